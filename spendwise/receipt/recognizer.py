"""Contract for the OCR step that turns a receipt image into text."""

from __future__ import annotations

from typing import Protocol


class TextRecognitionError(RuntimeError):
    """Raised when an OCR backend cannot recognize text in an image."""


class TextRecognizer(Protocol):
    """Image-to-text collaborator.

    Implementations raise TextRecognitionError for recognition failures and
    may let OSError escape for unreadable input.
    """

    def recognize_text(self, image_bytes: bytes) -> str: ...
