"""Shared pytest fixtures for spendwise tests."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from spendwise.runtime import load_settings, reset_paths


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch, tmp_path) -> Iterator[None]:
    """Point the project root at an empty tmp dir and drop cached settings."""
    monkeypatch.setenv("SPENDWISE_ROOT", str(tmp_path))
    reset_paths()
    load_settings.cache_clear()
    yield
    load_settings.cache_clear()
    reset_paths()


class FakeRecognizer:
    """TextRecognizer stand-in that returns canned text or raises."""

    def __init__(self, text: str = "", error: Exception | None = None) -> None:
        self.text = text
        self.error = error
        self.calls: list[bytes] = []

    def recognize_text(self, image_bytes: bytes) -> str:
        self.calls.append(image_bytes)
        if self.error is not None:
            raise self.error
        return self.text


@pytest.fixture
def fake_recognizer() -> type[FakeRecognizer]:
    return FakeRecognizer
