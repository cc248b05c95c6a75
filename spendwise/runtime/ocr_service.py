"""HTTP client for the OCR service that turns receipt images into text."""

from __future__ import annotations

import time

import httpx

from spendwise.receipt.ocr_helpers import ocr_text_from_result, resize_image_bytes
from spendwise.receipt.recognizer import TextRecognitionError
from spendwise.runtime.logging import get_logger
from spendwise.runtime.settings import DEFAULT_OCR_TIMEOUT

logger = get_logger(__name__)


class OCRServiceUnavailable(TextRecognitionError):
    """Raised when the OCR service cannot be reached or returns an error."""


class OCRServiceClient:
    """TextRecognizer backed by an OCR service exposing ``POST /ocr``."""

    def __init__(
        self,
        ocr_url: str,
        timeout: float = DEFAULT_OCR_TIMEOUT,
        client: httpx.Client | None = None,
    ) -> None:
        self.ocr_url = ocr_url.rstrip("/")
        self.timeout = timeout
        self._client = client or httpx.Client(timeout=timeout)

    def recognize_text(self, image_bytes: bytes) -> str:
        """
        Send an image to the OCR service and return the recognized text.

        Raises:
            OSError: If the image cannot be decoded.
            OCRServiceUnavailable: If the service is unreachable or fails.
        """
        resized_bytes = resize_image_bytes(image_bytes)
        logger.info("Sending receipt to OCR service at %s...", self.ocr_url)

        start_time = time.time()
        try:
            response = self._client.post(
                f"{self.ocr_url}/ocr",
                files={"file": ("receipt.jpg", resized_bytes, "image/jpeg")},
            )
        except httpx.RequestError as e:
            logger.error("Failed to connect to OCR service: %s", e)
            raise OCRServiceUnavailable(f"Failed to connect to OCR service: {e}") from e
        logger.info("OCR service returned in %.2f seconds", time.time() - start_time)

        if response.status_code != 200:
            # Response body may contain receipt text; keep it out of the logs.
            logger.error("OCR service error: %s", response.status_code)
            raise OCRServiceUnavailable(f"OCR service error: {response.status_code}")

        try:
            raw_result = response.json()
        except ValueError as e:
            raise OCRServiceUnavailable(f"OCR service returned invalid JSON: {e}") from e
        if not isinstance(raw_result, dict):
            raise OCRServiceUnavailable("OCR service returned an unexpected payload")

        return ocr_text_from_result(raw_result)
