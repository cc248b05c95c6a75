"""Receipt scan workflow orchestration."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal

from spendwise.domain.expense import ExpenseDraft, ReceiptData, create_expense_from_receipt
from spendwise.domain.taxonomy import RECEIPT_CATEGORY_KEYWORDS, KeywordTable
from spendwise.receipt import TextRecognitionError, TextRecognizer, parse_receipt_text
from spendwise.runtime.logging import get_logger
from spendwise.runtime.ocr_service import OCRServiceClient
from spendwise.runtime.settings import DEFAULT_OCR_TIMEOUT, DEFAULT_OCR_URL

logger = get_logger(__name__)

ScanStatus = Literal[
    "file_not_found",
    "unreadable",
    "ocr_failed",
    "no_amount",
    "parsed",
]


@dataclass(frozen=True)
class ReceiptScanRequest:
    """Inputs for running receipt scan workflow."""

    path: Path
    ocr_url: str = DEFAULT_OCR_URL
    ocr_timeout: float = DEFAULT_OCR_TIMEOUT
    text_only: bool = False  # path holds OCR text rather than an image
    keywords: KeywordTable = field(default_factory=lambda: RECEIPT_CATEGORY_KEYWORDS)
    recognizer: TextRecognizer | None = None


@dataclass(frozen=True)
class ReceiptScanResult:
    """Outcome from receipt scan workflow."""

    status: ScanStatus
    receipt: ReceiptData | None = None
    draft: ExpenseDraft | None = None
    error: str | None = None


def run_receipt_scan(request: ReceiptScanRequest) -> ReceiptScanResult:
    """Run scan flow: read file -> OCR (images only) -> parse -> expense draft."""
    if not request.path.exists():
        return ReceiptScanResult(
            status="file_not_found",
            error=f"Receipt file not found: {request.path}",
        )

    if request.text_only:
        try:
            raw_text = request.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            logger.error("Could not read receipt text %s: %s", request.path, exc)
            return ReceiptScanResult(status="unreadable", error=f"Could not read receipt text: {exc}")
    else:
        recognizer = request.recognizer or OCRServiceClient(request.ocr_url, timeout=request.ocr_timeout)
        try:
            raw_text = recognizer.recognize_text(request.path.read_bytes())
        except (OSError, TextRecognitionError) as exc:
            logger.error("OCR failed for %s: %s", request.path, exc)
            return ReceiptScanResult(status="ocr_failed", error=str(exc))

    receipt = parse_receipt_text(raw_text, keywords=request.keywords)
    if not receipt.success:
        return ReceiptScanResult(status="no_amount", receipt=receipt, error=receipt.error)

    return ReceiptScanResult(
        status="parsed",
        receipt=receipt,
        draft=create_expense_from_receipt(receipt),
    )
