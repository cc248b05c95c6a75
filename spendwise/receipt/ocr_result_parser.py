"""Parse raw OCR text into structured ReceiptData."""

from __future__ import annotations

from spendwise.domain.categorization import classify_receipt_category
from spendwise.domain.expense import ReceiptData
from spendwise.domain.taxonomy import OTHER, RECEIPT_CATEGORY_KEYWORDS, KeywordTable
from spendwise.runtime.logging import get_logger

from .ocr_parser import extract_merchant_name, extract_total
from .recognizer import TextRecognitionError, TextRecognizer

logger = get_logger(__name__)

MERCHANT_CONFIDENCE = 0.3
CATEGORY_CONFIDENCE = 0.2

NO_TEXT_ERROR = "No text recognized on the receipt"
NO_AMOUNT_ERROR = "Could not find a valid amount on the receipt"


def parse_receipt_text(
    raw_text: str,
    *,
    keywords: KeywordTable = RECEIPT_CATEGORY_KEYWORDS,
) -> ReceiptData:
    """Extract total, merchant and category from receipt OCR text.

    Args:
        raw_text: Full OCR text, one receipt line per text line.
        keywords: Receipt category keyword table.

    Returns:
        ReceiptData with success=True when a total was found. Without a total
        the result carries an error message and the raw text only.
    """
    if not raw_text.strip():
        return ReceiptData(success=False, raw_text=raw_text, error=NO_TEXT_ERROR)

    confidence = 0.0
    total = extract_total(raw_text)
    if total is not None:
        confidence += total.confidence

    merchant_name = extract_merchant_name(raw_text)
    if merchant_name:
        confidence += MERCHANT_CONFIDENCE

    category = classify_receipt_category(raw_text, merchant_name, keywords=keywords)
    if category != OTHER:
        confidence += CATEGORY_CONFIDENCE
    confidence = round(confidence, 2)

    logger.debug(
        "Receipt results - amount: %s, merchant: %r, category: %s, confidence: %.2f",
        total.amount if total is not None else None,
        merchant_name,
        category,
        confidence,
    )

    if total is None:
        return ReceiptData(success=False, raw_text=raw_text, error=NO_AMOUNT_ERROR, confidence=confidence)

    return ReceiptData(
        success=True,
        amount=total.amount,
        merchant_name=merchant_name,
        category=category,
        raw_text=raw_text,
        confidence=confidence,
    )


def parse_receipt_image(
    image_bytes: bytes,
    recognizer: TextRecognizer,
    *,
    keywords: KeywordTable = RECEIPT_CATEGORY_KEYWORDS,
) -> ReceiptData:
    """Run OCR on an image and parse the result.

    OCR failures become ``ReceiptData(success=False, error=...)`` instead of
    propagating.
    """
    try:
        raw_text = recognizer.recognize_text(image_bytes)
    except OSError as e:
        logger.error("Error processing image: %s", e)
        return ReceiptData(success=False, error=f"Failed to process image: {e}")
    except TextRecognitionError as e:
        logger.error("Error in receipt scanning: %s", e)
        return ReceiptData(success=False, error=f"Error analyzing receipt: {e}")

    logger.debug("Raw OCR text:\n%s", raw_text)
    return parse_receipt_text(raw_text, keywords=keywords)
