"""Receipt pipeline: totals, merchant and category from OCR text."""

from .ocr_result_parser import parse_receipt_image, parse_receipt_text
from .recognizer import TextRecognitionError, TextRecognizer

__all__ = [
    "TextRecognitionError",
    "TextRecognizer",
    "parse_receipt_image",
    "parse_receipt_text",
]
