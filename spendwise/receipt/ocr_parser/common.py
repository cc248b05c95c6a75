"""Shared constants and helpers for OCR receipt parsing."""

import re

from spendwise.util.patterns import RECEIPT_AMOUNT

MAX_MERCHANT_NAME_LENGTH = 50

# Romanian receipts print the currency as "LEI" or "RON"
CURRENCY_WORD = r"(?:LEI|RON)"

# Standalone receipt amount ("45.50", "45,50") not glued to a longer number
AMOUNT_TOKEN = re.compile(rf"(?<![\d.,])({RECEIPT_AMOUNT})(?!\d)")

PRICE_SHAPE = re.compile(r"\d{2}[.,]\d{2}")

# Header/footer lines that carry receipt metadata rather than a merchant
RECEIPT_METADATA = re.compile(r"\b(?:receipt|bon|fiscal|nr|data|ora)\b", re.IGNORECASE)

# TOTAL-looking lines that are not the amount paid
EXCLUDED_TOTAL_LINE = re.compile(
    r"\b(?:TVA|VAT|DISCOUNT|REDUCERE|ECONOMISIT)\b|\bSUB\s*TOTAL",
    re.IGNORECASE,
)

_NOT_NAME_CHARS = re.compile(r"[^A-Za-z\s&'.-]")
_WHITESPACE = re.compile(r"\s+")


def clean_merchant_name(name: str) -> str:
    """Strip OCR noise from a merchant candidate.

    Keeps letters, spaces and ``&'.-``, collapses whitespace and truncates to
    MAX_MERCHANT_NAME_LENGTH. Cleaning a cleaned name returns it unchanged.
    """
    cleaned = _NOT_NAME_CHARS.sub("", name)
    cleaned = _WHITESPACE.sub(" ", cleaned).strip()
    return cleaned[:MAX_MERCHANT_NAME_LENGTH].strip()


def line_containing(text: str, position: int) -> str:
    """Return the full line of ``text`` that contains ``position``."""
    start = text.rfind("\n", 0, position) + 1
    end = text.find("\n", position)
    if end == -1:
        end = len(text)
    return text[start:end]


def is_excluded_total_line(line: str) -> bool:
    """Return True for VAT/discount/subtotal lines that mention TOTAL."""
    return EXCLUDED_TOTAL_LINE.search(line) is not None
