"""Merchant name extraction from receipt OCR text."""

from __future__ import annotations

import re

from spendwise.runtime.logging import get_logger

from .common import PRICE_SHAPE, RECEIPT_METADATA, clean_merchant_name

logger = get_logger(__name__)

MIN_MERCHANT_NAME_LENGTH = 3
POSITIONAL_LINE_COUNT = 3

_LEGAL_PREFIX = r"(?:S\.?C\.?[ \t]+)?"
_LEGAL_SUFFIX = r"(?:S\.R\.L\.|S\.A\.|(?:SRL|SA)\b)"

# Tried in order; the first usable match wins
MERCHANT_PATTERNS: tuple[re.Pattern[str], ...] = (
    # "MEGA IMAGE SRL", "SC DEDEMAN S.R.L." : capitalised words right before the suffix
    re.compile(
        rf"\b{_LEGAL_PREFIX}([A-Z][A-Za-z&'.-]*(?:[ \t]+[A-Z][A-Za-z&'.-]*){{0,3}})[ \t]+{_LEGAL_SUFFIX}",
        re.MULTILINE,
    ),
    # "Profi Rom Food s.r.l." : whole line ending in a legal suffix
    re.compile(
        rf"^[ \t]*{_LEGAL_PREFIX}([^\n]{{2,60}}?)[ \t,]+(?i:S\.R\.L\.|SRL|S\.A\.|SA)\.?[ \t]*$",
        re.MULTILINE,
    ),
    # "KAUFLAND" : short all-caps line
    re.compile(r"^[ \t]*([A-Z][A-Z&'. -]{3,25})[ \t]*$", re.MULTILINE),
)

_NOT_A_MERCHANT = re.compile(r"\bTOTAL\b", re.IGNORECASE)


def _usable(candidate: str) -> str | None:
    if RECEIPT_METADATA.search(candidate) or _NOT_A_MERCHANT.search(candidate):
        return None
    cleaned = clean_merchant_name(candidate)
    if len(cleaned) < MIN_MERCHANT_NAME_LENGTH:
        return None
    return cleaned


def find_merchant_by_pattern(text: str) -> str | None:
    """Match legal-entity suffix patterns, then a bare all-caps line."""
    for index, pattern in enumerate(MERCHANT_PATTERNS, start=1):
        for match in pattern.finditer(text):
            merchant = _usable(match.group(1))
            if merchant:
                logger.debug("Merchant %r found by pattern %d", merchant, index)
                return merchant
    return None


def find_merchant_by_position(text: str) -> str | None:
    """First of the top non-empty lines that looks like a name rather than data."""
    lines = [line.strip() for line in text.splitlines() if line.strip()]
    for line in lines[:POSITIONAL_LINE_COUNT]:
        if len(line) <= 3:
            continue
        if PRICE_SHAPE.search(line) or line[0].isdigit():
            continue
        if RECEIPT_METADATA.search(line):
            continue
        cleaned = clean_merchant_name(line)
        if cleaned:
            logger.debug("Merchant %r found by position", cleaned)
            return cleaned
    return None


def extract_merchant_name(text: str) -> str:
    """Return the cleaned merchant name, or an empty string."""
    return find_merchant_by_pattern(text) or find_merchant_by_position(text) or ""
