"""Merchant extraction for chat messages."""

from __future__ import annotations

import re

MAX_MERCHANT_LENGTH = 30

MERCHANT_PATTERNS: tuple[re.Pattern[str], ...] = (
    # "from Auchan for ...", "at Olive Garden 45 ..."
    re.compile(
        r"\b(?:from|at|in)\s+([A-Za-z][A-Za-z0-9\s&'.-]{1,30}?)"
        r"(?:\s+(?:for|in|on|with|value|cost|price|\d))",
        re.IGNORECASE,
    ),
    # "Lidl store", "Petrom station"
    re.compile(
        r"([A-Za-z][A-Za-z0-9\s&'.-]{1,30})\s+(?:store|shop|restaurant|market|mall|station)",
        re.IGNORECASE,
    ),
)


def _capitalize(name: str) -> str:
    # Only the first letter; "McDonald's" must keep its inner capitals
    return name[:1].upper() + name[1:]


def extract_merchant(message: str) -> str | None:
    """Return the merchant named in the message, or None."""
    for pattern in MERCHANT_PATTERNS:
        match = pattern.search(message)
        if match is None:
            continue
        name = match.group(1).strip()[:MAX_MERCHANT_LENGTH].strip()
        if name:
            return _capitalize(name)
    return None
