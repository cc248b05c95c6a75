"""Priority-chain helpers shared by the chat and receipt parsers."""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable
from decimal import Decimal, InvalidOperation
from typing import TypeVar

T = TypeVar("T")

# Receipt-style amount: up to six integer digits, two decimals, dot or comma
RECEIPT_AMOUNT = r"\d{1,6}[.,]\d{2}"


def first_success(matchers: Iterable[Callable[[str], T | None]], text: str) -> T | None:
    """Run matchers in order and return the first non-None result."""
    for matcher in matchers:
        result = matcher(text)
        if result is not None:
            return result
    return None


def parse_decimal(raw: str | None) -> Decimal | None:
    """Parse a matched numeric string, accepting a decimal comma.

    Malformed numbers map to None so callers can move on to the next candidate.
    """
    if raw is None:
        return None
    try:
        value = Decimal(raw.strip().replace(",", "."))
    except InvalidOperation:
        return None
    if not value.is_finite():
        return None
    return value


def amount_matcher(
    pattern: re.Pattern[str],
    *,
    low: Decimal | None = None,
    high: Decimal | None = None,
    skip: Callable[[re.Match[str]], bool] | None = None,
) -> Callable[[str], Decimal | None]:
    """Build a matcher returning the first in-range amount captured by ``pattern``.

    Bounds are exclusive. Matches that fail to parse, or that ``skip`` rejects,
    are passed over.
    """

    def match(text: str) -> Decimal | None:
        for m in pattern.finditer(text):
            if skip is not None and skip(m):
                continue
            amount = parse_decimal(m.group(1))
            if amount is None:
                continue
            if low is not None and amount <= low:
                continue
            if high is not None and amount >= high:
                continue
            return amount
        return None

    return match
