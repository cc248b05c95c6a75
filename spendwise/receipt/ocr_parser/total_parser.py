"""Receipt total extraction with a three-tier fallback.

Tier 1 looks for TOTAL next to a currency word, tier 2 for any line that
starts with TOTAL, tier 3 for the largest plausible amount in the text.
The first tier that yields anything wins; later tiers are not consulted.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from decimal import Decimal

from spendwise.domain.expense import TotalAmount
from spendwise.runtime.logging import get_logger
from spendwise.util.patterns import RECEIPT_AMOUNT, amount_matcher, first_success, parse_decimal

from .common import AMOUNT_TOKEN, CURRENCY_WORD, is_excluded_total_line, line_containing

logger = get_logger(__name__)

# Tier 1 bounds (exclusive); anything outside is OCR noise
CURRENCY_TOTAL_MIN = Decimal("0")
CURRENCY_TOTAL_MAX = Decimal("50000")

# Tier 3 bounds (inclusive)
FALLBACK_MIN = Decimal("1.00")
FALLBACK_MAX = Decimal("5000.0")
# Largest candidate more than this many times the runner-up is likely a tax ID
FALLBACK_OUTLIER_RATIO = 3
FALLBACK_OUTLIER_MIN_CANDIDATES = 3

TIER_CONFIDENCE = {1: 0.4, 2: 0.3, 3: 0.2}

_AMOUNT = f"({RECEIPT_AMOUNT})"
_FLAGS = re.IGNORECASE | re.MULTILINE

CURRENCY_TOTAL_PATTERNS: tuple[re.Pattern[str], ...] = (
    # "TOTAL LEI 45.50" / "TOTAL Lei: 45,50" ending the line
    re.compile(rf"^[ \t]*TOTAL\b[^\n]*?\b{CURRENCY_WORD}\b[ \t]*[:=]?[ \t]*{_AMOUNT}[ \t]*$", _FLAGS),
    # "TOTAL 45.50 LEI" ending the line
    re.compile(rf"^[ \t]*TOTAL\b[^\n]*?{_AMOUNT}[ \t]*{CURRENCY_WORD}\b\.?[ \t]*$", _FLAGS),
    # "TOTAL DE PLATA LEI 45.50 A" anywhere on the line
    re.compile(rf"\bTOTAL\b[^\n]*?\b{CURRENCY_WORD}\b[^\d\n]*{_AMOUNT}", _FLAGS),
    # "TOTAL: 45.50 RON *" anywhere on the line
    re.compile(rf"\bTOTAL\b[^\n]*?{_AMOUNT}[ \t]*{CURRENCY_WORD}\b", _FLAGS),
    # "TOTAL LEI" with the amount alone on the next line
    re.compile(rf"^[ \t]*TOTAL\b[^\n]*?\b{CURRENCY_WORD}\b[ \t]*[:=]?[ \t]*\n[ \t]*{_AMOUNT}[ \t]*$", _FLAGS),
)

_LINE_END_AMOUNT = re.compile(rf"(?<![\d.,])({RECEIPT_AMOUNT})[ \t]*$")
_CANDIDATE_AMOUNT = re.compile(rf"\b({RECEIPT_AMOUNT})\b")


def _skip_excluded(text: str) -> Callable[[re.Match[str]], bool]:
    return lambda match: is_excluded_total_line(line_containing(text, match.start()))


def find_currency_total(text: str) -> Decimal | None:
    """Tier 1: TOTAL next to a currency word, first matching pattern wins."""
    matchers = [
        amount_matcher(
            pattern,
            low=CURRENCY_TOTAL_MIN,
            high=CURRENCY_TOTAL_MAX,
            skip=_skip_excluded(text),
        )
        for pattern in CURRENCY_TOTAL_PATTERNS
    ]
    return first_success(matchers, text)


_positive_at_line_end = amount_matcher(_LINE_END_AMOUNT, low=Decimal("0"))
_positive_anywhere = amount_matcher(AMOUNT_TOKEN, low=Decimal("0"))


def find_total_line_amount(text: str) -> Decimal | None:
    """Tier 2: a line starting with "total", amount at its end, anywhere on it, or on the next line."""
    lines = text.splitlines()
    for i, line in enumerate(lines):
        stripped = line.strip()
        if not stripped.lower().startswith("total"):
            continue

        logger.debug("Found total line: %r", stripped)
        amount = first_success((_positive_at_line_end, _positive_anywhere), stripped)
        if amount is None and i + 1 < len(lines):
            amount = _positive_anywhere(lines[i + 1])
        if amount is not None:
            return amount
    return None


def find_largest_plausible_amount(text: str) -> Decimal | None:
    """Tier 3: largest amount in [1.00, 5000.0].

    With at least three candidates, a largest value more than three times the
    runner-up is treated as a registration/VAT number and the runner-up wins.
    """
    candidates: list[Decimal] = []
    for match in _CANDIDATE_AMOUNT.finditer(text):
        amount = parse_decimal(match.group(1))
        if amount is not None and FALLBACK_MIN <= amount <= FALLBACK_MAX:
            candidates.append(amount)

    if not candidates:
        return None

    ranked = sorted(candidates, reverse=True)
    if len(ranked) >= FALLBACK_OUTLIER_MIN_CANDIDATES and ranked[0] > ranked[1] * FALLBACK_OUTLIER_RATIO:
        logger.debug("Largest amount %s looks like an outlier, using %s", ranked[0], ranked[1])
        return ranked[1]
    return ranked[0]


TOTAL_TIERS: tuple[tuple[int, Callable[[str], Decimal | None]], ...] = (
    (1, find_currency_total),
    (2, find_total_line_amount),
    (3, find_largest_plausible_amount),
)


def _tier_matcher(tier: int, find: Callable[[str], Decimal | None]) -> Callable[[str], TotalAmount | None]:
    def match(text: str) -> TotalAmount | None:
        amount = find(text)
        if amount is None:
            return None
        logger.debug("Receipt total %s found by tier %d", amount, tier)
        return TotalAmount(amount=amount, tier=tier, confidence=TIER_CONFIDENCE[tier])

    return match


def extract_total(text: str) -> TotalAmount | None:
    """Extract the receipt total, recording which tier produced it."""
    return first_success((_tier_matcher(tier, find) for tier, find in TOTAL_TIERS), text)


def extract_total_amount(text: str) -> Decimal:
    """Extract the receipt total, or Decimal("0") when nothing plausible is found."""
    total = extract_total(text)
    return total.amount if total is not None else Decimal("0")
