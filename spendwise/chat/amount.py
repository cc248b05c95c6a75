"""Amount and currency extraction for chat messages."""

from __future__ import annotations

import re
from decimal import Decimal

from spendwise.domain.taxonomy import CURRENCY_ALIASES
from spendwise.runtime.logging import get_logger
from spendwise.util.patterns import parse_decimal

logger = get_logger(__name__)

# Integer or decimal with 1-2 fraction digits, no thousands separators
NUMBER = r"(\d+(?:\.\d{1,2})?)"

_ALIAS_UNION = "|".join(
    re.escape(alias)
    for alias in sorted(
        (alias for aliases in CURRENCY_ALIASES.values() for alias in aliases),
        key=len,
        reverse=True,
    )
)

# Priority order: the first pattern with any match decides the amount
AMOUNT_PATTERNS: tuple[re.Pattern[str], ...] = (
    # "200 lei", "50 euros", "12.5$"
    re.compile(NUMBER + r"\s*(" + _ALIAS_UNION + r")", re.IGNORECASE),
    # "in value of 200", "price is 15"
    re.compile(r"(?:value|cost|price|worth)\s*(?:of|is)?\s*" + NUMBER, re.IGNORECASE),
    # "spent 40", "paid for 12.99"
    re.compile(r"(?:spent|paid|buy|bought)\s*(?:for)?\s*" + NUMBER, re.IGNORECASE),
)


def find_currency(text: str | None) -> str | None:
    """Return the first currency code whose alias occurs in ``text``."""
    if text is None:
        return None
    lower_text = text.lower()
    for code, aliases in CURRENCY_ALIASES.items():
        if any(alias in lower_text for alias in aliases):
            return code
    return None


def extract_amount_and_currency(message: str, default_currency: str) -> tuple[Decimal | None, str | None]:
    """Extract (amount, currency) from a chat message.

    Only the first match of the first matching pattern is considered, even
    when the message mentions several numbers. Currency comes from the text
    captured next to the amount when the pattern has one, otherwise from
    anywhere in the message, otherwise ``default_currency``.

    Returns:
        ``(None, None)`` when no pattern yields a parseable amount.
    """
    for index, pattern in enumerate(AMOUNT_PATTERNS, start=1):
        match = pattern.search(message)
        if match is None:
            continue

        amount = parse_decimal(match.group(1))
        if amount is None:
            logger.debug("Pattern %d matched unparseable amount %r", index, match.group(1))
            continue

        if pattern.groups > 1:
            currency = find_currency(match.group(2))
        else:
            currency = find_currency(message)
        logger.debug("Amount pattern %d matched %r", index, match.group(0))
        return amount, currency or default_currency

    return None, None
