"""Rule-based parser for natural-language expense messages.

Turns "I bought groceries from Auchan for 200 lei" into a ParsedExpense
with amount, currency, merchant, category, a short description and an
additive confidence score.
"""

from __future__ import annotations

from decimal import Decimal

from spendwise.chat.amount import extract_amount_and_currency
from spendwise.chat.merchant import extract_merchant
from spendwise.domain.categorization import classify_category
from spendwise.domain.expense import ParsedExpense
from spendwise.domain.taxonomy import CHAT_CATEGORY_KEYWORDS, OTHER, KeywordTable
from spendwise.runtime.logging import get_logger

logger = get_logger(__name__)

# Fixed weight per extracted field; the sum tops out at 1.0
AMOUNT_WEIGHT = 0.4
MERCHANT_WEIGHT = 0.3
CATEGORY_WEIGHT = 0.2
DESCRIPTION_WEIGHT = 0.1

DESCRIPTION_FALLBACK_LENGTH = 50

LOW_CONFIDENCE_THRESHOLD = 0.5

SUGGEST_AMOUNT = 'Try including the amount: "I spent 50 dollars on..."'
SUGGEST_MERCHANT = 'Try mentioning where: "I bought from Auchan..."'
EXAMPLE_MESSAGES = (
    'Example: "I bought groceries from Auchan for 200 lei"',
    "Example: \"Spent 50 euros at McDonald's for lunch\"",
)


def generate_description(message: str, merchant: str | None, amount: Decimal | None) -> str:
    """Synthesize a short human-readable description."""
    if merchant is not None and amount is not None:
        return f"Purchase at {merchant}"
    if merchant is not None:
        return f"Expense at {merchant}"
    if amount is not None:
        return "Expense via chat"
    return message[:DESCRIPTION_FALLBACK_LENGTH]


def score_confidence(
    amount: Decimal | None,
    merchant: str | None,
    category: str,
    description: str,
) -> float:
    """Add up the fixed weights of the fields that were extracted."""
    confidence = 0.0
    if amount is not None:
        confidence += AMOUNT_WEIGHT
    if merchant is not None:
        confidence += MERCHANT_WEIGHT
    if category != OTHER:
        confidence += CATEGORY_WEIGHT
    if description:
        confidence += DESCRIPTION_WEIGHT
    # Weights are tenths; rounding hides float accumulation noise
    return round(confidence, 2)


def parse_chat_expense(
    message: str,
    default_currency: str = "USD",
    *,
    keywords: KeywordTable = CHAT_CATEGORY_KEYWORDS,
) -> ParsedExpense:
    """Parse a free-text expense message.

    Args:
        message: Raw user message.
        default_currency: Currency code used when an amount is found but no
            currency alias is mentioned.
        keywords: Category keyword table (defaults to the built-in chat table).

    Returns:
        A new ParsedExpense. Missing fields are None; nothing is raised for
        unstructured input.
    """
    amount, currency = extract_amount_and_currency(message, default_currency)
    merchant = extract_merchant(message)
    category = classify_category(message.strip().lower(), merchant, keywords=keywords)
    description = generate_description(message, merchant, amount)
    confidence = score_confidence(amount, merchant, category, description)

    logger.debug(
        "Parsed chat message: amount=%s currency=%s merchant=%s category=%s confidence=%.2f",
        amount,
        currency,
        merchant,
        category,
        confidence,
    )
    return ParsedExpense(
        amount=amount,
        currency=currency,
        merchant=merchant,
        category=category,
        description=description,
        confidence=confidence,
    )


def suggestions_for(parsed: ParsedExpense) -> list[str]:
    """Guidance strings for whatever the parse could not find."""
    suggestions: list[str] = []
    if parsed.amount is None:
        suggestions.append(SUGGEST_AMOUNT)
    if parsed.merchant is None:
        suggestions.append(SUGGEST_MERCHANT)
    if parsed.confidence < LOW_CONFIDENCE_THRESHOLD:
        suggestions.extend(EXAMPLE_MESSAGES)
    return suggestions


def get_suggestions(
    message: str,
    default_currency: str = "USD",
    *,
    keywords: KeywordTable = CHAT_CATEGORY_KEYWORDS,
) -> list[str]:
    """Parse ``message`` and return guidance for the missing fields."""
    return suggestions_for(parse_chat_expense(message, default_currency, keywords=keywords))
