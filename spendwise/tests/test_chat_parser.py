from __future__ import annotations

from decimal import Decimal

import pytest

from spendwise.chat import get_suggestions, parse_chat_expense, score_confidence
from spendwise.chat.parser import EXAMPLE_MESSAGES, SUGGEST_AMOUNT, SUGGEST_MERCHANT, generate_description
from spendwise.domain.taxonomy import CHAT_CATEGORY_KEYWORDS, merge_keyword_tables


def test_parse_full_message() -> None:
    parsed = parse_chat_expense("I bought groceries from Auchan for 200 lei", "USD")

    assert parsed.amount == Decimal("200")
    assert parsed.currency == "RON"
    assert parsed.merchant == "Auchan"
    assert parsed.category == "Food"
    assert parsed.description == "Purchase at Auchan"
    assert parsed.confidence == 1.0


def test_parse_message_with_euro_amount() -> None:
    parsed = parse_chat_expense("Spent 50 euros at McDonald's for lunch")

    assert parsed.amount == Decimal("50")
    assert parsed.currency == "EUR"
    assert parsed.merchant == "McDonald's"
    assert parsed.category == "Food"


def test_parse_gibberish_scores_only_the_description() -> None:
    parsed = parse_chat_expense("asdkjaslkdj")

    assert parsed.amount is None
    assert parsed.currency is None
    assert parsed.merchant is None
    assert parsed.category == "Other"
    assert parsed.description == "asdkjaslkdj"
    assert parsed.confidence == 0.1


def test_parse_amount_only_message_uses_default_currency() -> None:
    parsed = parse_chat_expense("paid 40", "RON")

    assert parsed.amount == Decimal("40")
    assert parsed.currency == "RON"
    assert parsed.description == "Expense via chat"
    assert parsed.confidence == 0.5


def test_parse_uses_supplied_keyword_table() -> None:
    keywords = merge_keyword_tables(CHAT_CATEGORY_KEYWORDS, {"Healthcare": ("vitamins",)})
    parsed = parse_chat_expense("vitamins 30 lei", keywords=keywords)

    assert parsed.category == "Healthcare"


def test_generate_description_variants() -> None:
    assert generate_description("x", "Lidl", Decimal("5")) == "Purchase at Lidl"
    assert generate_description("x", "Lidl", None) == "Expense at Lidl"
    assert generate_description("x", None, Decimal("5")) == "Expense via chat"
    assert generate_description("a" * 80, None, None) == "a" * 50


def test_score_confidence_adds_fixed_weights() -> None:
    assert score_confidence(Decimal("1"), "Lidl", "Food", "desc") == 1.0
    assert score_confidence(None, "Lidl", "Other", "desc") == 0.4
    assert score_confidence(None, None, "Other", "") == 0.0


def test_suggestions_for_gibberish() -> None:
    assert get_suggestions("asdkjaslkdj") == [SUGGEST_AMOUNT, SUGGEST_MERCHANT, *EXAMPLE_MESSAGES]


def test_suggestions_for_complete_message() -> None:
    assert get_suggestions("I bought groceries from Auchan for 200 lei") == []


def test_suggestions_for_missing_merchant_only() -> None:
    # amount + description = 0.5, not below the low-confidence threshold
    assert get_suggestions("paid 40") == [SUGGEST_MERCHANT]


def test_parse_value_of_phrasing() -> None:
    parsed = parse_chat_expense("I bought from Auchan in value of 200 lei", "USD")

    assert parsed.amount == Decimal("200")
    assert parsed.currency == "RON"
    assert parsed.merchant == "Auchan"
    assert parsed.category == "Food"


@pytest.mark.parametrize(
    "message",
    [
        "coffee at Starbucks with friends",
        "movie night",
        "pharmacy run from Catena on monday",
        "",
    ],
)
def test_messages_without_digits_have_no_amount(message: str) -> None:
    parsed = parse_chat_expense(message)

    assert parsed.amount is None
    assert parsed.currency is None
    assert parsed.confidence <= 0.6
