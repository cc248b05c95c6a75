from __future__ import annotations

from spendwise.chat.merchant import MAX_MERCHANT_LENGTH, extract_merchant


def test_merchant_after_preposition() -> None:
    assert extract_merchant("I bought groceries from Auchan for 200 lei") == "Auchan"
    assert extract_merchant("Spent 50 euros at McDonald's for lunch") == "McDonald's"


def test_merchant_is_capitalized_without_lowering_the_rest() -> None:
    assert extract_merchant("bread from auchan for 10 lei") == "Auchan"
    assert extract_merchant("coffee in starbucks on monday") == "Starbucks"


def test_merchant_before_store_word() -> None:
    assert extract_merchant("Lidl store 30 lei") == "Lidl"


def test_merchant_is_truncated() -> None:
    merchant = extract_merchant("from " + "a" * 40 + " store")
    assert merchant is not None
    assert len(merchant) <= MAX_MERCHANT_LENGTH


def test_no_merchant() -> None:
    assert extract_merchant("asdkjaslkdj") is None
    assert extract_merchant("paid 40") is None


def test_preposition_must_be_a_whole_word() -> None:
    # "eat" ends in "at" but is not the preposition
    assert extract_merchant("I eat sushi for 30 lei") is None
    assert extract_merchant("I eat sushi at Tokyo for 30 lei") == "Tokyo"
