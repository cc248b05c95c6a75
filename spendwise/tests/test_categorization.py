from __future__ import annotations

from spendwise.domain.categorization import (
    classify_category,
    classify_receipt_category,
    score_receipt_categories,
)


def test_classify_counts_distinct_keywords() -> None:
    # Entertainment: cinema + movie; Transportation: taxi once however often repeated
    assert classify_category("taxi taxi taxi to the cinema for a movie") == "Entertainment"


def test_repeated_word_does_not_change_winner() -> None:
    assert classify_category("coffee ticket") == classify_category("coffee coffee coffee ticket") == "Food"
    assert classify_category("cinema movie taxi") == classify_category("cinema movie taxi taxi taxi") == "Entertainment"


def test_merchant_hint_mentioned_in_text_scores_once() -> None:
    # Food: auchan once; Shopping: store + mall
    assert classify_category("auchan store mall", "Auchan") == "Shopping"


def test_classify_tie_goes_to_earlier_category() -> None:
    # "phone" is both Shopping and Utilities
    assert classify_category("phone") == "Shopping"
    assert classify_category("bill for movie") == "Entertainment"


def test_classify_uses_merchant_hint() -> None:
    assert classify_category("spent 20", "Lidl") == "Food"


def test_classify_defaults_to_other() -> None:
    assert classify_category("asdkjaslkdj") == "Other"
    assert classify_category("") == "Other"


def test_receipt_scores_weight_merchant_prefix() -> None:
    scores = score_receipt_categories("kaufland\npaine 3.00", "KAUFLAND")

    # kaufland + paine in text (2 each), contained in merchant (5), merchant prefix (10)
    assert scores["Food"] == 2 + 2 + 5 + 10
    assert scores["Shopping"] == 0


def test_receipt_merchant_outweighs_body_keywords() -> None:
    text = "DEDEMAN\nlapte 5.00\npaine 3.00\nTOTAL 8.00"
    assert classify_receipt_category(text, "DEDEMAN") == "Shopping"


def test_receipt_category_other_without_keywords() -> None:
    assert classify_receipt_category("xyz 12.00", "") == "Other"
