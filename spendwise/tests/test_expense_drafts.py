from __future__ import annotations

from decimal import Decimal

from spendwise.domain import (
    ParsedExpense,
    ReceiptData,
    create_expense_from_parsed,
    create_expense_from_receipt,
    normalize_category,
    normalize_currency,
)


def test_chat_draft_requires_amount() -> None:
    parsed = ParsedExpense(amount=None, currency=None, merchant="Lidl")
    assert create_expense_from_parsed(parsed) is None


def test_chat_draft_fills_missing_currency() -> None:
    parsed = ParsedExpense(amount=Decimal("12"), currency=None, merchant=None, category="Food")
    draft = create_expense_from_parsed(parsed, user_currency="EUR")

    assert draft is not None
    assert draft.currency == "EUR"
    assert draft.description == "Chat expense"
    assert draft.source == "chat"
    assert draft.category == "Food"


def test_chat_draft_keeps_stated_currency() -> None:
    parsed = ParsedExpense(amount=Decimal("200"), currency="RON", merchant="Auchan", description="Purchase at Auchan")
    draft = create_expense_from_parsed(parsed, user_currency="USD")

    assert draft is not None
    assert draft.amount == Decimal("200")
    assert draft.currency == "RON"
    assert draft.as_dict()["amount"] == 200.0


def test_receipt_draft_only_for_successful_scans() -> None:
    assert create_expense_from_receipt(ReceiptData(success=False, error="nope")) is None


def test_receipt_draft_description() -> None:
    named = create_expense_from_receipt(ReceiptData(success=True, amount=Decimal("5"), merchant_name="KAUFLAND"))
    anonymous = create_expense_from_receipt(ReceiptData(success=True, amount=Decimal("5")))

    assert named is not None and named.description == "Purchase at KAUFLAND"
    assert anonymous is not None and anonymous.description == "Receipt Scan"
    assert named.source == "receipt"
    assert named.id != anonymous.id


def test_normalizers_stay_inside_taxonomies() -> None:
    assert normalize_category("food") == "Food"
    assert normalize_category("gadgets") == "Other"
    assert normalize_category(None) == "Other"
    assert normalize_currency("lei") == "RON"
    assert normalize_currency("eur") == "EUR"
    assert normalize_currency("yen") is None
