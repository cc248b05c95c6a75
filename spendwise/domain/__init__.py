"""Core domain models and taxonomies.

This module provides the data models used throughout the project:
- ParsedExpense: Fields extracted from a chat message
- ReceiptData, TotalAmount: Receipt heuristics output
- ExpenseDraft: Expense ready for persistence

Usage:
    from spendwise.domain import ParsedExpense, ReceiptData, classify_category
"""

from spendwise.domain.categorization import classify_category, classify_receipt_category, score_receipt_categories
from spendwise.domain.expense import (
    ExpenseDraft,
    ParsedExpense,
    ReceiptData,
    TotalAmount,
    create_expense_from_parsed,
    create_expense_from_receipt,
)
from spendwise.domain.taxonomy import (
    ALL_CATEGORIES,
    CATEGORIES,
    CURRENCY_CODES,
    OTHER,
    normalize_category,
    normalize_currency,
)

__all__ = [
    "ExpenseDraft",
    "ParsedExpense",
    "ReceiptData",
    "TotalAmount",
    "create_expense_from_parsed",
    "create_expense_from_receipt",
    "classify_category",
    "classify_receipt_category",
    "score_receipt_categories",
    "ALL_CATEGORIES",
    "CATEGORIES",
    "CURRENCY_CODES",
    "OTHER",
    "normalize_category",
    "normalize_currency",
]
