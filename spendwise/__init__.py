"""Expense parsing from chat messages and receipt OCR text."""

from spendwise.chat import HybridExpenseParser, get_suggestions, parse_chat_expense
from spendwise.domain import ExpenseDraft, ParsedExpense, ReceiptData, classify_category
from spendwise.receipt import parse_receipt_image, parse_receipt_text

__version__ = "0.1.0"

__all__ = [
    "ExpenseDraft",
    "HybridExpenseParser",
    "ParsedExpense",
    "ReceiptData",
    "classify_category",
    "get_suggestions",
    "parse_chat_expense",
    "parse_receipt_image",
    "parse_receipt_text",
]
