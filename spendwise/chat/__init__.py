"""Chat pipeline: free-text expense message parsing."""

from .amount import extract_amount_and_currency, find_currency
from .hybrid import ExpenseFallback, FallbackParserError, HybridExpenseParser
from .merchant import extract_merchant
from .parser import generate_description, get_suggestions, parse_chat_expense, score_confidence, suggestions_for

__all__ = [
    "ExpenseFallback",
    "FallbackParserError",
    "HybridExpenseParser",
    "extract_amount_and_currency",
    "extract_merchant",
    "find_currency",
    "generate_description",
    "get_suggestions",
    "parse_chat_expense",
    "score_confidence",
    "suggestions_for",
]
