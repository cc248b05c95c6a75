"""Small shared helpers."""

from .patterns import RECEIPT_AMOUNT, amount_matcher, first_success, parse_decimal

__all__ = [
    "RECEIPT_AMOUNT",
    "amount_matcher",
    "first_success",
    "parse_decimal",
]
