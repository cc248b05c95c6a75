"""Composable OCR receipt parser components."""

from .common import clean_merchant_name
from .merchant_parser import extract_merchant_name, find_merchant_by_pattern, find_merchant_by_position
from .total_parser import (
    extract_total,
    extract_total_amount,
    find_currency_total,
    find_largest_plausible_amount,
    find_total_line_amount,
)

__all__ = [
    "clean_merchant_name",
    "extract_merchant_name",
    "extract_total",
    "extract_total_amount",
    "find_currency_total",
    "find_largest_plausible_amount",
    "find_merchant_by_pattern",
    "find_merchant_by_position",
    "find_total_line_amount",
]
