from __future__ import annotations

import re
from decimal import Decimal

from spendwise.util.patterns import amount_matcher, first_success, parse_decimal


def test_parse_decimal_accepts_decimal_comma() -> None:
    assert parse_decimal("45,50") == Decimal("45.50")
    assert parse_decimal(" 12.00 ") == Decimal("12.00")


def test_parse_decimal_rejects_malformed_numbers() -> None:
    assert parse_decimal("12.3.4") is None
    assert parse_decimal("abc") is None
    assert parse_decimal("NaN") is None
    assert parse_decimal(None) is None


def test_first_success_returns_first_non_none_result() -> None:
    calls: list[str] = []

    def nothing(text: str) -> str | None:
        calls.append("nothing")
        return None

    def upper(text: str) -> str | None:
        calls.append("upper")
        return text.upper()

    def never(text: str) -> str | None:
        calls.append("never")
        return "unreachable"

    assert first_success([nothing, upper, never], "abc") == "ABC"
    assert calls == ["nothing", "upper"]


def test_first_success_returns_none_when_all_fail() -> None:
    assert first_success([lambda _: None, lambda _: None], "abc") is None


def test_amount_matcher_bounds_are_exclusive_and_scan_later_matches() -> None:
    match = amount_matcher(re.compile(r"(\d+\.\d{2})"), low=Decimal("0"), high=Decimal("100"))

    assert match("0.00 100.00 42.00") == Decimal("42.00")
    assert match("0.00 100.00") is None


def test_amount_matcher_skip_predicate() -> None:
    match = amount_matcher(re.compile(r"(\d+\.\d{2})"), skip=lambda m: m.group(1).startswith("9"))

    assert match("9.99 5.00") == Decimal("5.00")
