from __future__ import annotations

import pytest

from spendwise.receipt.ocr_parser import (
    clean_merchant_name,
    extract_merchant_name,
    find_merchant_by_pattern,
    find_merchant_by_position,
)
from spendwise.receipt.ocr_parser.common import MAX_MERCHANT_NAME_LENGTH


def test_merchant_before_legal_suffix() -> None:
    assert extract_merchant_name("STORE SRL\nBon fiscal nr 123\nTOTAL Lei 123.45\n") == "STORE"
    assert find_merchant_by_pattern("S.C. DEDEMAN S.R.L.\nCUI RO123") == "DEDEMAN"


def test_merchant_line_with_lowercase_suffix() -> None:
    assert find_merchant_by_pattern("Profi Rom Food s.r.l.\nTOTAL 10.00") == "Profi Rom Food"


def test_all_caps_line_is_a_merchant() -> None:
    assert find_merchant_by_pattern("KAUFLAND\nMultumim") == "KAUFLAND"


def test_metadata_lines_are_not_merchants() -> None:
    assert find_merchant_by_pattern("BON FISCAL\nTOTAL\n") is None


def test_position_fallback_uses_top_lines() -> None:
    text = "Cafeneaua Verde\nStrada Mare 12\nTotal 18.50"

    assert find_merchant_by_pattern(text) is None
    assert find_merchant_by_position(text) == "Cafeneaua Verde"


def test_position_fallback_skips_metadata_and_prices() -> None:
    assert find_merchant_by_position("Bon fiscal 0012\n12.50\nLa Mama\n") == "La Mama"
    assert find_merchant_by_position("12.50\n45.00\n") is None


def test_no_merchant_returns_empty_string() -> None:
    assert extract_merchant_name("12.50\n45.00\n") == ""


def test_clean_merchant_name_removes_noise() -> None:
    assert clean_merchant_name("  MEGA   IMAGE 123 ") == "MEGA IMAGE"
    assert clean_merchant_name("H&M*") == "H&M"


def test_clean_merchant_name_truncates() -> None:
    assert len(clean_merchant_name("A" * 60)) == MAX_MERCHANT_NAME_LENGTH


@pytest.mark.parametrize("raw", ["  MEGA   IMAGE 123 ", "SC #Foo# - Bar'S  ", "A " * 40])
def test_clean_merchant_name_is_idempotent(raw: str) -> None:
    once = clean_merchant_name(raw)
    assert clean_merchant_name(once) == once


def test_metadata_keywords_match_whole_words_only() -> None:
    # "Dorado" contains "ora" but is a name
    assert find_merchant_by_position("Dorado Grill\n12.50\n") == "Dorado Grill"
    assert find_merchant_by_position("Ora 14:02\nDorado Grill\n") == "Dorado Grill"
