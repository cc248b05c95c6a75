"""Runtime loader for spendwise settings (config/spendwise.toml)."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Any

from spendwise.domain.taxonomy import (
    CATEGORIES,
    CHAT_CATEGORY_KEYWORDS,
    CURRENCY_CODES,
    RECEIPT_CATEGORY_KEYWORDS,
    KeywordTable,
    merge_keyword_tables,
)
from spendwise.runtime.logging import get_logger
from spendwise.runtime.paths import get_paths

logger = get_logger(__name__)

DEFAULT_CURRENCY = "USD"
DEFAULT_CONFIDENCE_THRESHOLD = 0.7
DEFAULT_OCR_URL = "http://localhost:8001"
DEFAULT_OCR_TIMEOUT = 60.0


@dataclass(frozen=True)
class Settings:
    """Parser, OCR and keyword configuration."""

    default_currency: str = DEFAULT_CURRENCY
    confidence_threshold: float = DEFAULT_CONFIDENCE_THRESHOLD
    ocr_url: str = DEFAULT_OCR_URL
    ocr_timeout: float = DEFAULT_OCR_TIMEOUT
    fallback_url: str | None = None
    chat_keywords: KeywordTable = field(default_factory=lambda: CHAT_CATEGORY_KEYWORDS)
    receipt_keywords: KeywordTable = field(default_factory=lambda: RECEIPT_CATEGORY_KEYWORDS)


def _load_toml(path: Path) -> dict[str, Any]:
    """Load TOML file and return parsed dict; missing files map to empty dict."""
    try:
        import tomllib
    except ImportError:
        import tomli as tomllib  # type: ignore[no-redef]

    if not path.exists():
        logger.debug("Settings file not found: %s, using defaults", path)
        return {}

    with open(path, "rb") as f:
        data = tomllib.load(f)
    return data if isinstance(data, dict) else {}


def _extra_keywords(raw: Any, table_name: str) -> dict[str, tuple[str, ...]]:
    """Normalize a ``[keywords.<table>]`` section into lowercase keyword tuples."""
    if not isinstance(raw, Mapping):
        return {}

    extra: dict[str, tuple[str, ...]] = {}
    for category, keywords in raw.items():
        if category not in CATEGORIES:
            logger.warning("Ignoring keywords for unknown category %r in [keywords.%s]", category, table_name)
            continue
        if isinstance(keywords, str):
            keywords = [keywords]
        if not isinstance(keywords, list):
            logger.warning("Keywords for %r in [keywords.%s] must be a list", category, table_name)
            continue
        values = tuple(str(kw).strip().lower() for kw in keywords if str(kw).strip())
        if values:
            extra[category] = values
    return extra


def build_settings(config: Mapping[str, Any]) -> Settings:
    """Build Settings from an already-parsed TOML mapping."""
    parser = config.get("parser", {})
    ocr = config.get("ocr", {})
    fallback = config.get("fallback", {})
    keywords = config.get("keywords", {})

    default_currency = str(parser.get("default_currency", DEFAULT_CURRENCY)).strip().upper()
    if default_currency not in CURRENCY_CODES:
        raise ValueError(
            f"Unsupported default_currency {default_currency!r}; expected one of {', '.join(CURRENCY_CODES)}"
        )

    threshold = float(parser.get("confidence_threshold", DEFAULT_CONFIDENCE_THRESHOLD))
    if not 0.0 <= threshold <= 1.0:
        raise ValueError(f"confidence_threshold must be within [0, 1], got {threshold}")

    fallback_url = str(fallback.get("url", "")).strip() or None

    return Settings(
        default_currency=default_currency,
        confidence_threshold=threshold,
        ocr_url=str(ocr.get("url", DEFAULT_OCR_URL)).rstrip("/"),
        ocr_timeout=float(ocr.get("timeout", DEFAULT_OCR_TIMEOUT)),
        fallback_url=fallback_url,
        chat_keywords=merge_keyword_tables(CHAT_CATEGORY_KEYWORDS, _extra_keywords(keywords.get("chat"), "chat")),
        receipt_keywords=merge_keyword_tables(
            RECEIPT_CATEGORY_KEYWORDS, _extra_keywords(keywords.get("receipt"), "receipt")
        ),
    )


@lru_cache(maxsize=4)
def load_settings(config_path: str | None = None) -> Settings:
    """
    Load settings from spendwise.toml.

    Args:
        config_path: Optional TOML path override. If None, uses the project config path.

    Returns:
        Settings; defaults when the file does not exist.
    """
    path = Path(config_path) if config_path is not None else get_paths().settings
    settings = build_settings(_load_toml(path))
    logger.debug("Loaded settings from %s", path)
    return settings
