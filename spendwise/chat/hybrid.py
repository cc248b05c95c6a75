"""Hybrid parser: rule-based first, escalate to a fallback parser when unsure."""

from __future__ import annotations

from typing import Protocol

from spendwise.chat.parser import parse_chat_expense
from spendwise.domain.expense import ParsedExpense
from spendwise.domain.taxonomy import CHAT_CATEGORY_KEYWORDS, KeywordTable
from spendwise.runtime.logging import get_logger

logger = get_logger(__name__)

DEFAULT_CONFIDENCE_THRESHOLD = 0.7


class FallbackParserError(RuntimeError):
    """Raised when a fallback parser cannot produce a result."""


class ExpenseFallback(Protocol):
    """Anything that can parse an expense message the rule-based parser found hard."""

    def parse_expense(self, message: str, currency: str) -> ParsedExpense: ...


class HybridExpenseParser:
    """Choose between the rule-based parse and a fallback parse.

    The rule-based result wins when its confidence reaches ``threshold`` or
    when no fallback is configured. A failing fallback also falls back to the
    rule-based result.
    """

    def __init__(
        self,
        fallback: ExpenseFallback | None = None,
        threshold: float = DEFAULT_CONFIDENCE_THRESHOLD,
        keywords: KeywordTable = CHAT_CATEGORY_KEYWORDS,
    ) -> None:
        self.fallback = fallback
        self.threshold = threshold
        self.keywords = keywords

    def parse_expense(self, message: str, user_currency: str = "USD") -> ParsedExpense:
        rule_based = parse_chat_expense(message, user_currency, keywords=self.keywords)

        if rule_based.confidence >= self.threshold or self.fallback is None:
            return rule_based

        logger.debug(
            "Rule-based confidence %.2f below %.2f, trying fallback parser",
            rule_based.confidence,
            self.threshold,
        )
        try:
            return self.fallback.parse_expense(message, user_currency)
        except FallbackParserError as e:
            logger.warning("Fallback parser failed, keeping rule-based result: %s", e)
            return rule_based
