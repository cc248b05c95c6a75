"""HTTP fallback parser used when the rule-based parse is not confident."""

from __future__ import annotations

from decimal import Decimal
from typing import Any

import httpx

from spendwise.chat.hybrid import FallbackParserError
from spendwise.domain.expense import ParsedExpense
from spendwise.domain.taxonomy import normalize_category, normalize_currency
from spendwise.runtime.logging import get_logger
from spendwise.util.patterns import parse_decimal

logger = get_logger(__name__)

DEFAULT_FALLBACK_TIMEOUT = 30.0


def parsed_expense_from_payload(payload: dict[str, Any]) -> ParsedExpense:
    """Map a fallback JSON reply onto a ParsedExpense inside the closed taxonomies."""
    raw_amount = payload.get("amount")
    amount: Decimal | None = None
    if isinstance(raw_amount, (int, float, str)) and not isinstance(raw_amount, bool):
        amount = parse_decimal(str(raw_amount))

    try:
        confidence = float(payload.get("confidence") or 0.0)
    except (TypeError, ValueError):
        confidence = 0.0

    return ParsedExpense(
        amount=amount,
        currency=normalize_currency(payload.get("currency")),
        merchant=str(payload["merchant"]) if payload.get("merchant") else None,
        category=normalize_category(payload.get("category")),
        description=str(payload.get("description") or ""),
        confidence=min(1.0, max(0.0, confidence)),
    )


class HttpExpenseFallback:
    """ExpenseFallback that posts the message to a JSON parsing endpoint.

    The endpoint receives ``{"message": ..., "currency": ...}`` and answers
    with amount/currency/merchant/category/description/confidence fields.
    """

    def __init__(
        self,
        url: str,
        timeout: float = DEFAULT_FALLBACK_TIMEOUT,
        client: httpx.Client | None = None,
    ) -> None:
        self.url = url
        self.timeout = timeout
        self._client = client or httpx.Client(timeout=timeout)

    def parse_expense(self, message: str, currency: str) -> ParsedExpense:
        try:
            response = self._client.post(self.url, json={"message": message, "currency": currency})
        except httpx.RequestError as e:
            logger.error("Failed to reach fallback parser: %s", e)
            raise FallbackParserError(f"Failed to reach fallback parser: {e}") from e

        if response.status_code != 200:
            logger.error("Fallback parser error: %s", response.status_code)
            raise FallbackParserError(f"Fallback parser error: {response.status_code}")

        try:
            payload = response.json()
        except ValueError as e:
            raise FallbackParserError(f"Fallback parser returned invalid JSON: {e}") from e
        if not isinstance(payload, dict):
            raise FallbackParserError("Fallback parser returned an unexpected payload")

        return parsed_expense_from_payload(payload)
