"""Data models for parsed expenses and scanned receipts."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Any, Literal

from spendwise.domain.taxonomy import OTHER

ExpenseSource = Literal["chat", "receipt"]


@dataclass(frozen=True)
class ParsedExpense:
    """Structured fields extracted from a free-text chat message."""

    amount: Decimal | None
    currency: str | None  # Canonical code, e.g. "RON"
    merchant: str | None
    category: str = OTHER
    description: str = ""
    confidence: float = 0.0

    def as_dict(self) -> dict[str, Any]:
        return {
            "amount": float(self.amount) if self.amount is not None else None,
            "currency": self.currency,
            "merchant": self.merchant,
            "category": self.category,
            "description": self.description,
            "confidence": self.confidence,
        }


@dataclass(frozen=True)
class TotalAmount:
    """A receipt total together with the extraction tier that produced it."""

    amount: Decimal
    tier: int  # 1 = TOTAL + currency word, 2 = TOTAL line, 3 = largest plausible amount
    confidence: float


@dataclass(frozen=True)
class ReceiptData:
    """Result of running the receipt heuristics over OCR text."""

    success: bool
    amount: Decimal = Decimal("0")
    merchant_name: str = ""
    category: str = OTHER
    raw_text: str = ""  # Full OCR text, kept for diagnostics
    error: str = ""
    confidence: float = 0.0

    def as_dict(self) -> dict[str, Any]:
        return {
            "success": self.success,
            "amount": float(self.amount),
            "merchant_name": self.merchant_name,
            "category": self.category,
            "raw_text": self.raw_text,
            "error": self.error,
            "confidence": self.confidence,
        }


@dataclass(frozen=True)
class ExpenseDraft:
    """Expense record ready to be handed to a persistence layer."""

    amount: Decimal
    category: str
    description: str
    source: ExpenseSource
    currency: str | None = None
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    timestamp: datetime = field(default_factory=datetime.now)

    def as_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "amount": float(self.amount),
            "currency": self.currency,
            "category": self.category,
            "description": self.description,
            "source": self.source,
            "timestamp": self.timestamp.isoformat(),
        }


def create_expense_from_parsed(parsed: ParsedExpense, user_currency: str = "USD") -> ExpenseDraft | None:
    """Build an expense draft from a chat parse; None when no amount was found.

    Amounts are kept in the currency they were stated in; ``user_currency``
    only fills in a missing currency.
    """
    if parsed.amount is None:
        return None
    return ExpenseDraft(
        amount=parsed.amount,
        currency=parsed.currency or user_currency,
        category=parsed.category or OTHER,
        description=parsed.description or "Chat expense",
        source="chat",
    )


def create_expense_from_receipt(receipt: ReceiptData, currency: str | None = None) -> ExpenseDraft | None:
    """Build an expense draft from a successful receipt scan."""
    if not receipt.success:
        return None
    description = f"Purchase at {receipt.merchant_name}" if receipt.merchant_name else "Receipt Scan"
    return ExpenseDraft(
        amount=receipt.amount,
        currency=currency,
        category=receipt.category,
        description=description,
        source="receipt",
    )
