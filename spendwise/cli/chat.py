"""Chat command handlers used by the unified CLI."""

import argparse

from spendwise.chat import HybridExpenseParser, get_suggestions, suggestions_for
from spendwise.domain.taxonomy import normalize_currency
from spendwise.runtime import Settings
from spendwise.runtime.fallback_client import HttpExpenseFallback


def _resolve_currency(args: argparse.Namespace, settings: Settings) -> str | None:
    if args.currency is None:
        return settings.default_currency
    return normalize_currency(args.currency)


def cmd_chat(args: argparse.Namespace, settings: Settings) -> int:
    """Parse a chat message and print the extracted expense."""
    currency = _resolve_currency(args, settings)
    if currency is None:
        print(f"Unsupported currency: {args.currency}")
        return 1

    fallback = HttpExpenseFallback(settings.fallback_url) if settings.fallback_url else None
    parser = HybridExpenseParser(
        fallback=fallback,
        threshold=settings.confidence_threshold,
        keywords=settings.chat_keywords,
    )
    parsed = parser.parse_expense(args.message, currency)

    amount_str = f"{parsed.amount} {parsed.currency}" if parsed.amount is not None else "not found"
    print(f"Amount: {amount_str}")
    print(f"Merchant: {parsed.merchant or 'not found'}")
    print(f"Category: {parsed.category}")
    print(f"Description: {parsed.description}")
    print(f"Confidence: {parsed.confidence:.2f}")

    suggestions = suggestions_for(parsed)
    if suggestions:
        print()
        for suggestion in suggestions:
            print(f"  {suggestion}")

    return 0 if parsed.amount is not None else 1


def cmd_suggest(args: argparse.Namespace, settings: Settings) -> int:
    """Print guidance for a message the parser could not fully understand."""
    suggestions = get_suggestions(args.message, settings.default_currency, keywords=settings.chat_keywords)
    if not suggestions:
        print("Message looks complete.")
        return 0
    for suggestion in suggestions:
        print(suggestion)
    return 0
