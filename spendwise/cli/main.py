#!/usr/bin/env python3

import argparse
from collections.abc import Sequence

from spendwise.runtime import load_settings


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="Expense parsing utilities",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Commands:
  chat <message>             Parse a free-text expense message
  suggest <message>          Show hints for an incomplete message
  receipt <path>             Parse a receipt image (or OCR text with --text)
  serve [--host] [--port]    Start the HTTP parsing server

Configuration:
  config/spendwise.toml under $SPENDWISE_ROOT (default: current directory)
""",
    )
    parser.add_argument("--config", default=None, help="Path to settings TOML (default: config/spendwise.toml)")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    chat_parser = subparsers.add_parser("chat", help="Parse a free-text expense message")
    chat_parser.add_argument("message", help='Message, e.g. "I bought groceries from Auchan for 200 lei"')
    chat_parser.add_argument("--currency", default=None, help="Default currency when none is mentioned")

    suggest_parser = subparsers.add_parser("suggest", help="Show hints for an incomplete message")
    suggest_parser.add_argument("message", help="Message to analyze")

    receipt_parser = subparsers.add_parser("receipt", help="Parse a receipt")
    receipt_parser.add_argument("path", help="Path to receipt image, or OCR text file with --text")
    receipt_parser.add_argument("--text", action="store_true", help="Treat path as OCR text instead of an image")
    receipt_parser.add_argument("--ocr-url", default=None, help="OCR service URL (default: from settings)")

    serve_parser = subparsers.add_parser("serve", help="Start the HTTP parsing server")
    serve_parser.add_argument("--host", default="0.0.0.0", help="Host to bind to (default: 0.0.0.0)")
    serve_parser.add_argument("--port", type=int, default=8080, help="Port to bind to (default: 8080)")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    try:
        settings = load_settings(args.config)
    except ValueError as exc:
        print(f"Invalid configuration: {exc}")
        return 1

    if args.command == "chat":
        from spendwise.cli.chat import cmd_chat

        return cmd_chat(args, settings)
    elif args.command == "suggest":
        from spendwise.cli.chat import cmd_suggest

        return cmd_suggest(args, settings)
    elif args.command == "receipt":
        from spendwise.cli.receipt import cmd_receipt

        return cmd_receipt(args, settings)
    elif args.command == "serve":
        from spendwise.cli.receipt import cmd_serve

        return cmd_serve(args, settings)

    return 1


if __name__ == "__main__":
    raise SystemExit(main())
