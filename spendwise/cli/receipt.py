"""Receipt command handlers used by the unified CLI."""

import argparse
from pathlib import Path

from spendwise.runtime import Settings, get_logger

logger = get_logger(__name__)


def cmd_serve(args: argparse.Namespace, settings: Settings) -> int:
    """Start the FastAPI server for chat and receipt parsing."""
    import uvicorn

    from spendwise.runtime.receipt_server import create_app

    print(f"Starting spendwise server on {args.host}:{args.port}")
    print(f"Endpoints: http://{args.host}:{args.port}/chat/parse | /receipt/parse-text | /receipt/upload")
    print("Press Ctrl+C to stop")

    uvicorn.run(create_app(settings), host=args.host, port=args.port)
    return 0


def cmd_receipt(args: argparse.Namespace, settings: Settings) -> int:
    """Parse a receipt image (through the OCR service) or an OCR text file."""
    from spendwise.application.receipts.scan import ReceiptScanRequest, run_receipt_scan

    result = run_receipt_scan(
        ReceiptScanRequest(
            path=Path(args.path),
            ocr_url=args.ocr_url or settings.ocr_url,
            ocr_timeout=settings.ocr_timeout,
            text_only=args.text,
            keywords=settings.receipt_keywords,
        )
    )

    if result.status == "file_not_found":
        logger.error("%s", result.error)
        print(f"Error: {result.error}")
        return 1

    if result.status == "unreadable":
        print(f"Error: {result.error}")
        return 1

    if result.status == "ocr_failed":
        print(f"OCR failed: {result.error}")
        print("Make sure the OCR service is running before scanning receipts.")
        return 1

    receipt = result.receipt
    if receipt is None:
        print("Scan failed: missing receipt output.")
        return 1

    print("\n" + "=" * 60)
    print("PARSED RECEIPT")
    print("=" * 60)
    print(f"Merchant: {receipt.merchant_name or 'UNKNOWN'}")
    print(f"Total: {receipt.amount:.2f}")
    print(f"Category: {receipt.category}")
    print(f"Confidence: {receipt.confidence:.2f}")
    print("=" * 60)

    if result.status == "no_amount":
        print(f"\n{receipt.error}")
        return 1

    if result.draft is not None:
        print(f"\nDraft expense: {result.draft.description} ({result.draft.id})")
    return 0
