"""FastAPI server exposing the chat and receipt parsers over HTTP."""

from __future__ import annotations

from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from spendwise.chat import HybridExpenseParser, suggestions_for
from spendwise.domain.expense import create_expense_from_parsed, create_expense_from_receipt
from spendwise.domain.taxonomy import normalize_currency
from spendwise.receipt import TextRecognizer, parse_receipt_image, parse_receipt_text
from spendwise.runtime.fallback_client import HttpExpenseFallback
from spendwise.runtime.logging import get_logger
from spendwise.runtime.ocr_service import OCRServiceClient
from spendwise.runtime.settings import Settings, load_settings

logger = get_logger(__name__)


async def _json_body(request: Request) -> dict[str, Any] | None:
    try:
        body = await request.json()
    except ValueError:
        return None
    return body if isinstance(body, dict) else None


def _bad_request(message: str) -> JSONResponse:
    return JSONResponse({"status": "error", "message": message}, status_code=400)


def create_app(settings: Settings | None = None, recognizer: TextRecognizer | None = None) -> FastAPI:
    """Build the HTTP app.

    Args:
        settings: Parser/OCR settings; loaded from config/spendwise.toml if None.
        recognizer: OCR backend for uploads; defaults to the configured OCR service.
    """
    settings = settings or load_settings()
    recognizer = recognizer or OCRServiceClient(settings.ocr_url, timeout=settings.ocr_timeout)
    fallback = HttpExpenseFallback(settings.fallback_url) if settings.fallback_url else None
    chat_parser = HybridExpenseParser(
        fallback=fallback,
        threshold=settings.confidence_threshold,
        keywords=settings.chat_keywords,
    )

    app = FastAPI(title="Spendwise Expense Parser")

    @app.post("/chat/parse")
    async def parse_chat(request: Request) -> JSONResponse:
        """Parse a chat message into an expense."""
        body = await _json_body(request)
        if body is None or not isinstance(body.get("message"), str):
            return _bad_request("Expected a JSON body with a 'message' string")

        currency = settings.default_currency
        if body.get("currency") is not None:
            requested = normalize_currency(str(body["currency"]))
            if requested is None:
                return _bad_request(f"Unsupported currency: {body['currency']}")
            currency = requested

        parsed = await run_in_threadpool(chat_parser.parse_expense, body["message"], currency)
        draft = create_expense_from_parsed(parsed, user_currency=currency)
        return JSONResponse(
            {
                "status": "success",
                "expense": parsed.as_dict(),
                "suggestions": suggestions_for(parsed),
                "draft": draft.as_dict() if draft is not None else None,
            }
        )

    @app.post("/receipt/parse-text")
    async def parse_receipt_from_text(request: Request) -> JSONResponse:
        """Run the receipt heuristics over OCR text supplied by the caller."""
        body = await _json_body(request)
        if body is None or not isinstance(body.get("text"), str):
            return _bad_request("Expected a JSON body with a 'text' string")

        receipt = parse_receipt_text(body["text"], keywords=settings.receipt_keywords)
        draft = create_expense_from_receipt(receipt)
        return JSONResponse(
            {
                "status": "success" if receipt.success else "error",
                "receipt": receipt.as_dict(),
                "draft": draft.as_dict() if draft is not None else None,
            }
        )

    @app.post("/receipt/upload")
    async def upload_receipt(request: Request) -> JSONResponse:
        """Receive a receipt image, OCR it and parse the text."""
        form = await request.form()

        file = None
        for key, value in form.items():
            logger.debug("Form field: key=%r, type=%s", key, type(value))
            if hasattr(value, "read"):
                file = value
                break

        if not file:
            return _bad_request("No file found in request")

        contents = await file.read()
        receipt = await run_in_threadpool(
            parse_receipt_image,
            contents,
            recognizer,
            keywords=settings.receipt_keywords,
        )
        if not receipt.success:
            logger.warning("Receipt upload failed: %s", receipt.error)
        draft = create_expense_from_receipt(receipt)
        return JSONResponse(
            {
                "status": "success" if receipt.success else "error",
                "receipt": receipt.as_dict(),
                "draft": draft.as_dict() if draft is not None else None,
                "size_bytes": len(contents),
            }
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "ok"}

    return app


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(create_app(), host="0.0.0.0", port=8000)
