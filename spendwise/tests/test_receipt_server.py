from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from spendwise.receipt import TextRecognitionError
from spendwise.runtime import Settings
from spendwise.runtime.receipt_server import create_app


@pytest.fixture
def client(fake_recognizer) -> TestClient:
    recognizer = fake_recognizer(text="KAUFLAND\nTOTAL LEI 10.00")
    return TestClient(create_app(Settings(), recognizer=recognizer))


def test_health(client: TestClient) -> None:
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_chat_parse(client: TestClient) -> None:
    response = client.post("/chat/parse", json={"message": "I bought groceries from Auchan for 200 lei"})
    body = response.json()

    assert response.status_code == 200
    assert body["expense"]["amount"] == 200.0
    assert body["expense"]["currency"] == "RON"
    assert body["expense"]["merchant"] == "Auchan"
    assert body["suggestions"] == []
    assert body["draft"]["source"] == "chat"


def test_chat_parse_without_amount_has_no_draft(client: TestClient) -> None:
    body = client.post("/chat/parse", json={"message": "asdkjaslkdj", "currency": "EUR"}).json()

    assert body["expense"]["amount"] is None
    assert body["draft"] is None
    assert body["suggestions"]


def test_chat_parse_rejects_bad_requests(client: TestClient) -> None:
    assert client.post("/chat/parse", json={"text": "x"}).status_code == 400
    assert client.post("/chat/parse", json={"message": "x", "currency": "yen"}).status_code == 400


def test_receipt_parse_text(client: TestClient) -> None:
    body = client.post("/receipt/parse-text", json={"text": "STORE SRL\nTOTAL Lei 123.45\n"}).json()

    assert body["status"] == "success"
    assert body["receipt"]["amount"] == 123.45
    assert body["draft"]["description"] == "Purchase at STORE"


def test_receipt_parse_text_failure(client: TestClient) -> None:
    body = client.post("/receipt/parse-text", json={"text": ""}).json()

    assert body["status"] == "error"
    assert body["receipt"]["error"] == "No text recognized on the receipt"
    assert body["draft"] is None


def test_receipt_upload(client: TestClient) -> None:
    response = client.post("/receipt/upload", files={"file": ("receipt.jpg", b"jpeg-bytes", "image/jpeg")})
    body = response.json()

    assert response.status_code == 200
    assert body["status"] == "success"
    assert body["receipt"]["merchant_name"] == "KAUFLAND"
    assert body["size_bytes"] == len(b"jpeg-bytes")


def test_receipt_upload_without_file(client: TestClient) -> None:
    assert client.post("/receipt/upload", data={"note": "x"}).status_code == 400


def test_receipt_upload_ocr_failure(fake_recognizer) -> None:
    recognizer = fake_recognizer(error=TextRecognitionError("offline"))
    client = TestClient(create_app(Settings(), recognizer=recognizer))

    body = client.post("/receipt/upload", files={"file": ("receipt.jpg", b"x", "image/jpeg")}).json()

    assert body["status"] == "error"
    assert body["receipt"]["error"] == "Error analyzing receipt: offline"
