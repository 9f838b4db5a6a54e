"""
Pytest configuration and fixtures for QuickPay SDK tests.
"""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Optional

import httpx
import pytest

from quickpay import AsyncQuickPayClient, QuickPayClient


@dataclass
class _MockEntry:
    method: str
    url: str
    response: Optional[httpx.Response] = None
    exception: Optional[Exception] = None


@dataclass
class RecordedRequest:
    method: str
    url: str
    headers: dict[str, str]
    json: Any = None
    has_body: bool = False
    extra: dict[str, Any] = field(default_factory=dict)


class _LocalHTTPXMock:
    """Minimal httpx mock that answers queued responses and records requests."""

    def __init__(self) -> None:
        self._entries: list[_MockEntry] = []
        self.requests: list[RecordedRequest] = []

    def add_response(
        self,
        *,
        url: str,
        method: str = "GET",
        status_code: int = 200,
        json: Any = None,
        content: bytes | str | None = None,
        headers: Optional[dict[str, str]] = None,
    ) -> None:
        if content is None and json is not None:
            content = json_dumps_bytes(json)
            response_headers = {"content-type": "application/json"}
            if headers:
                response_headers.update(headers)
        else:
            response_headers = headers or {}
        if isinstance(content, str):
            content = content.encode("utf-8")

        request = httpx.Request(method.upper(), url)
        response = httpx.Response(
            status_code=status_code,
            headers=response_headers,
            content=content or b"",
            request=request,
        )
        self._entries.append(
            _MockEntry(method=method.upper(), url=url, response=response)
        )

    def add_exception(
        self,
        exception: Exception,
        *,
        url: str,
        method: str = "GET",
    ) -> None:
        self._entries.append(
            _MockEntry(method=method.upper(), url=url, exception=exception)
        )

    def last_request(self) -> RecordedRequest:
        assert self.requests, "no request was sent"
        return self.requests[-1]

    def _handle(self, method: str, url: Any, kwargs: dict[str, Any]) -> httpx.Response:
        self.requests.append(
            RecordedRequest(
                method=method.upper(),
                url=str(url),
                headers=dict(kwargs.pop("headers", None) or {}),
                json=kwargs.get("json"),
                has_body=any(kwargs.get(key) is not None for key in ("json", "content", "data")),
                extra=kwargs,
            )
        )
        match = self._pop_match(method, str(url))
        if match.exception is not None:
            raise match.exception
        assert match.response is not None
        return match.response

    def _pop_match(self, method: str, url: str) -> _MockEntry:
        normalized_method = method.upper()
        for idx, entry in enumerate(self._entries):
            if entry.method == normalized_method and entry.url == url:
                return self._entries.pop(idx)
        raise AssertionError(
            f"No mocked response for {normalized_method} {url}. "
            f"Available: {[f'{e.method} {e.url}' for e in self._entries]}"
        )


def json_dumps_bytes(payload: Any) -> bytes:
    return json.dumps(payload, default=str).encode("utf-8")


@pytest.fixture
def httpx_mock(monkeypatch):
    """Patch httpx clients so no request leaves the process."""
    mock = _LocalHTTPXMock()

    async def _async_request(self, method, url, **kwargs):
        return mock._handle(method, url, kwargs)

    def _sync_request(self, method, url, **kwargs):
        return mock._handle(method, url, kwargs)

    monkeypatch.setattr(httpx.AsyncClient, "request", _async_request)
    monkeypatch.setattr(httpx.Client, "request", _sync_request)
    return mock


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch, tmp_path):
    """Keep QUICKPAY_* variables and a stray .env out of the tests."""
    import os

    for key in list(os.environ):
        if key.startswith("QUICKPAY_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)


# Mock response data
MOCK_RESPONSES = {
    "payment": {
        "id": 42,
        "merchant_id": 1234,
        "order_id": "A1",
        "accepted": False,
        "type": "Payment",
        "text_on_statement": None,
        "branding_id": None,
        "variables": {},
        "currency": "DKK",
        "state": "initial",
        "metadata": {
            "type": None,
            "brand": None,
            "fraud_suspected": False,
            "fraud_remarks": [],
        },
        "link": None,
        "shipping_address": None,
        "invoice_address": None,
        "basket": [],
        "shipping": None,
        "operations": [],
        "test_mode": True,
        "acquirer": None,
        "facilitator": None,
        "created_at": "2024-03-01T10:00:00Z",
        "updated_at": "2024-03-01T10:00:00Z",
        "retented_at": None,
        "balance": 0,
        "fee": None,
        "deadline_at": None,
    },
    "authorized_payment": {
        "id": 42,
        "order_id": "A1",
        "accepted": True,
        "type": "Payment",
        "currency": "DKK",
        "state": "new",
        "test_mode": True,
        "acquirer": "clearhaus",
        "balance": 0,
        "metadata": {
            "type": "card",
            "origin": "form",
            "brand": "visa",
            "bin": "100000",
            "last4": "0008",
            "exp_month": 12,
            "exp_year": 30,
            "country": "DNK",
            "is_3d_secure": False,
            "hash": "c0d5cbf3b1c1e6a4",
            "customer_ip": "10.0.0.1",
            "customer_country": "DK",
            "fraud_suspected": False,
            "fraud_remarks": [],
            "reported": False,
            "report_description": None,
            "reported_at": None,
        },
        "link": {
            "url": "https://payment.quickpay.net/payments/abc",
            "agreement_id": 9876,
            "language": "en",
            "amount": 10000,
            "continue_url": None,
            "cancel_url": None,
            "callback_url": "https://shop.example.com/callback",
            "framed": False,
            "version": "v10",
        },
        "operations": [
            {
                "id": 1,
                "type": "authorize",
                "amount": 10000,
                "pending": False,
                "qp_status_code": "20000",
                "qp_status_msg": "Approved",
                "aq_status_code": "000",
                "aq_status_msg": "Approved",
                "data": {},
                "callback_url": "https://shop.example.com/callback",
                "callback_success": True,
                "callback_response_code": "200",
                "callback_duration": 120,
                "acquirer": "clearhaus",
                "callback_at": "2024-03-01T10:05:01Z",
                "created_at": "2024-03-01T10:05:00Z",
            }
        ],
        "created_at": "2024-03-01T10:00:00Z",
        "updated_at": "2024-03-01T10:05:00Z",
    },
    "link": {
        "url": "https://payment.quickpay.net/payments/abc",
    },
    "subscription": {
        "id": 77,
        "order_id": "sub-1",
        "accepted": False,
        "type": "Subscription",
        "currency": "DKK",
        "state": "initial",
        "operations": [],
        "test_mode": True,
    },
}


@pytest.fixture
def api_key() -> str:
    """Test API key."""
    return "test-api-key"


@pytest.fixture
def private_key() -> str:
    """Test account private key."""
    return "test-private-key"


@pytest.fixture
async def client(api_key: str, private_key: str) -> AsyncQuickPayClient:
    """Create a test client."""
    client = AsyncQuickPayClient(
        api_key=api_key,
        private_key=private_key,
        callback_url="https://shop.example.com/callback",
    )
    yield client
    await client.close()


@pytest.fixture
def sync_client(api_key: str, private_key: str) -> QuickPayClient:
    client = QuickPayClient(
        api_key=api_key,
        private_key=private_key,
        callback_url="https://shop.example.com/callback",
    )
    yield client
    client.close()


@pytest.fixture
def mock_responses() -> dict:
    """Return mock response data."""
    return MOCK_RESPONSES
