"""
QuickPay Python SDK

Example usage:
    ```python
    from quickpay import AsyncQuickPayClient

    async with AsyncQuickPayClient(api_key="your-api-key") as client:
        payment = await client.payments.create(order_id="A1", currency="dkk")
        link = await client.payments.create_link(payment.id, amount=10000)
    ```

Both clients issue one HTTP round trip per call. Non-2xx answers raise
:class:`~quickpay.models.errors.APIError`; transport failures and timeouts
are raised by httpx unchanged. Nothing is retried.
"""
from __future__ import annotations

import logging
import threading
from typing import Any, Optional, Union

import httpx
from pydantic import ValidationError

from .auth import build_headers
from .config import QuickPaySettings
from .logging import get_logger, mask_body, mask_headers
from .models.base import QuickPayModel
from .models.errors import APIError, ResponseDecodeError
from .models.requests import CreateLinkRequest, QuickPayPayload
from .operations import Endpoint
from .resources.payments import AsyncPaymentsResource, PaymentsResource
from .resources.subscriptions import AsyncSubscriptionsResource, SubscriptionsResource
from .webhooks import verify_signature

_module_logger = get_logger(__name__)


class _BaseClient:
    """Settings resolution, request building and response handling."""

    DEFAULT_TIMEOUT = 30.0

    def __init__(
        self,
        api_key: Optional[str] = None,
        *,
        private_key: Optional[str] = None,
        callback_url: Optional[str] = None,
        cancel_url: Optional[str] = None,
        continue_url: Optional[str] = None,
        version: Optional[str] = None,
        endpoint: Optional[str] = None,
        settings: Optional[QuickPaySettings] = None,
        timeout: Union[float, httpx.Timeout] = DEFAULT_TIMEOUT,
        logger: Optional[logging.Logger] = None,
    ):
        overrides = {
            key: value
            for key, value in {
                "api_key": api_key,
                "private_key": private_key,
                "callback_url": callback_url,
                "cancel_url": cancel_url,
                "continue_url": continue_url,
                "version": version,
                "endpoint": endpoint,
            }.items()
            if value is not None
        }
        if settings is None:
            settings = QuickPaySettings(**overrides)
        elif overrides:
            settings = QuickPaySettings(**{**settings.model_dump(), **overrides})

        if settings.api_key is None or not settings.api_key.get_secret_value():
            raise ValueError("API key is required")

        self._settings = settings
        self._timeout = timeout if isinstance(timeout, httpx.Timeout) else httpx.Timeout(timeout)
        self._logger = logger or _module_logger

    @property
    def settings(self) -> QuickPaySettings:
        return self._settings

    def _build_request(
        self,
        endpoint: Endpoint,
        payload: Optional[QuickPayPayload],
        path_params: dict[str, Any],
    ) -> dict[str, Any]:
        endpoint.check_payload(payload)
        if isinstance(payload, CreateLinkRequest):
            payload = self._with_link_defaults(payload)

        request: dict[str, Any] = {
            "method": endpoint.method,
            "url": self._settings.endpoint + endpoint.format_path(**path_params),
            "headers": build_headers(self._settings, payload.headers if payload else None),
        }
        if endpoint.has_body:
            request["json"] = payload.to_body() if payload is not None else {}

        if self._logger.isEnabledFor(logging.DEBUG):
            self._logger.debug(
                "QuickPay %s %s %s headers=%s",
                endpoint.name,
                request["method"],
                request["url"],
                mask_headers(request["headers"]),
            )
        return request

    def _with_link_defaults(self, payload: CreateLinkRequest) -> CreateLinkRequest:
        """Fill link URLs the caller left unset from the settings."""
        defaults = {
            field: getattr(self._settings, field)
            for field in ("callback_url", "cancel_url", "continue_url")
            if getattr(payload, field) is None and getattr(self._settings, field) is not None
        }
        return payload.model_copy(update=defaults) if defaults else payload

    def _handle_response(self, endpoint: Endpoint, response: httpx.Response) -> QuickPayModel:
        body = response.text
        if not response.is_success:
            self._logger.warning(
                "QuickPay %s failed: %s %s",
                endpoint.name,
                response.status_code,
                response.reason_phrase,
            )
            raise APIError.from_response(response.status_code, response.reason_phrase, body)

        if self._logger.isEnabledFor(logging.INFO):
            self._logger.info("QuickPay %s response: %s", endpoint.name, mask_body(body))

        try:
            return endpoint.response.model_validate_json(body)
        except ValidationError as exc:
            raise ResponseDecodeError(
                f"Could not decode {endpoint.name} response as {endpoint.response.__name__}",
                response.status_code,
                body,
            ) from exc

    def verify_callback(self, body: Union[bytes, str], signature: Optional[str]) -> bool:
        """Verify a callback body against its QuickPay-Checksum-Sha256 value.

        ``body`` must be the raw request body as received.
        """
        if self._settings.private_key is None:
            self._logger.warning("Cannot verify callback: no private key configured")
            return False
        return verify_signature(body, signature, self._settings.private_key.get_secret_value())


class AsyncQuickPayClient(_BaseClient):
    """
    Async QuickPay API client.

    Provides access to:
    - payments: create, get, link, refund and capture payments
    - subscriptions: create, get, link, charge and cancel subscriptions

    Args:
        api_key: API user key, sent as the Basic-auth password
        private_key: Account private key used to verify callbacks
        callback_url: Default QuickPay-Callback-Url and link callback URL
        cancel_url: Default cancel URL for payment links
        continue_url: Default continue URL for payment links
        version: Accept-Version header value (default: v10)
        endpoint: API base URL (default: https://api.quickpay.net/)
        settings: Prebuilt settings; explicit arguments above override them
        timeout: Request timeout in seconds (default: 30)
        logger: Logger for request and response diagnostics
    """

    def __init__(self, api_key: Optional[str] = None, **kwargs: Any):
        super().__init__(api_key, **kwargs)
        self._client: Optional[httpx.AsyncClient] = None

        self.payments = AsyncPaymentsResource(self)
        self.subscriptions = AsyncSubscriptionsResource(self)

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(timeout=self._timeout)
        return self._client

    async def _dispatch(
        self,
        endpoint: Endpoint,
        payload: Optional[QuickPayPayload] = None,
        **path_params: Any,
    ) -> QuickPayModel:
        """Issue one operation and decode its response."""
        request = self._build_request(endpoint, payload, path_params)
        client = await self._get_client()
        response = await client.request(**request)
        return self._handle_response(endpoint, response)

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
        self._client = None

    async def __aenter__(self) -> "AsyncQuickPayClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()


class QuickPayClient(_BaseClient):
    """
    Synchronous QuickPay API client.

    Takes the same arguments as :class:`AsyncQuickPayClient`.
    """

    def __init__(self, api_key: Optional[str] = None, **kwargs: Any):
        super().__init__(api_key, **kwargs)
        self._client: Optional[httpx.Client] = None
        self._lock = threading.Lock()

        self.payments = PaymentsResource(self)
        self.subscriptions = SubscriptionsResource(self)

    def _get_client(self) -> httpx.Client:
        """Get or create the HTTP client, once per instance across threads."""
        client = self._client
        if client is not None and not client.is_closed:
            return client
        with self._lock:
            if self._client is None or self._client.is_closed:
                self._client = httpx.Client(timeout=self._timeout)
            return self._client

    def _dispatch(
        self,
        endpoint: Endpoint,
        payload: Optional[QuickPayPayload] = None,
        **path_params: Any,
    ) -> QuickPayModel:
        """Issue one operation and decode its response."""
        request = self._build_request(endpoint, payload, path_params)
        response = self._get_client().request(**request)
        return self._handle_response(endpoint, response)

    def close(self) -> None:
        """Close the HTTP client."""
        with self._lock:
            if self._client and not self._client.is_closed:
                self._client.close()
            self._client = None

    def __enter__(self) -> "QuickPayClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
