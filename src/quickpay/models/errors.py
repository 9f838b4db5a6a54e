"""Error models for the QuickPay SDK."""
from __future__ import annotations

import json
from typing import Any, Optional


class QuickPayError(Exception):
    """Base exception for the QuickPay SDK."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class APIError(QuickPayError):
    """QuickPay answered with a non-2xx status.

    ``response_body`` is the raw body exactly as received, JSON or not.
    """

    def __init__(
        self,
        message: str,
        status_code: int,
        response_body: str = "",
    ):
        super().__init__(message)
        self.status_code = status_code
        self.response_body = response_body

    def __str__(self) -> str:
        return f"[{self.status_code}] {self.message}"

    def json(self) -> Optional[Any]:
        """The response body parsed as JSON, or None if it is not JSON."""
        try:
            return json.loads(self.response_body)
        except ValueError:
            return None

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary."""
        return {
            "error": {
                "status_code": self.status_code,
                "message": self.message,
                "response_body": self.response_body,
            }
        }

    @classmethod
    def from_response(
        cls,
        status_code: int,
        reason: str,
        body: str,
    ) -> "APIError":
        """Create the APIError subclass matching an HTTP failure."""
        error_cls = _STATUS_ERRORS.get(status_code)
        if error_cls is None:
            error_cls = ServerError if status_code >= 500 else APIError
        return error_cls(reason or f"HTTP {status_code}", status_code, body)


class AuthenticationError(APIError):
    """The API key was missing or rejected (401)."""


class PaymentRequiredError(APIError):
    """The operation was declined (402)."""


class ForbiddenError(APIError):
    """The API user lacks permission for the operation (403)."""


class NotFoundError(APIError):
    """The payment or subscription does not exist (404)."""


class RateLimitError(APIError):
    """Too many requests (429)."""


class ServerError(APIError):
    """QuickPay failed to handle the request (5xx)."""


class ResponseDecodeError(QuickPayError):
    """A 2xx response body could not be decoded into the expected model."""

    def __init__(self, message: str, status_code: int, response_body: str):
        super().__init__(message)
        self.status_code = status_code
        self.response_body = response_body


_STATUS_ERRORS: dict[int, type[APIError]] = {
    401: AuthenticationError,
    402: PaymentRequiredError,
    403: ForbiddenError,
    404: NotFoundError,
    429: RateLimitError,
}
