"""
QuickPay Python SDK

Client for the QuickPay payments API and verification of QuickPay callbacks.
"""
from .client import AsyncQuickPayClient, QuickPayClient
from .config import QuickPaySettings, load_settings
from .models.errors import (
    APIError,
    AuthenticationError,
    ForbiddenError,
    NotFoundError,
    PaymentRequiredError,
    QuickPayError,
    RateLimitError,
    ResponseDecodeError,
    ServerError,
)
from .models.payment import Callback, Link, Metadata, Operation, PaymentLink
from .models.requests import (
    CancelSubscriptionRequest,
    CaptureRequest,
    CreateLinkRequest,
    CreatePaymentRequest,
    CreateRecurringRequest,
    EmptyPayload,
    GetSubscriptionRequest,
    HeaderOverride,
    HeaderOverrides,
    RefundRequest,
)
from .operations import OPERATIONS, Endpoint
from .webhooks import CHECKSUM_HEADER, parse_callback, sign, verify_request, verify_signature

__version__ = "0.1.0"

__all__ = [
    # Clients
    "AsyncQuickPayClient",
    "QuickPayClient",
    # Configuration
    "QuickPaySettings",
    "load_settings",
    # Errors
    "QuickPayError",
    "APIError",
    "AuthenticationError",
    "PaymentRequiredError",
    "ForbiddenError",
    "NotFoundError",
    "RateLimitError",
    "ServerError",
    "ResponseDecodeError",
    # Response models
    "Callback",
    "Link",
    "Metadata",
    "Operation",
    "PaymentLink",
    # Request payloads
    "CancelSubscriptionRequest",
    "CaptureRequest",
    "CreateLinkRequest",
    "CreatePaymentRequest",
    "CreateRecurringRequest",
    "EmptyPayload",
    "GetSubscriptionRequest",
    "HeaderOverride",
    "HeaderOverrides",
    "RefundRequest",
    # Operations
    "OPERATIONS",
    "Endpoint",
    # Webhooks
    "CHECKSUM_HEADER",
    "parse_callback",
    "sign",
    "verify_request",
    "verify_signature",
]
