"""QuickPay SDK models."""
from .base import QuickPayModel
from .errors import (
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
from .payment import Callback, Link, Metadata, Operation, PaymentLink
from .requests import (
    CancelSubscriptionRequest,
    CaptureRequest,
    CreateLinkRequest,
    CreatePaymentRequest,
    CreateRecurringRequest,
    EmptyPayload,
    GetSubscriptionRequest,
    HeaderOverride,
    HeaderOverrides,
    QuickPayPayload,
    RefundRequest,
)

__all__ = [
    "QuickPayModel",
    "Callback",
    "Link",
    "Metadata",
    "Operation",
    "PaymentLink",
    "QuickPayPayload",
    "EmptyPayload",
    "RefundRequest",
    "CaptureRequest",
    "CreatePaymentRequest",
    "CreateRecurringRequest",
    "CreateLinkRequest",
    "CancelSubscriptionRequest",
    "GetSubscriptionRequest",
    "HeaderOverride",
    "HeaderOverrides",
    "QuickPayError",
    "APIError",
    "AuthenticationError",
    "PaymentRequiredError",
    "ForbiddenError",
    "NotFoundError",
    "RateLimitError",
    "ServerError",
    "ResponseDecodeError",
]
