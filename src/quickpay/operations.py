"""The catalog of QuickPay API operations this client can issue."""
from __future__ import annotations

import string
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping, Optional
from urllib.parse import quote

from .models.base import QuickPayModel
from .models.payment import Callback, Link
from .models.requests import (
    CancelSubscriptionRequest,
    CaptureRequest,
    CreateLinkRequest,
    CreatePaymentRequest,
    CreateRecurringRequest,
    QuickPayPayload,
    RefundRequest,
)


@dataclass(frozen=True)
class Endpoint:
    """One API operation.

    Attributes:
        name: Operation name
        method: HTTP verb
        path: Path template relative to the API endpoint
        payload: Payload type sent as the JSON body, None for GET
        response: Model the success body decodes into
    """

    name: str
    method: str
    path: str
    payload: Optional[type[QuickPayPayload]]
    response: type[QuickPayModel]

    @property
    def path_params(self) -> tuple[str, ...]:
        return tuple(
            field for _, field, _, _ in string.Formatter().parse(self.path) if field
        )

    @property
    def has_body(self) -> bool:
        return self.method != "GET"

    def format_path(self, **params: Any) -> str:
        """Substitute path parameters, URL-quoting each value."""
        missing = [name for name in self.path_params if params.get(name) is None]
        if missing:
            raise ValueError(f"{self.name}: missing path parameter(s) {', '.join(missing)}")
        return self.path.format(
            **{name: quote(str(params[name]), safe="") for name in self.path_params}
        )

    def check_payload(self, payload: Optional[QuickPayPayload]) -> None:
        """Reject a payload of the wrong variant for this operation."""
        if self.payload is None:
            return
        if not isinstance(payload, self.payload):
            raise TypeError(
                f"{self.name} expects {self.payload.__name__}, "
                f"got {type(payload).__name__}"
            )


CREATE_PAYMENT = Endpoint("create_payment", "POST", "payments", CreatePaymentRequest, Callback)
GET_PAYMENT = Endpoint("get_payment", "GET", "payments/{id}", None, Callback)
CREATE_PAYMENT_LINK = Endpoint("create_payment_link", "PUT", "payments/{id}/link", CreateLinkRequest, Link)
REFUND_PAYMENT = Endpoint("refund_payment", "POST", "payments/{id}/refund", RefundRequest, Callback)
CAPTURE_PAYMENT = Endpoint("capture_payment", "POST", "payments/{id}/capture", CaptureRequest, Callback)
CREATE_SUBSCRIPTION = Endpoint("create_subscription", "POST", "subscriptions", CreatePaymentRequest, Callback)
GET_SUBSCRIPTION = Endpoint("get_subscription", "GET", "subscriptions/{id}", None, Callback)
CREATE_SUBSCRIPTION_LINK = Endpoint(
    "create_subscription_link", "PUT", "subscriptions/{id}/link", CreateLinkRequest, Link
)
CREATE_RECURRING = Endpoint(
    "create_recurring", "POST", "subscriptions/{id}/recurring", CreateRecurringRequest, Callback
)
CANCEL_SUBSCRIPTION = Endpoint(
    "cancel_subscription", "POST", "subscriptions/{id}/cancel", CancelSubscriptionRequest, Callback
)

OPERATIONS: Mapping[str, Endpoint] = MappingProxyType({
    endpoint.name: endpoint
    for endpoint in (
        CREATE_PAYMENT,
        GET_PAYMENT,
        CREATE_PAYMENT_LINK,
        REFUND_PAYMENT,
        CAPTURE_PAYMENT,
        CREATE_SUBSCRIPTION,
        GET_SUBSCRIPTION,
        CREATE_SUBSCRIPTION_LINK,
        CREATE_RECURRING,
        CANCEL_SUBSCRIPTION,
    )
})
