"""Request payloads for QuickPay API operations."""
from __future__ import annotations

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class HeaderOverride(str, Enum):
    """Request headers a payload may override per call."""

    ACCEPT_VERSION = "Accept-Version"
    CALLBACK_URL = "QuickPay-Callback-Url"


_OVERRIDE_FIELDS = {
    HeaderOverride.ACCEPT_VERSION: "accept_version",
    HeaderOverride.CALLBACK_URL: "callback_url",
}


class HeaderOverrides(BaseModel):
    """Per-request header values that take precedence over client settings.

    Only the keys in :class:`HeaderOverride` are accepted; anything else is
    rejected at construction so a misspelt key cannot silently do nothing.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    accept_version: Optional[str] = None
    callback_url: Optional[str] = None

    def get(self, header: HeaderOverride) -> Optional[str]:
        """Return the override for ``header``, or None when not set."""
        return getattr(self, _OVERRIDE_FIELDS[HeaderOverride(header)])

    def items(self) -> list[tuple[HeaderOverride, str]]:
        """Overrides that are set, keyed by header. Empty values count as unset."""
        return [(header, value) for header in HeaderOverride if (value := self.get(header))]


class QuickPayPayload(BaseModel):
    """Base class for every request payload.

    ``headers`` travels with the payload but is never part of the JSON body.
    """

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    headers: HeaderOverrides = Field(default_factory=HeaderOverrides, exclude=True)

    def to_body(self) -> dict[str, Any]:
        """Serialize to the JSON body sent on the wire."""
        return self.model_dump(mode="json", exclude_none=True)


class EmptyPayload(QuickPayPayload):
    """Payload for operations that send no fields."""


class RefundRequest(QuickPayPayload):
    """Refund part or all of a captured payment."""

    amount: int
    order_id: Optional[str] = None


class CaptureRequest(QuickPayPayload):
    """Capture an authorized amount."""

    amount: int


class CreatePaymentRequest(QuickPayPayload):
    """Create a payment or a subscription."""

    order_id: str
    currency: str = "dkk"
    description: Optional[str] = None


class CreateRecurringRequest(QuickPayPayload):
    """Charge a subscription."""

    order_id: str
    amount: int
    currency: str = "dkk"
    description: Optional[str] = None
    auto_capture: bool = False


class CreateLinkRequest(QuickPayPayload):
    """Create or replace the hosted payment window link.

    URL fields left unset are filled from the client settings at dispatch.
    """

    amount: int
    callback_url: Optional[str] = None
    cancel_url: Optional[str] = None
    continue_url: Optional[str] = None
    auto_capture: bool = False
    framed: bool = False
    language: str = "en"


class CancelSubscriptionRequest(QuickPayPayload):
    """Cancel a subscription."""

    id: int


class GetSubscriptionRequest(QuickPayPayload):
    """Look up a subscription. ``id`` only fills the path."""

    id: int
