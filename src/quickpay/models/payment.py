"""Payment and subscription response models for the QuickPay SDK."""
from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from pydantic import Field, field_validator

from .base import QuickPayModel

# QuickPay status code for an approved operation.
APPROVED_STATUS_CODE = "20000"


class Operation(QuickPayModel):
    """One state transition recorded by QuickPay on a payment or subscription."""

    id: Optional[int] = None
    type: Optional[str] = None
    amount: Optional[int] = None
    pending: Optional[bool] = None
    qp_status_code: Optional[str] = None
    qp_status_msg: Optional[str] = None
    aq_status_code: Optional[str] = None
    aq_status_msg: Optional[str] = None
    data: Any = None
    callback_url: Optional[str] = None
    callback_success: Optional[bool] = None
    callback_response_code: Optional[str] = None
    callback_duration: Optional[int] = None
    acquirer: Optional[str] = None
    callback_at: Any = None
    created_at: Optional[datetime] = None

    @property
    def approved(self) -> bool:
        """True when QuickPay reported the operation as approved."""
        return self.qp_status_code == APPROVED_STATUS_CODE


class Metadata(QuickPayModel):
    """Card and fraud metadata attached to a payment."""

    type: Optional[str] = None
    origin: Optional[str] = None
    brand: Optional[str] = None
    bin: Optional[str] = None
    last4: Optional[str] = None
    exp_month: Optional[int] = None
    exp_year: Optional[int] = None
    country: Optional[str] = None
    is_3d_secure: Optional[bool] = None
    issued_to: Any = None
    hash: Optional[str] = None
    number: Any = None
    customer_ip: Optional[str] = None
    customer_country: Optional[str] = None
    fraud_suspected: Optional[bool] = None
    fraud_remarks: Optional[list[Any]] = None
    fraud_reported: Optional[bool] = Field(default=None, alias="reported")
    fraud_report_description: Any = Field(default=None, alias="report_description")
    fraud_reported_at: Any = Field(default=None, alias="reported_at")
    nin_number: Any = None
    nin_country_code: Any = None
    nin_gender: Any = None


class PaymentLink(QuickPayModel):
    """Payment window link as embedded in a payment or subscription."""

    url: Optional[str] = None
    agreement_id: Optional[int] = None
    language: Optional[str] = None
    amount: Optional[int] = None
    continue_url: Any = None
    cancel_url: Any = None
    callback_url: Any = None
    payment_methods: Any = None
    auto_fee: Any = None
    auto_capture: Any = None
    branding_id: Any = None
    google_analytics_client_id: Any = None
    google_analytics_tracking_id: Any = None
    version: Optional[str] = None
    acquirer: Any = None
    deadline: Any = None
    framed: Optional[bool] = None
    branding_config: Any = None
    invoice_address_selection: Any = None
    shipping_address_selection: Any = None
    customer_email: Any = None


class Callback(QuickPayModel):
    """A payment or subscription as returned by the API and sent in callbacks."""

    id: Optional[int] = None
    merchant_id: Optional[int] = None
    order_id: Optional[str] = None
    accepted: Optional[bool] = None
    type: Optional[str] = None
    text_on_statement: Any = None
    branding_id: Any = None
    variables: Any = None
    currency: Optional[str] = None
    state: Optional[str] = None
    metadata: Optional[Metadata] = None
    link: Optional[PaymentLink] = None
    shipping_address: Any = None
    invoice_address: Any = None
    basket: Optional[list[Any]] = None
    shipping: Any = None
    operations: tuple[Operation, ...] = ()
    test_mode: Optional[bool] = None
    acquirer: Optional[str] = None
    facilitator: Any = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    retented_at: Any = None
    balance: Optional[int] = None
    fee: Any = None
    deadline_at: Any = None

    @field_validator("operations", mode="before")
    @classmethod
    def _null_operations(cls, v: Any) -> Any:
        return () if v is None else v

    @property
    def latest_operation(self) -> Optional[Operation]:
        """Most recent operation in the history, if any."""
        return self.operations[-1] if self.operations else None

    @property
    def is_test(self) -> bool:
        return bool(self.test_mode)


class Link(QuickPayModel):
    """Response of the create-link operations."""

    url: Optional[str] = None
