"""
Payments resource for the QuickPay SDK.

This module provides both async and sync interfaces for payment operations.
"""
from __future__ import annotations

from typing import Optional

from ..models.payment import Callback, Link
from ..models.requests import (
    CaptureRequest,
    CreateLinkRequest,
    CreatePaymentRequest,
    EmptyPayload,
    HeaderOverrides,
    RefundRequest,
)
from ..operations import (
    CAPTURE_PAYMENT,
    CREATE_PAYMENT,
    CREATE_PAYMENT_LINK,
    GET_PAYMENT,
    REFUND_PAYMENT,
)
from .base import AsyncBaseResource, SyncBaseResource, overrides


class AsyncPaymentsResource(AsyncBaseResource):
    """Async resource for payment operations.

    Example:
        ```python
        async with AsyncQuickPayClient(api_key="...") as client:
            payment = await client.payments.create(order_id="A1")
            link = await client.payments.create_link(payment.id, amount=10000)

            # After the customer has paid
            payment = await client.payments.capture(payment.id, amount=10000)
        ```
    """

    async def create(
        self,
        order_id: str,
        currency: str = "dkk",
        description: Optional[str] = None,
        headers: Optional[HeaderOverrides] = None,
    ) -> Callback:
        """Create a payment.

        Args:
            order_id: Merchant order reference, unique per payment
            currency: ISO 4217 currency code (default: dkk)
            description: Optional description
            headers: Optional per-request header overrides

        Returns:
            The new payment
        """
        request = CreatePaymentRequest(
            order_id=order_id,
            currency=currency,
            description=description,
            headers=overrides(headers),
        )
        return await self._call(CREATE_PAYMENT, request)

    async def get(
        self,
        payment_id: int,
        headers: Optional[HeaderOverrides] = None,
    ) -> Callback:
        """Get a payment by ID."""
        return await self._call(GET_PAYMENT, EmptyPayload(headers=overrides(headers)), id=payment_id)

    async def create_link(
        self,
        payment_id: int,
        amount: int,
        callback_url: Optional[str] = None,
        cancel_url: Optional[str] = None,
        continue_url: Optional[str] = None,
        auto_capture: bool = False,
        framed: bool = False,
        language: str = "en",
        headers: Optional[HeaderOverrides] = None,
    ) -> Link:
        """Create or replace the payment window link for a payment.

        Args:
            payment_id: The payment ID
            amount: Amount in minor units
            callback_url: Callback URL (defaults to the client setting)
            cancel_url: Cancel URL (defaults to the client setting)
            continue_url: Continue URL (defaults to the client setting)
            auto_capture: Capture as soon as the payment is authorized
            framed: Render the payment window for an iframe
            language: Payment window language (default: en)
            headers: Optional per-request header overrides

        Returns:
            Link holding the payment window URL
        """
        request = CreateLinkRequest(
            amount=amount,
            callback_url=callback_url,
            cancel_url=cancel_url,
            continue_url=continue_url,
            auto_capture=auto_capture,
            framed=framed,
            language=language,
            headers=overrides(headers),
        )
        return await self._call(CREATE_PAYMENT_LINK, request, id=payment_id)

    async def refund(
        self,
        payment_id: int,
        amount: int,
        order_id: Optional[str] = None,
        headers: Optional[HeaderOverrides] = None,
    ) -> Callback:
        """Refund part or all of a captured payment.

        Args:
            payment_id: The payment ID
            amount: Amount to refund in minor units
            order_id: Optional order reference
            headers: Optional per-request header overrides

        Returns:
            Updated payment
        """
        request = RefundRequest(amount=amount, order_id=order_id, headers=overrides(headers))
        return await self._call(REFUND_PAYMENT, request, id=payment_id)

    async def capture(
        self,
        payment_id: int,
        amount: int,
        headers: Optional[HeaderOverrides] = None,
    ) -> Callback:
        """Capture an authorized payment.

        Args:
            payment_id: The payment ID
            amount: Amount to capture in minor units
            headers: Optional per-request header overrides

        Returns:
            Updated payment
        """
        request = CaptureRequest(amount=amount, headers=overrides(headers))
        return await self._call(CAPTURE_PAYMENT, request, id=payment_id)


class PaymentsResource(SyncBaseResource):
    """Sync resource for payment operations.

    Example:
        ```python
        with QuickPayClient(api_key="...") as client:
            payment = client.payments.create(order_id="A1")
            payment = client.payments.capture(payment.id, amount=10000)
        ```
    """

    def create(
        self,
        order_id: str,
        currency: str = "dkk",
        description: Optional[str] = None,
        headers: Optional[HeaderOverrides] = None,
    ) -> Callback:
        """Create a payment."""
        request = CreatePaymentRequest(
            order_id=order_id,
            currency=currency,
            description=description,
            headers=overrides(headers),
        )
        return self._call(CREATE_PAYMENT, request)

    def get(
        self,
        payment_id: int,
        headers: Optional[HeaderOverrides] = None,
    ) -> Callback:
        """Get a payment by ID."""
        return self._call(GET_PAYMENT, EmptyPayload(headers=overrides(headers)), id=payment_id)

    def create_link(
        self,
        payment_id: int,
        amount: int,
        callback_url: Optional[str] = None,
        cancel_url: Optional[str] = None,
        continue_url: Optional[str] = None,
        auto_capture: bool = False,
        framed: bool = False,
        language: str = "en",
        headers: Optional[HeaderOverrides] = None,
    ) -> Link:
        """Create or replace the payment window link for a payment."""
        request = CreateLinkRequest(
            amount=amount,
            callback_url=callback_url,
            cancel_url=cancel_url,
            continue_url=continue_url,
            auto_capture=auto_capture,
            framed=framed,
            language=language,
            headers=overrides(headers),
        )
        return self._call(CREATE_PAYMENT_LINK, request, id=payment_id)

    def refund(
        self,
        payment_id: int,
        amount: int,
        order_id: Optional[str] = None,
        headers: Optional[HeaderOverrides] = None,
    ) -> Callback:
        """Refund part or all of a captured payment."""
        request = RefundRequest(amount=amount, order_id=order_id, headers=overrides(headers))
        return self._call(REFUND_PAYMENT, request, id=payment_id)

    def capture(
        self,
        payment_id: int,
        amount: int,
        headers: Optional[HeaderOverrides] = None,
    ) -> Callback:
        """Capture an authorized payment."""
        request = CaptureRequest(amount=amount, headers=overrides(headers))
        return self._call(CAPTURE_PAYMENT, request, id=payment_id)


__all__ = [
    "AsyncPaymentsResource",
    "PaymentsResource",
]
