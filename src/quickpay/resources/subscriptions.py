"""
Subscriptions resource for the QuickPay SDK.

A subscription is authorized once through a payment window link and then
charged with recurring payments.
"""
from __future__ import annotations

from typing import Optional

from ..models.payment import Callback, Link
from ..models.requests import (
    CancelSubscriptionRequest,
    CreateLinkRequest,
    CreatePaymentRequest,
    CreateRecurringRequest,
    GetSubscriptionRequest,
    HeaderOverrides,
)
from ..operations import (
    CANCEL_SUBSCRIPTION,
    CREATE_RECURRING,
    CREATE_SUBSCRIPTION,
    CREATE_SUBSCRIPTION_LINK,
    GET_SUBSCRIPTION,
)
from .base import AsyncBaseResource, SyncBaseResource, overrides


class AsyncSubscriptionsResource(AsyncBaseResource):
    """Async resource for subscription operations.

    Example:
        ```python
        async with AsyncQuickPayClient(api_key="...") as client:
            subscription = await client.subscriptions.create(
                order_id="sub-1", description="Monthly plan"
            )
            link = await client.subscriptions.create_link(subscription.id, amount=0)

            # Once the customer has authorized the subscription
            charge = await client.subscriptions.create_recurring(
                subscription.id, order_id="sub-1-jan", amount=9900, auto_capture=True
            )
        ```
    """

    async def create(
        self,
        order_id: str,
        currency: str = "dkk",
        description: Optional[str] = None,
        headers: Optional[HeaderOverrides] = None,
    ) -> Callback:
        """Create a subscription.

        Args:
            order_id: Merchant order reference
            currency: ISO 4217 currency code (default: dkk)
            description: Optional description
            headers: Optional per-request header overrides

        Returns:
            The new subscription
        """
        request = CreatePaymentRequest(
            order_id=order_id,
            currency=currency,
            description=description,
            headers=overrides(headers),
        )
        return await self._call(CREATE_SUBSCRIPTION, request)

    async def get(
        self,
        subscription_id: int,
        headers: Optional[HeaderOverrides] = None,
    ) -> Callback:
        """Get a subscription by ID."""
        request = GetSubscriptionRequest(id=subscription_id, headers=overrides(headers))
        return await self._call(GET_SUBSCRIPTION, request, id=request.id)

    async def create_link(
        self,
        subscription_id: int,
        amount: int,
        callback_url: Optional[str] = None,
        cancel_url: Optional[str] = None,
        continue_url: Optional[str] = None,
        auto_capture: bool = False,
        framed: bool = False,
        language: str = "en",
        headers: Optional[HeaderOverrides] = None,
    ) -> Link:
        """Create or replace the authorization link for a subscription."""
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
        return await self._call(CREATE_SUBSCRIPTION_LINK, request, id=subscription_id)

    async def create_recurring(
        self,
        subscription_id: int,
        order_id: str,
        amount: int,
        currency: str = "dkk",
        description: Optional[str] = None,
        auto_capture: bool = False,
        headers: Optional[HeaderOverrides] = None,
    ) -> Callback:
        """Charge an authorized subscription.

        Args:
            subscription_id: The subscription ID
            order_id: Order reference for the new recurring payment
            amount: Amount in minor units
            currency: ISO 4217 currency code (default: dkk)
            description: Optional description
            auto_capture: Capture the charge immediately
            headers: Optional per-request header overrides

        Returns:
            The recurring payment created by QuickPay
        """
        request = CreateRecurringRequest(
            order_id=order_id,
            amount=amount,
            currency=currency,
            description=description,
            auto_capture=auto_capture,
            headers=overrides(headers),
        )
        return await self._call(CREATE_RECURRING, request, id=subscription_id)

    async def cancel(
        self,
        subscription_id: int,
        headers: Optional[HeaderOverrides] = None,
    ) -> Callback:
        """Cancel a subscription."""
        request = CancelSubscriptionRequest(id=subscription_id, headers=overrides(headers))
        return await self._call(CANCEL_SUBSCRIPTION, request, id=request.id)


class SubscriptionsResource(SyncBaseResource):
    """Sync resource for subscription operations."""

    def create(
        self,
        order_id: str,
        currency: str = "dkk",
        description: Optional[str] = None,
        headers: Optional[HeaderOverrides] = None,
    ) -> Callback:
        """Create a subscription."""
        request = CreatePaymentRequest(
            order_id=order_id,
            currency=currency,
            description=description,
            headers=overrides(headers),
        )
        return self._call(CREATE_SUBSCRIPTION, request)

    def get(
        self,
        subscription_id: int,
        headers: Optional[HeaderOverrides] = None,
    ) -> Callback:
        """Get a subscription by ID."""
        request = GetSubscriptionRequest(id=subscription_id, headers=overrides(headers))
        return self._call(GET_SUBSCRIPTION, request, id=request.id)

    def create_link(
        self,
        subscription_id: int,
        amount: int,
        callback_url: Optional[str] = None,
        cancel_url: Optional[str] = None,
        continue_url: Optional[str] = None,
        auto_capture: bool = False,
        framed: bool = False,
        language: str = "en",
        headers: Optional[HeaderOverrides] = None,
    ) -> Link:
        """Create or replace the authorization link for a subscription."""
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
        return self._call(CREATE_SUBSCRIPTION_LINK, request, id=subscription_id)

    def create_recurring(
        self,
        subscription_id: int,
        order_id: str,
        amount: int,
        currency: str = "dkk",
        description: Optional[str] = None,
        auto_capture: bool = False,
        headers: Optional[HeaderOverrides] = None,
    ) -> Callback:
        """Charge an authorized subscription."""
        request = CreateRecurringRequest(
            order_id=order_id,
            amount=amount,
            currency=currency,
            description=description,
            auto_capture=auto_capture,
            headers=overrides(headers),
        )
        return self._call(CREATE_RECURRING, request, id=subscription_id)

    def cancel(
        self,
        subscription_id: int,
        headers: Optional[HeaderOverrides] = None,
    ) -> Callback:
        """Cancel a subscription."""
        request = CancelSubscriptionRequest(id=subscription_id, headers=overrides(headers))
        return self._call(CANCEL_SUBSCRIPTION, request, id=request.id)


__all__ = [
    "AsyncSubscriptionsResource",
    "SubscriptionsResource",
]
