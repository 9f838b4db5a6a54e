"""
Resources for the QuickPay SDK.

This module exports both sync and async resource classes for all API endpoints.
"""
from .base import AsyncBaseResource, SyncBaseResource
from .payments import AsyncPaymentsResource, PaymentsResource
from .subscriptions import AsyncSubscriptionsResource, SubscriptionsResource

__all__ = [
    # Base classes
    "AsyncBaseResource",
    "SyncBaseResource",
    # Payments
    "PaymentsResource",
    "AsyncPaymentsResource",
    # Subscriptions
    "SubscriptionsResource",
    "AsyncSubscriptionsResource",
]
