"""
Base resource classes for the QuickPay SDK.

Resources group the operations of one API collection and hand each call to
the owning client, which builds, sends and decodes the request.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

from ..models.base import QuickPayModel
from ..models.requests import HeaderOverrides, QuickPayPayload
from ..operations import Endpoint

if TYPE_CHECKING:
    from ..client import AsyncQuickPayClient, QuickPayClient


def overrides(headers: Optional[HeaderOverrides]) -> HeaderOverrides:
    """Header overrides for a payload, empty when the caller passed none."""
    return headers if headers is not None else HeaderOverrides()


class AsyncBaseResource:
    """Base class for async API resources.

    Attributes:
        _client: The async client instance
    """

    def __init__(self, client: "AsyncQuickPayClient") -> None:
        self._client = client

    async def _call(
        self,
        endpoint: Endpoint,
        payload: Optional[QuickPayPayload] = None,
        **path_params: Any,
    ) -> QuickPayModel:
        return await self._client._dispatch(endpoint, payload, **path_params)


class SyncBaseResource:
    """Base class for sync API resources.

    Attributes:
        _client: The sync client instance
    """

    def __init__(self, client: "QuickPayClient") -> None:
        self._client = client

    def _call(
        self,
        endpoint: Endpoint,
        payload: Optional[QuickPayPayload] = None,
        **path_params: Any,
    ) -> QuickPayModel:
        return self._client._dispatch(endpoint, payload, **path_params)


__all__ = [
    "overrides",
    "AsyncBaseResource",
    "SyncBaseResource",
]
