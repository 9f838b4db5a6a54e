"""Outbound request authentication and header construction."""
from __future__ import annotations

import base64
from typing import Optional

from .config import QuickPaySettings
from .models.requests import HeaderOverride, HeaderOverrides

USER_AGENT = "quickpay-python/0.1.0"


def basic_auth(api_key: str) -> str:
    """HTTP Basic credentials with an empty user name and the API key as password."""
    token = base64.b64encode(f":{api_key}".encode("utf-8")).decode("ascii")
    return f"Basic {token}"


def build_headers(
    settings: QuickPaySettings,
    overrides: Optional[HeaderOverrides] = None,
) -> dict[str, str]:
    """Build the headers for one outbound request.

    Overrides carried by the payload win over the settings defaults. The
    callback header is left out when neither provides a URL.
    """
    if settings.api_key is None:
        raise ValueError("API key is required")
    headers = {
        "Authorization": basic_auth(settings.api_key.get_secret_value()),
        "Accept": "application/json",
        "User-Agent": USER_AGENT,
        HeaderOverride.ACCEPT_VERSION.value: settings.version,
    }
    if settings.callback_url:
        headers[HeaderOverride.CALLBACK_URL.value] = settings.callback_url
    if overrides is not None:
        for header, value in overrides.items():
            headers[header.value] = value
    return headers
