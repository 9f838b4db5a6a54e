"""
Logging helpers for the QuickPay SDK with sensitive data masking.

The SDK logs through the standard library. Nothing is emitted unless the
application configures a handler for the ``quickpay`` logger.

Usage:
    from quickpay.logging import get_logger, mask_headers

    logger = get_logger(__name__)
    logger.debug("Request headers: %s", mask_headers(headers))
"""
from __future__ import annotations

import json
import logging
import re
from typing import Any, Mapping, Optional, Sequence

MASK_PATTERN = "***"
MAX_LOG_MESSAGE_LENGTH = 10_000

SENSITIVE_FIELDS = frozenset({
    "password",
    "secret",
    "token",
    "api_key",
    "private_key",
    "authorization",
    "card_number",
    "cvd",
    "cvv",
    "nin_number",
})

SENSITIVE_HEADERS = frozenset({
    "authorization",
    "cookie",
    "set-cookie",
    "quickpay-checksum-sha256",
})

_INLINE_PATTERNS = [
    (re.compile(r"(Basic\s+)[a-zA-Z0-9+/=]+", re.IGNORECASE), r"\1***"),
    (re.compile(r"(Bearer\s+)[a-zA-Z0-9._-]+", re.IGNORECASE), r"\1***"),
    (re.compile(r"(https?://)[^:/\s]+:[^@/\s]+@", re.IGNORECASE), r"\1***:***@"),
]

# Silent unless the application configures logging.
logging.getLogger("quickpay").addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the ``quickpay`` namespace."""
    if name != "quickpay" and not name.startswith("quickpay."):
        name = f"quickpay.{name}"
    return logging.getLogger(name)


def is_sensitive_key(key: str) -> bool:
    """Check if a key name indicates sensitive data."""
    key_lower = key.lower().replace("-", "_")
    return key_lower in SENSITIVE_FIELDS or any(
        sensitive in key_lower for sensitive in ("secret", "password", "api_key", "private_key")
    )


def mask_sensitive_data(
    data: Any,
    additional_fields: Optional[Sequence[str]] = None,
    _depth: int = 0,
    _max_depth: int = 10,
) -> Any:
    """Recursively mask sensitive values in a decoded JSON structure.

    Returns a copy; the input is not modified.
    """
    if _depth > _max_depth:
        return data

    if isinstance(data, dict):
        result = {}
        for key, value in data.items():
            if is_sensitive_key(str(key)) or (additional_fields and key in additional_fields):
                result[key] = MASK_PATTERN
            else:
                result[key] = mask_sensitive_data(value, additional_fields, _depth + 1, _max_depth)
        return result

    if isinstance(data, (list, tuple)):
        return type(data)(
            mask_sensitive_data(item, additional_fields, _depth + 1, _max_depth)
            for item in data
        )

    if isinstance(data, str):
        return _mask_inline_patterns(data)

    return data


def _mask_inline_patterns(text: str) -> str:
    if len(text) > MAX_LOG_MESSAGE_LENGTH:
        text = text[:MAX_LOG_MESSAGE_LENGTH] + "...[truncated]"
    for pattern, replacement in _INLINE_PATTERNS:
        text = pattern.sub(replacement, text)
    return text


def mask_headers(headers: Mapping[str, str]) -> dict[str, str]:
    """Mask sensitive HTTP headers."""
    return {
        key: MASK_PATTERN if key.lower() in SENSITIVE_HEADERS else value
        for key, value in headers.items()
    }


def mask_body(body: str) -> str:
    """Mask a raw response body for logging.

    JSON bodies are masked field by field; anything else only has inline
    credential patterns removed.
    """
    try:
        decoded = json.loads(body)
    except ValueError:
        return _mask_inline_patterns(body)
    return json.dumps(mask_sensitive_data(decoded), separators=(",", ":"))
