"""
Verification of inbound QuickPay callbacks.

QuickPay signs every callback with HMAC-SHA256 over the raw request body,
keyed with the account's private key, and sends the lowercase hex digest in
the ``QuickPay-Checksum-Sha256`` header.

The body passed here must be the exact bytes received on the wire, captured
before any parsing. Re-serializing a decoded JSON object does not reproduce
the signed bytes. Frameworks that only allow the request body to be read
once need to buffer it, for example ``body = await request.body()`` in
Starlette/FastAPI, and hand the same bytes to both the verifier and the
parser.

Verification is a predicate: a bad or missing signature returns False and
the caller rejects the callback without processing it.
"""
from __future__ import annotations

import hashlib
import hmac
from typing import Mapping, Optional, Union

from .logging import get_logger
from .models.payment import Callback

logger = get_logger(__name__)

CHECKSUM_HEADER = "QuickPay-Checksum-Sha256"

Body = Union[bytes, bytearray, str]


def _as_bytes(value: Body) -> bytes:
    if isinstance(value, str):
        return value.encode("utf-8")
    return bytes(value)


def sign(body: Body, secret: str) -> str:
    """Compute the lowercase hex HMAC-SHA256 of ``body`` keyed with ``secret``."""
    return hmac.new(secret.encode("utf-8"), _as_bytes(body), hashlib.sha256).hexdigest()


def verify_signature(
    body: Optional[Body],
    signature: Optional[str],
    secret: Optional[str],
) -> bool:
    """Check a callback signature.

    Args:
        body: Raw request body bytes
        signature: Value of the QuickPay-Checksum-Sha256 header
        secret: The account private key

    Returns:
        True only if the signature matches the body exactly
    """
    if not body or not signature or not secret:
        return False
    try:
        provided = signature.encode("ascii")
    except UnicodeEncodeError:
        return False
    expected = sign(body, secret).encode("ascii")
    return hmac.compare_digest(expected, provided)


def get_checksum_header(headers: Mapping[str, str]) -> Optional[str]:
    """Find the checksum header regardless of how the framework cased it."""
    wanted = CHECKSUM_HEADER.lower()
    for key, value in headers.items():
        if key.lower() == wanted:
            return value
    return None


def verify_request(
    headers: Mapping[str, str],
    body: Optional[Body],
    secret: Optional[str],
) -> bool:
    """Verify a callback from its request headers and raw body."""
    signature = get_checksum_header(headers)
    if signature is None:
        logger.warning("Callback rejected: missing %s header", CHECKSUM_HEADER)
        return False
    valid = verify_signature(body, signature, secret)
    if not valid:
        logger.warning("Callback rejected: checksum mismatch")
    return valid


def parse_callback(body: Body) -> Callback:
    """Decode a verified callback body.

    Raises:
        pydantic.ValidationError: If the body is not a valid callback document
    """
    return Callback.model_validate_json(_as_bytes(body))
