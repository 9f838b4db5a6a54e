"""Configuration surface for the QuickPay client."""
from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_ENDPOINT = "https://api.quickpay.net/"
DEFAULT_VERSION = "v10"


class QuickPaySettings(BaseSettings):
    """Credentials and defaults shared by every call a client makes.

    Values can be passed directly or read from ``QUICKPAY_*`` environment
    variables. Settings are frozen once built.
    """

    # Basic-auth password for outbound calls
    api_key: Optional[SecretStr] = None

    # HMAC key for inbound callbacks
    private_key: Optional[SecretStr] = None

    callback_url: Optional[str] = None
    cancel_url: Optional[str] = None
    continue_url: Optional[str] = None

    version: str = DEFAULT_VERSION
    endpoint: str = DEFAULT_ENDPOINT

    model_config = SettingsConfigDict(
        env_prefix="QUICKPAY_",
        env_file=".env",
        extra="ignore",
        frozen=True,
    )

    @field_validator("endpoint")
    @classmethod
    def normalize_endpoint(cls, v: str) -> str:
        """Paths are appended to the endpoint, so it must end in one slash."""
        if not v:
            raise ValueError("endpoint must not be empty")
        return v.rstrip("/") + "/"

    @field_validator("version")
    @classmethod
    def validate_version(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("version must not be empty")
        return v.strip()


@lru_cache
def load_settings(env_file: str | None = None) -> QuickPaySettings:
    """Load QuickPaySettings once per process."""
    env_path = Path(env_file) if env_file else None
    return QuickPaySettings(_env_file=env_path)
