"""Base models for the QuickPay SDK."""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class QuickPayModel(BaseModel):
    """Base model for decoded API responses.

    Responses are read-only projections of the JSON returned by QuickPay.
    Fields the service does not send stay ``None``; fields we do not know
    about are dropped.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )

    def to_dict(self) -> dict[str, Any]:
        """Convert model to dictionary."""
        return self.model_dump(mode="json", exclude_none=True)
