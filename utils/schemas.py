"""
Pydantic schemas for the devbook user service.
"""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


# ═══════════════════════════════════════════════════════════════════════════════
# Response envelope
# ═══════════════════════════════════════════════════════════════════════════════


class Envelope(BaseModel):
    """
    Uniform wrapper for every response body.

    Exactly one of ``data`` / ``error`` is populated; the other is left out
    of the serialized JSON.
    """

    data: Any = None
    error: Optional[str] = None

    def render(self) -> dict[str, Any]:
        if self.error is not None:
            return {"error": self.error}
        return {"data": self.data}


# ═══════════════════════════════════════════════════════════════════════════════
# Users — inbound
# ═══════════════════════════════════════════════════════════════════════════════


class _InboundBody(BaseModel):
    """JSON ``null`` in a string field is read as ``""``, the same as an absent field."""

    @field_validator("*", mode="before")
    @classmethod
    def null_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value


class UserPayload(_InboundBody):
    """
    Inbound user body for create and update.

    Every field defaults to ``""`` (null included) so missing fields reach
    the validator (400 naming the field) instead of failing body parsing
    (422).  On update an empty field means "leave unchanged".
    """

    model_config = ConfigDict(frozen=True)

    name: str = ""
    nick: str = ""
    email: str = ""
    password: str = ""


class LoginRequest(_InboundBody):
    email: str = ""
    password: str = ""


# ═══════════════════════════════════════════════════════════════════════════════
# Users — outbound
# ═══════════════════════════════════════════════════════════════════════════════


class UserResponse(BaseModel):
    """Public view of a user; never carries the password hash."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    name: str
    nick: str
    email: str
    created_at: datetime = Field(serialization_alias="createdAt")

    def to_json(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)
