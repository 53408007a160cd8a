"""
FastAPI dependencies (shared across routes).
"""

from __future__ import annotations

import uuid

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from auth.jwt import TokenService
from database.session import get_db_session
from database.user_store import UserStore
from utils.errors import InvalidIdentifierError


async def get_user_store(session: AsyncSession = Depends(get_db_session)) -> UserStore:
    return UserStore(session)


def get_token_service(request: Request) -> TokenService:
    """The ``TokenService`` built once at startup and kept on ``app.state``."""
    return request.app.state.token_service


def parse_user_id(raw: str) -> uuid.UUID:
    """Parse a path identifier, raising ``InvalidIdentifierError`` (400) if it is not a UUID."""
    try:
        return uuid.UUID(raw)
    except ValueError as exc:
        raise InvalidIdentifierError(detail=f"not a uuid: {raw!r}") from exc
