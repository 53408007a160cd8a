"""
User persistence — create, search, read, update and delete ``users`` rows.

All queries go through bound parameters.  Database failures are wrapped in
``StoreError``; "no such row" is reported as ``NotFoundError``.
"""

from __future__ import annotations

import logging
import uuid
from typing import List, Tuple

from sqlalchemy import String, cast, delete, func, or_, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from database.models import User
from utils.errors import NotFoundError, StoreError
from utils.schemas import UserPayload

logger = logging.getLogger(__name__)

_LIKE_ESCAPE = "\\"


def _to_uuid(value: str | uuid.UUID) -> uuid.UUID:
    return uuid.UUID(value) if isinstance(value, str) else value


def _contains_pattern(query: str) -> str:
    """Turn free text into a LIKE pattern matching it literally as a substring."""
    escaped = (
        query.replace(_LIKE_ESCAPE, _LIKE_ESCAPE * 2)
        .replace("%", _LIKE_ESCAPE + "%")
        .replace("_", _LIKE_ESCAPE + "_")
    )
    return f"%{escaped}%"


def _keep_if_empty(value: str, column):
    """``COALESCE(NULLIF(:value, ''), column)`` — an empty value keeps the stored one."""
    return func.coalesce(func.nullif(cast(value, String), ""), column)


class UserStore:
    """Data access for users, bound to one request-scoped ``AsyncSession``."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, payload: UserPayload) -> User:
        """Insert a user; ``payload.password`` must already be hashed."""
        user = User(
            id=uuid.uuid4(),
            name=payload.name,
            nick=payload.nick,
            email=payload.email,
            password=payload.password,
        )
        try:
            self._session.add(user)
            await self._session.flush()
        except SQLAlchemyError as exc:
            raise StoreError(detail=f"insert user failed: {exc}") from exc
        logger.info("Created user %s (%s)", user.nick, user.id)
        return user

    async def list_by_name_or_nick(self, query: str) -> List[User]:
        """
        Case-insensitive substring search over name OR nick.

        An empty query matches every user; no match gives ``[]``.
        """
        pattern = _contains_pattern(query)
        stmt = (
            select(User)
            .where(
                or_(
                    User.name.ilike(pattern, escape=_LIKE_ESCAPE),
                    User.nick.ilike(pattern, escape=_LIKE_ESCAPE),
                )
            )
            .order_by(User.created_at.asc())
        )
        try:
            result = await self._session.execute(stmt)
        except SQLAlchemyError as exc:
            raise StoreError(detail=f"list users failed: {exc}") from exc
        return list(result.scalars().all())

    async def get_by_id(self, user_id: str | uuid.UUID) -> User:
        uid = _to_uuid(user_id)
        try:
            result = await self._session.execute(select(User).where(User.id == uid))
        except SQLAlchemyError as exc:
            raise StoreError(detail=f"get user {uid} failed: {exc}") from exc
        user = result.scalar_one_or_none()
        if user is None:
            raise NotFoundError(detail=f"no user with id {uid}")
        return user

    async def get_credentials_by_email(self, email: str) -> Tuple[uuid.UUID, str]:
        """Return ``(id, password_hash)`` for the user owning ``email``."""
        try:
            result = await self._session.execute(
                select(User.id, User.password).where(User.email == email)
            )
        except SQLAlchemyError as exc:
            raise StoreError(detail=f"lookup by email failed: {exc}") from exc
        row = result.one_or_none()
        if row is None:
            raise NotFoundError(detail="no user with that email")
        return row.id, row.password

    async def update(self, user_id: str | uuid.UUID, payload: UserPayload) -> None:
        """
        Overwrite name / nick / email with the non-empty values in ``payload``.

        Raises ``NotFoundError`` when no row has ``user_id``.
        """
        uid = _to_uuid(user_id)
        stmt = (
            update(User)
            .where(User.id == uid)
            .values(
                name=_keep_if_empty(payload.name, User.name),
                nick=_keep_if_empty(payload.nick, User.nick),
                email=_keep_if_empty(payload.email, User.email),
            )
            .execution_options(synchronize_session=False)
        )
        try:
            result = await self._session.execute(stmt)
        except SQLAlchemyError as exc:
            raise StoreError(detail=f"update user {uid} failed: {exc}") from exc
        if result.rowcount == 0:
            raise NotFoundError(detail=f"no user with id {uid}")
        logger.info("Updated user %s", uid)

    async def delete(self, user_id: str | uuid.UUID) -> None:
        uid = _to_uuid(user_id)
        stmt = (
            delete(User)
            .where(User.id == uid)
            .execution_options(synchronize_session=False)
        )
        try:
            result = await self._session.execute(stmt)
        except SQLAlchemyError as exc:
            raise StoreError(detail=f"delete user {uid} failed: {exc}") from exc
        if result.rowcount == 0:
            raise NotFoundError(detail=f"no user with id {uid}")
        logger.info("Deleted user %s", uid)

    async def commit(self) -> None:
        try:
            await self._session.commit()
        except SQLAlchemyError as exc:
            await self._session.rollback()
            raise StoreError(detail=f"commit failed: {exc}") from exc
