"""
User REST routes.

Route prefix: /users
"""

from __future__ import annotations

import asyncio
import logging

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import JSONResponse, Response

from api.dependencies import get_user_store, parse_user_id
from api.responses import send_json, send_no_content
from auth.dependencies import require_resource_owner
from database.user_store import UserStore
from utils.schemas import UserPayload, UserResponse
from utils.validators import prepare_user

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"])


@router.post("")
async def create_user(
    payload: UserPayload,
    store: UserStore = Depends(get_user_store),
) -> JSONResponse:
    """Register a new user; the response never includes the password."""
    # bcrypt is CPU bound, keep it off the event loop
    prepared = await asyncio.to_thread(prepare_user, payload)
    user = await store.create(prepared)
    await store.commit()
    return send_json(UserResponse.model_validate(user).to_json(), status.HTTP_201_CREATED)


@router.get("")
async def list_users(
    user: str = Query("", description="Substring of name or nick (case-insensitive)"),
    store: UserStore = Depends(get_user_store),
) -> JSONResponse:
    users = await store.list_by_name_or_nick(user.lower())
    return send_json([UserResponse.model_validate(u).to_json() for u in users])


@router.get("/{user_id}")
async def get_user(
    user_id: str,
    store: UserStore = Depends(get_user_store),
) -> JSONResponse:
    user = await store.get_by_id(parse_user_id(user_id))
    return send_json(UserResponse.model_validate(user).to_json())


@router.put("/{user_id}")
async def update_user(
    user_id: str,
    payload: UserPayload,
    store: UserStore = Depends(get_user_store),
) -> Response:
    """Partial update: empty fields leave the stored value unchanged."""
    uid = parse_user_id(user_id)
    await store.update(uid, payload)
    await store.commit()
    return send_no_content()


@router.delete("/{user_id}", dependencies=[Depends(require_resource_owner)])
async def delete_user(
    user_id: str,
    store: UserStore = Depends(get_user_store),
) -> Response:
    uid = parse_user_id(user_id)
    await store.delete(uid)
    await store.commit()
    logger.info("User %s deleted their account", uid)
    return send_no_content()
