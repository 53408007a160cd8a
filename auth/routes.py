"""
Auth API routes — login.

Route: POST /login
"""

from __future__ import annotations

import asyncio
import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from api.dependencies import get_token_service, get_user_store
from api.responses import send_json
from auth.jwt import TokenService
from auth.password import verify_password
from database.user_store import UserStore
from utils.schemas import LoginRequest

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


@router.post("/login")
async def login(
    req: LoginRequest,
    store: UserStore = Depends(get_user_store),
    tokens: TokenService = Depends(get_token_service),
) -> JSONResponse:
    """Login with email + password; responds with a bearer token."""
    user_id, password_hash = await store.get_credentials_by_email(req.email)

    await asyncio.to_thread(verify_password, password_hash, req.password)

    token = tokens.issue(str(user_id))
    logger.info("Login: %s", user_id)
    return send_json(token)
