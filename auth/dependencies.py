"""
FastAPI dependencies for authentication.

``require_resource_owner`` guards routes that act on ``/{user_id}``: the
bearer token must be valid and its subject must be that same user.
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import Depends, Header

from api.dependencies import get_token_service
from auth.jwt import TokenClaims, TokenService
from utils.errors import AuthenticationError, AuthorizationError

logger = logging.getLogger(__name__)


async def get_token_claims(
    authorization: Optional[str] = Header(None, alias="Authorization"),
    tokens: TokenService = Depends(get_token_service),
) -> TokenClaims:
    """
    Verify the Bearer token from the Authorization header and return its
    claims.  Any failure is an ``AuthenticationError`` (401).
    """
    try:
        return tokens.validate(authorization)
    except AuthenticationError as exc:
        logger.warning("Token rejected (%s): %s", type(exc).__name__, exc.detail)
        raise


async def require_resource_owner(
    user_id: str,
    claims: TokenClaims = Depends(get_token_claims),
) -> TokenClaims:
    """Refuse with 403 unless the token subject equals the ``user_id`` path segment."""
    if claims.sub != user_id:
        logger.warning("Token subject %s may not act on user %s", claims.sub, user_id)
        raise AuthorizationError(detail="token subject does not match target user")
    return claims
