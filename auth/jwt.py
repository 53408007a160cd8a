"""
JWT token creation and verification.

Tokens are standard JWTs signed with an HMAC algorithm (HS256 by default).
The secret key is injected into ``TokenService`` at construction; the app
builds one from ``config.jwt_secret`` (env var: ``JWT_SECRET``) at startup.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel, ConfigDict, ValidationError

from utils.errors import (
    InvalidSignatureError,
    InvalidTokenError,
    MalformedHeaderError,
    MissingTokenError,
    TokenExpiredError,
    TokenSigningError,
    UnexpectedAlgorithmError,
)

HMAC_ALGORITHMS = ("HS256", "HS384", "HS512")
DEFAULT_ISSUER = "devbook"
DEFAULT_TTL = timedelta(hours=2)


class TokenClaims(BaseModel):
    """Claims carried by every access token."""

    model_config = ConfigDict(strict=True, extra="ignore")

    sub: str
    iss: str
    exp: int


def extract_bearer_token(header: str | None) -> str:
    """
    Return the token from an ``Authorization: Bearer <token>`` value.

    The value must split on single spaces into exactly two parts, the first
    being literally ``Bearer``.
    """
    if not header:
        raise MissingTokenError(detail="authorization header is missing")
    parts = header.split(" ")
    if len(parts) != 2 or parts[0] != "Bearer" or not parts[1]:
        raise MalformedHeaderError(detail="authorization header is not 'Bearer <token>'")
    return parts[1]


class TokenService:
    """Issues and validates signed, time-limited access tokens. Stateless."""

    def __init__(
        self,
        secret: str,
        ttl: timedelta = DEFAULT_TTL,
        issuer: str = DEFAULT_ISSUER,
        algorithm: str = "HS256",
    ) -> None:
        if not secret:
            raise ValueError("token signing secret must not be empty")
        if algorithm not in HMAC_ALGORITHMS:
            raise ValueError(f"unsupported signing algorithm: {algorithm}")
        self._secret = secret
        self._ttl = ttl
        self._issuer = issuer
        self._algorithm = algorithm

    def issue(self, subject_id: str) -> str:
        """Create a signed token whose subject is ``subject_id``."""
        claims = {
            "sub": subject_id,
            "iss": self._issuer,
            "exp": datetime.now(timezone.utc) + self._ttl,
        }
        try:
            return jwt.encode(claims, self._secret, algorithm=self._algorithm)
        except (jwt.PyJWTError, NotImplementedError, TypeError, ValueError) as exc:
            raise TokenSigningError(detail=f"could not sign token: {exc}") from exc

    def validate(self, authorization: str | None) -> TokenClaims:
        """
        Verify the bearer token in an ``Authorization`` header value.

        Raises an ``AuthenticationError`` subclass describing why the token
        was refused.
        """
        token = extract_bearer_token(authorization)
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=list(HMAC_ALGORITHMS),
                issuer=self._issuer,
                options={"require": ["exp", "iss", "sub"]},
            )
        except jwt.ExpiredSignatureError as exc:
            raise TokenExpiredError(detail="token expired") from exc
        except jwt.InvalidAlgorithmError as exc:
            raise UnexpectedAlgorithmError(detail=f"unexpected signing method: {exc}") from exc
        except jwt.InvalidSignatureError as exc:
            raise InvalidSignatureError(detail="signature verification failed") from exc
        except jwt.PyJWTError as exc:
            raise InvalidTokenError(detail=f"invalid token: {exc}") from exc

        try:
            return TokenClaims.model_validate(payload)
        except ValidationError as exc:
            raise InvalidTokenError(detail=f"malformed claims: {exc}") from exc
