"""
Error taxonomy shared by the security core, the store and the handlers.

Every error carries the HTTP ``status_code`` it maps to and a ``message``
that is safe to return to the client.  Internal errors keep their cause
(``__cause__``) for the server log only.
"""

from __future__ import annotations


class AppError(Exception):
    status_code: int = 500
    message: str = "something went wrong"

    def __init__(self, message: str | None = None, *, detail: str | None = None) -> None:
        if message is not None:
            self.message = message
        # server-side only, never rendered
        self.detail = detail
        super().__init__(detail or self.message)


# ── 400 ──────────────────────────────────────────────────────────────────


class ValidationError(AppError):
    status_code = 400
    message = "invalid request"


class MissingFieldError(ValidationError):
    """A required user field is empty or absent."""

    def __init__(self, field: str, reason: str = "is required") -> None:
        self.field = field
        self.reason = reason
        super().__init__(f"the field {field} {reason}")


class InvalidIdentifierError(ValidationError):
    message = "invalid uuid"


# ── 401 / 403 ────────────────────────────────────────────────────────────


class AuthenticationError(AppError):
    status_code = 401
    message = "unauthorized"


class PasswordMismatchError(AuthenticationError):
    message = "email or password invalid"


class MissingTokenError(AuthenticationError):
    pass


class MalformedHeaderError(AuthenticationError):
    pass


class InvalidSignatureError(AuthenticationError):
    pass


class TokenExpiredError(AuthenticationError):
    pass


class UnexpectedAlgorithmError(AuthenticationError):
    pass


class InvalidTokenError(AuthenticationError):
    pass


class AuthorizationError(AppError):
    status_code = 403
    message = "forbidden"


# ── 404 ──────────────────────────────────────────────────────────────────


class NotFoundError(AppError):
    status_code = 404
    message = "user not found"


# ── 500 ──────────────────────────────────────────────────────────────────


class InternalError(AppError):
    status_code = 500
    message = "something went wrong"


class HashingError(InternalError):
    pass


class PasswordTooLongError(HashingError):
    """bcrypt only consumes the first 72 bytes; longer input is refused."""

    status_code = 400
    message = "password is bigger than requested"


class TokenSigningError(InternalError):
    pass


class StoreError(InternalError):
    pass
