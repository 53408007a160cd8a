"""
Validation and preparation of inbound user payloads.
"""

from __future__ import annotations

import logging
from enum import Enum

from auth.password import hash_password
from utils.errors import MissingFieldError
from utils.schemas import UserPayload

logger = logging.getLogger(__name__)


class ValidationMode(str, Enum):
    CREATE = "create"
    UPDATE = "update"


def validate_required_fields(payload: UserPayload, mode: ValidationMode) -> None:
    """
    Check the required fields in order (name, nick, email, password) and
    raise ``MissingFieldError`` for the first empty one.

    The password is only required when creating a user.
    """
    if not payload.name:
        raise MissingFieldError("name")
    if not payload.nick:
        raise MissingFieldError("nick")
    if not payload.email:
        raise MissingFieldError("email")
    if not payload.password and mode is ValidationMode.CREATE:
        raise MissingFieldError("password")


def prepare_user(payload: UserPayload) -> UserPayload:
    """
    Validate a creation payload and return a copy whose password is the
    bcrypt hash.  The input payload is left untouched.
    """
    validate_required_fields(payload, ValidationMode.CREATE)
    prepared = payload.model_copy(update={"password": hash_password(payload.password)})
    logger.debug("Prepared user payload for %s", payload.email)
    return prepared
