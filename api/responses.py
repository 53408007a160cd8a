"""
Envelope rendering shared by every route and exception handler.
"""

from __future__ import annotations

from typing import Any

from fastapi import Response, status
from fastapi.responses import JSONResponse

from utils.schemas import Envelope


def send_json(data: Any, status_code: int = status.HTTP_200_OK) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=Envelope(data=data).render())


def send_error(message: str, status_code: int, headers: dict[str, str] | None = None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=Envelope(error=message).render(),
        headers=headers,
    )


def send_no_content() -> Response:
    """204 responses carry no body at all."""
    return Response(status_code=status.HTTP_204_NO_CONTENT)
