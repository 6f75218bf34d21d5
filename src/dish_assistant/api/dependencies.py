"""Shared FastAPI dependencies and response helpers."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from fastapi import Header, HTTPException, Request, status
from fastapi.responses import JSONResponse

if TYPE_CHECKING:
    from dish_assistant.containers import AppContainer


def get_container(request: Request) -> AppContainer:
    """Return the container attached to the running app."""
    return request.app.state.container


async def require_user_id(x_user_id: str | None = Header(default=None)) -> UUID:
    """Return the caller's id as forwarded by the upstream auth layer."""
    if not x_user_id:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)
    try:
        return UUID(x_user_id)
    except ValueError:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED) from None


def error_response(status_code: int, error: str, message: str) -> JSONResponse:
    """Build the standard failure body."""
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "error": error, "message": message},
    )
