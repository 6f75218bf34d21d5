"""Admin API endpoints with simple token auth."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Header, HTTPException, Request, status

from dish_assistant.api.dependencies import get_container


def _get_admin_token(request: Request) -> str:
    return get_container(request).settings.admin_token


async def require_admin(
    x_admin_token: str | None = Header(default=None),
    admin_token: str = Depends(_get_admin_token),
) -> None:
    """Ensure requests include a valid admin token."""
    if not x_admin_token or x_admin_token != admin_token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)


router = APIRouter(
    prefix="/admin", tags=["admin"], dependencies=[Depends(require_admin)]
)


@router.get("/health")
async def admin_health() -> dict[str, str]:
    """Admin health check endpoint."""
    return {"status": "ok"}


@router.get("/ai/stats")
async def ai_chat_stats(request: Request) -> dict[str, object]:
    """Return AI chat usage statistics."""
    stats = get_container(request).admin_service.ai_chat_stats()
    return {
        "success": True,
        "stats": {
            "totalSessions": stats.total_sessions,
            "totalMessages": stats.total_messages,
            "activeUsers": stats.active_users,
            "recentSessions": stats.recent_sessions,
            "generatedAt": stats.generated_at.isoformat(),
        },
    }
