"""AI chat session endpoints."""

from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from dish_assistant.api.dependencies import (
    error_response,
    get_container,
    require_user_id,
)
from dish_assistant.api.schemas import (  # noqa: TC001
    AddMessageRequest,
    CreateSessionRequest,
    GenerateResponseRequest,
    UpdateSessionRequest,
)
from dish_assistant.domain.chat import ChatMessage, ChatSession
from dish_assistant.services.chat import AI_UNAVAILABLE_ERROR, GENERATION_FAILED_REPLY

router = APIRouter(prefix="/api/ai/chat", tags=["ai-chat"])

_NOT_FOUND_MESSAGE = "Сесію чату не знайдено або у вас немає до неї доступу"


def _session_not_found() -> JSONResponse:
    return error_response(
        status.HTTP_404_NOT_FOUND, "Chat session not found", _NOT_FOUND_MESSAGE
    )


@router.get("/sessions")
async def list_sessions(
    request: Request, user_id: UUID = Depends(require_user_id)
) -> dict[str, object]:
    """Return the caller's chat sessions."""
    sessions = get_container(request).chat_service.list_sessions(user_id)
    return {"success": True, "sessions": [_serialize_session(s) for s in sessions]}


@router.post("/sessions")
async def create_session(
    body: CreateSessionRequest,
    request: Request,
    user_id: UUID = Depends(require_user_id),
) -> dict[str, object]:
    """Start a new chat session."""
    session = get_container(request).chat_service.create_session(user_id, body.title)
    return {"success": True, "session": _serialize_session(session)}


@router.patch("/sessions/{session_id}", response_model=None)
async def update_session(
    session_id: UUID,
    body: UpdateSessionRequest,
    request: Request,
    user_id: UUID = Depends(require_user_id),
) -> dict[str, object] | JSONResponse:
    """Rename a chat session."""
    session = get_container(request).chat_service.rename_session(
        session_id, user_id, body.title
    )
    if session is None:
        return _session_not_found()
    return {"success": True, "session": _serialize_session(session)}


@router.delete("/sessions/{session_id}", response_model=None)
async def delete_session(
    session_id: UUID,
    request: Request,
    user_id: UUID = Depends(require_user_id),
) -> dict[str, object] | JSONResponse:
    """Delete a chat session and its messages."""
    if not get_container(request).chat_service.delete_session(session_id, user_id):
        return _session_not_found()
    return {"success": True}


@router.get("/sessions/{session_id}/messages", response_model=None)
async def list_messages(
    session_id: UUID,
    request: Request,
    user_id: UUID = Depends(require_user_id),
) -> dict[str, object] | JSONResponse:
    """Return a session with its messages."""
    found = get_container(request).chat_service.get_messages(session_id, user_id)
    if found is None:
        return _session_not_found()
    session, messages = found
    return {
        "success": True,
        "session": _serialize_session(session),
        "messages": [_serialize_message(message) for message in messages],
    }


@router.post("/sessions/{session_id}/messages", response_model=None)
async def add_message(
    session_id: UUID,
    body: AddMessageRequest,
    request: Request,
    user_id: UUID = Depends(require_user_id),
) -> dict[str, object] | JSONResponse:
    """Append a message to a session."""
    message = get_container(request).chat_service.add_message(
        session_id, user_id, body.content, role=body.role, metadata=body.metadata
    )
    if message is None:
        return _session_not_found()
    return {"success": True, "message": _serialize_message(message)}


@router.post("/generate-response", response_model=None)
async def generate_response(
    body: GenerateResponseRequest,
    request: Request,
    user_id: UUID = Depends(require_user_id),
) -> dict[str, object] | JSONResponse:
    """Save the user's message and reply as the assistant."""
    reply = await get_container(request).chat_service.generate_response(
        body.session_id,
        user_id,
        body.user_message,
        [message.model_dump() for message in body.previous_messages],
    )
    if reply is None:
        return _session_not_found()
    if reply.error == AI_UNAVAILABLE_ERROR:
        return error_response(
            status.HTTP_503_SERVICE_UNAVAILABLE,
            reply.error,
            "Сервіс AI тимчасово недоступний",
        )
    user_message = (
        _serialize_message(reply.user_message) if reply.user_message else None
    )
    ai_message = _serialize_message(reply.ai_message) if reply.ai_message else None
    if not reply.success:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "success": False,
                "error": reply.error,
                "message": "Не вдалося згенерувати відповідь AI",
                "errorMessage": GENERATION_FAILED_REPLY,
                "userMessage": user_message,
                "aiMessage": ai_message,
            },
        )
    return {"success": True, "userMessage": user_message, "aiMessage": ai_message}


def _serialize_session(session: ChatSession) -> dict[str, object]:
    return {
        "id": str(session.id),
        "user_id": str(session.user_id),
        "title": session.title,
        "created_at": session.created_at.isoformat() if session.created_at else None,
        "updated_at": session.updated_at.isoformat() if session.updated_at else None,
    }


def _serialize_message(message: ChatMessage) -> dict[str, object]:
    return {
        "id": str(message.id),
        "session_id": str(message.session_id),
        "role": message.role,
        "content": message.content,
        "metadata": message.metadata,
        "created_at": message.created_at.isoformat() if message.created_at else None,
    }
