"""Chat widget messaging API routes."""

from typing import Literal

from pydantic import BaseModel
from fastapi import APIRouter, HTTPException

from ...app import Application
from ...errors import DialogueBusyError


class MessageRequest(BaseModel):
    """Request model for sending a message."""

    text: str


class MessageModel(BaseModel):
    """A conversation message."""

    role: Literal["user", "assistant"]
    text: str


class ReplyResponse(BaseModel):
    """Response model for a sent message; reply is null for ignored input."""

    reply: MessageModel | None


def _dump(message) -> dict:
    return {"role": message.role.value, "text": message.text}


def create_messaging_router(app: Application) -> APIRouter:
    """Create messaging router."""
    router = APIRouter(prefix="/api/sessions", tags=["messaging"])

    @router.post("/{session_id}/messages", response_model=ReplyResponse)
    async def send_message(session_id: str, request: MessageRequest) -> dict:
        """Send a visitor message and wait for the assistant reply."""
        dialogue = app.session(session_id).dialogue
        try:
            reply = await dialogue.submit_user_message(request.text)
        except DialogueBusyError as e:
            raise HTTPException(status_code=409, detail=str(e))
        return {"reply": _dump(reply) if reply else None}

    @router.get("/{session_id}/messages", response_model=list[MessageModel])
    async def get_messages(session_id: str) -> list[dict]:
        """Conversation history in display order."""
        visitor = app.find_session(session_id)
        history = visitor.dialogue.history() if visitor else app.initial_history()
        return [_dump(m) for m in history]

    @router.delete("/{session_id}/messages", response_model=list[MessageModel])
    async def reset_messages(session_id: str) -> list[dict]:
        """Close the chat: forget the session."""
        app.drop_session(session_id)
        return [_dump(m) for m in app.initial_history()]

    return router
