"""Chat completion API route."""

from pydantic import BaseModel, Field
from fastapi import APIRouter, HTTPException

from ...app import Application
from ...logging_config import get_logger

logger = get_logger(__name__)


class ChatRequest(BaseModel):
    """Request model for a completion."""

    message: str = Field(min_length=1)
    context: str = ""


class ChatResponse(BaseModel):
    """Response model for a completion."""

    reply: str


def create_chat_router(app: Application) -> APIRouter:
    """Create chat completion router."""
    router = APIRouter(prefix="/api", tags=["chat"])

    @router.post("/chat", response_model=ChatResponse)
    async def chat(request: ChatRequest) -> dict:
        """Answer a question the knowledge base could not."""
        if app.llm is None:
            raise HTTPException(status_code=503, detail="Assistant is not configured")

        try:
            reply = await app.llm.complete(
                messages=[{"role": "user", "content": request.message}],
                system=request.context or None,
            )
        except Exception as e:
            logger.error("Completion failed: %s", e, exc_info=True)
            raise HTTPException(status_code=502, detail="Assistant is unavailable")

        return {"reply": reply}

    return router
