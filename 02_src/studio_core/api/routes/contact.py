"""Contact form API routes."""

from pydantic import BaseModel, Field
from fastapi import APIRouter, HTTPException

from ...app import Application
from ...errors import SubmissionInProgressError
from ...models import SubmissionState
from ...models.submission import IDLE


class ContactRequest(BaseModel):
    """Contact form fields as rendered on the site."""

    name: str = Field(min_length=1)
    email: str = Field(min_length=3, pattern=r"^[^@\s]+@[^@\s]+$")
    project_type: str = ""
    message: str = ""


class SubmissionResponse(BaseModel):
    """Observable form state."""

    status: str
    message: str | None = None


def _dump(state: SubmissionState) -> dict:
    return {"status": state.status.value, "message": state.message}


def create_contact_router(app: Application) -> APIRouter:
    """Create contact form router."""
    router = APIRouter(prefix="/api/sessions", tags=["contact"])

    @router.post("/{session_id}/contact", response_model=SubmissionResponse)
    async def submit_contact(session_id: str, request: ContactRequest) -> dict:
        """Send the contact form to the intake service."""
        form = app.session(session_id).contact_form
        try:
            state = await form.submit(request.model_dump())
        except SubmissionInProgressError as e:
            raise HTTPException(status_code=409, detail=str(e))
        return _dump(state)

    @router.get("/{session_id}/contact", response_model=SubmissionResponse)
    async def get_contact_state(session_id: str) -> dict:
        visitor = app.find_session(session_id)
        return _dump(visitor.contact_form.state if visitor else IDLE)

    @router.post("/{session_id}/contact/reset", response_model=SubmissionResponse)
    async def reset_contact(session_id: str) -> dict:
        """Handle the "submit another" action."""
        visitor = app.find_session(session_id)
        return _dump(visitor.contact_form.reset() if visitor else IDLE)

    return router
