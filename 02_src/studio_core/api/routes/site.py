"""Static site data API route."""

from typing import Any

from fastapi import APIRouter

from ...app import Application
from ...presentation import OFFICE_MAP, SITE_ICONS


def create_site_router(app: Application) -> APIRouter:
    """Create site data router."""
    router = APIRouter(prefix="/api", tags=["site"])

    @router.get("/site")
    async def get_site() -> dict[str, Any]:
        """FAQ questions, office map and contact icons."""
        return {
            "faq": app.resolver.questions(),
            "map": OFFICE_MAP.as_dict(),
            "contact_icons": {
                kind: SITE_ICONS.lookup(name)
                for kind, name in (("address", "map-pin"), ("phone", "phone"), ("email", "mail"))
            },
        }

    return router
