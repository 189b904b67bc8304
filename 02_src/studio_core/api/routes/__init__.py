"""API routes."""

from .chat import create_chat_router
from .contact import create_contact_router
from .messaging import create_messaging_router
from .site import create_site_router

__all__ = [
    "create_chat_router",
    "create_contact_router",
    "create_messaging_router",
    "create_site_router",
]
