"""Knowledge module."""

from .base import FAQ_ENTRIES, SITE_CONTEXT
from .resolver import IKnowledgeResolver, KnowledgeResolver, resolve

__all__ = [
    "FAQ_ENTRIES",
    "SITE_CONTEXT",
    "IKnowledgeResolver",
    "KnowledgeResolver",
    "resolve",
]
