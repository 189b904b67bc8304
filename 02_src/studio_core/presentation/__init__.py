"""Presentation collaborators: map view and icons."""

from .icons import DEFAULT_ICON, SITE_ICONS, IconRegistry
from .map_view import DEFAULT_CENTER, DEFAULT_ZOOM, OFFICE_MAP, MapMarker, MapView

__all__ = [
    "DEFAULT_ICON",
    "SITE_ICONS",
    "IconRegistry",
    "DEFAULT_CENTER",
    "DEFAULT_ZOOM",
    "OFFICE_MAP",
    "MapMarker",
    "MapView",
]
