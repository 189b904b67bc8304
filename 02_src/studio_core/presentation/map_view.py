"""Map view contract for the office map renderer."""

from dataclasses import dataclass, field

# [longitude, latitude] of the Moscow office
DEFAULT_CENTER: tuple[float, float] = (37.6173, 55.7558)
DEFAULT_ZOOM = 12.0


def _check_coordinates(lng: float, lat: float) -> None:
    if not -180.0 <= lng <= 180.0:
        raise ValueError(f"Longitude out of range: {lng}")
    if not -90.0 <= lat <= 90.0:
        raise ValueError(f"Latitude out of range: {lat}")


@dataclass(frozen=True)
class MapMarker:
    """A titled pin on the map."""

    lng: float
    lat: float
    title: str

    def __post_init__(self) -> None:
        _check_coordinates(self.lng, self.lat)

    @property
    def lng_lat(self) -> list[float]:
        return [self.lng, self.lat]


@dataclass(frozen=True)
class MapView:
    """Renderer input. Coordinate pairs are always [longitude, latitude]."""

    center: tuple[float, float] = DEFAULT_CENTER
    zoom: float = DEFAULT_ZOOM
    markers: tuple[MapMarker, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        _check_coordinates(*self.center)
        if not 0 <= self.zoom <= 22:
            raise ValueError(f"Zoom out of range: {self.zoom}")

    def as_dict(self) -> dict:
        return {
            "center": list(self.center),
            "zoom": self.zoom,
            "markers": [
                {"lng": m.lng, "lat": m.lat, "title": m.title} for m in self.markers
            ],
        }


OFFICE_MAP = MapView(
    markers=(MapMarker(lng=37.6173, lat=55.7558, title="ARCHITECT Studio"),),
)
