import math
from numbers import Real

from ..config import EARTH_RADIUS_M
from ..errors import InvalidCoordinate
from ..models import Coordinate


def validate_coordinate(lat: float, lon: float) -> None:
    """Raise ``InvalidCoordinate`` unless lat/lon are finite and in range."""
    for name, value, limit in (("latitude", lat, 90.0), ("longitude", lon, 180.0)):
        if isinstance(value, bool) or not isinstance(value, Real):
            raise InvalidCoordinate(f"{name} must be a number, got {value!r}")
        if not math.isfinite(value):
            raise InvalidCoordinate(f"{name} must be finite, got {value!r}")
        if not -limit <= value <= limit:
            raise InvalidCoordinate(
                f"{name} {value} outside [{-limit:g}, {limit:g}]"
            )


def haversine(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Great‑circle distance in metres between two lat/lon pairs."""
    φ1, φ2 = map(math.radians, (lat1, lat2))
    Δφ = math.radians(lat2 - lat1)
    Δλ = math.radians(lon2 - lon1)

    a = math.sin(Δφ / 2) ** 2 + math.cos(φ1) * math.cos(φ2) * math.sin(Δλ / 2) ** 2
    # rounding can push a past 1 for antipodal points
    a = min(1.0, a)
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_M * c


def distance(a: Coordinate, b: Coordinate) -> float:
    """Validated haversine distance in metres between two coordinates."""
    validate_coordinate(a.latitude, a.longitude)
    validate_coordinate(b.latitude, b.longitude)
    return haversine(a.latitude, a.longitude, b.latitude, b.longitude)


def validate_accuracy(accuracy: float) -> None:
    """Raise ``InvalidCoordinate`` unless accuracy is a finite, non‑negative radius."""
    if isinstance(accuracy, bool) or not isinstance(accuracy, Real):
        raise InvalidCoordinate(f"accuracy must be a number, got {accuracy!r}")
    if not math.isfinite(accuracy) or accuracy < 0:
        raise InvalidCoordinate(f"accuracy must be finite and >= 0, got {accuracy!r}")


def round_metres(metres: float) -> int:
    """Round half up (2.5 -> 3), not Python's half‑to‑even."""
    return math.floor(metres + 0.5)
