"""
geodelta package – geohash encoding plus great‑circle distances, and a
tiny CLI that shows how much a geohash precision distorts a distance.

Public entry points
-------------------
* `geodelta.main` – the command‑line driver (`python -m geodelta.main`)
* Core helpers:
    - `encode`, `decode`, `decode_bbox`, `cell_size`
    - `haversine`, `distance`
* Service classes:
    - `DistanceComparisonService`
    - `ZipLookupService`
* Value types and errors via `geodelta.models` / `geodelta.errors`

Having these symbols available at the package root keeps the import
experience ergonomic:

    >>> from geodelta import Coordinate, encode, decode, distance
"""

__all__ = [
    "VERSION",
    "Coordinate",
    # Errors
    "GeohashError",
    "InvalidCoordinate",
    "InvalidPrecision",
    "InvalidCharacter",
    "LocationLookupError",
    # Services
    "DistanceComparison",
    "DistanceComparisonService",
    "ZipLookupService",
    # Utilities
    "BASE32",
    "BoundingBox",
    "encode",
    "decode",
    "decode_bbox",
    "cell_size",
    "haversine",
    "distance",
]

# Semantic version of the library
VERSION = "0.1.0"


from .models import Coordinate  # noqa: F401
from .errors import (  # noqa: F401
    GeohashError,
    InvalidCoordinate,
    InvalidPrecision,
    InvalidCharacter,
    LocationLookupError,
)

# ----------------------------------------------------------------------
# Re‑export the service classes (they are defined in sub‑packages)
# ----------------------------------------------------------------------
from .services import (  # noqa: F401
    DistanceComparison,
    DistanceComparisonService,
    ZipLookupService,
)

# ----------------------------------------------------------------------
# Re‑export the geometry helpers from the utils package
# ----------------------------------------------------------------------
from .utils import (  # noqa: F401
    BASE32,
    BoundingBox,
    encode,
    decode,
    decode_bbox,
    cell_size,
    haversine,
    distance,
)
