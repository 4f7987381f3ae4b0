"""
utils package – small, pure‑function helpers.

We expose the geohash codec and the distance helpers that are used
throughout the app.
"""

# Re‑export the helpers for a clean import path
from .geo import haversine, distance, validate_coordinate   # noqa: F401
from .geohash import (  # noqa: F401
    BASE32,
    BoundingBox,
    cell_size,
    decode,
    decode_bbox,
    encode,
)
from .logging import get_logger   # noqa: F401

__all__ = [
    "haversine",
    "distance",
    "validate_coordinate",
    "BASE32",
    "BoundingBox",
    "encode",
    "decode",
    "decode_bbox",
    "cell_size",
    "get_logger",
]
