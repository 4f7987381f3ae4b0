"""
Geohash encoding and decoding.

A geohash is built by repeatedly halving a whole‑Earth bounding box,
alternating between longitude and latitude (longitude first).  Each halving
yields one bit: ``1`` when the point lies strictly above the midpoint,
``0`` otherwise (so a point sitting exactly on the midpoint goes low).
Five bits, most significant first, make one base‑32 character.

Precision reference (cell height x width at the equator):

    1   ~5000 km x 5000 km
    5   ~4.9 km x 4.9 km
    8   ~19 m x 38 m
    12  ~1.9 cm x 3.7 cm

There is no upper bound on precision, but once the interval on an axis is
narrower than the float spacing of the coordinate (roughly 18-20
characters) further characters are rounding artifacts, not geometry.
"""

import math
from dataclasses import dataclass
from types import MappingProxyType
from typing import Tuple

from ..errors import InvalidCharacter, InvalidPrecision
from ..models import Coordinate
from .geo import validate_coordinate

# Digits plus lowercase letters minus a, i, l, o
BASE32 = "0123456789bcdefghjkmnpqrstuvwxyz"
DECODE_MAP = MappingProxyType({char: value for value, char in enumerate(BASE32)})
BITS_PER_CHAR = 5


@dataclass
class BoundingBox:
    """Latitude/longitude intervals of a geohash cell."""

    lat_min: float = -90.0
    lat_max: float = 90.0
    lon_min: float = -180.0
    lon_max: float = 180.0

    @property
    def center(self) -> Coordinate:
        return Coordinate(
            (self.lat_min + self.lat_max) / 2,
            (self.lon_min + self.lon_max) / 2,
        )

    @property
    def south_west(self) -> Coordinate:
        return Coordinate(self.lat_min, self.lon_min)

    @property
    def north_east(self) -> Coordinate:
        return Coordinate(self.lat_max, self.lon_max)

    def contains(self, coordinate: Coordinate) -> bool:
        return (
            self.lat_min <= coordinate.latitude <= self.lat_max
            and self.lon_min <= coordinate.longitude <= self.lon_max
        )


class _Bisector:
    """A whole‑Earth box plus the cursor saying which axis is split next."""

    def __init__(self):
        self.box = BoundingBox()
        self.on_longitude = True

    def push(self, bit: int) -> None:
        """Keep the upper (bit 1) or lower (bit 0) half of the active axis."""
        box = self.box
        if self.on_longitude:
            mid = (box.lon_min + box.lon_max) / 2
            if bit:
                box.lon_min = mid
            else:
                box.lon_max = mid
        else:
            mid = (box.lat_min + box.lat_max) / 2
            if bit:
                box.lat_min = mid
            else:
                box.lat_max = mid
        self.on_longitude = not self.on_longitude

    def split(self, lat: float, lon: float) -> int:
        """Classify the point against the active midpoint and narrow."""
        box = self.box
        if self.on_longitude:
            bit = 1 if lon > (box.lon_min + box.lon_max) / 2 else 0
        else:
            bit = 1 if lat > (box.lat_min + box.lat_max) / 2 else 0
        self.push(bit)
        return bit


def validate_precision(precision: int) -> None:
    if isinstance(precision, bool) or not isinstance(precision, int):
        raise InvalidPrecision(f"precision must be an integer, got {precision!r}")
    if precision < 1:
        raise InvalidPrecision(f"precision must be >= 1, got {precision}")


def encode(coordinate: Coordinate, precision: int) -> str:
    """Encode a coordinate as a geohash of exactly ``precision`` characters.

    :raises InvalidCoordinate: latitude/longitude out of range
    :raises InvalidPrecision: precision is not a positive integer
    """
    lat, lon = coordinate.latitude, coordinate.longitude
    validate_coordinate(lat, lon)
    validate_precision(precision)

    bisector = _Bisector()
    geohash = []
    for _ in range(precision):
        ch = 0
        for _ in range(BITS_PER_CHAR):
            ch = (ch << 1) | bisector.split(lat, lon)
        geohash.append(BASE32[ch])
    return "".join(geohash)


def decode_bbox(geohash: str) -> BoundingBox:
    """Return the cell a geohash denotes.

    :raises InvalidCharacter: on the first symbol outside ``BASE32``
    :raises InvalidPrecision: if the geohash is empty
    """
    if not isinstance(geohash, str):
        raise InvalidCharacter(geohash, 0)
    if not geohash:
        raise InvalidPrecision("geohash must contain at least one character")

    bisector = _Bisector()
    for position, char in enumerate(geohash):
        try:
            value = DECODE_MAP[char]
        except KeyError:
            raise InvalidCharacter(char, position) from None
        for shift in range(BITS_PER_CHAR - 1, -1, -1):
            bisector.push((value >> shift) & 1)
    return bisector.box


def decode(geohash: str) -> Coordinate:
    """Return the center of the cell a geohash denotes."""
    return decode_bbox(geohash).center


def cell_size(precision: int) -> Tuple[float, float]:
    """(height, width) in degrees of any cell at ``precision``."""
    validate_precision(precision)
    bits = precision * BITS_PER_CHAR
    lon_bits = (bits + 1) // 2
    lat_bits = bits // 2
    return math.ldexp(180.0, -lat_bits), math.ldexp(360.0, -lon_bits)
