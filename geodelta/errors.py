"""Exceptions raised for invalid caller input."""

from typing import Any


class GeohashError(ValueError):
    """Base class for every input‑validation failure in geodelta."""


class InvalidCoordinate(GeohashError):
    """Latitude or longitude is non‑numeric, non‑finite or out of range."""


class InvalidPrecision(GeohashError):
    """Precision is not a positive integer."""


class InvalidCharacter(GeohashError):
    """A geohash contains a symbol outside the base‑32 alphabet."""

    def __init__(self, character: Any, position: int):
        self.character = character
        self.position = position
        super().__init__(
            f"Invalid geohash character {character!r} at position {position}"
        )


class LocationLookupError(ValueError):
    """A ZIP code or place name could not be resolved to a coordinate."""
