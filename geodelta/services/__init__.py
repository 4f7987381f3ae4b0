"""
services package – orchestration and external lookups.

Export the high‑level service classes so callers can do:

    from geodelta.services import (
        DistanceComparisonService,
        ZipLookupService,
    )
"""

# Re‑export the concrete service classes for a tidy public API
from .comparison import DistanceComparison, DistanceComparisonService   # noqa: F401
from .zip_lookup import ZipLookupService                                # noqa: F401

# Define what gets imported when a user writes:
#   from geodelta.services import *
__all__ = [
    "DistanceComparison",
    "DistanceComparisonService",
    "ZipLookupService",
]
