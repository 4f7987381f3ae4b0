import pandas as pd
from dataclasses import dataclass
from typing import Iterable, Optional

from ..config import (
    DEFAULT_PRECISION,
    MAX_UI_PRECISION,
    MAX_USEFUL_PRECISION,
    MIN_UI_PRECISION,
    THRESHOLD_METERS,
)
from ..models import Coordinate
from ..utils.geo import distance, round_metres
from ..utils.geohash import cell_size, decode, encode
from ..utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class DistanceComparison:
    """True distance next to its geohash approximation for one precision."""

    origin: Coordinate
    target: Coordinate
    precision: int
    origin_hash: str
    target_hash: str
    origin_center: Coordinate
    target_center: Coordinate
    true_distance: float
    geohash_distance: float

    @property
    def error(self) -> float:
        return abs(self.geohash_distance - self.true_distance)


class DistanceComparisonService:
    """Measure how far apart two points are, raw and through geohash cells."""

    def __init__(
        self,
        precision: int = DEFAULT_PRECISION,
        threshold_meters: float = THRESHOLD_METERS,
    ):
        self.precision = precision
        self.threshold_meters = threshold_meters

    # ------------------------------------------------------------------
    # Single measurement
    # ------------------------------------------------------------------
    def compare(
        self,
        origin: Coordinate,
        target: Coordinate,
        precision: Optional[int] = None,
    ) -> DistanceComparison:
        """
        Encode both points, decode both hashes back to cell centers and
        measure the distance twice: between the raw points and between
        the centers.
        """
        if precision is None:
            precision = self.precision
        if isinstance(precision, int) and precision > MAX_USEFUL_PRECISION:
            logger.warning(
                "Precision %d exceeds %d; trailing characters may be float noise",
                precision,
                MAX_USEFUL_PRECISION,
            )

        origin_hash = encode(origin, precision)
        target_hash = encode(target, precision)
        origin_center = decode(origin_hash)
        target_center = decode(target_hash)

        return DistanceComparison(
            origin=origin,
            target=target,
            precision=precision,
            origin_hash=origin_hash,
            target_hash=target_hash,
            origin_center=origin_center,
            target_center=target_center,
            true_distance=distance(origin, target),
            geohash_distance=distance(origin_center, target_center),
        )

    def within_threshold(self, comparison: DistanceComparison) -> bool:
        return round_metres(comparison.true_distance) <= self.threshold_meters

    # ------------------------------------------------------------------
    # Precision sweep
    # ------------------------------------------------------------------
    def sweep(
        self,
        origin: Coordinate,
        target: Coordinate,
        precisions: Iterable[int] = range(1, MAX_USEFUL_PRECISION + 1),
    ) -> pd.DataFrame:
        """
        Returns one row per precision showing how the geohash distance
        converges on the true distance.
        """
        rows = []
        for precision in precisions:
            result = self.compare(origin, target, precision)
            height, width = cell_size(precision)
            rows.append(
                {
                    "precision": precision,
                    "origin_hash": result.origin_hash,
                    "target_hash": result.target_hash,
                    "true_distance_m": result.true_distance,
                    "geohash_distance_m": result.geohash_distance,
                    "error_m": result.error,
                    "cell_height_deg": height,
                    "cell_width_deg": width,
                }
            )
        df = pd.DataFrame(
            rows,
            columns=[
                "precision",
                "origin_hash",
                "target_hash",
                "true_distance_m",
                "geohash_distance_m",
                "error_m",
                "cell_height_deg",
                "cell_width_deg",
            ],
        )
        return df.set_index("precision", drop=False)

    # ------------------------------------------------------------------
    # Interactive precision control
    # ------------------------------------------------------------------
    @staticmethod
    def next_precision(current: int) -> int:
        """Step through MIN_UI_PRECISION..MAX_UI_PRECISION, wrapping around."""
        if not MIN_UI_PRECISION <= current < MAX_UI_PRECISION:
            return MIN_UI_PRECISION
        return current + 1
