import math
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Coordinate:
    """A point on the Earth in decimal degrees.

    ``accuracy`` is the optional uncertainty radius (metres) reported by
    whatever produced the fix.  It is informational only.
    """

    latitude: float
    longitude: float
    accuracy: Optional[float] = None

    def __str__(self) -> str:
        text = f"{self.latitude:.6f}, {self.longitude:.6f}"
        if self.accuracy is not None:
            text += f" (±{math.floor(self.accuracy + 0.5)} m)"
        return text
