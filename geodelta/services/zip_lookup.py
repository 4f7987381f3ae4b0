import requests
from typing import Optional

from ..config import HTTP_TIMEOUT, ZIPPOPOTAM_URL
from ..errors import LocationLookupError
from ..models import Coordinate
from ..utils.logging import get_logger

logger = get_logger(__name__)


class ZipLookupService:
    """Resolve ZIP → Coordinate and City,State → ZIP."""

    def __init__(self, base_url: str = ZIPPOPOTAM_URL, timeout: float = HTTP_TIMEOUT):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def zip_to_coordinate(self, zip_code: str) -> Coordinate:
        """Return the coordinate of a US ZIP using Zippopotam."""
        url = f"{self.base_url}/{zip_code}"
        try:
            resp = requests.get(url, timeout=self.timeout)
        except requests.RequestException as exc:
            raise LocationLookupError(f"ZIP lookup failed: {exc}") from exc
        if resp.status_code != 200:
            raise LocationLookupError("Invalid ZIP code or service unavailable.")
        try:
            place = resp.json()["places"][0]
            return Coordinate(float(place["latitude"]), float(place["longitude"]))
        except (KeyError, IndexError, TypeError, ValueError) as exc:
            raise LocationLookupError(
                f"Unexpected response for ZIP {zip_code}"
            ) from exc

    def city_state_to_zip(self, city_state: str) -> Optional[str]:
        """
        Convert a “City, State” string to a ZIP using Zippopotam.
        Returns the first ZIP found or None.
        """
        try:
            city, state = [x.strip() for x in city_state.split(",")]
            url = f"{self.base_url}/{state}/{city}"
            resp = requests.get(url, timeout=self.timeout)
            if resp.status_code == 200:
                return resp.json()["places"][0]["post code"]
        except (ValueError, KeyError, IndexError, TypeError, requests.RequestException) as exc:
            logger.warning("Error converting city/state → ZIP: %s", exc)
        return None
