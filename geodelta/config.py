"""
Project‑wide settings.

Everything here is a plain module‑level constant so callers can simply do
``from geodelta.config import THRESHOLD_METERS``.  A handful of values can be
overridden through environment variables.
"""

import os

# ----------------------------------------------------------------------
# Geometry
# ----------------------------------------------------------------------
EARTH_RADIUS_M = 6_371_000.0   # mean Earth radius in metres

# ----------------------------------------------------------------------
# Geohash precision
# ----------------------------------------------------------------------
DEFAULT_PRECISION = int(os.getenv("GEODELTA_PRECISION", "8"))

# The interactive precision control cycles through this range
MIN_UI_PRECISION = 5
MAX_UI_PRECISION = 12

# Past this many characters the cell is centimetre sized; trailing
# characters eventually become float rounding noise
MAX_USEFUL_PRECISION = 12

# ----------------------------------------------------------------------
# "Are we there yet?" radius
# ----------------------------------------------------------------------
THRESHOLD_METERS = float(os.getenv("GEODELTA_THRESHOLD_METERS", "50"))

# ----------------------------------------------------------------------
# HTTP lookups
# ----------------------------------------------------------------------
ZIPPOPOTAM_URL = "http://api.zippopotam.us/us"
HTTP_TIMEOUT = float(os.getenv("GEODELTA_HTTP_TIMEOUT", "10"))

# ----------------------------------------------------------------------
# Logging
# ----------------------------------------------------------------------
LOG_LEVEL = os.getenv("GEODELTA_LOG_LEVEL", "INFO").upper()


class Colours:
    """ANSI colour escapes for terminal output."""

    RED = "\033[91m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    CYAN = "\033[96m"
    BOLD = "\033[1m"
    RESET = "\033[0m"
