"""Environment-driven defaults for the command line."""

from __future__ import annotations

import os

from venue_finder.fixtures import TIMES_SQUARE

DEFAULT_MAX_DISTANCE_KM = float(os.getenv("VENUE_FINDER_MAX_KM", "2.0"))
DEFAULT_LATITUDE = float(os.getenv("VENUE_FINDER_LAT", str(TIMES_SQUARE[0])))
DEFAULT_LONGITUDE = float(os.getenv("VENUE_FINDER_LON", str(TIMES_SQUARE[1])))

# JSON venue list to use instead of the built-in sample
VENUES_FILE = os.getenv("VENUE_FINDER_VENUES_FILE") or None
