"""Find nearby venues by great-circle distance and category."""

from venue_finder.geo import EARTH_RADIUS_KM, haversine_km
from venue_finder.models import InvalidInputError, SortKey, Venue, VenueQuery
from venue_finder.pipeline import (
    filter_and_sort,
    filter_by_distance,
    filter_by_type,
    run_query,
    sort_venues,
)

__all__ = [
    "EARTH_RADIUS_KM",
    "InvalidInputError",
    "SortKey",
    "Venue",
    "VenueQuery",
    "filter_and_sort",
    "filter_by_distance",
    "filter_by_type",
    "haversine_km",
    "run_query",
    "sort_venues",
]
