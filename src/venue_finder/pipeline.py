"""Venue filtering and sorting.

Every function here is pure: venues are frozen records, distances are
attached to copies, and sorting works on a fresh list so the caller's
sequence is never reordered.
"""

from __future__ import annotations

import logging
import unicodedata
from typing import Iterable, Optional, Sequence

from venue_finder.geo import haversine_km
from venue_finder.models import InvalidInputError, SortKey, Venue, VenueQuery, number_error

logger = logging.getLogger(__name__)


def _checked_venues(venues: Optional[Iterable[Venue]]) -> list[Venue]:
    if venues is None:
        raise InvalidInputError(["venues is None"])

    checked = list(venues)
    errors: list[str] = []
    for i, venue in enumerate(checked):
        if not isinstance(venue, Venue):
            errors.append(f"venues[{i}] is not a Venue: {venue!r}")
            continue
        for label, value in (("latitude", venue.latitude), ("longitude", venue.longitude)):
            error = number_error(value, f"venues[{i}].{label}")
            if error:
                errors.append(error)
    if errors:
        raise InvalidInputError(errors)
    return checked


def _check_numbers(**values: float) -> None:
    errors = [e for e in (number_error(v, k) for k, v in values.items()) if e]
    if errors:
        raise InvalidInputError(errors)


def _collation_key(value: Optional[str]) -> tuple[str, str, str]:
    # Letters first, then accents, then case with lowercase ahead of uppercase.
    text = value or ""
    decomposed = unicodedata.normalize("NFKD", text).casefold()
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return base, decomposed, text.swapcase()


def filter_by_distance(
    venues: Iterable[Venue],
    user_lat: float,
    user_lon: float,
    max_distance_km: float,
) -> list[Venue]:
    """Return venues within *max_distance_km* of the user, closest first.

    Each returned venue is a copy carrying its ``distance`` in km. The bound
    is inclusive and ties keep their input order.
    """
    checked = _checked_venues(venues)
    _check_numbers(user_lat=user_lat, user_lon=user_lon)
    error = number_error(max_distance_km, "max_distance_km", allow_infinite=True)
    if error:
        raise InvalidInputError([error])

    annotated = [
        venue.with_distance(haversine_km(user_lat, user_lon, venue.latitude, venue.longitude))
        for venue in checked
    ]
    nearby = [venue for venue in annotated if venue.distance <= max_distance_km]
    nearby.sort(key=lambda venue: venue.distance)

    logger.debug(
        "%d of %d venues within %.2f km of (%.4f, %.4f)",
        len(nearby), len(checked), max_distance_km, user_lat, user_lon,
    )
    return nearby


def filter_by_type(venues: Sequence[Venue], venue_type: Optional[str]) -> Sequence[Venue]:
    """Keep venues whose type matches *venue_type*, ignoring case.

    An empty *venue_type* returns *venues* itself. Venues without a type
    never match.
    """
    if venues is None:
        raise InvalidInputError(["venues is None"])
    if not venue_type:
        return venues

    wanted = venue_type.lower()
    matched = [
        venue for venue in _checked_venues(venues)
        if venue.type and venue.type.lower() == wanted
    ]
    logger.debug("%d venues of type %r", len(matched), venue_type)
    return matched


def sort_venues(venues: Iterable[Venue], key: SortKey | str) -> list[Venue]:
    """Return a new list of *venues* sorted by *key* (stable, ascending).

    Missing distances sort as 0 and missing names or types as "". An unknown
    key leaves the order unchanged.
    """
    checked = _checked_venues(venues)
    try:
        sort_key = SortKey(key)
    except ValueError:
        logger.debug("Unknown sort key %r, order unchanged", key)
        return checked

    if sort_key is SortKey.DISTANCE:
        checked.sort(key=lambda venue: venue.distance or 0.0)
    elif sort_key is SortKey.NAME:
        checked.sort(key=lambda venue: _collation_key(venue.name))
    else:
        checked.sort(key=lambda venue: _collation_key(venue.type))
    return checked


def filter_and_sort(
    venues: Iterable[Venue],
    user_lat: float,
    user_lon: float,
    max_distance_km: float,
    venue_type: str = "",
    sort_key: SortKey | str = SortKey.DISTANCE,
) -> list[Venue]:
    """Filter by distance, then by type (if given), then sort."""
    filtered: Sequence[Venue] = filter_by_distance(venues, user_lat, user_lon, max_distance_km)
    if venue_type:
        filtered = filter_by_type(filtered, venue_type)
    return sort_venues(filtered, sort_key)


def run_query(venues: Iterable[Venue], query: VenueQuery) -> list[Venue]:
    return filter_and_sort(
        venues,
        query.latitude,
        query.longitude,
        query.max_distance_km,
        venue_type=query.venue_type,
        sort_key=query.sort_key,
    )
