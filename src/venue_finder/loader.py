"""Load venue lists from JSON."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from venue_finder.models import InvalidInputError, Venue

logger = logging.getLogger(__name__)


def parse_venues(raw: str) -> list[Venue]:
    """Parse a JSON array of venue objects.

    Every record is validated; all problems are reported together in one
    InvalidInputError.
    """
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise InvalidInputError([f"malformed JSON: {exc}"]) from exc

    if not isinstance(data, list):
        raise InvalidInputError([f"expected a JSON array of venues, got {type(data).__name__}"])

    venues: list[Venue] = []
    errors: list[str] = []
    for i, item in enumerate(data):
        try:
            venues.append(Venue.from_dict(item))
        except InvalidInputError as exc:
            errors.extend(f"[{i}] {e}" for e in exc.errors)
    if errors:
        raise InvalidInputError(errors)
    return venues


def load_venues(path: str | Path) -> list[Venue]:
    path = Path(path)
    venues = parse_venues(path.read_text(encoding="utf-8"))
    logger.info("Loaded %d venues from %s", len(venues), path)
    return venues
