"""Data models for venue search."""

from __future__ import annotations

import enum
import json
import math
from dataclasses import dataclass, field, replace
from numbers import Real
from typing import Any, Mapping, Optional


class InvalidInputError(ValueError):
    """Raised when caller-supplied input breaks the input contract."""

    def __init__(self, errors: list[str]):
        self.errors = errors
        super().__init__(f"Invalid input: {'; '.join(errors)}")


def number_error(value: Any, label: str, allow_infinite: bool = False) -> Optional[str]:
    """Return an error message if *value* is not a usable real number, else None."""
    if isinstance(value, bool) or not isinstance(value, Real):
        return f"{label} must be a number, got {value!r}"
    if math.isnan(value):
        return f"{label} is NaN"
    if math.isinf(value) and not allow_infinite:
        return f"{label} is infinite"
    return None


class SortKey(str, enum.Enum):
    DISTANCE = "distance"
    NAME = "name"
    TYPE = "type"


# Keys with a dedicated Venue attribute; anything else lands in Venue.extra.
_KNOWN_KEYS = ("name", "latitude", "longitude", "type", "distance")


@dataclass(frozen=True)
class Venue:
    """A place of interest.

    ``distance`` (km from the user) is only set on the copies returned by
    ``filter_by_distance``. Unrecognised fields from the source record are
    kept verbatim in ``extra``.
    """

    name: str
    latitude: float
    longitude: float
    type: Optional[str] = None
    distance: Optional[float] = None
    extra: dict[str, Any] = field(default_factory=dict, hash=False)

    def with_distance(self, distance: float) -> Venue:
        return replace(self, distance=distance)

    @staticmethod
    def validate(data: Mapping[str, Any]) -> list[str]:
        """Validate a raw venue mapping. Returns list of error messages (empty = valid)."""
        errors: list[str] = []

        name = data.get("name")
        if not isinstance(name, str) or not name:
            errors.append(f"name must be a non-empty string, got {name!r}")

        # Coordinates are required, but their range is not checked
        for key in ("latitude", "longitude"):
            if key not in data:
                errors.append(f"{key} is missing")
                continue
            error = number_error(data[key], key)
            if error:
                errors.append(error)

        venue_type = data.get("type")
        if venue_type is not None and not isinstance(venue_type, str):
            errors.append(f"type must be a string, got {venue_type!r}")

        distance = data.get("distance")
        if distance is not None:
            error = number_error(distance, "distance")
            if error:
                errors.append(error)

        return errors

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Venue:
        if not isinstance(data, Mapping):
            raise InvalidInputError([f"venue must be an object, got {data!r}"])
        errors = cls.validate(data)
        if errors:
            raise InvalidInputError(errors)

        distance = data.get("distance")
        return cls(
            name=data["name"],
            latitude=float(data["latitude"]),
            longitude=float(data["longitude"]),
            type=data.get("type") or None,
            distance=float(distance) if distance is not None else None,
            extra={k: v for k, v in data.items() if k not in _KNOWN_KEYS},
        )

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {
            "name": self.name,
            "latitude": self.latitude,
            "longitude": self.longitude,
        }
        if self.type is not None:
            d["type"] = self.type
        d.update(self.extra)
        if self.distance is not None:
            d["distance"] = self.distance
        return d

    def to_json(self) -> str:
        return json.dumps(self.to_dict())

    @classmethod
    def from_json(cls, raw: str) -> Venue:
        return cls.from_dict(json.loads(raw))


@dataclass
class VenueQuery:
    """Parameters of a combined distance/type/sort query."""

    latitude: float
    longitude: float
    max_distance_km: float
    venue_type: str = ""
    sort_key: SortKey | str = SortKey.DISTANCE
