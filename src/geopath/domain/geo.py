"""
geopath.domain.geo

Geographic primitives.

Responsibilities:
- The immutable `Point` value type.
- Great-circle (haversine) distance and polyline length.
- Coordinate validation used before any strategy executes.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any

from geopath.domain.errors import ValidationError

EARTH_RADIUS_KM = 6371.0


@dataclass(frozen=True, slots=True)
class Point:
    lat: float
    lng: float

    def as_dict(self) -> dict[str, float]:
        return {"lat": self.lat, "lng": self.lng}

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> Point:
        return cls(lat=raw["lat"], lng=raw["lng"])


def haversine_distance(a: Point, b: Point) -> float:
    """
    Great-circle distance in km on a sphere of radius 6371 km.
    """

    lat1 = math.radians(a.lat)
    lat2 = math.radians(b.lat)
    dlat = lat2 - lat1
    dlng = math.radians(b.lng - a.lng)
    h = math.sin(dlat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(dlng / 2) ** 2
    # Rounding can push h a hair above 1.0 for antipodal points.
    return 2 * EARTH_RADIUS_KM * math.asin(math.sqrt(min(1.0, h)))


def path_length(points: Sequence[Point]) -> float:
    return sum(haversine_distance(p, q) for p, q in zip(points, points[1:]))


def validate_point(point: Any, label: str = "point") -> Point:
    if not isinstance(point, Point):
        raise ValidationError(f"Invalid {label}: expected a point with lat/lng")
    _check_coordinate(point.lat, -90.0, 90.0, f"Invalid {label} latitude")
    _check_coordinate(point.lng, -180.0, 180.0, f"Invalid {label} longitude")
    return point


def _check_coordinate(value: Any, lo: float, hi: float, message: str) -> None:
    # bool is an int subclass; reject it explicitly.
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise ValidationError(message)
    if math.isnan(value) or value < lo or value > hi:
        raise ValidationError(message)


def clamp_lat(lat: float) -> float:
    return max(-90.0, min(90.0, lat))


def wrap_lng(lng: float) -> float:
    if -180.0 <= lng <= 180.0:
        return lng
    return (lng + 180.0) % 360.0 - 180.0


def points_to_dicts(points: Iterable[Point]) -> list[dict[str, float]]:
    return [p.as_dict() for p in points]


# --- Module Notes -----------------------------------------------------------
# Strategies never call `validate_point`; the orchestration service rejects bad
# coordinates before dispatch.
