"""
geopath.api.schemas

Request bodies for the path endpoints.

Coordinates are plain floats here: range checks belong to the path service so
that a bad item inside a batch fails alone instead of rejecting the whole body.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from geopath.domain.geo import Point
from geopath.domain.models import PathRequest


class PointIn(BaseModel):
    lat: float
    lng: float

    def to_domain(self) -> Point:
        return Point(lat=self.lat, lng=self.lng)


class PathFindRequest(BaseModel):
    start: PointIn
    end: PointIn
    algorithm: str = Field(min_length=1, max_length=32)
    options: dict[str, Any] = Field(default_factory=dict)
    is_public: bool = False

    def to_domain(self, *, owner_id: str) -> PathRequest:
        return PathRequest(
            start=self.start.to_domain(),
            end=self.end.to_domain(),
            algorithm=self.algorithm,
            owner_id=owner_id,
            options=dict(self.options),
            is_public=self.is_public,
        )


class PathBatchRequest(BaseModel):
    requests: list[PathFindRequest] = Field(min_length=1)
