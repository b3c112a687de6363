from __future__ import annotations

from dataclasses import dataclass

from ..common.validators import require_in_range, require_positive


@dataclass(frozen=True)
class Coordinate:
    """A latitude/longitude pair in decimal degrees."""

    latitude: float
    longitude: float

    @classmethod
    def parse(cls, latitude, longitude) -> "Coordinate":
        """Build from untrusted input, raising ValidationError on bad values."""
        return cls(
            latitude=require_in_range(latitude, "latitude", -90.0, 90.0),
            longitude=require_in_range(longitude, "longitude", -180.0, 180.0),
        )


@dataclass(frozen=True)
class GeoFence:
    """Circular acceptance zone around the office."""

    center: Coordinate
    radius_meters: float

    @classmethod
    def parse(cls, *, latitude, longitude, radius_meters) -> "GeoFence":
        return cls(
            center=Coordinate.parse(latitude, longitude),
            radius_meters=require_positive(radius_meters, "radius_meters"),
        )


@dataclass(frozen=True)
class EvaluationResult:
    distance_meters: float
    within_fence: bool
