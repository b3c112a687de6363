from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ..core.enums import AttendanceStatus, PunchDirection
from ..geofence.model import Coordinate


@dataclass(frozen=True)
class PunchEvent:
    """Record of an accepted punch, handed straight to the event sink."""

    user_id: str
    direction: PunchDirection
    coordinate: Coordinate
    timestamp: datetime

    def to_payload(self) -> dict:
        return {
            "userId": self.user_id,
            "type": self.direction.value,
            "lat": self.coordinate.latitude,
            "lng": self.coordinate.longitude,
            "timestamp": self.timestamp.isoformat(),
        }


@dataclass(frozen=True)
class PunchOutcome:
    status: AttendanceStatus
    distance_meters: float
    timestamp: datetime
    event: PunchEvent
