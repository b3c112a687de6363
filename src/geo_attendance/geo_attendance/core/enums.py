from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Current attendance state of a user session."""

    CHECKED_OUT = "CHECKED_OUT"
    CHECKED_IN = "CHECKED_IN"


class PunchDirection(str, Enum):
    """Direction recorded on an accepted punch."""

    IN = "IN"
    OUT = "OUT"


class AccuracyPreference(str, Enum):
    """Trades acquisition latency for precision."""

    HIGH = "high"
    BALANCED = "balanced"


class RejectionKind(str, Enum):
    """Machine-readable reason a punch attempt was refused."""

    UNSUPPORTED = "UNSUPPORTED"
    PERMISSION_DENIED = "PERMISSION_DENIED"
    TIMEOUT = "TIMEOUT"
    POSITION_UNAVAILABLE = "POSITION_UNAVAILABLE"
    GEOFENCE_VIOLATION = "GEOFENCE_VIOLATION"
