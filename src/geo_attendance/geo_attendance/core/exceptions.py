from __future__ import annotations

from .enums import RejectionKind


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class PunchRejected(DomainError):
    """A punch attempt was refused; attendance status is left untouched."""

    kind: RejectionKind
    retryable: bool = False


class AcquisitionError(PunchRejected):
    """The current position could not be acquired."""


class Unsupported(AcquisitionError):
    kind = RejectionKind.UNSUPPORTED


class PermissionDenied(AcquisitionError):
    kind = RejectionKind.PERMISSION_DENIED


class AcquisitionTimeout(AcquisitionError):
    kind = RejectionKind.TIMEOUT
    retryable = True


class PositionUnavailable(AcquisitionError):
    kind = RejectionKind.POSITION_UNAVAILABLE
    retryable = True


class GeofenceViolation(PunchRejected):
    """Raised when the user is outside the allowed radius."""

    kind = RejectionKind.GEOFENCE_VIOLATION
    retryable = True

    def __init__(self, distance_meters: float):
        super().__init__(f"{distance_meters:.1f}m away from the fence center")
        self.distance_meters = distance_meters
