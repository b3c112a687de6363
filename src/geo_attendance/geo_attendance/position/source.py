from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol

from ..core.constants import DEFAULT_ACQUISITION_TIMEOUT_SECONDS
from ..core.enums import AccuracyPreference
from ..geofence.model import Coordinate


@dataclass(frozen=True)
class AcquisitionOptions:
    accuracy: AccuracyPreference = AccuracyPreference.HIGH
    timeout_seconds: Optional[float] = DEFAULT_ACQUISITION_TIMEOUT_SECONDS
    # Fixes with a larger error radius are treated as unavailable.
    max_accuracy_meters: Optional[float] = None


class PositionSource(Protocol):
    def acquire(self, options: AcquisitionOptions) -> Coordinate:
        """Return the caller's current coordinate.

        Raises an ``AcquisitionError`` subclass (Unsupported, PermissionDenied,
        AcquisitionTimeout, PositionUnavailable) when no fix can be produced.
        """

        raise NotImplementedError
