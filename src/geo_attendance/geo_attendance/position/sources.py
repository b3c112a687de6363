from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from concurrent.futures import TimeoutError as FutureTimeout
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..common.validators import require_float
from ..core.exceptions import (
    AcquisitionTimeout,
    PermissionDenied,
    PositionUnavailable,
    Unsupported,
    ValidationError,
)
from ..geofence.model import Coordinate
from .source import AcquisitionOptions, PositionSource

logger = logging.getLogger(__name__)

# Browser Geolocation API error codes (GeolocationPositionError.code).
BROWSER_ERROR_CODES = {
    1: PermissionDenied,
    2: PositionUnavailable,
    3: AcquisitionTimeout,
}


@dataclass(frozen=True)
class StaticPositionSource:
    """Always reports the same coordinate."""

    coordinate: Coordinate

    def acquire(self, options: AcquisitionOptions) -> Coordinate:
        return self.coordinate


class UnsupportedPositionSource:
    """Platform without any geolocation capability."""

    def acquire(self, options: AcquisitionOptions) -> Coordinate:
        raise Unsupported("Geolocation is not supported on this platform")


@dataclass(frozen=True)
class ReportedPositionSource:
    """Position (or failure) already reported by the client device.

    Use ``from_payload`` to build one from a request body of the form
    ``{"latitude": .., "longitude": .., "accuracy": ..}`` or
    ``{"error_code": 1|2|3, "message": ".."}``.
    """

    coordinate: Optional[Coordinate] = None
    accuracy_meters: Optional[float] = None
    error_code: Optional[int] = None
    error_message: Optional[str] = None

    @classmethod
    def from_payload(cls, payload: Optional[Mapping[str, Any]]) -> "ReportedPositionSource":
        if not payload:
            return cls()
        if not isinstance(payload, Mapping):
            raise ValidationError("Position report must be a JSON object")

        if payload.get("error_code") is not None:
            try:
                code = int(payload["error_code"])
            except (TypeError, ValueError):
                raise ValidationError("error_code must be an integer") from None
            if code not in BROWSER_ERROR_CODES:
                raise ValidationError(f"Unknown error_code {code}")
            return cls(error_code=code, error_message=payload.get("message"))

        if payload.get("latitude") is None or payload.get("longitude") is None:
            raise ValidationError("latitude and longitude are required")

        accuracy = payload.get("accuracy")
        return cls(
            coordinate=Coordinate.parse(payload["latitude"], payload["longitude"]),
            accuracy_meters=require_float(accuracy, "accuracy") if accuracy is not None else None,
        )

    def acquire(self, options: AcquisitionOptions) -> Coordinate:
        if self.error_code is not None:
            error_cls = BROWSER_ERROR_CODES[self.error_code]
            raise error_cls(self.error_message or error_cls.kind.value)

        if self.coordinate is None:
            raise Unsupported("No position was reported by the device")

        limit = options.max_accuracy_meters
        if limit is not None and self.accuracy_meters is not None and self.accuracy_meters > limit:
            raise PositionUnavailable(f"Position accuracy {self.accuracy_meters:.0f}m exceeds {limit:.0f}m")

        return self.coordinate


class BoundedPositionSource:
    """Runs a blocking source on a worker thread and bounds the wait.

    A fix that does not arrive within ``options.timeout_seconds`` is reported
    as ``AcquisitionTimeout``; the worker is left to finish on its own.
    Each call gets its own worker so a hung fix never delays the next attempt.
    """

    def __init__(self, inner: PositionSource):
        self._inner = inner

    def acquire(self, options: AcquisitionOptions) -> Coordinate:
        executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="position")
        future = executor.submit(self._inner.acquire, options)
        try:
            return future.result(timeout=options.timeout_seconds)
        except FutureTimeout:
            logger.warning("Position acquisition timed out after %ss", options.timeout_seconds)
            raise AcquisitionTimeout(f"No position within {options.timeout_seconds}s") from None
        finally:
            executor.shutdown(wait=False)
