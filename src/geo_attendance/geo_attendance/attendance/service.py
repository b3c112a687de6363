from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable

from ..common.datetime_utils import format_clock, now_utc
from ..common.validators import require_non_empty
from ..core.constants import DISPLAY_COORD_DECIMALS
from ..core.enums import AccuracyPreference, AttendanceStatus, RejectionKind
from ..core.exceptions import GeofenceViolation, PunchRejected
from ..geofence.evaluator import evaluate
from ..geofence.model import GeoFence
from ..position.source import AcquisitionOptions, PositionSource
from ..position.sources import BoundedPositionSource
from .model import PunchOutcome
from .repository import PunchEventSink
from .state_machine import AttendanceStateMachine

logger = logging.getLogger(__name__)


STATUS_LABELS = {
    AttendanceStatus.CHECKED_IN: "Working",
    AttendanceStatus.CHECKED_OUT: "Not Checked In",
}

ACTION_LABELS = {
    AttendanceStatus.CHECKED_IN: "Punch OUT",
    AttendanceStatus.CHECKED_OUT: "Punch IN",
}

REJECTION_MESSAGES = {
    RejectionKind.UNSUPPORTED: "Geolocation is not supported by your device",
    RejectionKind.PERMISSION_DENIED: "Location permission denied. Enable location access and try again.",
    RejectionKind.TIMEOUT: "Timed out acquiring your location. Try again.",
    RejectionKind.POSITION_UNAVAILABLE: "Your location is currently unavailable. Try again.",
}


class PunchService:
    def __init__(
        self,
        position_source: PositionSource,
        fence: GeoFence,
        events: PunchEventSink,
        *,
        options: AcquisitionOptions | None = None,
        clock: Callable[[], datetime] = now_utc,
    ):
        self._source = position_source
        self._fence = fence
        self._events = events
        self._options = options or AcquisitionOptions()
        self._clock = clock

    @property
    def fence(self) -> GeoFence:
        return self._fence

    @property
    def options(self) -> AcquisitionOptions:
        return self._options

    def punch(
        self,
        user_id: str,
        machine: AttendanceStateMachine,
        *,
        source: PositionSource | None = None,
    ) -> PunchOutcome:
        """Acquire, evaluate and toggle.

        Any ``PunchRejected`` propagates unchanged and ``machine`` keeps its
        previous status. With ``options.timeout_seconds`` set, acquisition from
        any source is bounded and overruns raise ``AcquisitionTimeout``.
        """
        user_id = require_non_empty(user_id, "user_id")
        source = source or self._source
        if self._options.timeout_seconds is not None:
            source = BoundedPositionSource(source)

        try:
            coordinate = source.acquire(self._options)
            evaluation = evaluate(coordinate, self._fence)
            event = machine.punch(
                evaluation,
                user_id=user_id,
                coordinate=coordinate,
                timestamp=self._clock(),
            )
        except GeofenceViolation as e:
            logger.warning("Punch rejected user=%s kind=%s distance=%.1fm", user_id, e.kind.value, e.distance_meters)
            raise
        except PunchRejected as e:
            logger.warning("Punch rejected user=%s kind=%s: %s", user_id, e.kind.value, e)
            raise

        self._events.record(event)
        logger.info(
            "Punch %s accepted user=%s distance=%.1fm",
            event.direction.value,
            user_id,
            evaluation.distance_meters,
        )
        return PunchOutcome(
            status=machine.status,
            distance_meters=evaluation.distance_meters,
            timestamp=event.timestamp,
            event=event,
        )

    def status_ui(self, machine: AttendanceStateMachine) -> dict:
        status = machine.status
        return {
            "status": status.value,
            "label": STATUS_LABELS[status],
            "action": ACTION_LABELS[status],
        }

    def acquisition_ui(self) -> dict:
        """Options for the browser's ``getCurrentPosition`` call."""
        timeout = self._options.timeout_seconds
        return {
            "enableHighAccuracy": self._options.accuracy == AccuracyPreference.HIGH,
            "timeout": int(timeout * 1000) if timeout is not None else None,
            "maximumAge": 0,
        }

    def outcome_ui(self, outcome: PunchOutcome) -> dict:
        verb = "Checked In" if outcome.status == AttendanceStatus.CHECKED_IN else "Checked Out"
        coord = outcome.event.coordinate
        return {
            "status": outcome.status.value,
            "label": STATUS_LABELS[outcome.status],
            "action": ACTION_LABELS[outcome.status],
            "distance_meters": outcome.distance_meters,
            "timestamp": outcome.timestamp.isoformat(),
            "message": f"{verb} at {format_clock(outcome.timestamp)}",
            "location": (
                f"Lat: {coord.latitude:.{DISPLAY_COORD_DECIMALS}f}, "
                f"Lng: {coord.longitude:.{DISPLAY_COORD_DECIMALS}f}"
            ),
        }


def rejection_message(error: PunchRejected) -> str:
    if isinstance(error, GeofenceViolation):
        return f"You are {round(error.distance_meters)}m away from office. Move closer."
    return REJECTION_MESSAGES.get(error.kind, str(error))
