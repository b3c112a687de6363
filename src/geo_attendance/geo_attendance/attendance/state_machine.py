from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ..core.enums import AttendanceStatus, PunchDirection
from ..core.exceptions import GeofenceViolation
from ..geofence.model import Coordinate, EvaluationResult
from .model import PunchEvent


@dataclass(frozen=True)
class Transition:
    target: AttendanceStatus
    direction: PunchDirection


_TRANSITIONS = {
    AttendanceStatus.CHECKED_OUT: Transition(AttendanceStatus.CHECKED_IN, PunchDirection.IN),
    AttendanceStatus.CHECKED_IN: Transition(AttendanceStatus.CHECKED_OUT, PunchDirection.OUT),
}


class AttendanceStateMachine:
    """Two-state toggle guarded by a geofence verdict.

    Holds one piece of mutable state, the current status. It does not guard
    against concurrent punches; callers keep at most one in flight per session.
    """

    def __init__(self, status: AttendanceStatus = AttendanceStatus.CHECKED_OUT):
        self._status = AttendanceStatus(status)

    @property
    def status(self) -> AttendanceStatus:
        return self._status

    def next_transition(self) -> Transition:
        return _TRANSITIONS[self._status]

    def punch(
        self,
        evaluation: EvaluationResult,
        *,
        user_id: str,
        coordinate: Coordinate,
        timestamp: datetime,
    ) -> PunchEvent:
        if not evaluation.within_fence:
            raise GeofenceViolation(evaluation.distance_meters)

        transition = self.next_transition()
        self._status = transition.target
        return PunchEvent(
            user_id=user_id,
            direction=transition.direction,
            coordinate=coordinate,
            timestamp=timestamp,
        )
