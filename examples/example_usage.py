"""Example: drive the punch service directly (no Flask).

Controllers are a thin layer; the punch rules live in the service and the
state machine.
"""

from config import load_settings

from src.geo_attendance.geo_attendance.attendance.memory_punch_log import InMemoryPunchLog
from src.geo_attendance.geo_attendance.attendance.service import rejection_message
from src.geo_attendance.geo_attendance.attendance.state_machine import AttendanceStateMachine
from src.geo_attendance.geo_attendance.common.logging_config import configure_logging
from src.geo_attendance.geo_attendance.container import build_container
from src.geo_attendance.geo_attendance.core.exceptions import PunchRejected
from src.geo_attendance.geo_attendance.geofence.model import Coordinate
from src.geo_attendance.geo_attendance.position.sources import StaticPositionSource


def main():
    settings = load_settings()
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    log = InMemoryPunchLog()
    container = build_container(geo_config=settings.GEO_CONFIG, events=log)
    service = container.punch_service
    machine = AttendanceStateMachine()

    for where in (container.fence.center, Coordinate(12.9800, 77.6000), container.fence.center):
        try:
            outcome = service.punch("USER_123", machine, source=StaticPositionSource(where))
            print(service.outcome_ui(outcome)["message"])
        except PunchRejected as e:
            print(rejection_message(e))

    print([e.to_payload() for e in log.events])


if __name__ == "__main__":
    main()
