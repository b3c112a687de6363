import json
from datetime import datetime, timezone

from src.geo_attendance.geo_attendance.attendance.logging_punch_sink import LoggingPunchSink
from src.geo_attendance.geo_attendance.attendance.memory_punch_log import InMemoryPunchLog
from src.geo_attendance.geo_attendance.attendance.model import PunchEvent
from src.geo_attendance.geo_attendance.core.enums import PunchDirection
from src.geo_attendance.geo_attendance.geofence.model import Coordinate

EVENT = PunchEvent(
    user_id="USER_123",
    direction=PunchDirection.OUT,
    coordinate=Coordinate(12.9716, 77.5946),
    timestamp=datetime(2026, 2, 1, 17, 0, tzinfo=timezone.utc),
)


class FakeLogger:
    def __init__(self):
        self.lines = []

    def info(self, msg, *args):
        self.lines.append(msg % args)


def test_event_payload_shape():
    assert EVENT.to_payload() == {
        "userId": "USER_123",
        "type": "OUT",
        "lat": 12.9716,
        "lng": 77.5946,
        "timestamp": "2026-02-01T17:00:00+00:00",
    }


def test_logging_sink_logs_payload():
    log = FakeLogger()
    LoggingPunchSink(log).record(EVENT)

    assert len(log.lines) == 1
    assert json.loads(log.lines[0].removeprefix("API payload: ")) == EVENT.to_payload()


def test_memory_log_filters_by_user():
    log = InMemoryPunchLog()
    log.record(EVENT)

    assert log.for_user("USER_123") == (EVENT,)
    assert log.for_user("someone-else") == ()
