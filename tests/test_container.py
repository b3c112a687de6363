import pytest

from src.geo_attendance.geo_attendance.attendance.logging_punch_sink import LoggingPunchSink
from src.geo_attendance.geo_attendance.container import build_container
from src.geo_attendance.geo_attendance.core.enums import AccuracyPreference
from src.geo_attendance.geo_attendance.core.exceptions import Unsupported, ValidationError
from src.geo_attendance.geo_attendance.attendance.state_machine import AttendanceStateMachine


def _geo(**overrides):
    cfg = {
        "office_lat": "12.9716",
        "office_lng": "77.5946",
        "radius_meters": "100",
        "accuracy_preference": "balanced",
        "timeout_seconds": "20",
        "max_accuracy_meters": "",
    }
    cfg.update(overrides)
    return cfg


def test_build_container_from_env_strings():
    c = build_container(geo_config=_geo())

    assert c.fence.center.latitude == 12.9716
    assert c.fence.radius_meters == 100
    assert c.options.accuracy == AccuracyPreference.BALANCED
    assert c.options.timeout_seconds == 20
    assert c.options.max_accuracy_meters is None
    assert isinstance(c.events, LoggingPunchSink)


def test_default_source_on_server_is_unsupported():
    c = build_container(geo_config=_geo())

    with pytest.raises(Unsupported):
        c.punch_service.punch("USER_123", AttendanceStateMachine())


@pytest.mark.parametrize(
    "overrides",
    [
        {"radius_meters": "0"},
        {"radius_meters": "-5"},
        {"office_lat": "95"},
        {"office_lng": "nope"},
        {"accuracy_preference": "extreme"},
        {"timeout_seconds": "0"},
    ],
)
def test_invalid_settings_are_rejected(overrides):
    with pytest.raises(ValidationError):
        build_container(geo_config=_geo(**overrides))
