import threading

import pytest

from src.geo_attendance.geo_attendance.core.enums import RejectionKind
from src.geo_attendance.geo_attendance.core.exceptions import (
    AcquisitionTimeout,
    PermissionDenied,
    PositionUnavailable,
    Unsupported,
    ValidationError,
)
from src.geo_attendance.geo_attendance.geofence.model import Coordinate
from src.geo_attendance.geo_attendance.position.source import AcquisitionOptions
from src.geo_attendance.geo_attendance.position.sources import (
    BoundedPositionSource,
    ReportedPositionSource,
    StaticPositionSource,
    UnsupportedPositionSource,
)

OPTIONS = AcquisitionOptions()
OFFICE = Coordinate(12.9716, 77.5946)


def test_static_source_returns_coordinate():
    assert StaticPositionSource(OFFICE).acquire(OPTIONS) == OFFICE


def test_unsupported_source_raises():
    with pytest.raises(Unsupported):
        UnsupportedPositionSource().acquire(OPTIONS)


def test_reported_coordinate():
    source = ReportedPositionSource.from_payload({"latitude": 12.9716, "longitude": 77.5946, "accuracy": 8})
    assert source.acquire(OPTIONS) == OFFICE
    assert source.accuracy_meters == 8


@pytest.mark.parametrize(
    "code, error_cls, kind",
    [
        (1, PermissionDenied, RejectionKind.PERMISSION_DENIED),
        (2, PositionUnavailable, RejectionKind.POSITION_UNAVAILABLE),
        (3, AcquisitionTimeout, RejectionKind.TIMEOUT),
    ],
)
def test_reported_browser_error_codes(code, error_cls, kind):
    source = ReportedPositionSource.from_payload({"error_code": code, "message": "from browser"})

    with pytest.raises(error_cls) as exc:
        source.acquire(OPTIONS)

    assert exc.value.kind == kind
    assert str(exc.value) == "from browser"


@pytest.mark.parametrize("payload", [None, {}])
def test_missing_report_is_unsupported(payload):
    with pytest.raises(Unsupported):
        ReportedPositionSource.from_payload(payload).acquire(OPTIONS)


@pytest.mark.parametrize(
    "payload",
    [
        {"latitude": 12.9716},
        {"latitude": 120, "longitude": 77.5946},
        {"latitude": "abc", "longitude": 77.5946},
        {"latitude": 12.9716, "longitude": 77.5946, "accuracy": "far"},
        {"error_code": 9},
        {"error_code": "x"},
        [12.9716, 77.5946],
    ],
)
def test_malformed_reports_are_validation_errors(payload):
    with pytest.raises(ValidationError):
        ReportedPositionSource.from_payload(payload)


def test_coarse_fix_is_unavailable_when_limit_set():
    source = ReportedPositionSource.from_payload({"latitude": 12.9716, "longitude": 77.5946, "accuracy": 250})

    assert source.acquire(OPTIONS) == OFFICE
    with pytest.raises(PositionUnavailable):
        source.acquire(AcquisitionOptions(max_accuracy_meters=50))


class BlockingSource:
    def __init__(self):
        self.release = threading.Event()

    def acquire(self, options):
        self.release.wait(timeout=5)
        return OFFICE


def test_bounded_source_times_out():
    inner = BlockingSource()
    try:
        with pytest.raises(AcquisitionTimeout):
            BoundedPositionSource(inner).acquire(AcquisitionOptions(timeout_seconds=0.05))
    finally:
        inner.release.set()


def test_bounded_source_passes_through_result_and_errors():
    assert BoundedPositionSource(StaticPositionSource(OFFICE)).acquire(OPTIONS) == OFFICE

    with pytest.raises(Unsupported):
        BoundedPositionSource(UnsupportedPositionSource()).acquire(OPTIONS)


class HangsOnceSource:
    def __init__(self):
        self.release = threading.Event()
        self.calls = 0

    def acquire(self, options):
        self.calls += 1
        if self.calls == 1:
            self.release.wait(timeout=5)
        return OFFICE


def test_bounded_source_recovers_after_a_hung_fix():
    inner = HangsOnceSource()
    source = BoundedPositionSource(inner)
    options = AcquisitionOptions(timeout_seconds=0.1)

    try:
        with pytest.raises(AcquisitionTimeout):
            source.acquire(options)
        assert source.acquire(options) == OFFICE
    finally:
        inner.release.set()
