from __future__ import annotations

from dataclasses import dataclass

from .attendance.logging_punch_sink import LoggingPunchSink
from .attendance.repository import PunchEventSink
from .attendance.service import PunchService
from .common.validators import require_positive
from .core.enums import AccuracyPreference
from .core.exceptions import ValidationError
from .geofence.model import GeoFence
from .position.source import AcquisitionOptions, PositionSource
from .position.sources import UnsupportedPositionSource


@dataclass(frozen=True)
class Container:
    fence: GeoFence
    options: AcquisitionOptions
    events: PunchEventSink
    punch_service: PunchService


def _optional_positive(value, field_name: str):
    if value in (None, ""):
        return None
    return require_positive(value, field_name)


def build_options(geo_config: dict) -> AcquisitionOptions:
    raw = str(geo_config.get("accuracy_preference", AccuracyPreference.HIGH.value)).lower()
    try:
        accuracy = AccuracyPreference(raw)
    except ValueError:
        raise ValidationError(f"accuracy_preference must be one of: high, balanced (got {raw!r})") from None

    return AcquisitionOptions(
        accuracy=accuracy,
        timeout_seconds=_optional_positive(geo_config.get("timeout_seconds"), "timeout_seconds"),
        max_accuracy_meters=_optional_positive(geo_config.get("max_accuracy_meters"), "max_accuracy_meters"),
    )


def build_container(
    *,
    geo_config: dict,
    events: PunchEventSink | None = None,
    position_source: PositionSource | None = None,
) -> Container:
    fence = GeoFence.parse(
        latitude=geo_config["office_lat"],
        longitude=geo_config["office_lng"],
        radius_meters=geo_config["radius_meters"],
    )
    options = build_options(geo_config)
    events = events or LoggingPunchSink()

    # Server side has no positioning hardware; HTTP requests supply their own source.
    source = position_source or UnsupportedPositionSource()

    punch_service = PunchService(source, fence, events, options=options)

    return Container(
        fence=fence,
        options=options,
        events=events,
        punch_service=punch_service,
    )
