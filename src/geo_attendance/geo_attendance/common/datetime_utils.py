from __future__ import annotations

from datetime import datetime, timezone


def now_utc() -> datetime:
    """Current aware UTC time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now(timezone.utc)


def format_clock(value: datetime) -> str:
    """HH:MM:SS in the instant's own timezone."""
    return value.strftime("%H:%M:%S")
