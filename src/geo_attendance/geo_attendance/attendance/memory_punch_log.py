from __future__ import annotations

from typing import Sequence

from .model import PunchEvent


class InMemoryPunchLog:
    """Append-only punch log kept in process memory."""

    def __init__(self):
        self._events: list[PunchEvent] = []

    def record(self, event: PunchEvent) -> None:
        self._events.append(event)

    @property
    def events(self) -> Sequence[PunchEvent]:
        return tuple(self._events)

    def for_user(self, user_id: str) -> Sequence[PunchEvent]:
        return tuple(e for e in self._events if e.user_id == user_id)
