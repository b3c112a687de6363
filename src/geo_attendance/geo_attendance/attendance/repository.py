from __future__ import annotations

from typing import Protocol

from .model import PunchEvent


class PunchEventSink(Protocol):
    """Persistence collaborator that takes ownership of accepted punches."""

    def record(self, event: PunchEvent) -> None:
        raise NotImplementedError
