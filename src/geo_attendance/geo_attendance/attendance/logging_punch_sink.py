from __future__ import annotations

import json
import logging

from .model import PunchEvent

logger = logging.getLogger(__name__)


class LoggingPunchSink:
    """Logs the API payload for each punch until a punch API is wired in."""

    def __init__(self, log: logging.Logger | None = None):
        self._log = log or logger

    def record(self, event: PunchEvent) -> None:
        self._log.info("API payload: %s", json.dumps(event.to_payload()))
