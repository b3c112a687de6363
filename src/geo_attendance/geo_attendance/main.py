from __future__ import annotations

import logging

from dotenv import load_dotenv
from flask import Flask

from config import load_settings

from .attendance.controller import register as register_attendance
from .attendance.repository import PunchEventSink
from .common.logging_config import configure_logging
from .container import build_container

logger = logging.getLogger(__name__)


def create_app(settings_module: str | None = None, *, events: PunchEventSink | None = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings = load_settings(settings_module)
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    geo_config = getattr(settings, "GEO_CONFIG")

    container = build_container(geo_config=geo_config, events=events)
    app.extensions["geo_attendance"] = container

    logger.info(
        "settings=%s fence=(%s, %s) radius=%sm",
        settings.__name__,
        container.fence.center.latitude,
        container.fence.center.longitude,
        container.fence.radius_meters,
    )

    register_attendance(app, container)

    return app
