import importlib
import os
from types import ModuleType

REQUIRED_SETTINGS = ("SECRET_KEY", "GEO_CONFIG")


def get_settings_module() -> str:
    # APP_SETTINGS names a settings module outright (e.g. a site-specific office)
    explicit = os.getenv("APP_SETTINGS", "").strip()
    if explicit:
        return explicit

    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "config.production"

    if env in {"test", "testing"}:
        return "config.testing"

    return "config.development"


def load_settings(module_name: str | None = None) -> ModuleType:
    """Import the settings module and check it defines what the app needs."""
    settings = importlib.import_module(module_name or get_settings_module())
    missing = [name for name in REQUIRED_SETTINGS if not hasattr(settings, name)]
    if missing:
        raise RuntimeError(f"{settings.__name__} is missing settings: {', '.join(missing)}")
    return settings
