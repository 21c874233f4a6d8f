import importlib
import os
from types import ModuleType
from typing import Optional

# APP_ENV spellings accepted for each settings module
_ENVIRONMENTS = {
    "dev": "development",
    "development": "development",
    "prod": "production",
    "production": "production",
    "test": "testing",
    "testing": "testing",
}


def get_settings_module(env: Optional[str] = None) -> str:
    """Dotted settings module for ``env`` (APP_ENV when omitted); unknown names use development."""
    name = (env or os.getenv("APP_ENV") or "development").strip().lower()
    return f"config.{_ENVIRONMENTS.get(name, 'development')}"


def load_settings(env: Optional[str] = None) -> ModuleType:
    return importlib.import_module(get_settings_module(env))
