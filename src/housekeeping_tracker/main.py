from __future__ import annotations

import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import load_settings

from .api.controller import register as register_api
from .container import Container, build_container
from .core.constants import DEFAULT_RESET_HOUR, DEFAULT_TIMEZONE
from .reset.scheduler import start_daily_reset_scheduler

logger = logging.getLogger(__name__)


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__, template_folder="../../templates", static_folder="../../static")

    settings = load_settings()
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    store_config = dict(getattr(settings, "STORE_CONFIG", {}))
    timezone = getattr(settings, "TIMEZONE", DEFAULT_TIMEZONE)
    logger.info("settings=%s backend=%s tz=%s", settings.__name__, store_config.get("backend"), timezone)

    if container is None:
        container = build_container(store_config=store_config, timezone=timezone)
    app.extensions["housekeeping"] = container

    if bool(getattr(settings, "ENABLE_SCHEDULER", False)):
        app.extensions["housekeeping_scheduler"] = start_daily_reset_scheduler(
            container.reset_service,
            tz=container.tz,
            hour=int(getattr(settings, "DAILY_RESET_HOUR", DEFAULT_RESET_HOUR)),
        )

    register_api(app, container)

    return app
