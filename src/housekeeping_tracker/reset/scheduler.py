from __future__ import annotations

import logging
from zoneinfo import ZoneInfo

from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.triggers.cron import CronTrigger

from .service import DailyResetService

logger = logging.getLogger(__name__)

JOB_ID = "daily_reset"


def build_daily_reset_scheduler(reset_service: DailyResetService, *, tz: ZoneInfo, hour: int) -> BackgroundScheduler:
    """Scheduler (not started) with one job: ``run_daily_reset`` at ``hour``:00 in ``tz``."""

    def job() -> None:
        try:
            reset_service.run_daily_reset()
        except Exception:
            # Next request falls back to ensure_daily_reset.
            logger.exception("Scheduled daily reset failed")

    scheduler = BackgroundScheduler(timezone=tz)
    scheduler.add_job(
        job,
        CronTrigger(hour=int(hour), minute=0, timezone=tz),
        id=JOB_ID,
        replace_existing=True,
        coalesce=True,
        max_instances=1,
    )
    return scheduler


def start_daily_reset_scheduler(reset_service: DailyResetService, *, tz: ZoneInfo, hour: int) -> BackgroundScheduler:
    scheduler = build_daily_reset_scheduler(reset_service, tz=tz, hour=hour)
    scheduler.start()
    logger.info("Daily reset scheduled at %02d:00 %s", int(hour), tz.key)
    return scheduler
