"""Run the daily reset once. Meant for an external cron job.

Example crontab line (server clock in the configured timezone):
    0 0 * * * cd /srv/housekeeping && APP_ENV=production python scripts/run_daily_reset.py
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
for p in (REPO_ROOT, REPO_ROOT / "src"):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))

from dotenv import load_dotenv

from config import load_settings

from housekeeping_tracker.container import build_container


def main() -> None:
    load_dotenv(override=False)
    settings = load_settings()
    logging.basicConfig(level=getattr(settings, "LOG_LEVEL", "INFO"))

    container = build_container(
        store_config=dict(settings.STORE_CONFIG),
        timezone=getattr(settings, "TIMEZONE", "America/New_York"),
    )
    container.reset_service.run_daily_reset()
    print(f"OK: Daily reset done (lastResetDate={container.reset_service.last_reset_date()})")


if __name__ == "__main__":
    main()
