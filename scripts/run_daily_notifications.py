#!/usr/bin/env python3
"""
Run the daily summary email job once, outside the HTTP server.

Meant for cron or a scheduler container that cannot reach the API:
  python scripts/run_daily_notifications.py [--date YYYY-MM-DD]

Without --date the run uses today's date in the configured TIMEZONE.
"""

import argparse
import asyncio
import logging
import sys
from datetime import date
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from farmtrack.application.use_cases.notifications import daily_summary
from farmtrack.config.settings import get_settings
from farmtrack.infrastructure.db.session import (
    SQLAlchemyUnitOfWork,
    create_engine,
    create_session_factory,
)
from farmtrack.infrastructure.email.factory import build_email_service
from farmtrack.infrastructure.email.renderer.engine import EmailTemplateRenderer
from farmtrack.utils.datetime_tz import local_today

logger = logging.getLogger("farmtrack.scripts.daily_notifications")


async def run(run_date: date | None) -> int:
    settings = get_settings()
    engine = create_engine(settings.database_url)
    session_factory = create_session_factory(engine)
    today = run_date or local_today(settings.timezone)

    try:
        uow = SQLAlchemyUnitOfWork(session_factory)
        async with uow:
            result = await daily_summary.execute(
                uow,
                today,
                email_service=build_email_service(settings),
                renderer=EmailTemplateRenderer.create_default(),
                settings=settings,
            )
    finally:
        await engine.dispose()

    for item in result.results:
        logger.info(
            "account=%s status=%s reason=%s", item.account_id, item.status, item.reason or "-"
        )
    logger.info("Daily summary for %s: %d/%d sent", today, result.sent, result.total_users)
    failed = sum(1 for r in result.results if r.status == daily_summary.FAILED)
    return 1 if failed else 0


def main() -> None:
    parser = argparse.ArgumentParser(description="Send the daily farm summary emails")
    parser.add_argument("--date", type=date.fromisoformat, default=None, help="Run date (YYYY-MM-DD)")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO, format="%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    )
    sys.exit(asyncio.run(run(args.date)))


if __name__ == "__main__":
    main()
