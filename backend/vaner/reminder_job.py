"""Run the reminder job once and exit.

For hosting where an external cron (Cloud Scheduler, Kubernetes CronJob, ...)
provides the 5-minute trigger instead of the in-process scheduler:

    python -m vaner.reminder_job
"""
import asyncio
import logging
import sys

from .firebase import close_firebase
from .services.scheduler import scheduler_service

logger = logging.getLogger(__name__)


async def main() -> int:
    try:
        summary = await scheduler_service.run_once()
    except Exception:
        return 1
    finally:
        close_firebase()
    logger.info(f"Run summary: {summary}")
    return 0


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    sys.exit(asyncio.run(main()))
