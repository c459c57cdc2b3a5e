"""Scheduler service - fires the reminder job on a fixed cadence.

The trigger is a cron expression evaluated in the reminder timezone, so runs
land on :00, :05, :10, ... local wall-clock time (Europe/Oslo by default).
"""
import logging
from typing import Optional

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.cron import CronTrigger

from ..config import settings
from ..firebase import get_firestore
from .push_sender import push_sender_service
from .reminder_store import FirestoreReminderStore
from .reminders import ReminderConfig, ReminderRunSummary, ReminderService

logger = logging.getLogger(__name__)

REMINDER_JOB_ID = "send_daily_habit_reminders"


def build_reminder_service() -> ReminderService:
    """Wire the reminder service to Firestore and FCM."""
    return ReminderService(
        store=FirestoreReminderStore(get_firestore()),
        push_sender=push_sender_service,
        config=ReminderConfig.from_settings(settings),
    )


class SchedulerService:
    """Service for running the reminder job periodically."""
    
    def __init__(self):
        self.scheduler: Optional[AsyncIOScheduler] = None
        self._running = False
    
    @property
    def running(self) -> bool:
        return self._running
    
    def start(self):
        """Start the scheduler."""
        if self._running:
            return
        
        self.scheduler = AsyncIOScheduler(timezone=settings.reminder_timezone)
        self.scheduler.add_job(
            self.run_once,
            trigger=CronTrigger(
                minute=f"*/{settings.reminder_interval_minutes}",
                timezone=settings.reminder_timezone,
            ),
            id=REMINDER_JOB_ID,
            replace_existing=True,
            max_instances=1,
            misfire_grace_time=60,
        )
        
        self.scheduler.start()
        self._running = True
        logger.info(
            f"Scheduler started (every {settings.reminder_interval_minutes} min, "
            f"tz={settings.reminder_timezone})"
        )
    
    def stop(self):
        """Stop the scheduler."""
        if self.scheduler and self._running:
            self.scheduler.shutdown(wait=False)
            self._running = False
            logger.info("Scheduler stopped")
    
    async def run_once(self) -> ReminderRunSummary:
        """Run the reminder job a single time.
        
        A failed run is logged and re-raised so the scheduler (or the calling
        process) records it as failed.
        """
        try:
            return await build_reminder_service().run()
        except Exception as e:
            logger.error(f"Reminder job failed: {type(e).__name__}: {e}")
            raise


# Global instance
scheduler_service = SchedulerService()
