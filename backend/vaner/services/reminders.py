"""Reminder service - pushes the daily habit reminder to users due right now.

Each run:
- Computes the current minute of day in the reminder timezone
- Queries users whose notification.minuteOfDay falls in [minute - W, minute + W]
- Sends one multicast push per user to that user's enabled devices

Users are handled one after another. A failed send for one user is logged and
the run moves on; a failed query is not caught and fails the run. Nothing is
recorded between runs, so overlapping or retried runs can notify a user twice.
"""
import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Dict, List, Optional
from zoneinfo import ZoneInfo

from ..config import Settings
from ..models import Device, User
from .push_sender import PushMessage
from .reminder_window import ReminderWindow

logger = logging.getLogger(__name__)


@dataclass
class ReminderConfig:
    """Reminder job configuration."""
    timezone: str = "Europe/Oslo"
    window_minutes: int = 5
    wrap_midnight: bool = False
    title: str = "Vaner"
    body: str = "Husk dagens vaner ✨"
    
    @classmethod
    def from_settings(cls, settings: Settings) -> "ReminderConfig":
        return cls(
            timezone=settings.reminder_timezone,
            window_minutes=settings.reminder_window_minutes,
            wrap_midnight=settings.reminder_wrap_midnight,
            title=settings.reminder_title,
            body=settings.reminder_body,
        )


@dataclass
class ReminderRunSummary:
    """Outcome of one run. Only logged, never stored."""
    minute_of_day: int
    lower: int
    upper: int
    users_matched: int = 0
    users_skipped: int = 0
    users_sent: int = 0
    users_failed: int = 0
    success_count: int = 0  # Tokens FCM accepted
    failure_count: int = 0  # Tokens FCM rejected


class ReminderService:
    """Finds users due for a reminder and pushes to their devices."""
    
    def __init__(self, store, push_sender, config: Optional[ReminderConfig] = None):
        self.store = store
        self.push_sender = push_sender
        self.config = config or ReminderConfig()
    
    def _local_now(self, now: Optional[datetime]) -> datetime:
        """Current time in the reminder timezone. Naive datetimes are taken as local."""
        zone = ZoneInfo(self.config.timezone)
        if now is None:
            return datetime.now(zone)
        if now.tzinfo is None:
            return now
        return now.astimezone(zone)
    
    async def run(self, now: Optional[datetime] = None) -> ReminderRunSummary:
        """Run the reminder job once.
        
        Args:
            now: Trigger time; defaults to the current time
            
        Returns:
            ReminderRunSummary with per-run counts
        """
        window = ReminderWindow.at(self._local_now(now), self.config.window_minutes)
        summary = ReminderRunSummary(
            minute_of_day=window.minute_of_day,
            lower=window.lower,
            upper=window.upper,
        )
        
        logger.info(
            f"Running reminder job at minute={window.minute_of_day} "
            f"(window=[{window.lower}, {window.upper}])"
        )
        
        users = await self._find_due_users(window)
        summary.users_matched = len(users)
        logger.info(f"Found {len(users)} users to notify")
        
        for user in users:
            await self._notify_user(user, summary)
        
        logger.info(
            f"Reminder job done: sent={summary.users_sent}, skipped={summary.users_skipped}, "
            f"failed={summary.users_failed}"
        )
        return summary
    
    async def _find_due_users(self, window: ReminderWindow) -> List[User]:
        """Query every range of the window, keeping the first copy of each user."""
        users: Dict[str, User] = {}
        for lower, upper in window.ranges(self.config.wrap_midnight):
            for user in await self.store.find_due_users(lower, upper):
                users.setdefault(user.id, user)
        return list(users.values())
    
    @staticmethod
    def _collect_tokens(devices: List[Device]) -> List[str]:
        return [device.token for device in devices if device.is_deliverable]
    
    async def _notify_user(self, user: User, summary: ReminderRunSummary):
        """Push to one user's devices. Send errors are logged, not raised."""
        devices = await self.store.get_enabled_devices(user.id)
        tokens = self._collect_tokens(devices)
        
        if not tokens:
            logger.info(f"No tokens for user {user.id}, skipping.")
            summary.users_skipped += 1
            return
        
        message = PushMessage(
            title=self.config.title,
            body=self.config.body,
            data={"userId": user.id},
            tokens=tokens,
        )
        
        try:
            result = await self.push_sender.send_multicast(message)
        except Exception as e:
            logger.error(f"Error sending to {user.id}: {e}")
            summary.users_failed += 1
            return
        
        logger.info(
            f"Sent to {user.id}. success={result.success_count}, failure={result.failure_count}"
        )
        summary.users_sent += 1
        summary.success_count += result.success_count
        summary.failure_count += result.failure_count
