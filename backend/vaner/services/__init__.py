"""Services for reminders, push delivery, scheduling, and share rendering."""
from .push_sender import PushSenderService, PushMessage, PushResult
from .reminders import ReminderService, ReminderConfig, ReminderRunSummary
from .reminder_store import FirestoreReminderStore
from .reminder_window import ReminderWindow
from .scheduler import SchedulerService

__all__ = [
    "PushSenderService",
    "PushMessage",
    "PushResult",
    "ReminderService",
    "ReminderConfig",
    "ReminderRunSummary",
    "FirestoreReminderStore",
    "ReminderWindow",
    "SchedulerService",
]
