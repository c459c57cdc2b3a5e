"""User model - read-only view of a document in the users collection."""
from dataclasses import dataclass
from typing import Any, Optional

USERS_COLLECTION = "users"

# Nested fields under the user's "notification" map
NOTIFICATION_ENABLED_FIELD = "notification.enabled"
NOTIFICATION_MINUTE_FIELD = "notification.minuteOfDay"


@dataclass
class NotificationPreference:
    """When (and whether) the user wants the daily reminder."""
    enabled: bool = False
    minute_of_day: Optional[int] = None  # 0-1439, local wall-clock minute
    
    @classmethod
    def from_dict(cls, data: Optional[dict]) -> "NotificationPreference":
        if not isinstance(data, dict):
            return cls()
        minute = data.get("minuteOfDay")
        return cls(
            enabled=data.get("enabled") is True,
            minute_of_day=minute if isinstance(minute, int) and not isinstance(minute, bool) else None,
        )


@dataclass
class User:
    """A user document. Owned by the app's settings flow; never written here."""
    id: str
    notification: NotificationPreference
    
    @classmethod
    def from_snapshot(cls, snapshot: Any) -> "User":
        """Build from a Firestore DocumentSnapshot."""
        data = snapshot.to_dict() or {}
        return cls(
            id=snapshot.id,
            notification=NotificationPreference.from_dict(data.get("notification")),
        )
