"""Device model - a push destination stored under users/{uid}/devices."""
from dataclasses import dataclass
from typing import Any, Optional

DEVICES_COLLECTION = "devices"

DEVICE_ENABLED_FIELD = "enabled"
DEVICE_TOKEN_FIELD = "token"


@dataclass
class Device:
    """Registered device for push notifications."""
    id: str
    enabled: bool = False
    token: Optional[str] = None  # FCM registration token
    
    @property
    def is_deliverable(self) -> bool:
        """Whether a push can be addressed to this device."""
        return self.enabled and bool(self.token)
    
    @classmethod
    def from_snapshot(cls, snapshot: Any) -> "Device":
        """Build from a Firestore DocumentSnapshot."""
        data = snapshot.to_dict() or {}
        token = data.get(DEVICE_TOKEN_FIELD)
        return cls(
            id=snapshot.id,
            enabled=data.get(DEVICE_ENABLED_FIELD) is True,
            token=token if isinstance(token, str) else None,
        )
