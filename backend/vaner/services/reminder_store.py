"""Firestore queries used by the reminder job. Read-only."""
import logging
from typing import List

from google.cloud.firestore_v1.base_query import FieldFilter

from ..models.device import DEVICES_COLLECTION, DEVICE_ENABLED_FIELD, Device
from ..models.user import (
    USERS_COLLECTION,
    NOTIFICATION_ENABLED_FIELD,
    NOTIFICATION_MINUTE_FIELD,
    User,
)

logger = logging.getLogger(__name__)


class FirestoreReminderStore:
    """Looks up due users and their devices in Firestore.
    
    Query errors are left to propagate; a failed lookup fails the whole run.
    """
    
    def __init__(self, client):
        self._client = client
    
    async def find_due_users(self, lower: int, upper: int) -> List[User]:
        """Users with notifications enabled and minuteOfDay in [lower, upper].
        
        Needs a composite index on (notification.enabled, notification.minuteOfDay).
        """
        query = (
            self._client.collection(USERS_COLLECTION)
            .where(filter=FieldFilter(NOTIFICATION_ENABLED_FIELD, "==", True))
            .where(filter=FieldFilter(NOTIFICATION_MINUTE_FIELD, ">=", lower))
            .where(filter=FieldFilter(NOTIFICATION_MINUTE_FIELD, "<=", upper))
        )
        snapshots = await query.get()
        users = [User.from_snapshot(s) for s in snapshots]
        logger.debug(f"Users query [{lower}, {upper}] returned {len(users)} documents")
        return users
    
    async def get_enabled_devices(self, user_id: str) -> List[Device]:
        """Enabled devices registered under a user."""
        query = (
            self._client.collection(USERS_COLLECTION)
            .document(user_id)
            .collection(DEVICES_COLLECTION)
            .where(filter=FieldFilter(DEVICE_ENABLED_FIELD, "==", True))
        )
        snapshots = await query.get()
        return [Device.from_snapshot(s) for s in snapshots]
