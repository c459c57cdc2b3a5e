"""Push notification sender service using Firebase Cloud Messaging."""
import asyncio
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from firebase_admin import messaging

logger = logging.getLogger(__name__)


@dataclass
class PushMessage:
    """One notification addressed to several device tokens."""
    title: str
    body: str
    data: Dict[str, str] = field(default_factory=dict)
    tokens: List[str] = field(default_factory=list)
    
    def __post_init__(self):
        if not self.tokens:
            raise ValueError("A multicast push needs at least one token")
    
    def to_multicast(self) -> messaging.MulticastMessage:
        """Build the firebase-admin message. FCM data values must be strings."""
        return messaging.MulticastMessage(
            tokens=list(self.tokens),
            notification=messaging.Notification(title=self.title, body=self.body),
            data={key: str(value) for key, value in self.data.items()},
        )


@dataclass
class PushResult:
    """Per-call delivery counts reported by FCM."""
    success_count: int = 0
    failure_count: int = 0


class PushSenderService:
    """Service for sending push notifications via FCM."""
    
    def __init__(self, app=None, dry_run: bool = False):
        self._app = app
        self._dry_run = dry_run
    
    async def send_multicast(self, message: PushMessage) -> PushResult:
        """Send one message to all of its tokens.
        
        Rejected tokens are counted, not raised and not pruned. Errors for the
        call as a whole (auth, transport, quota) propagate to the caller.
        
        Returns:
            PushResult with FCM's success and failure counts
        """
        # firebase-admin is blocking; keep the event loop free
        response = await asyncio.to_thread(
            messaging.send_each_for_multicast,
            message.to_multicast(),
            dry_run=self._dry_run,
            app=self._app,
        )
        
        for token, item in zip(message.tokens, response.responses):
            if not item.success:
                logger.debug(f"Push rejected for token {token[:16]}...: {item.exception}")
        
        return PushResult(
            success_count=response.success_count,
            failure_count=response.failure_count,
        )


# Global instance
push_sender_service = PushSenderService()
