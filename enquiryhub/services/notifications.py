"""
Notification channel - transient, user-visible messages raised by the board.
"""
import logging
from datetime import datetime
from typing import List, Literal

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

Severity = Literal["info", "success", "warning", "error"]

_LOG_LEVELS = {
    "info": logging.INFO,
    "success": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


class Notification(BaseModel):
    """A toast-style message: title, description and severity."""
    title: str
    description: str = ""
    severity: Severity = "info"
    created_at: datetime = Field(default_factory=datetime.utcnow)


class NotificationChannel:
    """Collects notifications for the caller to display. Nothing is persisted."""

    def __init__(self):
        self._messages: List[Notification] = []

    def publish(self, title: str, description: str = "", severity: Severity = "info") -> Notification:
        notification = Notification(title=title, description=description, severity=severity)
        self._messages.append(notification)
        logger.log(_LOG_LEVELS[severity], f"{title}: {description}")
        return notification

    def error(self, title: str, description: str = "") -> Notification:
        return self.publish(title, description, "error")

    @property
    def messages(self) -> List[Notification]:
        return list(self._messages)

    def drain(self) -> List[Notification]:
        """Return and forget all pending notifications."""
        messages, self._messages = self._messages, []
        return messages
