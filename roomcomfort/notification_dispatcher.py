"""
Notification dispatcher module for the Room Comfort Monitor.

This module contains the NotificationDispatcher class which decides whether a
critical analysis raises a notification, and keeps the in-memory inbox of
notifications for operators.

Critical rooms tend to stay critical for many consecutive cycles, so only a
sampled fraction of critical analyses (10% by default) raise a notification.
The sampling lives here rather than in the analyzer, which stays
deterministic.
"""

from collections import deque
from datetime import datetime
from typing import Optional

import numpy as np

from .analysis_record import AnalysisRecord
from .config import NOTIFICATION_RATE_VAR, env_float
from .notification import Notification
from .parameter_statuses import CRITICAL


class NotificationDispatcher:
    """
    Raises sampled notifications for critical analyses and stores them.

    The sample rate is taken from the constructor argument, then from the
    ROOMCOMFORT_NOTIFICATION_RATE environment variable, then DEFAULT_RATE.
    """

    DEFAULT_RATE = 0.1
    MAX_NOTIFICATIONS = 200
    TITLE = "Critical Environmental Condition"
    FALLBACK_MESSAGE = "Environmental conditions require immediate attention"

    def __init__(
        self,
        rate: Optional[float] = None,
        rng: Optional[np.random.Generator] = None,
        max_notifications: int = MAX_NOTIFICATIONS
    ) -> None:
        """
        Initialize the dispatcher.

        Args:
            rate: Probability in [0, 1] that a critical analysis raises a
                  notification. If None, read from the environment.
            rng: Random source for the sampling gate. If None, a fresh
                 unseeded generator is used.
            max_notifications: Size of the inbox. Once full, the oldest
                               notification is dropped for each new one.
        """
        if rate is None:
            rate = env_float(NOTIFICATION_RATE_VAR, self.DEFAULT_RATE, "NotificationDispatcher", 0.0, 1.0)
        if not 0.0 <= rate <= 1.0:
            raise ValueError(f"rate must be between 0 and 1, got {rate}")
        if max_notifications < 1:
            raise ValueError("max_notifications must be >= 1")

        self.rate = rate
        self.rng = rng if rng is not None else np.random.default_rng()
        self._notifications: deque[Notification] = deque(maxlen=max_notifications)
        self._next_id = 1

    def dispatch(self, record: AnalysisRecord) -> Optional[Notification]:
        """
        Raises a notification for a record if it is critical and passes the sample gate.

        Args:
            record: The analysis record of one room cycle

        Returns:
            The new Notification, or None if none was raised
        """
        if record.analysis.overall_status != CRITICAL:
            return None

        # Sample gate: only a fraction of critical cycles notify
        if self.rng.random() >= self.rate:
            return None

        notification = Notification(
            id=self._next_id,
            room_id=record.room_id,
            type="alert",
            title=self.TITLE,
            message=record.analysis.analysis_text or self.FALLBACK_MESSAGE,
            severity="critical",
            timestamp=datetime.now(),
        )
        self._next_id += 1
        self._notifications.append(notification)
        return notification

    def active_notifications(self, room_id: int) -> list[Notification]:
        """Unread notifications for a room, newest first."""
        unread = [n for n in self._notifications if n.room_id == room_id and not n.is_read]
        return sorted(unread, key=lambda n: (n.timestamp, n.id), reverse=True)

    def mark_as_read(self, notification_id: int) -> bool:
        """
        Marks a single notification as read.

        Returns:
            True if the notification exists, False otherwise
        """
        for index, notification in enumerate(self._notifications):
            if notification.id == notification_id:
                self._notifications[index] = notification.mark_read()
                return True
        return False

    def mark_all_as_read(self, room_id: int) -> int:
        """
        Marks every notification of a room as read.

        Returns:
            Number of notifications that changed from unread to read
        """
        changed = 0
        for index, notification in enumerate(self._notifications):
            if notification.room_id == room_id and not notification.is_read:
                self._notifications[index] = notification.mark_read()
                changed += 1
        return changed
