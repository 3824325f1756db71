"""
Notification module for the Room Comfort Monitor.

This module defines the Notification dataclass raised for rooms in a critical
environmental condition.
"""

from dataclasses import dataclass, replace
from datetime import datetime


@dataclass(frozen=True)
class Notification:
    """
    An alert about a room.
    
    Attributes:
        id: Notification identifier, unique within a dispatcher
        room_id: Room the notification is about
        type: Notification kind ("alert", "warning", "info")
        title: Short headline
        message: Body text, usually the analysis text
        severity: One of "low", "medium", "high", "critical"
        timestamp: When the notification was raised
        is_read: Whether an operator has acknowledged it
    """
    
    id: int
    room_id: int
    type: str
    title: str
    message: str
    severity: str
    timestamp: datetime
    is_read: bool = False
    
    def mark_read(self) -> "Notification":
        """Returns a copy of this notification flagged as read."""
        return replace(self, is_read=True)
    
    def to_dict(self) -> dict[str, object]:
        """Converts the notification to a serializable dictionary."""
        return {
            "id": self.id,
            "roomId": self.room_id,
            "type": self.type,
            "title": self.title,
            "message": self.message,
            "severity": self.severity,
            "timestamp": self.timestamp.isoformat(),
            "isRead": self.is_read,
        }
