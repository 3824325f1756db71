"""
Room module for the Room Comfort Monitor.

This module defines the Room dataclass and the default set of monitored rooms
used when no rooms are configured.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Room:
    """
    A monitored room.
    
    Attributes:
        id: Room identifier, carried on every sensor reading
        name: Display name
        description: Optional free-text description
        icon: Font Awesome icon class used by UI collaborators
        is_active: Inactive rooms are skipped by the monitor
    """
    
    id: int
    name: str
    description: Optional[str] = None
    icon: str = "fas fa-home"
    is_active: bool = True


DEFAULT_ROOMS = (
    Room(1, "Conference Room A", "Main conference room for meetings", "fas fa-users"),
    Room(2, "Office Floor 1", "General office workspace", "fas fa-building"),
    Room(3, "Lab Room", "Research and development laboratory", "fas fa-flask"),
    Room(4, "Meeting Room B", "Small meeting room for team discussions", "fas fa-handshake"),
)
