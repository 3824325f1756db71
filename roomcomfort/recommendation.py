"""
Recommendation module for the Room Comfort Monitor.

This module defines the Recommendation dataclass, a single remedial action
tied to one out-of-range parameter. Dashboards key icon selection and
priority coloring off the type and priority strings, so their values are part
of the external contract.
"""

from dataclasses import dataclass
from typing import Literal

Priority = Literal["low", "medium", "high"]


@dataclass(frozen=True)
class Recommendation:
    """
    A suggested action for an out-of-range parameter.
    
    Attributes:
        type: Action tag, e.g. "heating", "dehumidification", "air_purification"
        message: Human-readable instruction
        priority: One of "low", "medium", "high"
        icon: Font Awesome icon class used by UI collaborators
    """
    
    type: str
    message: str
    priority: Priority
    icon: str
    
    def to_dict(self) -> dict[str, str]:
        """Returns the {type, message, priority, icon} wire shape."""
        return {
            "type": self.type,
            "message": self.message,
            "priority": self.priority,
            "icon": self.icon,
        }
