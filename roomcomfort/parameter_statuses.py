"""
Parameter statuses module for the Room Comfort Monitor.

This module defines the status vocabulary (comfortable, warning, critical)
and the ParameterStatuses dataclass which holds the classification of each of
the five parameters of one reading. The same instance feeds aggregation, text
generation and recommendation generation so they can never disagree.
"""

from dataclasses import dataclass
from typing import Literal

ParameterStatus = Literal["comfortable", "warning", "critical"]

COMFORTABLE: ParameterStatus = "comfortable"
WARNING: ParameterStatus = "warning"
CRITICAL: ParameterStatus = "critical"


@dataclass(frozen=True)
class ParameterStatuses:
    """
    Per-parameter classification of a single reading.
    
    Attributes:
        temperature: Status of the temperature measurement
        humidity: Status of the humidity measurement
        noise_level: Status of the noise measurement
        light_intensity: Status of the light measurement
        air_quality: Status of the air quality measurement
    """
    
    temperature: ParameterStatus
    humidity: ParameterStatus
    noise_level: ParameterStatus
    light_intensity: ParameterStatus
    air_quality: ParameterStatus
    
    def as_dict(self) -> dict[str, ParameterStatus]:
        """Returns the statuses keyed by parameter name, in parameter order."""
        return {
            "temperature": self.temperature,
            "humidity": self.humidity,
            "noise_level": self.noise_level,
            "light_intensity": self.light_intensity,
            "air_quality": self.air_quality,
        }
    
    def count(self, status: ParameterStatus) -> int:
        """
        Counts how many parameters have the given status.
        
        Args:
            status: One of "comfortable", "warning", "critical"
        
        Returns:
            Number of parameters classified with that status
        """
        return sum(1 for value in self.as_dict().values() if value == status)
    
    def has_critical(self) -> bool:
        """Returns True if at least one parameter is critical."""
        return self.count(CRITICAL) > 0
    
    def out_of_range(self) -> list[str]:
        """Names of the parameters that are not comfortable."""
        return [name for name, value in self.as_dict().items() if value != COMFORTABLE]
