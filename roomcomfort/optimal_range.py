"""
Optimal range module for the Room Comfort Monitor.

This module holds the single threshold table shared by classification, text
generation, recommendation generation and confidence estimation, along with
the neutral default values substituted for missing sensor fields.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class OptimalRange:
    """
    Inclusive [minimum, maximum] interval considered comfortable for a parameter.
    
    Attributes:
        minimum: Lower comfort bound (0 means the parameter has no lower violation)
        maximum: Upper comfort bound
        unit: Display unit for the parameter
    """
    
    minimum: float
    maximum: float
    unit: str
    
    def contains(self, value: float) -> bool:
        """Returns True if value lies within the inclusive range."""
        return self.minimum <= value <= self.maximum
    
    def width(self) -> float:
        """Returns the span of the range."""
        return self.maximum - self.minimum


# Parameter order is significant: recommendations are emitted in this order
PARAMETERS = (
    "temperature",
    "humidity",
    "noise_level",
    "light_intensity",
    "air_quality",
)

OPTIMAL_RANGES = {
    "temperature": OptimalRange(20, 25, "°C"),
    "humidity": OptimalRange(40, 60, "%"),
    "noise_level": OptimalRange(0, 50, "dB"),
    "light_intensity": OptimalRange(300, 500, "lux"),
    "air_quality": OptimalRange(0, 15, "μg/m³"),
}

# Neutral values used when a reading omits a field
DEFAULT_VALUES = {
    "temperature": 22.0,
    "humidity": 50.0,
    "noise_level": 40.0,
    "light_intensity": 300.0,
    "air_quality": 15.0,
}
