"""
Sensor reading module for the Room Comfort Monitor.

This module defines the SensorReading dataclass which represents one
timestamped snapshot of the five environmental measurements taken in a room
(temperature, humidity, noise, light, air quality). Every measurement is
optional; missing values are replaced by the neutral defaults before
classification. It also defines the InvalidReading error raised when a
reading carries values that cannot be classified.
"""

import math
from dataclasses import dataclass
from datetime import datetime
from numbers import Real
from typing import Optional

from .optimal_range import DEFAULT_VALUES, PARAMETERS


class InvalidReading(ValueError):
    """Raised when a sensor reading contains a non-numeric, NaN or infinite value."""


@dataclass(frozen=True)
class SensorReading:
    """
    Represents one snapshot of environmental sensor readings for a room.

    Attributes:
        room_id: Identifier of the room the reading was taken in
        temperature: Temperature in Celsius, or None if not measured
        humidity: Relative humidity in percent, or None if not measured
        noise_level: Noise level in decibels, or None if not measured
        light_intensity: Light intensity in lux, or None if not measured
        air_quality: PM2.5 concentration in μg/m³, or None if not measured
        timestamp: Optional timestamp when the reading was collected
        reading_id: Optional identifier assigned by the ingestion side
    """

    room_id: Optional[int] = None
    temperature: Optional[float] = None
    humidity: Optional[float] = None
    noise_level: Optional[float] = None
    light_intensity: Optional[float] = None
    air_quality: Optional[float] = None
    timestamp: Optional[datetime] = None
    reading_id: Optional[int] = None

    def validate(self) -> tuple[bool, Optional[str]]:
        """
        Validates every present measurement.

        Checks that each field which is not None is a real number (booleans
        excluded) that is finite as a float. Missing fields are always valid since they
        are replaced by defaults.

        Returns:
            A tuple containing:
            - bool: True if all validations pass, False otherwise
            - Optional[str]: None if valid, or a descriptive error message if invalid
        """
        for name in PARAMETERS:
            value = getattr(self, name)
            if value is None:
                continue

            if isinstance(value, bool) or not isinstance(value, Real):
                return (False, f"{name} must be a real number, got {type(value).__name__}")

            # Huge ints and Fractions overflow on conversion to float
            try:
                finite = math.isfinite(value)
            except OverflowError:
                return (False, f"{name} is too large to classify")

            if not finite:
                return (False, f"{name} must be finite, got {value}")

        return (True, None)

    def resolved_values(self) -> dict[str, float]:
        """
        Returns all five measurements with defaults applied.

        Only None counts as missing; a measured 0 is kept as 0.

        Returns:
            Dictionary mapping parameter name to its (defaulted) value
        """
        values = {}
        for name in PARAMETERS:
            value = getattr(self, name)
            values[name] = DEFAULT_VALUES[name] if value is None else float(value)
        return values

    def missing_fields(self) -> list[str]:
        """Names of the measurements that were not supplied."""
        return [name for name in PARAMETERS if getattr(self, name) is None]

    def to_dict(self) -> dict[str, object]:
        """Converts the reading to a serializable dictionary."""
        return {
            "readingId": self.reading_id,
            "roomId": self.room_id,
            "temperature": self.temperature,
            "humidity": self.humidity,
            "noiseLevel": self.noise_level,
            "lightIntensity": self.light_intensity,
            "airQuality": self.air_quality,
            "timestamp": self.timestamp.isoformat() if self.timestamp else None,
        }
