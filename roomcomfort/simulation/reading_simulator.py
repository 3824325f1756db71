"""
Reading simulator module for the Room Comfort Monitor.

This module contains the ReadingSimulator class which stands in for real
sensors. It draws base values from the room's profile, then adds slow
sinusoidal drift to temperature and humidity and small random noise to every
measurement.
"""

import math
from datetime import datetime
from typing import Callable, Optional

import numpy as np

from ..sensor_reading import SensorReading
from .room_profiles import profile_for_room


class ReadingSimulator:
    """
    Generates simulated sensor readings per room.
    
    Readings get consecutive reading ids starting at 1. Pass a seeded
    generator for reproducible sequences.
    """
    
    # Drift periods in milliseconds and amplitudes
    TEMPERATURE_DRIFT_PERIOD_MS = 1_000_000
    TEMPERATURE_DRIFT_AMPLITUDE = 1.0
    HUMIDITY_DRIFT_PERIOD_MS = 1_200_000
    HUMIDITY_DRIFT_AMPLITUDE = 2.0
    
    def __init__(
        self,
        rng: Optional[np.random.Generator] = None,
        clock: Optional[Callable[[], datetime]] = None
    ) -> None:
        """
        Initialize the simulator.
        
        Args:
            rng: Random source. If None, a fresh unseeded generator is used.
            clock: Returns the timestamp for new readings. Defaults to datetime.now.
        """
        self.rng = rng if rng is not None else np.random.default_rng()
        self.clock = clock or datetime.now
        self._next_reading_id = 1
    
    def simulate(self, room_id: int) -> SensorReading:
        """
        Produces one reading for a room.
        
        Args:
            room_id: Room to simulate; selects the room profile
        
        Returns:
            A fully populated SensorReading
        """
        timestamp = self.clock()
        values = profile_for_room(room_id).base_values(self.rng)
        
        epoch_ms = timestamp.timestamp() * 1000
        temperature_drift = math.sin(epoch_ms / self.TEMPERATURE_DRIFT_PERIOD_MS) * self.TEMPERATURE_DRIFT_AMPLITUDE
        humidity_drift = math.sin(epoch_ms / self.HUMIDITY_DRIFT_PERIOD_MS) * self.HUMIDITY_DRIFT_AMPLITUDE
        
        reading = SensorReading(
            room_id=room_id,
            temperature=float(values["temperature"] + temperature_drift + (self.rng.random() - 0.5) * 0.5),
            humidity=float(values["humidity"] + humidity_drift + (self.rng.random() - 0.5) * 1),
            noise_level=float(values["noise_level"] + self.rng.random() * 5),
            light_intensity=float(values["light_intensity"] + self.rng.random() * 50),
            air_quality=float(values["air_quality"] + self.rng.random() * 2),
            timestamp=timestamp,
            reading_id=self._next_reading_id,
        )
        self._next_reading_id += 1
        return reading
