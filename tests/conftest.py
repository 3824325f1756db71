"""
Pytest configuration for Room Comfort Monitor tests.

Provides shared fixtures.
"""

from datetime import datetime

import pytest

from roomcomfort.environmental_analyzer import EnvironmentalAnalyzer
from roomcomfort.sensor_reading import SensorReading


@pytest.fixture
def analyzer():
    """Fixture providing the default rule-based analyzer."""
    return EnvironmentalAnalyzer()


@pytest.fixture
def fixed_time():
    """Fixture providing a fixed timestamp."""
    return datetime(2024, 3, 14, 9, 30, 0)


@pytest.fixture
def optimal_reading(fixed_time):
    """Fixture providing a reading with every parameter well inside its range."""
    return SensorReading(
        room_id=1,
        temperature=22.0,
        humidity=50.0,
        noise_level=35.0,
        light_intensity=400.0,
        air_quality=8.0,
        timestamp=fixed_time,
        reading_id=101,
    )
