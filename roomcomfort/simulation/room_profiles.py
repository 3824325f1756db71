"""
Room profiles module for the Room Comfort Monitor simulation.

Each profile draws the base values of one simulated reading for a room before
drift and noise are added. The profiles reproduce four typical situations:
- a well-controlled room with small fluctuations,
- rooms where each parameter independently goes out of range with a given
  probability,
- a room that always shows one of a few multi-issue combinations.
"""

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class NormalProfile:
    """Values fluctuate uniformly around comfortable base values."""
    
    def base_values(self, rng: np.random.Generator) -> dict[str, float]:
        return {
            "temperature": 22 + (rng.random() - 0.5) * 2,  # 21-23 °C
            "humidity": 50 + (rng.random() - 0.5) * 4,  # 48-52 %
            "noise_level": 35 + (rng.random() - 0.5) * 4,  # 33-37 dB
            "light_intensity": 350 + (rng.random() - 0.5) * 20,  # 340-360 lux
            "air_quality": 8 + (rng.random() - 0.5) * 2,  # 7-9 μg/m³
        }


@dataclass(frozen=True)
class RandomIssueProfile:
    """
    Each parameter independently has issue_probability of being out of range.
    
    Two-sided parameters pick their high or low issue value with equal chance.
    
    Attributes:
        issue_probability: Chance per parameter of an issue
        temperature: (too hot, too cold) values
        humidity: (too humid, too dry) values
        noise_level: Noisy value
        light_intensity: (too bright, too dim) values
        air_quality: Polluted value
    """
    
    issue_probability: float
    temperature: tuple[float, float]
    humidity: tuple[float, float]
    noise_level: float
    light_intensity: tuple[float, float]
    air_quality: float
    
    def _pick(self, rng: np.random.Generator, sides: tuple[float, float]) -> float:
        return sides[0] if rng.random() < 0.5 else sides[1]
    
    def base_values(self, rng: np.random.Generator) -> dict[str, float]:
        p = self.issue_probability
        return {
            "temperature": self._pick(rng, self.temperature) if rng.random() < p else 22,
            "humidity": self._pick(rng, self.humidity) if rng.random() < p else 50,
            "noise_level": self.noise_level if rng.random() < p else 35,
            "light_intensity": self._pick(rng, self.light_intensity) if rng.random() < p else 350,
            "air_quality": self.air_quality if rng.random() < p else 8,
        }


@dataclass(frozen=True)
class MultiIssueProfile:
    """Always one of the combinations, chosen uniformly."""
    
    combinations: tuple[dict[str, float], ...]
    
    def base_values(self, rng: np.random.Generator) -> dict[str, float]:
        index = int(rng.integers(len(self.combinations)))
        return dict(self.combinations[index])


NORMAL_PROFILE = NormalProfile()

ROOM_PROFILES = {
    1: NORMAL_PROFILE,
    2: RandomIssueProfile(
        issue_probability=0.5,
        temperature=(28, 18),
        humidity=(75, 35),
        noise_level=65,
        light_intensity=(800, 200),
        air_quality=25,
    ),
    3: RandomIssueProfile(
        issue_probability=0.3,
        temperature=(27, 19),
        humidity=(70, 40),
        noise_level=60,
        light_intensity=(750, 250),
        air_quality=20,
    ),
    4: MultiIssueProfile(combinations=(
        # Temperature and humidity
        {"temperature": 30, "humidity": 75, "noise_level": 35, "light_intensity": 350, "air_quality": 8},
        # Noise and light
        {"temperature": 22, "humidity": 50, "noise_level": 70, "light_intensity": 900, "air_quality": 8},
        # Air quality and temperature
        {"temperature": 29, "humidity": 50, "noise_level": 35, "light_intensity": 350, "air_quality": 30},
        # Everything at once
        {"temperature": 28, "humidity": 70, "noise_level": 65, "light_intensity": 800, "air_quality": 25},
    )),
}


def profile_for_room(room_id: int):
    """Returns the profile of a room; rooms without one behave normally."""
    return ROOM_PROFILES.get(room_id, NORMAL_PROFILE)
