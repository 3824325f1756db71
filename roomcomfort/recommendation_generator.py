"""
Recommendation generator module for the Room Comfort Monitor.

This module contains the RecommendationGenerator class which emits at most
one remedial action per out-of-range parameter. Recommendations are produced
in fixed parameter order (temperature, humidity, noise, light, air quality)
and are deliberately not sorted by priority.
"""

from typing import Optional

from .optimal_range import OPTIMAL_RANGES, PARAMETERS, OptimalRange
from .parameter_statuses import COMFORTABLE, ParameterStatuses
from .recommendation import Recommendation
from .sensor_reading import SensorReading


HEATING = Recommendation(
    type="heating",
    message="Increase heating to raise temperature to comfortable levels",
    priority="medium",
    icon="fas fa-thermometer-full",
)
COOLING = Recommendation(
    type="cooling",
    message="Turn on air conditioning to reduce temperature",
    priority="medium",
    icon="fas fa-snowflake",
)
HUMIDIFICATION = Recommendation(
    type="humidification",
    message="Use a humidifier to increase moisture levels",
    priority="low",
    icon="fas fa-tint",
)
DEHUMIDIFICATION = Recommendation(
    type="dehumidification",
    message="Turn on dehumidifier or improve ventilation",
    priority="medium",
    icon="fas fa-fan",
)
NOISE_REDUCTION = Recommendation(
    type="noise_reduction",
    message="Implement noise reduction measures or relocate noise sources",
    priority="medium",
    icon="fas fa-volume-mute",
)
LIGHTING = Recommendation(
    type="lighting",
    message="Increase lighting by 200-300 lux for optimal comfort",
    priority="high",
    icon="fas fa-lightbulb",
)
LIGHTING_REDUCTION = Recommendation(
    type="lighting_reduction",
    message="Reduce lighting intensity or use blinds to control brightness",
    priority="low",
    icon="fas fa-adjust",
)
AIR_PURIFICATION = Recommendation(
    type="air_purification",
    message="Activate air purifier and check filter replacement",
    priority="high",
    icon="fas fa-leaf",
)


class RecommendationGenerator:
    """
    Maps out-of-range parameters onto remedial actions.

    Each entry of ACTIONS is (low-side action, high-side action). Single-sided
    parameters use the same action for both.
    """

    ACTIONS = {
        "temperature": (HEATING, COOLING),
        "humidity": (HUMIDIFICATION, DEHUMIDIFICATION),
        "noise_level": (NOISE_REDUCTION, NOISE_REDUCTION),
        "light_intensity": (LIGHTING, LIGHTING_REDUCTION),
        "air_quality": (AIR_PURIFICATION, AIR_PURIFICATION),
    }

    def __init__(self, ranges: Optional[dict[str, OptimalRange]] = None) -> None:
        self.ranges = ranges if ranges is not None else OPTIMAL_RANGES

    def recommend(
        self,
        reading: SensorReading,
        statuses: ParameterStatuses
    ) -> tuple[Recommendation, ...]:
        """
        Generates recommendations for a classified reading.

        Args:
            reading: The sensor reading (missing fields are defaulted)
            statuses: Statuses already computed for this reading

        Returns:
            Recommendations in parameter order; empty if every parameter is
            comfortable
        """
        values = reading.resolved_values()
        status_by_name = statuses.as_dict()
        recommendations = []

        for name in PARAMETERS:
            if status_by_name[name] == COMFORTABLE:
                continue

            low_action, high_action = self.ACTIONS[name]
            if values[name] < self.ranges[name].minimum:
                recommendations.append(low_action)
            else:
                recommendations.append(high_action)

        return tuple(recommendations)
