"""
Environmental analysis module for the Room Comfort Monitor.

This module defines the EnvironmentalAnalysis dataclass, the result produced
for every sensor reading. Its serialized form (field names and the
recommendation object shape) is what gets persisted, transmitted to
dashboards and rendered, so to_dict() must keep those names stable.
"""

from dataclasses import dataclass

from .parameter_statuses import ParameterStatus, ParameterStatuses
from .recommendation import Recommendation


@dataclass(frozen=True)
class EnvironmentalAnalysis:
    """
    Immutable analysis of one sensor reading.

    Constructed fresh for every reading and never mutated; the caller owns
    it and is responsible for persisting it.

    Attributes:
        overall_status: Worst-case aggregate status of the reading
        statuses: Per-parameter statuses the text and recommendations were built from
        analysis_text: Human-readable summary of concerns and positives
        recommendations: Remedial actions in fixed parameter order
        confidence: Certainty of the rule-based classification, in [0, 1]
    """

    overall_status: ParameterStatus
    statuses: ParameterStatuses
    analysis_text: str
    recommendations: tuple[Recommendation, ...]
    confidence: float

    @property
    def temperature_status(self) -> ParameterStatus:
        return self.statuses.temperature

    @property
    def humidity_status(self) -> ParameterStatus:
        return self.statuses.humidity

    @property
    def noise_status(self) -> ParameterStatus:
        return self.statuses.noise_level

    @property
    def light_status(self) -> ParameterStatus:
        return self.statuses.light_intensity

    @property
    def air_quality_status(self) -> ParameterStatus:
        return self.statuses.air_quality

    def to_dict(self) -> dict[str, object]:
        """
        Converts the analysis to its serializable wire shape.

        Returns:
            Dictionary with overallStatus, the five <parameter>Status keys,
            analysisText, recommendations (list of {type, message, priority,
            icon}) and confidence
        """
        return {
            "overallStatus": self.overall_status,
            "temperatureStatus": self.temperature_status,
            "humidityStatus": self.humidity_status,
            "noiseStatus": self.noise_status,
            "lightStatus": self.light_status,
            "airQualityStatus": self.air_quality_status,
            "analysisText": self.analysis_text,
            "recommendations": [rec.to_dict() for rec in self.recommendations],
            "confidence": self.confidence,
        }
