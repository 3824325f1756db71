"""
Analysis text module for the Room Comfort Monitor.

This module contains the AnalysisTextGenerator class which turns the
per-parameter statuses of a reading into one human-readable paragraph listing
current concerns followed by the parameters that are fine.
"""

from typing import Optional

from .optimal_range import OPTIMAL_RANGES, OptimalRange
from .parameter_statuses import COMFORTABLE, ParameterStatuses
from .sensor_reading import SensorReading


class AnalysisTextGenerator:
    """
    Builds the analysis sentence for a classified reading.

    Phrases per parameter are (low issue, high issue, positive). Noise and air
    quality only have upper limits in practice, so both issue phrases are the
    same for them.
    """

    PHRASES = {
        "temperature": (
            "temperature is too low",
            "temperature is too high",
            "temperature is comfortable",
        ),
        "humidity": (
            "air is too dry",
            "humidity levels are too high",
            "humidity levels are optimal",
        ),
        "noise_level": (
            "noise levels exceed comfortable ranges",
            "noise levels exceed comfortable ranges",
            "noise levels are acceptable",
        ),
        "light_intensity": (
            "lighting is insufficient",
            "lighting is too bright",
            "lighting conditions are optimal",
        ),
        "air_quality": (
            "air quality needs improvement",
            "air quality needs improvement",
            "air quality is good",
        ),
    }

    CONCERNS_PREFIX = "Current concerns: "
    ISSUE_JOINER = ", "
    POSITIVE_JOINER = " and "
    FALLBACK_TEXT = "Environmental conditions are being monitored."

    def __init__(self, ranges: Optional[dict[str, OptimalRange]] = None) -> None:
        self.ranges = ranges if ranges is not None else OPTIMAL_RANGES

    def describe(self, reading: SensorReading, statuses: ParameterStatuses) -> str:
        """
        Generates the analysis text for a reading.

        Args:
            reading: The sensor reading (missing fields are defaulted)
            statuses: Statuses already computed for this reading

        Returns:
            "Current concerns: a, b." followed by "c and d." for the
            comfortable parameters, separated by a single space
        """
        values = reading.resolved_values()
        issues = []
        positives = []

        for name, status in statuses.as_dict().items():
            low_phrase, high_phrase, positive_phrase = self.PHRASES[name]
            if status == COMFORTABLE:
                positives.append(positive_phrase)
            elif values[name] < self.ranges[name].minimum:
                issues.append(low_phrase)
            else:
                issues.append(high_phrase)

        sentences = []
        if issues:
            sentences.append(f"{self.CONCERNS_PREFIX}{self.ISSUE_JOINER.join(issues)}.")
        if positives:
            sentences.append(f"{self.POSITIVE_JOINER.join(positives)}.")

        if not sentences:
            return self.FALLBACK_TEXT
        return " ".join(sentences)
