"""
Confidence module for the Room Comfort Monitor.

This module contains the ConfidenceEstimator class which scores how certain
the rule-based classification of a reading is. A value sitting right on a
comfort bound, or right on the critical deviation threshold, could flip status
with a small measurement error; a value well inside a band cannot.

The estimate:
- For each parameter, compute a margin in [0, 1]: the distance to the nearest
  decision threshold divided by a quarter of the range width (or, for the
  critical threshold, by a quarter of the critical deviation)
- Average the five margins
- Map the average onto [CONFIDENCE_FLOOR, 1.0]
"""

from typing import Optional

import numpy as np

from .optimal_range import OPTIMAL_RANGES, OptimalRange
from .parameter_classifier import ParameterClassifier


class ConfidenceEstimator:
    """
    Deterministic confidence score for a classified reading.

    Identical inputs always produce identical confidence. The score never
    drops below CONFIDENCE_FLOOR.
    """

    CONFIDENCE_FLOOR = 0.6

    # Fraction of the range width over which a margin grows from 0 to 1
    MARGIN_FRACTION = 0.25

    def __init__(self, ranges: Optional[dict[str, OptimalRange]] = None) -> None:
        self.ranges = ranges if ranges is not None else OPTIMAL_RANGES

    def _margin(self, value: float, optimal: OptimalRange) -> float:
        """
        Margin between a value and its nearest decision threshold.

        A zero lower bound is not a decision threshold for in-range values.
        """
        scale = self.MARGIN_FRACTION * optimal.width()

        if optimal.contains(value):
            distances = [optimal.maximum - value]
            if optimal.minimum != 0:
                distances.append(value - optimal.minimum)
            return min(distances) / scale

        if value < optimal.minimum:
            comfort_distance = optimal.minimum - value
        else:
            comfort_distance = value - optimal.maximum

        critical = ParameterClassifier.CRITICAL_DEVIATION
        deviation = ParameterClassifier.deviation(value, optimal.minimum, optimal.maximum)
        critical_distance = abs(deviation - critical) / (self.MARGIN_FRACTION * critical)

        return min(comfort_distance / scale, critical_distance)

    def estimate(self, values: dict[str, float]) -> float:
        """
        Computes the confidence for a set of (defaulted) parameter values.

        Args:
            values: Mapping of parameter name to value

        Returns:
            Confidence in [CONFIDENCE_FLOOR, 1.0], rounded to 4 decimals
        """
        margins = np.array([
            self._margin(value, self.ranges[name])
            for name, value in values.items()
        ], dtype=float)

        if margins.size == 0:
            return 1.0

        certainty = float(np.clip(margins, 0.0, 1.0).mean())
        confidence = self.CONFIDENCE_FLOOR + (1.0 - self.CONFIDENCE_FLOOR) * certainty
        return round(confidence, 4)
