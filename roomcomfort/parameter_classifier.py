"""
Parameter classifier module for the Room Comfort Monitor.

This module contains the ParameterClassifier class which maps a single
measurement onto comfortable, warning or critical by comparing it against the
parameter's optimal range. Values inside the range are comfortable; values
outside are critical when their relative deviation from the range bounds
exceeds 50%, and a warning otherwise.
"""

from typing import Optional

from .optimal_range import OPTIMAL_RANGES, OptimalRange
from .parameter_statuses import (
    COMFORTABLE,
    CRITICAL,
    WARNING,
    ParameterStatus,
    ParameterStatuses,
)


class ParameterClassifier:
    """
    Pure rule-based classifier for individual environmental parameters.
    
    Holds no state besides the (immutable) range table, so one instance can be
    shared between threads.
    """
    
    # Relative deviation above which an out-of-range value is critical
    CRITICAL_DEVIATION = 0.5
    
    def __init__(self, ranges: Optional[dict[str, OptimalRange]] = None) -> None:
        self.ranges = ranges if ranges is not None else OPTIMAL_RANGES
    
    @staticmethod
    def deviation(value: float, minimum: float, maximum: float) -> float:
        """
        Computes the relative deviation of a value from the range bounds.
        
        The deviation is max(|value - min| / min, |value - max| / max). A bound
        of zero has no meaningful relative violation, so its ratio is taken as
        0 and only the other bound contributes.
        
        Args:
            value: Measured value
            minimum: Lower comfort bound
            maximum: Upper comfort bound
        
        Returns:
            Non-negative relative deviation
        """
        lower_ratio = abs(value - minimum) / minimum if minimum != 0 else 0.0
        upper_ratio = abs(value - maximum) / maximum if maximum != 0 else 0.0
        return max(lower_ratio, upper_ratio)
    
    def classify(self, value: float, minimum: float, maximum: float) -> ParameterStatus:
        """
        Classifies a single value against an inclusive [minimum, maximum] range.
        
        Args:
            value: Measured value
            minimum: Lower comfort bound
            maximum: Upper comfort bound
        
        Returns:
            "comfortable" if minimum <= value <= maximum, otherwise "critical"
            if the deviation exceeds CRITICAL_DEVIATION, else "warning"
        """
        if minimum <= value <= maximum:
            return COMFORTABLE
        
        if self.deviation(value, minimum, maximum) > self.CRITICAL_DEVIATION:
            return CRITICAL
        return WARNING
    
    def classify_values(self, values: dict[str, float]) -> ParameterStatuses:
        """
        Classifies all five (already defaulted) parameter values.
        
        Args:
            values: Mapping of parameter name to value, as returned by
                    SensorReading.resolved_values()
        
        Returns:
            ParameterStatuses with one status per parameter
        """
        statuses = {}
        for name, value in values.items():
            optimal = self.ranges[name]
            statuses[name] = self.classify(value, optimal.minimum, optimal.maximum)
        return ParameterStatuses(**statuses)


def classify(value: float, minimum: float, maximum: float) -> ParameterStatus:
    """Module-level shortcut for ParameterClassifier().classify()."""
    return ParameterClassifier().classify(value, minimum, maximum)
