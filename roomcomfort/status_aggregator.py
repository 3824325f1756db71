"""
Status aggregator module for the Room Comfort Monitor.

This module contains the StatusAggregator class which folds the five
per-parameter statuses of a reading into one overall status.
"""

from .parameter_statuses import (
    COMFORTABLE,
    CRITICAL,
    WARNING,
    ParameterStatus,
    ParameterStatuses,
)


class StatusAggregator:
    """
    Worst-case aggregation of per-parameter statuses.
    
    A single critical parameter makes the whole room critical. Warnings only
    escalate the room once at least WARNING_THRESHOLD parameters are affected,
    so one slightly-off value does not flag an otherwise comfortable room.
    """
    
    WARNING_THRESHOLD = 2
    
    def aggregate(self, statuses: ParameterStatuses) -> ParameterStatus:
        """
        Determines the overall status of a reading.
        
        Args:
            statuses: Per-parameter statuses of the reading
        
        Returns:
            "critical" if any parameter is critical, "warning" if two or more
            parameters are warnings, otherwise "comfortable"
        """
        if statuses.has_critical():
            return CRITICAL
        if statuses.count(WARNING) >= self.WARNING_THRESHOLD:
            return WARNING
        return COMFORTABLE
