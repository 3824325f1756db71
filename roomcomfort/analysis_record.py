"""
Analysis record module for the Room Comfort Monitor.

This module defines the AnalysisRecord dataclass which pairs a sensor reading
with the analysis produced from it. Records keep every analysis traceable to
the exact reading (room, reading id and timestamp) that produced it, and are
what the monitor hands to history, logging and notifications.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from .environmental_analysis import EnvironmentalAnalysis
from .sensor_reading import SensorReading


@dataclass(frozen=True)
class AnalysisRecord:
    """
    A single analysis cycle for one room.

    Attributes:
        timestamp: When the analysis was made
        reading: The sensor reading used as input
        analysis: The analysis produced for that reading
    """

    timestamp: datetime
    reading: SensorReading
    analysis: EnvironmentalAnalysis

    @property
    def room_id(self) -> Optional[int]:
        return self.reading.room_id

    def to_dict(self) -> dict[str, object]:
        """
        Converts the record to a serializable dictionary.

        The analysis fields are flattened next to the reading identity so an
        outside store can persist the record as one row.

        Returns:
            A dictionary with roomId, sensorReadingId, readingTimestamp,
            timestamp, the reading values and all analysis fields
        """
        record = {
            "roomId": self.reading.room_id,
            "sensorReadingId": self.reading.reading_id,
            "readingTimestamp": self.reading.timestamp.isoformat() if self.reading.timestamp else None,
            "timestamp": self.timestamp.isoformat(),
            "reading": self.reading.to_dict(),
        }
        record.update(self.analysis.to_dict())
        return record
