"""
Analysis history module for the Room Comfort Monitor.

This module contains the AnalysisHistory class, a bounded in-memory store of
analysis records per room. It answers the lookups dashboards need (latest
analysis, recent history, a time window) and provides pandas views for
tables and charts. Durable storage is left to the caller, which can persist
AnalysisRecord.to_dict() however it likes.
"""

from collections import deque
from datetime import datetime
from typing import Optional

import pandas as pd

from .analysis_record import AnalysisRecord
from .optimal_range import PARAMETERS


class AnalysisHistory:
    """
    Per-room ring buffer of analysis records, oldest first.

    Only the most recent max_records_per_room records of each room are kept.
    """

    DEFAULT_MAX_RECORDS = 50

    FRAME_COLUMNS = (
        ["timestamp", "room_id", "reading_id"]
        + list(PARAMETERS)
        + ["overall_status"]
        + [f"{name}_status" for name in PARAMETERS]
        + ["confidence", "recommendations"]
    )

    def __init__(self, max_records_per_room: int = DEFAULT_MAX_RECORDS) -> None:
        if max_records_per_room < 1:
            raise ValueError("max_records_per_room must be >= 1")
        self.max_records_per_room = max_records_per_room
        self._records: dict[Optional[int], deque] = {}

    def add(self, record: AnalysisRecord) -> None:
        """Stores a record, dropping the oldest record of its room if full."""
        if record.room_id not in self._records:
            self._records[record.room_id] = deque(maxlen=self.max_records_per_room)
        self._records[record.room_id].append(record)

    def room_ids(self) -> list[Optional[int]]:
        return list(self._records.keys())

    def latest(self, room_id: int) -> Optional[AnalysisRecord]:
        """Most recent record for a room, or None if the room has none."""
        records = self._records.get(room_id)
        if not records:
            return None
        return records[-1]

    def for_room(self, room_id: int, limit: Optional[int] = None) -> list[AnalysisRecord]:
        """
        Recent records for a room, newest first.

        Args:
            room_id: Room to look up
            limit: Maximum number of records to return; None returns all

        Returns:
            List of records, newest first
        """
        records = list(reversed(self._records.get(room_id, ())))
        if limit is not None:
            records = records[:limit]
        return records

    def between(self, room_id: int, start: datetime, end: datetime) -> list[AnalysisRecord]:
        """
        Records of a room whose reading was taken within [start, end], oldest first.

        The reading timestamp is used when present, otherwise the analysis time.

        Raises:
            ValueError: If start is after end
        """
        if start > end:
            raise ValueError("start must not be after end")

        return [
            record for record in self._records.get(room_id, ())
            if start <= (record.reading.timestamp or record.timestamp) <= end
        ]

    def to_frame(self, room_id: Optional[int] = None) -> pd.DataFrame:
        """
        Flattens records into a DataFrame, one row per record, oldest first.

        Reading values are the defaulted values the analysis was computed from.

        Args:
            room_id: Restrict to one room; None includes every room

        Returns:
            DataFrame with FRAME_COLUMNS
        """
        if room_id is None:
            records = [record for records in self._records.values() for record in records]
        else:
            records = list(self._records.get(room_id, ()))

        rows = []
        for record in records:
            analysis = record.analysis
            row = {
                "timestamp": record.reading.timestamp or record.timestamp,
                "room_id": record.room_id,
                "reading_id": record.reading.reading_id,
            }
            row.update(record.reading.resolved_values())
            row["overall_status"] = analysis.overall_status
            for name, status in analysis.statuses.as_dict().items():
                row[f"{name}_status"] = status
            row["confidence"] = analysis.confidence
            row["recommendations"] = ", ".join(rec.type for rec in analysis.recommendations)
            rows.append(row)

        frame = pd.DataFrame(rows, columns=self.FRAME_COLUMNS)
        if not frame.empty:
            frame = frame.sort_values("timestamp", kind="stable").reset_index(drop=True)
        return frame

    def status_summary(self) -> pd.DataFrame:
        """
        Counts overall statuses per room.

        Returns:
            DataFrame indexed by room_id with integer columns comfortable,
            warning and critical
        """
        columns = ["comfortable", "warning", "critical"]
        frame = self.to_frame()
        if frame.empty:
            return pd.DataFrame(columns=columns, dtype=int)

        summary = pd.crosstab(frame["room_id"], frame["overall_status"])
        summary = summary.reindex(columns=columns, fill_value=0).astype(int)
        summary.columns.name = None
        return summary
