"""
Tests for AnalysisHistory component.

Tests cover:
- Lookups: latest, recent history, time window
- Boundary value analysis: per-room capacity
- pandas views: record frame and status summary
"""

from datetime import datetime, timedelta

import pandas as pd
import pytest

from roomcomfort.analysis_record import AnalysisRecord
from roomcomfort.environmental_analyzer import analyze
from roomcomfort.history import AnalysisHistory
from roomcomfort.sensor_reading import SensorReading

START = datetime(2024, 3, 14, 9, 0, 0)


def make_record(room_id, minute, reading_id=None, **values):
    reading = SensorReading(
        room_id=room_id,
        timestamp=START + timedelta(minutes=minute),
        reading_id=reading_id,
        **values,
    )
    return AnalysisRecord(timestamp=reading.timestamp, reading=reading, analysis=analyze(reading))


class TestAnalysisHistoryLookups:
    """Test suite for record lookups."""

    @pytest.fixture
    def history(self):
        """Fixture providing a history with three records for room 1 and one for room 2."""
        history = AnalysisHistory()
        history.add(make_record(1, 0, reading_id=1))
        history.add(make_record(2, 0, reading_id=2, humidity=90.0))
        history.add(make_record(1, 5, reading_id=3, temperature=27.0, noise_level=60.0))
        history.add(make_record(1, 10, reading_id=4, air_quality=30.0))
        return history

    def test_latest(self, history):
        assert history.latest(1).reading.reading_id == 4
        assert history.latest(2).reading.reading_id == 2

    def test_latest_unknown_room(self, history):
        assert history.latest(99) is None

    def test_for_room_newest_first(self, history):
        assert [r.reading.reading_id for r in history.for_room(1)] == [4, 3, 1]

    def test_for_room_limit(self, history):
        assert [r.reading.reading_id for r in history.for_room(1, limit=2)] == [4, 3]

    def test_between_inclusive(self, history):
        records = history.between(1, START + timedelta(minutes=5), START + timedelta(minutes=10))
        assert [r.reading.reading_id for r in records] == [3, 4]

    def test_between_rejects_reversed_window(self, history):
        with pytest.raises(ValueError):
            history.between(1, START + timedelta(minutes=10), START)

    def test_room_ids(self, history):
        assert sorted(history.room_ids()) == [1, 2]


class TestAnalysisHistoryCapacity:
    """Test suite for the per-room cap."""

    def test_oldest_dropped_when_full(self):
        """Boundary: Capacity 2 keeps the two most recent records per room."""
        history = AnalysisHistory(max_records_per_room=2)
        for minute in range(3):
            history.add(make_record(1, minute, reading_id=minute))
        history.add(make_record(2, 0, reading_id=100))

        assert [r.reading.reading_id for r in history.for_room(1)] == [2, 1]
        assert len(history.for_room(2)) == 1

    def test_invalid_capacity(self):
        with pytest.raises(ValueError):
            AnalysisHistory(max_records_per_room=0)


class TestAnalysisHistoryFrames:
    """Test suite for pandas views."""

    def test_to_frame_columns_and_rows(self):
        history = AnalysisHistory()
        history.add(make_record(1, 5, reading_id=2, temperature=27.0))
        history.add(make_record(1, 0, reading_id=1))

        frame = history.to_frame(1)

        assert list(frame.columns) == AnalysisHistory.FRAME_COLUMNS
        assert list(frame["reading_id"]) == [1, 2]
        assert frame.loc[1, "temperature"] == 27.0
        assert frame.loc[1, "temperature_status"] == "warning"
        assert frame.loc[1, "recommendations"] == "cooling"
        # Missing fields appear with their defaults
        assert frame.loc[0, "light_intensity"] == 300.0

    def test_empty_frame(self):
        frame = AnalysisHistory().to_frame()
        assert frame.empty
        assert list(frame.columns) == AnalysisHistory.FRAME_COLUMNS

    def test_status_summary(self):
        history = AnalysisHistory()
        history.add(make_record(1, 0))
        history.add(make_record(1, 1, humidity=90.0))
        history.add(make_record(2, 0, temperature=27.0, noise_level=60.0))
        history.add(make_record(2, 1, temperature=27.0, noise_level=60.0))

        summary = history.status_summary()

        assert list(summary.columns) == ["comfortable", "warning", "critical"]
        assert summary.loc[1].tolist() == [1, 0, 1]
        assert summary.loc[2].tolist() == [0, 2, 0]

    def test_empty_status_summary(self):
        summary = AnalysisHistory().status_summary()
        assert isinstance(summary, pd.DataFrame)
        assert summary.empty
