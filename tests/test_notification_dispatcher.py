"""
Tests for NotificationDispatcher component.

Tests cover:
- Equivalence classes: non-critical, critical passing the gate, critical failing it
- Boundary value analysis: sample value equal to the rate
- Inbox operations: active notifications, mark as read, mark all as read
- Configuration: rate from constructor and environment
"""

import os
from datetime import datetime
from unittest.mock import Mock, patch

import numpy as np
import pytest

from roomcomfort.analysis_record import AnalysisRecord
from roomcomfort.environmental_analyzer import analyze
from roomcomfort.notification_dispatcher import NotificationDispatcher
from roomcomfort.sensor_reading import SensorReading


def make_record(room_id=1, **values):
    reading = SensorReading(room_id=room_id, **values)
    return AnalysisRecord(timestamp=datetime.now(), reading=reading, analysis=analyze(reading))


def gate(*samples):
    """Random source returning the given samples in order."""
    rng = Mock(spec=np.random.Generator)
    rng.random.side_effect = list(samples)
    return rng


class TestNotificationDispatch:
    """Test suite for dispatch decisions."""

    # ==================== Equivalence Classes ====================

    def test_non_critical_never_notifies(self):
        """Equivalence class: Warning room → no notification, gate not consulted."""
        rng = gate()
        dispatcher = NotificationDispatcher(rate=1.0, rng=rng)

        assert dispatcher.dispatch(make_record(temperature=27.0, noise_level=60.0)) is None
        rng.random.assert_not_called()

    def test_critical_passing_gate_notifies(self):
        """Equivalence class: Critical room and sample below rate → notification."""
        dispatcher = NotificationDispatcher(rate=0.1, rng=gate(0.05))
        record = make_record(room_id=4, humidity=90.0)

        notification = dispatcher.dispatch(record)

        assert notification is not None
        assert notification.room_id == 4
        assert notification.type == "alert"
        assert notification.severity == "critical"
        assert notification.title == "Critical Environmental Condition"
        assert notification.message == record.analysis.analysis_text
        assert notification.is_read is False

    def test_critical_failing_gate_is_silent(self):
        """Equivalence class: Critical room and sample above rate → nothing."""
        dispatcher = NotificationDispatcher(rate=0.1, rng=gate(0.5))
        assert dispatcher.dispatch(make_record(humidity=90.0)) is None

    # ==================== Boundary Value Analysis ====================

    def test_sample_equal_to_rate_is_silent(self):
        """Boundary: Sample exactly at the rate does not pass."""
        dispatcher = NotificationDispatcher(rate=0.1, rng=gate(0.1))
        assert dispatcher.dispatch(make_record(humidity=90.0)) is None

    def test_rate_one_always_notifies(self):
        """Boundary: Rate 1.0 notifies every critical cycle."""
        dispatcher = NotificationDispatcher(rate=1.0, rng=np.random.default_rng(0))
        results = [dispatcher.dispatch(make_record(humidity=90.0)) for _ in range(20)]
        assert all(result is not None for result in results)

    def test_rate_zero_never_notifies(self):
        """Boundary: Rate 0.0 never notifies."""
        dispatcher = NotificationDispatcher(rate=0.0, rng=np.random.default_rng(0))
        results = [dispatcher.dispatch(make_record(humidity=90.0)) for _ in range(20)]
        assert all(result is None for result in results)

    def test_invalid_rate_rejected(self):
        """Error scenario: Rate outside [0, 1] → ValueError."""
        with pytest.raises(ValueError):
            NotificationDispatcher(rate=1.5)

    # ==================== Configuration ====================

    def test_rate_from_environment(self):
        """Rate read from ROOMCOMFORT_NOTIFICATION_RATE when not given."""
        with patch.dict(os.environ, {"ROOMCOMFORT_NOTIFICATION_RATE": "0.25"}, clear=False):
            assert NotificationDispatcher().rate == 0.25

    def test_invalid_environment_rate_falls_back(self):
        """Unusable environment value → default rate."""
        with patch.dict(os.environ, {"ROOMCOMFORT_NOTIFICATION_RATE": "often"}, clear=False):
            assert NotificationDispatcher().rate == NotificationDispatcher.DEFAULT_RATE

    def test_out_of_range_environment_rate_falls_back(self):
        with patch.dict(os.environ, {"ROOMCOMFORT_NOTIFICATION_RATE": "3"}, clear=False):
            assert NotificationDispatcher().rate == NotificationDispatcher.DEFAULT_RATE


class TestNotificationInbox:
    """Test suite for the in-memory notification inbox."""

    @pytest.fixture
    def dispatcher(self):
        """Fixture providing a dispatcher that notifies every critical cycle."""
        return NotificationDispatcher(rate=1.0, rng=np.random.default_rng(0))

    def test_ids_increment(self, dispatcher):
        first = dispatcher.dispatch(make_record(humidity=90.0))
        second = dispatcher.dispatch(make_record(humidity=90.0))
        assert (first.id, second.id) == (1, 2)

    def test_active_notifications_per_room_newest_first(self, dispatcher):
        first = dispatcher.dispatch(make_record(room_id=2, humidity=90.0))
        dispatcher.dispatch(make_record(room_id=3, humidity=90.0))
        second = dispatcher.dispatch(make_record(room_id=2, air_quality=40.0))

        active = dispatcher.active_notifications(2)
        assert [n.id for n in active] == [second.id, first.id]

    def test_mark_as_read(self, dispatcher):
        notification = dispatcher.dispatch(make_record(room_id=2, humidity=90.0))

        assert dispatcher.mark_as_read(notification.id) is True
        assert dispatcher.active_notifications(2) == []

    def test_mark_unknown_as_read(self, dispatcher):
        assert dispatcher.mark_as_read(999) is False

    def test_mark_all_as_read_only_affects_room(self, dispatcher):
        dispatcher.dispatch(make_record(room_id=2, humidity=90.0))
        dispatcher.dispatch(make_record(room_id=2, humidity=90.0))
        dispatcher.dispatch(make_record(room_id=3, humidity=90.0))

        assert dispatcher.mark_all_as_read(2) == 2
        assert dispatcher.mark_all_as_read(2) == 0
        assert dispatcher.active_notifications(2) == []
        assert len(dispatcher.active_notifications(3)) == 1

    def test_inbox_drops_oldest_when_full(self):
        """Boundary: Inbox of 3 keeps only the 3 newest notifications."""
        dispatcher = NotificationDispatcher(rate=1.0, rng=np.random.default_rng(0), max_notifications=3)
        for _ in range(5):
            dispatcher.dispatch(make_record(room_id=2, humidity=90.0))

        active = dispatcher.active_notifications(2)
        assert [n.id for n in active] == [5, 4, 3]
        assert dispatcher.mark_as_read(1) is False
        assert dispatcher.mark_as_read(4) is True

    def test_invalid_inbox_size_rejected(self):
        """Error scenario: Inbox size below 1 → ValueError."""
        with pytest.raises(ValueError):
            NotificationDispatcher(rate=0.5, max_notifications=0)

    def test_notification_to_dict(self, dispatcher):
        data = dispatcher.dispatch(make_record(room_id=2, humidity=90.0)).to_dict()
        assert data["roomId"] == 2
        assert data["severity"] == "critical"
        assert data["isRead"] is False
