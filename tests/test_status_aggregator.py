"""
Tests for StatusAggregator component.

Tests cover:
- Equivalence classes: all comfortable, single warning, several warnings, any critical
- Boundary value analysis: warning count threshold (1 vs 2)
"""

import pytest

from roomcomfort.parameter_statuses import COMFORTABLE, CRITICAL, WARNING, ParameterStatuses
from roomcomfort.status_aggregator import StatusAggregator


def make_statuses(**overrides):
    statuses = {
        "temperature": COMFORTABLE,
        "humidity": COMFORTABLE,
        "noise_level": COMFORTABLE,
        "light_intensity": COMFORTABLE,
        "air_quality": COMFORTABLE,
    }
    statuses.update(overrides)
    return ParameterStatuses(**statuses)


class TestStatusAggregator:
    """Test suite for overall status aggregation."""

    @pytest.fixture
    def aggregator(self):
        """Fixture providing a StatusAggregator instance."""
        return StatusAggregator()

    # ==================== Equivalence Classes ====================

    def test_all_comfortable(self, aggregator):
        """Equivalence class: No issues → comfortable."""
        assert aggregator.aggregate(make_statuses()) == COMFORTABLE

    @pytest.mark.parametrize("name", [
        "temperature", "humidity", "noise_level", "light_intensity", "air_quality"
    ])
    def test_single_critical_forces_critical(self, aggregator, name):
        """Any one critical parameter → critical, whichever it is."""
        assert aggregator.aggregate(make_statuses(**{name: CRITICAL})) == CRITICAL

    def test_critical_beats_warnings(self, aggregator):
        """Critical plus warnings → critical."""
        statuses = make_statuses(temperature=WARNING, humidity=WARNING, air_quality=CRITICAL)
        assert aggregator.aggregate(statuses) == CRITICAL

    def test_all_warnings(self, aggregator):
        """Five warnings, no critical → warning."""
        statuses = ParameterStatuses(WARNING, WARNING, WARNING, WARNING, WARNING)
        assert aggregator.aggregate(statuses) == WARNING

    # ==================== Boundary Value Analysis ====================

    def test_single_warning_stays_comfortable(self, aggregator):
        """Boundary: One warning → comfortable."""
        assert aggregator.aggregate(make_statuses(noise_level=WARNING)) == COMFORTABLE

    def test_two_warnings_is_warning(self, aggregator):
        """Boundary: Two warnings → warning, not critical."""
        statuses = make_statuses(temperature=WARNING, noise_level=WARNING)
        assert aggregator.aggregate(statuses) == WARNING


class TestParameterStatuses:
    """Test suite for the ParameterStatuses helpers."""

    def test_count(self):
        statuses = make_statuses(temperature=WARNING, light_intensity=WARNING, air_quality=CRITICAL)
        assert statuses.count(WARNING) == 2
        assert statuses.count(CRITICAL) == 1
        assert statuses.count(COMFORTABLE) == 2

    def test_out_of_range_in_parameter_order(self):
        statuses = make_statuses(air_quality=CRITICAL, temperature=WARNING)
        assert statuses.out_of_range() == ["temperature", "air_quality"]

    def test_has_critical(self):
        assert make_statuses(humidity=CRITICAL).has_critical() is True
        assert make_statuses(humidity=WARNING).has_critical() is False
