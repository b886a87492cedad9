"""Tests for the break rule policy."""

from datetime import datetime, timedelta

import pytest

from ukgroster.domain.policies import DefaultBreakRulePolicy


class TestDefaultBreakRulePolicy:
    """Tests for DefaultBreakRulePolicy."""

    @pytest.fixture
    def policy(self):
        return DefaultBreakRulePolicy()

    @pytest.fixture
    def start(self):
        return datetime(2025, 8, 11, 8, 0)

    def test_exactly_six_hours_needs_no_break(self, policy, start):
        """6.0 hours is not strictly over the threshold."""
        hours = policy.duration_hours(start, start + timedelta(hours=6))
        assert hours == 6.0
        assert policy.break_flag(hours) == "No"

    def test_just_over_six_hours_needs_break(self, policy, start):
        """6.0000001 hours requires a break."""
        end = start + timedelta(hours=6, microseconds=360)
        hours = policy.duration_hours(start, end)
        assert hours == pytest.approx(6.0000001)
        assert policy.break_flag(hours) == "Yes"

    def test_midnight_wrap(self, policy):
        """22:00 to 02:00 on the same date counts as 4 hours."""
        hours = policy.duration_hours(datetime(2025, 8, 11, 22, 0), datetime(2025, 8, 11, 2, 0))
        assert hours == 4.0
        assert policy.break_flag(hours) == "No"

    def test_overnight_instants(self, policy):
        hours = policy.duration_hours(datetime(2025, 8, 11, 23, 30), datetime(2025, 8, 12, 0, 30))
        assert hours == 1.0

    def test_wraps_only_once(self, policy, start):
        """An end more than a day before the start has no duration."""
        assert policy.duration_hours(start, start - timedelta(hours=30)) is None

    def test_long_shift_is_not_wrapped(self, policy, start):
        hours = policy.duration_hours(start, start + timedelta(hours=30))
        assert hours == 30.0
        assert policy.is_break_required(hours) is True

    def test_zero_length(self, policy, start):
        assert policy.duration_hours(start, start) == 0.0

    def test_custom_threshold(self, start):
        policy = DefaultBreakRulePolicy(threshold_hours=5.0)
        assert policy.break_flag(5.5) == "Yes"
        assert policy.break_flag(5.0) == "No"
