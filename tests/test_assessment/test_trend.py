"""
Tests for talent_assessor/assessment/trend.py.

What we test
------------
build_rating_series():
  - Skips absent slots and explicit "Unrated" labels (no 0 placeholder).
  - Preserves chronological order.

trend_from_series() / analyze_trend():
  - 0 or 1 rated periods → INSUFFICIENT_DATA, consistent (vacuously).
  - Direction from the last two entries only.
  - Consistency tested over all three periods when present.
  - latest_rating is the last rated value, 0 when nothing is rated.
"""

from __future__ import annotations

import pytest

from talent_assessor.assessment.trend import (
    analyze_trend,
    build_rating_series,
    trend_from_series,
)
from talent_assessor.taxonomy.talent_taxonomy import PerformanceRating, TrendDirection

R = PerformanceRating


# ── build_rating_series ───────────────────────────────────────────────────────

class TestBuildRatingSeries:
    def test_maps_ratings_to_ordinals_in_order(self):
        series = build_rating_series([R.ACHIEVED_TARGET, R.EXCEED_TARGET, R.EXCEPTIONAL])
        assert series == (3, 4, 5)

    def test_absent_slots_are_skipped(self):
        assert build_rating_series([None, R.EXCEED_TARGET, None]) == (4,)

    def test_unrated_is_skipped_not_zero(self):
        assert build_rating_series([R.UNRATED, R.LOW_PERFORMANCE, R.UNRATED]) == (1,)

    def test_all_absent_gives_empty_series(self):
        assert build_rating_series([None, None, None]) == ()


# ── Insufficient data ─────────────────────────────────────────────────────────

class TestInsufficientData:
    @pytest.mark.parametrize("series", [(), (1,), (3,), (5,)])
    def test_short_series_is_insufficient_and_consistent(self, series):
        result = trend_from_series(series)
        assert result.direction == TrendDirection.INSUFFICIENT_DATA
        assert result.consistent is True

    def test_empty_series_latest_is_zero(self):
        assert trend_from_series(()).latest_rating == 0

    def test_single_entry_latest_is_that_entry(self):
        assert trend_from_series((4,)).latest_rating == 4

    def test_all_unrated_record_is_insufficient(self, make_record):
        record = make_record(ratings=[R.UNRATED, R.UNRATED, R.UNRATED])
        result = analyze_trend(record)
        assert result.direction == TrendDirection.INSUFFICIENT_DATA
        assert result.rating_series == ()
        assert result.latest_rating == 0


# ── Direction ─────────────────────────────────────────────────────────────────

class TestDirection:
    def test_two_point_improving(self):
        result = trend_from_series((3, 4))
        assert result.direction == TrendDirection.IMPROVING
        assert result.consistent is True

    def test_two_point_declining(self):
        result = trend_from_series((4, 2))
        assert result.direction == TrendDirection.DECLINING
        assert result.consistent is True

    def test_two_point_stable(self):
        assert trend_from_series((3, 3)).direction == TrendDirection.STABLE

    def test_direction_uses_last_two_entries_only(self):
        # 5 → 2 → 3: overall down, but the latest step is up
        assert trend_from_series((5, 2, 3)).direction == TrendDirection.IMPROVING

    def test_gap_in_middle_compares_remaining_entries(self, make_record):
        record = make_record(ratings=[R.EXCEPTIONAL, None, R.ACHIEVED_TARGET])
        result = analyze_trend(record)
        assert result.rating_series == (5, 3)
        assert result.direction == TrendDirection.DECLINING


# ── Consistency over three periods ────────────────────────────────────────────

class TestConsistency:
    @pytest.mark.parametrize("series", [(1, 2, 3), (3, 3, 4), (2, 4, 5), (1, 1, 5)])
    def test_non_decreasing_with_rise_is_consistent_improving(self, series):
        result = trend_from_series(series)
        assert result.direction == TrendDirection.IMPROVING
        assert result.consistent is True

    def test_improving_after_dip_is_variable(self):
        result = trend_from_series((5, 2, 3))
        assert result.consistent is False

    def test_declining_after_rise_is_variable(self):
        result = trend_from_series((3, 5, 2))
        assert result.direction == TrendDirection.DECLINING
        assert result.consistent is False

    def test_monotonic_decline_is_consistent(self):
        result = trend_from_series((5, 4, 2))
        assert result.direction == TrendDirection.DECLINING
        assert result.consistent is True

    def test_flat_series_is_consistent_stable(self):
        result = trend_from_series((4, 4, 4))
        assert result.direction == TrendDirection.STABLE
        assert result.consistent is True

    def test_stable_tail_after_change_is_variable(self):
        result = trend_from_series((5, 3, 3))
        assert result.direction == TrendDirection.STABLE
        assert result.consistent is False


# ── analyze_trend on records ──────────────────────────────────────────────────

class TestAnalyzeTrend:
    def test_full_improving_record(self, make_record):
        record = make_record(ratings=[R.ACHIEVED_TARGET, R.EXCEED_TARGET, R.EXCEPTIONAL])
        result = analyze_trend(record)
        assert result.direction == TrendDirection.IMPROVING
        assert result.consistent is True
        assert result.rating_series == (3, 4, 5)
        assert result.latest_rating == 5

    def test_latest_rating_skips_trailing_absent_slot(self, make_record):
        record = make_record(ratings=[R.NEED_IMPROVEMENT, R.EXCEED_TARGET, None])
        assert analyze_trend(record).latest_rating == 4

    def test_repeated_calls_are_equal(self, make_record):
        record = make_record(ratings=[R.EXCEPTIONAL, R.ACHIEVED_TARGET, R.EXCEED_TARGET])
        assert analyze_trend(record) == analyze_trend(record)

    def test_label_shows_consistency(self, make_record):
        record = make_record(ratings=[R.EXCEPTIONAL, R.ACHIEVED_TARGET, R.EXCEED_TARGET])
        assert analyze_trend(record).label == "Improving (Variable)"
