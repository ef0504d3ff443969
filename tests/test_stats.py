"""Tests for the statistics primitives."""

import math
from datetime import date

import pytest

from conftest import make_series
from runrate.engine.stats import StatisticsService
from runrate.models.snapshot import DataPoint


@pytest.fixture
def stats():
    return StatisticsService()


class TestDescriptiveStatistics:
    def test_mean(self, stats):
        assert stats.mean([2, 4, 6]) == pytest.approx(4.0)

    def test_median_odd_and_even(self, stats):
        assert stats.median([5, 1, 3]) == 3
        assert stats.median([4, 1, 3, 2]) == pytest.approx(2.5)

    def test_population_variance(self, stats):
        # mean 5, squared diffs 9,1,1,1,0,0,4,16 -> 32 / 8 = 4
        values = [2, 4, 4, 4, 5, 5, 7, 9]
        assert stats.variance(values) == pytest.approx(4.0)
        assert stats.standard_deviation(values) == pytest.approx(2.0)

    def test_empty_inputs_are_zero(self, stats):
        assert stats.mean([]) == 0
        assert stats.median([]) == 0
        assert stats.variance([]) == 0
        assert stats.standard_deviation([]) == 0

    def test_summary(self, stats):
        summary = stats.summary([1, 2, 3, 4])
        assert summary.count == 4
        assert summary.min == 1
        assert summary.max == 4
        assert summary.mean == pytest.approx(2.5)
        assert summary.median == pytest.approx(2.5)

    def test_summary_empty(self, stats):
        summary = stats.summary([])
        assert summary.count == 0
        assert summary.mean == 0.0
        assert summary.max == 0.0


class TestConfidenceInterval:
    def test_95_percent_uses_1_96(self, stats):
        values = [2, 4, 4, 4, 5, 5, 7, 9]
        ci = stats.confidence_interval(values, 0.95)
        margin = 1.96 * 2.0 / math.sqrt(8)
        assert ci.lower == pytest.approx(5 - margin)
        assert ci.upper == pytest.approx(5 + margin)
        assert ci.confidence_level == 0.95

    def test_99_percent_uses_2_576(self, stats):
        values = [2, 4, 4, 4, 5, 5, 7, 9]
        ci = stats.confidence_interval(values, 0.99)
        assert ci.upper - 5 == pytest.approx(2.576 * 2.0 / math.sqrt(8))

    def test_other_levels_use_1_645(self, stats):
        values = [2, 4, 4, 4, 5, 5, 7, 9]
        ci = stats.confidence_interval(values, 0.90)
        assert ci.upper - 5 == pytest.approx(1.645 * 2.0 / math.sqrt(8))

    def test_empty_interval_is_zero(self, stats):
        ci = stats.confidence_interval([])
        assert ci.lower == 0.0
        assert ci.upper == 0.0


class TestOutliers:
    def test_flags_extreme_value(self, stats):
        values = [10] * 20 + [100]
        results = stats.detect_outliers(values, threshold=3)
        assert results[-1].is_outlier
        assert results[-1].index == 20
        assert not any(r.is_outlier for r in results[:-1])

    def test_constant_series_has_no_outliers(self, stats):
        results = stats.detect_outliers([5, 5, 5])
        assert all(r.z_score == 0 for r in results)
        assert not any(r.is_outlier for r in results)


class TestMovingAverage:
    def test_trailing_window(self, stats):
        points = make_series([1, 2, 3, 4, 5])
        averaged = stats.moving_average(points, 3)
        assert [p.value for p in averaged] == pytest.approx([2, 3, 4])
        assert averaged[0].date == points[2].date
        assert averaged[-1].date == points[-1].date

    def test_too_few_points(self, stats):
        assert stats.moving_average(make_series([1, 2]), 3) == []


class TestLinearRegression:
    def test_perfect_line(self, stats):
        result = stats.linear_regression(make_series([10, 20, 30, 40]))
        assert result.slope == pytest.approx(10)
        assert result.intercept == pytest.approx(10)
        assert result.r_squared == pytest.approx(1)
        assert [p.value for p in result.predictions] == pytest.approx([10, 20, 30, 40])

    def test_fewer_than_two_points(self, stats):
        result = stats.linear_regression(make_series([42]))
        assert (result.slope, result.intercept, result.r_squared) == (0, 0, 0)
        assert result.predictions == []

    def test_flat_series_has_zero_r_squared(self, stats):
        result = stats.linear_regression(make_series([7, 7, 7]))
        assert result.slope == pytest.approx(0)
        assert result.r_squared == 0

    def test_uses_index_not_calendar_spacing(self, stats):
        # Same values with a gap in the dates fit identically.
        points = make_series([1, 2, 3])
        gapped = [points[0], points[1], DataPoint(date=date(2026, 3, 1), value=3)]
        assert stats.linear_regression(gapped).slope == pytest.approx(
            stats.linear_regression(points).slope
        )


class TestForecast:
    def test_extends_line_daily(self, stats):
        forecast = stats.forecast_future(make_series([10, 20, 30, 40]), 2)
        assert [p.value for p in forecast] == pytest.approx([50, 60])
        assert forecast[0].date == date(2026, 1, 5)
        assert forecast[1].date == date(2026, 1, 6)

    def test_clamps_at_zero(self, stats):
        forecast = stats.forecast_future(make_series([100, 80, 60, 40]), 5)
        assert [p.value for p in forecast] == pytest.approx([20, 0, 0, 0, 0])
        assert all(p.value >= 0 for p in forecast)

    def test_empty_series(self, stats):
        assert stats.forecast_future([], 5) == []


class TestGrowthAndCorrelation:
    def test_growth_rate_first_to_last(self, stats):
        assert stats.growth_rate(make_series([50, 500, 75])) == pytest.approx(50)

    def test_growth_rate_zero_first(self, stats):
        assert stats.growth_rate(make_series([0, 10])) == 0

    def test_growth_rate_single_point(self, stats):
        assert stats.growth_rate(make_series([10])) == 0

    def test_perfect_correlation(self, stats):
        assert stats.correlation([1, 2, 3], [2, 4, 6]) == pytest.approx(1)
        assert stats.correlation([1, 2, 3], [6, 4, 2]) == pytest.approx(-1)

    def test_correlation_uses_common_prefix(self, stats):
        assert stats.correlation([1, 2, 3, 100], [2, 4, 6]) == pytest.approx(1)

    def test_correlation_constant_series(self, stats):
        assert stats.correlation([1, 1, 1], [1, 2, 3]) == 0

    def test_coefficient_of_variation(self, stats):
        values = [2, 4, 4, 4, 5, 5, 7, 9]
        assert stats.coefficient_of_variation(values) == pytest.approx(40)

    def test_coefficient_of_variation_zero_mean(self, stats):
        assert stats.coefficient_of_variation([-1, 1]) == 0
