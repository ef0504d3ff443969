"""Unit tests for the agent and study projection formulas."""

import pytest

from conftest import make_variables
from runrate.engine.projections import (
    calculate_agent_projections,
    calculate_fte,
    calculate_study_metrics,
)
from runrate.models.study import StudyInputs


class TestAgentProjections:
    def test_basic_calculation(self):
        # 50 min saved x 1000 uses / 60 = 833.33 h; x $25 = $20,833.33
        result = calculate_agent_projections(make_variables())
        assert result.time_saved_per_use_minutes == pytest.approx(50)
        assert result.annual_time_saved_hours == pytest.approx(833.3333, rel=1e-6)
        assert result.annual_cost_savings == pytest.approx(20_833.333, rel=1e-6)
        assert result.fte_equivalent == pytest.approx(833.3333 / 2080, rel=1e-6)

    def test_discount_halves_usage(self):
        full = calculate_agent_projections(make_variables(usage_discount_percent=0))
        half = calculate_agent_projections(make_variables(usage_discount_percent=50))
        assert half.annual_time_saved_hours == pytest.approx(
            full.annual_time_saved_hours / 2
        )

    def test_custom_hours_per_year(self):
        result = calculate_agent_projections(make_variables(), hours_per_year=1800)
        assert result.fte_equivalent == pytest.approx(833.3333 / 1800, rel=1e-6)

    def test_slower_with_agent_goes_negative(self):
        result = calculate_agent_projections(
            make_variables(avg_time_without_agent_minutes=10, avg_time_with_agent_minutes=15)
        )
        assert result.time_saved_per_use_minutes == -5
        assert result.annual_time_saved_hours < 0
        assert result.annual_cost_savings < 0
        assert result.fte_equivalent < 0

    def test_idempotent(self):
        variables = make_variables(avg_usage_count=1234, usage_discount_percent=17)
        assert calculate_agent_projections(variables) == calculate_agent_projections(variables)

    def test_zero_usage(self):
        result = calculate_agent_projections(make_variables(avg_usage_count=0))
        assert result.annual_time_saved_hours == 0
        assert result.annual_cost_savings == 0


class TestStudyMetrics:
    def test_reference_study(self):
        result = calculate_study_metrics(
            StudyInputs(
                time_without_ai_minutes=60,
                time_with_ai_minutes=15,
                usage_count=100,
                usage_discount_percent=50,
                cost_per_hour=30,
            )
        )
        assert result.time_saved_minutes == pytest.approx(45)
        assert result.net_usage == pytest.approx(50)
        assert result.net_time_saved_hours == pytest.approx(37.5)
        assert result.potential_savings == pytest.approx(1125)

    def test_full_discount_saves_nothing(self):
        result = calculate_study_metrics(
            StudyInputs(
                time_without_ai_minutes=60,
                time_with_ai_minutes=15,
                usage_count=100,
                usage_discount_percent=100,
                cost_per_hour=30,
            )
        )
        assert result.net_usage == 0
        assert result.potential_savings == 0


class TestFTE:
    def test_default_work_year(self):
        assert calculate_fte(2080) == pytest.approx(1.0)

    def test_non_standard_work_year(self):
        assert calculate_fte(1950, hours_per_year=1950) == pytest.approx(1.0)

    def test_zero_hours_per_year(self):
        assert calculate_fte(1000, hours_per_year=0) == 0
