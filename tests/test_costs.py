"""Tests for cost roll-ups and net ROI."""

from datetime import date

import pytest

from runrate.engine.costs import (
    calculate_cost_breakdown,
    calculate_net_roi,
    to_monthly_and_annual,
    tokens_to_monthly_and_annual,
)
from runrate.models.costs import AITeamMember, PlatformCost, TokenUsage
from runrate.models.enums import CostPeriod


class TestPeriodConversion:
    def test_monthly_amount(self):
        result = to_monthly_and_annual(100, CostPeriod.MONTHLY)
        assert (result.monthly, result.annual) == (100, 1200)

    def test_annual_amount(self):
        result = to_monthly_and_annual(1200, "annual")
        assert result.monthly == pytest.approx(100)
        assert result.annual == 1200

    def test_annual_tokens_round_monthly(self):
        result = tokens_to_monthly_and_annual(1000, CostPeriod.ANNUAL)
        assert result.monthly == 83
        assert result.annual == 1000

    def test_annual_tokens_round_half_up(self):
        # 30 / 12 = 2.5
        assert tokens_to_monthly_and_annual(30, CostPeriod.ANNUAL).monthly == 3
        # 18 / 12 = 1.5
        assert tokens_to_monthly_and_annual(18, CostPeriod.ANNUAL).monthly == 2


class TestCostBreakdown:
    def test_sums_three_lines(self):
        month = date(2026, 1, 1)
        breakdown = calculate_cost_breakdown(
            platform_costs=[
                PlatformCost(month=month, amount=100),
                PlatformCost(month=month, amount=500, annual_amount=5000),
            ],
            token_usage=[
                TokenUsage(agent_id="a", month=month, cost=40),
                TokenUsage(agent_id="b", month=month, cost=60),
            ],
            team_members=[
                AITeamMember(name="Ana", monthly_cost=10_000, fte_percentage=50),
                AITeamMember(
                    name="Bo", monthly_cost=8000, end_date=date(2025, 12, 31)
                ),
            ],
        )
        assert breakdown.platform_costs == 1200 + 5000
        assert breakdown.token_costs == 100
        assert breakdown.team_costs == 5000
        assert breakdown.total_costs == 6200 + 100 + 5000

    def test_token_costs_filtered_by_agent(self):
        month = date(2026, 1, 1)
        breakdown = calculate_cost_breakdown(
            [],
            [
                TokenUsage(agent_id="a", month=month, cost=40),
                TokenUsage(agent_id="b", month=month, cost=60),
            ],
            [],
            agent_ids={"b"},
        )
        assert breakdown.token_costs == 60


class TestNetROI:
    def test_positive_roi(self):
        roi = calculate_net_roi(30_000, 10_000)
        assert roi.net_savings == 20_000
        assert roi.roi_percentage == pytest.approx(200)
        assert roi.roi_multiple == pytest.approx(3)

    def test_no_costs(self):
        roi = calculate_net_roi(30_000, 0)
        assert roi.net_savings == 30_000
        assert roi.roi_percentage == 0
        assert roi.roi_multiple == 0

    def test_accepts_breakdown(self):
        breakdown = calculate_cost_breakdown(
            [PlatformCost(month=date(2026, 1, 1), amount=1000)], [], []
        )
        roi = calculate_net_roi(6000, breakdown)
        assert roi.total_costs == 12_000
        assert roi.net_savings == -6000
        assert roi.roi_percentage == pytest.approx(-50)
