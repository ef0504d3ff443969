"""Platform, token and team costs set against projected or measured savings."""

from __future__ import annotations

import math
from typing import Collection, Optional, Sequence

from runrate.engine.result import CostBreakdown, MonthlyAnnual, NetROI
from runrate.models.costs import AITeamMember, PlatformCost, TokenUsage
from runrate.models.enums import CostPeriod

_MONTHS_PER_YEAR = 12


def to_monthly_and_annual(amount: float, period: CostPeriod | str) -> MonthlyAnnual:
    if CostPeriod(period) == CostPeriod.MONTHLY:
        return MonthlyAnnual(monthly=amount, annual=amount * _MONTHS_PER_YEAR)
    return MonthlyAnnual(monthly=amount / _MONTHS_PER_YEAR, annual=amount)


def tokens_to_monthly_and_annual(
    token_count: int, period: CostPeriod | str
) -> MonthlyAnnual:
    """Like ``to_monthly_and_annual`` but monthly token counts are whole numbers.

    Halves round up (30 tokens a year is 3 a month).
    """
    if CostPeriod(period) == CostPeriod.MONTHLY:
        return MonthlyAnnual(monthly=token_count, annual=token_count * _MONTHS_PER_YEAR)
    monthly = math.floor(token_count / _MONTHS_PER_YEAR + 0.5)
    return MonthlyAnnual(monthly=monthly, annual=token_count)


def calculate_cost_breakdown(
    platform_costs: Sequence[PlatformCost],
    token_usage: Sequence[TokenUsage],
    team_members: Sequence[AITeamMember],
    agent_ids: Optional[Collection[str]] = None,
) -> CostBreakdown:
    """Sum the three cost lines.

    Platform costs count at their annual amount (``amount * 12`` when none is
    stored). Token costs are limited to ``agent_ids`` when given. Team costs
    are each active member's monthly cost scaled by their FTE allocation.
    """
    platform = sum(
        c.annual_amount if c.annual_amount else c.amount * _MONTHS_PER_YEAR
        for c in platform_costs
    )
    tokens = sum(
        u.cost for u in token_usage if agent_ids is None or u.agent_id in agent_ids
    )
    team = sum(
        m.monthly_cost * m.fte_percentage / 100 for m in team_members if m.is_active
    )

    return CostBreakdown(
        platform_costs=platform,
        token_costs=tokens,
        team_costs=team,
        total_costs=platform + tokens + team,
    )


def calculate_net_roi(total_savings: float, costs: CostBreakdown | float) -> NetROI:
    """Net = savings - costs; ROI % and multiple are 0 when there are no costs."""
    total_costs = costs.total_costs if isinstance(costs, CostBreakdown) else costs
    net = total_savings - total_costs
    if total_costs > 0:
        roi_pct = (net / total_costs) * 100
        roi_mult = total_savings / total_costs
    else:
        roi_pct = 0.0
        roi_mult = 0.0

    return NetROI(
        total_savings=total_savings,
        total_costs=total_costs,
        net_savings=net,
        roi_percentage=roi_pct,
        roi_multiple=roi_mult,
    )
