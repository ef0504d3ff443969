"""Adoption-rate arithmetic and adoption-adjusted projections."""

from __future__ import annotations

import dataclasses
from typing import Sequence

from runrate.config.settings import DEFAULT_HOURS_PER_YEAR
from runrate.engine.projections import calculate_agent_projections
from runrate.engine.result import (
    AdoptionAdjustedResult,
    AdoptionMetrics,
    AdoptionStats,
    IncrementalValue,
    OpportunityGap,
    ProjectionResult,
)
from runrate.models.adoption import AdoptionHistoryEntry
from runrate.models.agent import AgentVariables
from runrate.models.enums import AdoptionTrend

# Average change (in points) beyond which adoption counts as moving.
_TREND_THRESHOLD = 1.0


def calculate_adoption_rate(current_users: float, target_users: float) -> float:
    if target_users <= 0:
        return 0.0
    return min(100.0, (current_users / target_users) * 100)


def calculate_projected_usage_at_adoption(
    base_usage: float, adoption_percent: float
) -> float:
    return base_usage * (adoption_percent / 100)


def _with_usage(variables: AgentVariables, usage: float) -> AgentVariables:
    return dataclasses.replace(variables, avg_usage_count=usage)


def calculate_adoption_adjusted_projections(
    variables: AgentVariables,
    hours_per_year: float = DEFAULT_HOURS_PER_YEAR,
) -> AdoptionAdjustedResult:
    """Compare impact at the current adoption rate with impact at 100%.

    ``variables.avg_usage_count`` is the usage at full adoption; the current
    impact scales it by ``adoption_rate_percent``.
    """
    adoption_rate = variables.adoption_rate_percent
    current_usage = calculate_projected_usage_at_adoption(
        variables.avg_usage_count, adoption_rate
    )

    current = calculate_agent_projections(
        _with_usage(variables, current_usage), hours_per_year
    )
    potential = calculate_agent_projections(variables, hours_per_year)

    gap = OpportunityGap(
        time_saved_hours=potential.annual_time_saved_hours - current.annual_time_saved_hours,
        cost_savings=potential.annual_cost_savings - current.annual_cost_savings,
        fte_equivalent=potential.fte_equivalent - current.fte_equivalent,
    )

    remaining = 100 - adoption_rate
    if remaining > 0:
        incremental = IncrementalValue(
            time_saved_hours=gap.time_saved_hours / remaining,
            cost_savings=gap.cost_savings / remaining,
        )
    else:
        incremental = IncrementalValue(time_saved_hours=0.0, cost_savings=0.0)

    metrics = AdoptionMetrics(
        adoption_rate=adoption_rate,
        target_users=variables.target_user_base,
        current_users=variables.current_active_users,
        users_to_full_adoption=variables.target_user_base - variables.current_active_users,
    )

    return AdoptionAdjustedResult(
        current_impact=current,
        potential_impact=potential,
        opportunity_gap=gap,
        adoption_metrics=metrics,
        incremental_value_per_percent=incremental,
    )


def calculate_adoption_scenario(
    variables: AgentVariables,
    scenario_adoption_percent: float,
    hours_per_year: float = DEFAULT_HOURS_PER_YEAR,
) -> ProjectionResult:
    """Projected impact if adoption were ``scenario_adoption_percent``."""
    usage = calculate_projected_usage_at_adoption(
        variables.avg_usage_count, scenario_adoption_percent
    )
    return calculate_agent_projections(_with_usage(variables, usage), hours_per_year)


def calculate_adoption_stats(history: Sequence[AdoptionHistoryEntry]) -> AdoptionStats:
    """Summarise an agent's adoption history.

    Entries are ordered by ``created_at`` newest first before comparing
    consecutive rates.
    """
    if not history:
        return AdoptionStats(
            total_changes=0,
            average_change=0.0,
            max_adoption=0.0,
            min_adoption=0.0,
            trend=AdoptionTrend.STABLE,
        )

    ordered = sorted(history, key=lambda h: h.created_at, reverse=True)
    rates = [h.new_adoption_rate or 0.0 for h in ordered]
    changes = [rates[i] - rates[i + 1] for i in range(len(rates) - 1)]
    average_change = sum(changes) / len(changes) if changes else 0.0

    if average_change > _TREND_THRESHOLD:
        trend = AdoptionTrend.INCREASING
    elif average_change < -_TREND_THRESHOLD:
        trend = AdoptionTrend.DECREASING
    else:
        trend = AdoptionTrend.STABLE

    return AdoptionStats(
        total_changes=len(ordered),
        average_change=average_change,
        max_adoption=max(rates),
        min_adoption=min(rates),
        trend=trend,
    )
