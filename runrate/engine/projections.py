"""Projection formulas: time, cost and FTE saved per agent and per study.

Each function is a pure calculation with no side effects. Nothing is
clamped: when the time with the agent exceeds the time without it, the
savings come out negative so regressions stay visible in reporting.
"""

from __future__ import annotations

from runrate.config.settings import DEFAULT_HOURS_PER_YEAR
from runrate.engine.result import ProjectionResult, StudyCalculationResult
from runrate.models.agent import AgentVariables
from runrate.models.study import StudyInputs


def net_usage(usage_count: float, discount_percent: float) -> float:
    """Usage after the discount: usage * (1 - discount / 100)"""
    return usage_count * (1 - discount_percent / 100)


def calculate_fte(
    total_hours: float,
    hours_per_year: float = DEFAULT_HOURS_PER_YEAR,
) -> float:
    """FTE = total_hours / hours_per_year"""
    if hours_per_year <= 0:
        return 0.0
    return total_hours / hours_per_year


def calculate_annual_hours(variables: AgentVariables) -> float:
    """Hours = (without - with) * net_usage / 60"""
    time_saved_per_use = (
        variables.avg_time_without_agent_minutes - variables.avg_time_with_agent_minutes
    )
    usage = net_usage(variables.avg_usage_count, variables.usage_discount_percent)
    return (time_saved_per_use * usage) / 60


def calculate_agent_projections(
    variables: AgentVariables,
    hours_per_year: float = DEFAULT_HOURS_PER_YEAR,
) -> ProjectionResult:
    """Annual projected impact of one agent from its assumed variables."""
    time_saved_per_use = (
        variables.avg_time_without_agent_minutes - variables.avg_time_with_agent_minutes
    )
    annual_hours = calculate_annual_hours(variables)

    return ProjectionResult(
        time_saved_per_use_minutes=time_saved_per_use,
        annual_time_saved_hours=annual_hours,
        annual_cost_savings=annual_hours * variables.avg_hourly_wage,
        fte_equivalent=calculate_fte(annual_hours, hours_per_year),
    )


def calculate_study_metrics(inputs: StudyInputs) -> StudyCalculationResult:
    """Savings measured by a single completed time & motion study."""
    time_saved = inputs.time_without_ai_minutes - inputs.time_with_ai_minutes
    usage = net_usage(inputs.usage_count, inputs.usage_discount_percent)
    hours = (time_saved * usage) / 60

    return StudyCalculationResult(
        time_saved_minutes=time_saved,
        net_usage=usage,
        net_time_saved_hours=hours,
        potential_savings=hours * inputs.cost_per_hour,
    )
