"""Contribution formulas for each goal type.

Each function turns one agent's projected annual hours into its share of an
organisation-wide goal, in the goal's own unit.
"""

from runrate.metrics.registry import register_goal_metric
from runrate.models.agent import AgentVariables
from runrate.models.enums import GoalType


@register_goal_metric(
    goal_type=GoalType.TIME_SAVED,
    label="Time Saved (hours)",
    description="Projected annual hours saved. Formula: annual_hours.",
    unit="hours",
)
def contribution_time_saved(
    annual_hours: float,
    variables: AgentVariables,
    hours_per_year: float,
) -> float:
    """Contribution = annual_hours"""
    return annual_hours


@register_goal_metric(
    goal_type=GoalType.COST_SAVED,
    label="Cost Savings ($)",
    description="Projected annual savings. Formula: annual_hours * hourly_wage.",
    unit="currency",
)
def contribution_cost_saved(
    annual_hours: float,
    variables: AgentVariables,
    hours_per_year: float,
) -> float:
    """Contribution = annual_hours x avg_hourly_wage"""
    return annual_hours * variables.avg_hourly_wage


@register_goal_metric(
    goal_type=GoalType.FTE_IMPACT,
    label="FTE Impact (%)",
    description="Full-time equivalents freed. Formula: annual_hours / hours_per_year.",
    unit="fte",
)
def contribution_fte_impact(
    annual_hours: float,
    variables: AgentVariables,
    hours_per_year: float,
) -> float:
    """Contribution = annual_hours / hours_per_year"""
    if hours_per_year <= 0:
        return 0.0
    return annual_hours / hours_per_year


@register_goal_metric(
    goal_type=GoalType.STUDY_COUNT,
    label="Study Count",
    description="Completed studies. Projections do not produce studies.",
    unit="studies",
)
def contribution_study_count(
    annual_hours: float,
    variables: AgentVariables,
    hours_per_year: float,
) -> float:
    return 0.0
