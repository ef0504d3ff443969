from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from runrate.models.agent import AgentVariables
from runrate.models.enums import GoalType

# (annual_hours, variables, hours_per_year) -> contribution in goal units
ContributionFn = Callable[[float, AgentVariables, float], float]

# Global registry -- maps goal type -> GoalMetricDefinition
_REGISTRY: dict[GoalType, GoalMetricDefinition] = {}


@dataclass(frozen=True)
class GoalMetricDefinition:
    """How a goal type is measured and how one agent contributes to it."""

    goal_type: GoalType
    label: str
    description: str
    contribution_fn: ContributionFn
    unit: str = "hours"


def register_goal_metric(
    goal_type: GoalType,
    label: str,
    description: str,
    unit: str = "hours",
) -> Callable:
    """Decorator to register a contribution formula for a goal type."""

    def decorator(fn: ContributionFn) -> ContributionFn:
        _REGISTRY[goal_type] = GoalMetricDefinition(
            goal_type=goal_type,
            label=label,
            description=description,
            contribution_fn=fn,
            unit=unit,
        )
        return fn

    return decorator


def get_goal_metric(goal_type: GoalType) -> Optional[GoalMetricDefinition]:
    """Look up a goal metric by type."""
    return _REGISTRY.get(goal_type)


def get_all_goal_metrics() -> dict[GoalType, GoalMetricDefinition]:
    """Return the full registry (read-only copy)."""
    return dict(_REGISTRY)
