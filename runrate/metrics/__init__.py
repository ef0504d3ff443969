import runrate.metrics.definitions  # noqa: F401
from runrate.metrics.registry import (
    GoalMetricDefinition,
    get_all_goal_metrics,
    get_goal_metric,
    register_goal_metric,
)

__all__ = [
    "GoalMetricDefinition",
    "get_all_goal_metrics",
    "get_goal_metric",
    "register_goal_metric",
]
