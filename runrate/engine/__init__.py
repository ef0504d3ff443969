from .adoption import (
    calculate_adoption_adjusted_projections,
    calculate_adoption_rate,
    calculate_adoption_scenario,
    calculate_adoption_stats,
    calculate_projected_usage_at_adoption,
)
from .goals import GoalProgressAggregator
from .projections import (
    calculate_agent_projections,
    calculate_fte,
    calculate_study_metrics,
)
from .scenarios import ScenarioEngine
from .stats import StatisticsService, statistics_service
from .summary import SummaryAggregator, fte_percentage
from .trends import TrendAnalyzer

__all__ = [
    "GoalProgressAggregator",
    "ScenarioEngine",
    "StatisticsService",
    "SummaryAggregator",
    "TrendAnalyzer",
    "calculate_adoption_adjusted_projections",
    "calculate_adoption_rate",
    "calculate_adoption_scenario",
    "calculate_adoption_stats",
    "calculate_agent_projections",
    "calculate_fte",
    "calculate_projected_usage_at_adoption",
    "calculate_study_metrics",
    "fte_percentage",
    "statistics_service",
]
