"""Immutable result records returned by the calculation engines."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from runrate.engine.confidence import (
    forecast_quality,
    is_low_confidence,
)
from runrate.models.enums import AdoptionTrend, ForecastQuality
from runrate.models.scenario import ScenarioParameters
from runrate.models.snapshot import DataPoint


@dataclass(frozen=True)
class ProjectionResult:
    """Projected annual impact of one agent (or one adjusted variant of it)."""

    time_saved_per_use_minutes: float
    annual_time_saved_hours: float
    annual_cost_savings: float
    fte_equivalent: float


@dataclass(frozen=True)
class StudyCalculationResult:
    time_saved_minutes: float
    net_usage: float
    net_time_saved_hours: float
    potential_savings: float


@dataclass(frozen=True)
class OpportunityGap:
    time_saved_hours: float
    cost_savings: float
    fte_equivalent: float


@dataclass(frozen=True)
class IncrementalValue:
    time_saved_hours: float
    cost_savings: float


@dataclass(frozen=True)
class AdoptionMetrics:
    adoption_rate: float
    target_users: float
    current_users: float
    users_to_full_adoption: float


@dataclass(frozen=True)
class AdoptionAdjustedResult:
    """Impact at current adoption versus full adoption."""

    current_impact: ProjectionResult
    potential_impact: ProjectionResult
    opportunity_gap: OpportunityGap
    adoption_metrics: AdoptionMetrics
    incremental_value_per_percent: IncrementalValue


@dataclass(frozen=True)
class AdoptionStats:
    total_changes: int
    average_change: float
    max_adoption: float
    min_adoption: float
    trend: AdoptionTrend


# -- statistics ---------------------------------------------------------------


@dataclass(frozen=True)
class RegressionResult:
    slope: float
    intercept: float
    r_squared: float
    predictions: list[DataPoint] = field(default_factory=list)


@dataclass(frozen=True)
class StatisticalSummary:
    mean: float
    median: float
    standard_deviation: float
    variance: float
    min: float
    max: float
    count: int


@dataclass(frozen=True)
class ConfidenceInterval:
    lower: float
    upper: float
    confidence_level: float


@dataclass(frozen=True)
class OutlierResult:
    value: float
    index: int
    z_score: float
    is_outlier: bool


# -- trends -------------------------------------------------------------------


@dataclass(frozen=True)
class TrendRegression:
    slope: float
    intercept: float
    r_squared: float


@dataclass(frozen=True)
class TrendStatistics:
    mean: float
    standard_deviation: float
    growth_rate: float
    coefficient_of_variation: float


@dataclass(frozen=True)
class TrendData:
    """Historical series, its forecast, and the numbers describing both.

    Moving averages are ``None`` unless the history holds at least 7 (or 30)
    points.
    """

    historical: list[DataPoint]
    forecast: list[DataPoint]
    regression: TrendRegression
    statistics: TrendStatistics
    moving_average_7_day: Optional[list[DataPoint]] = None
    moving_average_30_day: Optional[list[DataPoint]] = None

    @property
    def has_data(self) -> bool:
        return len(self.historical) > 0

    @property
    def quality(self) -> ForecastQuality:
        return forecast_quality(self.regression.r_squared)

    @property
    def is_low_confidence(self) -> bool:
        return is_low_confidence(len(self.historical))

    @property
    def current_value(self) -> float:
        return self.historical[-1].value if self.historical else 0.0

    @property
    def forecasted_value(self) -> float:
        return self.forecast[-1].value if self.forecast else 0.0


@dataclass(frozen=True)
class DataSourceInfo:
    has_synthetic: bool
    has_real: bool
    synthetic_count: int
    real_count: int
    total_count: int


@dataclass(frozen=True)
class AgentPerformance:
    agent_id: str
    agent_name: str
    category: Optional[str]
    current_value: float
    forecasted_value: float
    growth_rate: float
    consistency: float


# -- goals --------------------------------------------------------------------


@dataclass(frozen=True)
class AgentContribution:
    agent_id: str
    agent_name: str
    contribution: float
    percentage: float


@dataclass(frozen=True)
class GoalProgress:
    goal_id: str
    progress: float
    days_remaining: int
    status: str


@dataclass(frozen=True)
class GoalSummary:
    total: int
    achieved: int
    on_track: int
    at_risk: int
    behind: int
    cancelled: int


# -- scenarios ----------------------------------------------------------------


@dataclass(frozen=True)
class ProjectionTotals:
    time_saved: float
    cost_savings: float
    fte: float


@dataclass(frozen=True)
class ScenarioDelta:
    time_saved: float
    cost_savings: float
    fte: float


@dataclass(frozen=True)
class ScenarioResult:
    projected_time_saved: float
    projected_cost_savings: float
    projected_fte: float
    delta_from_baseline: ScenarioDelta


@dataclass(frozen=True)
class ScenarioPreset:
    name: str
    description: str
    parameters: ScenarioParameters


@dataclass(frozen=True)
class ScenarioComparison:
    name: str
    description: Optional[str]
    parameters: ScenarioParameters
    result: ScenarioResult


# -- summaries ----------------------------------------------------------------


@dataclass(frozen=True)
class ProjectedSummary:
    total_time_saved: float
    total_savings: float
    active_agents: int
    avg_savings_per_agent: float
    fte_equivalent: float


@dataclass(frozen=True)
class ActualSummary:
    total_time_saved: float
    total_savings: float
    total_studies: int
    active_agents: int
    avg_savings_per_agent: float
    fte_equivalent: float


@dataclass(frozen=True)
class GlobalSummary:
    projected: ProjectedSummary
    actual: ActualSummary
    has_projected_data: bool
    has_actual_data: bool


@dataclass(frozen=True)
class AgentProjectionDetail:
    id: str
    name: str
    category: Optional[str]
    projected_time_saved: float
    projected_cost_savings: float
    fte_equivalent: float
    adoption_rate_percent: float


# -- costs --------------------------------------------------------------------


@dataclass(frozen=True)
class MonthlyAnnual:
    monthly: float
    annual: float


@dataclass(frozen=True)
class CostBreakdown:
    platform_costs: float
    token_costs: float
    team_costs: float
    total_costs: float


@dataclass(frozen=True)
class NetROI:
    total_savings: float
    total_costs: float
    net_savings: float
    roi_percentage: float
    roi_multiple: float
