from enum import Enum


class AgentStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    TESTING = "testing"
    DEPRECATED = "deprecated"


class GoalType(str, Enum):
    TIME_SAVED = "time_saved"
    COST_SAVED = "cost_saved"
    STUDY_COUNT = "study_count"
    FTE_IMPACT = "fte_impact"


class GoalStatus(str, Enum):
    ON_TRACK = "on_track"
    AT_RISK = "at_risk"
    BEHIND = "behind"
    ACHIEVED = "achieved"
    CANCELLED = "cancelled"


class GoalDataSource(str, Enum):
    PROJECTED = "projected"
    ACTUAL = "actual"

    @property
    def label(self) -> str:
        return "Projections" if self is GoalDataSource.PROJECTED else "Run Rate"


class TrendMetric(str, Enum):
    TIME_SAVED = "time_saved"
    COST_SAVINGS = "cost_savings"
    STUDY_COUNT = "study_count"


class SnapshotType(str, Enum):
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"


class SnapshotDataSource(str, Enum):
    SYNTHETIC = "synthetic"
    REAL = "real"


class ForecastQuality(str, Enum):
    STRONG = "strong"
    MODERATE = "moderate"
    WEAK = "weak"


class AdoptionTrend(str, Enum):
    INCREASING = "increasing"
    DECREASING = "decreasing"
    STABLE = "stable"


class CostPeriod(str, Enum):
    MONTHLY = "monthly"
    ANNUAL = "annual"
