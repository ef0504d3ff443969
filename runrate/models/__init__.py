from .adoption import AdoptionHistoryEntry
from .agent import AgentRecord, AgentVariables
from .costs import AITeamMember, PlatformCost, TokenUsage
from .enums import (
    AdoptionTrend,
    AgentStatus,
    CostPeriod,
    ForecastQuality,
    GoalDataSource,
    GoalStatus,
    GoalType,
    SnapshotDataSource,
    SnapshotType,
    TrendMetric,
)
from .goal import Goal
from .scenario import ScenarioParameters
from .snapshot import DataPoint, HistoricalSnapshot
from .study import AgentSummaryRecord, StudyInputs, StudyRecord

__all__ = [
    "AITeamMember",
    "AdoptionHistoryEntry",
    "AdoptionTrend",
    "AgentRecord",
    "AgentStatus",
    "AgentSummaryRecord",
    "AgentVariables",
    "CostPeriod",
    "DataPoint",
    "ForecastQuality",
    "Goal",
    "GoalDataSource",
    "GoalStatus",
    "GoalType",
    "HistoricalSnapshot",
    "PlatformCost",
    "ScenarioParameters",
    "SnapshotDataSource",
    "SnapshotType",
    "StudyInputs",
    "StudyRecord",
    "TokenUsage",
    "TrendMetric",
]
