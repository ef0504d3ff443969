from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict


@dataclass(frozen=True)
class StudyInputs:
    """The five measured values of a completed time & motion study."""

    time_without_ai_minutes: float
    time_with_ai_minutes: float
    usage_count: float
    usage_discount_percent: float
    cost_per_hour: float


class StudyRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: Optional[str] = None
    agent_id: Optional[str] = None
    task_description: str = ""
    time_without_ai_minutes: float
    time_with_ai_minutes: float
    usage_count: float
    usage_discount_percent: float = 50.0
    cost_per_hour: float
    study_date: Optional[date] = None

    def to_inputs(self) -> StudyInputs:
        return StudyInputs(
            time_without_ai_minutes=self.time_without_ai_minutes,
            time_with_ai_minutes=self.time_with_ai_minutes,
            usage_count=self.usage_count,
            usage_discount_percent=self.usage_discount_percent,
            cost_per_hour=self.cost_per_hour,
        )


class AgentSummaryRecord(BaseModel):
    """Measured (run-rate) totals for one agent, rolled up from its studies."""

    model_config = ConfigDict(frozen=True)

    agent_id: str
    total_studies: int = 0
    total_time_saved_hours: float = 0.0
    total_potential_savings: float = 0.0
