from __future__ import annotations

from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict

from .enums import GoalDataSource, GoalStatus, GoalType

ACTIVE_GOAL_STATUSES = frozenset(
    {GoalStatus.ON_TRACK, GoalStatus.AT_RISK, GoalStatus.BEHIND}
)


class Goal(BaseModel):
    """A target for an agent, or for the whole organisation when ``agent_id`` is None.

    ``status`` is assigned by an external process and is never derived here.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    agent_id: Optional[str] = None
    goal_type: GoalType
    target_value: float
    current_value: float = 0.0
    target_date: date
    status: GoalStatus = GoalStatus.ON_TRACK
    description: Optional[str] = None
    data_source: GoalDataSource = GoalDataSource.PROJECTED

    @property
    def is_organization_wide(self) -> bool:
        return self.agent_id is None

    @property
    def is_active(self) -> bool:
        return self.status in ACTIVE_GOAL_STATUSES
