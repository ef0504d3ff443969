"""Goal progress, time remaining and per-agent contribution breakdowns."""

from __future__ import annotations

import logging
import math
from datetime import datetime, time, timezone
from typing import Optional, Sequence

import runrate.metrics.definitions  # noqa: F401
from runrate.config.settings import DEFAULT_HOURS_PER_YEAR, Settings
from runrate.engine.projections import calculate_annual_hours
from runrate.engine.result import AgentContribution, GoalProgress, GoalSummary
from runrate.metrics.registry import get_goal_metric
from runrate.models.agent import AgentRecord
from runrate.models.enums import GoalDataSource, GoalStatus, GoalType
from runrate.models.goal import Goal

logger = logging.getLogger(__name__)

_SECONDS_PER_DAY = 86_400


class GoalProgressAggregator:
    """Computes the numbers a status-assignment process needs for each goal.

    Status itself is stored on the goal and is never derived here.
    """

    def __init__(
        self,
        hours_per_year: float = DEFAULT_HOURS_PER_YEAR,
        settings: Settings | None = None,
    ):
        self.hours_per_year = hours_per_year
        self._settings = settings

    @staticmethod
    def calculate_progress(goal: Goal) -> float:
        if goal.target_value == 0:
            return 0.0
        return min(100.0, (goal.current_value / goal.target_value) * 100)

    @staticmethod
    def days_remaining(goal: Goal, now: Optional[datetime] = None) -> int:
        """Whole days until the target date (midnight UTC); negative when overdue."""
        if now is None:
            now = datetime.now(tz=timezone.utc)
        elif now.tzinfo is None:
            now = now.replace(tzinfo=timezone.utc)
        target = datetime.combine(goal.target_date, time.min, tzinfo=timezone.utc)
        return math.ceil((target - now).total_seconds() / _SECONDS_PER_DAY)

    def progress_for(self, goal: Goal, now: Optional[datetime] = None) -> GoalProgress:
        return GoalProgress(
            goal_id=goal.id,
            progress=self.calculate_progress(goal),
            days_remaining=self.days_remaining(goal, now),
            status=goal.status.value,
        )

    def agent_contributions(
        self,
        goal: Goal,
        agents: Sequence[AgentRecord],
    ) -> list[AgentContribution]:
        """Break an organisation-wide projected goal down by agent.

        Returns ``[]`` for agent-scoped goals and goals tracked on actual
        (measured) data, where a projection breakdown does not apply.
        """
        if not goal.is_organization_wide or goal.data_source != GoalDataSource.PROJECTED:
            return []

        definition = get_goal_metric(goal.goal_type)
        if definition is None:
            logger.warning("No goal metric registered for %s", goal.goal_type)
            return []

        eligible = [a for a in agents if a.is_active and a.has_contribution_data()]
        if not eligible:
            return []

        raw: list[tuple[AgentRecord, float]] = []
        for agent in eligible:
            variables = agent.to_variables(self._settings)
            hours = calculate_annual_hours(variables)
            raw.append(
                (agent, definition.contribution_fn(hours, variables, self.hours_per_year))
            )

        total = sum(value for _, value in raw)
        contributions = [
            AgentContribution(
                agent_id=agent.id,
                agent_name=agent.name,
                contribution=value,
                percentage=(value / total) * 100 if total > 0 else 0.0,
            )
            for agent, value in raw
        ]
        return sorted(contributions, key=lambda c: c.contribution, reverse=True)

    @staticmethod
    def summarize(goals: Sequence[Goal]) -> GoalSummary:
        def count(status: GoalStatus) -> int:
            return sum(1 for g in goals if g.status == status)

        return GoalSummary(
            total=len(goals),
            achieved=count(GoalStatus.ACHIEVED),
            on_track=count(GoalStatus.ON_TRACK),
            at_risk=count(GoalStatus.AT_RISK),
            behind=count(GoalStatus.BEHIND),
            cancelled=count(GoalStatus.CANCELLED),
        )

    @staticmethod
    def active_goals(
        goals: Sequence[Goal],
        agents: Sequence[AgentRecord] = (),
        division_id: Optional[str] = None,
    ) -> list[Goal]:
        """Open goals, optionally narrowed to one division.

        Organisation-wide goals are kept under every division filter.
        """
        active = [g for g in goals if g.is_active]
        if division_id is None:
            return sorted(active, key=lambda g: g.target_date)

        agents_by_id = {a.id: a for a in agents}
        kept = []
        for goal in active:
            if goal.is_organization_wide:
                kept.append(goal)
                continue
            agent = agents_by_id.get(goal.agent_id)
            if agent is not None and agent.in_division(division_id):
                kept.append(goal)
        return sorted(kept, key=lambda g: g.target_date)

    @staticmethod
    def goal_type_label(goal_type: GoalType) -> str:
        definition = get_goal_metric(goal_type)
        return definition.label if definition else goal_type.value
