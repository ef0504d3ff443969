"""Projected versus actual (run-rate) roll-ups for the dashboard header."""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from runrate.config.settings import DEFAULT_HOURS_PER_YEAR, Settings
from runrate.engine.projections import calculate_agent_projections, calculate_fte
from runrate.engine.result import (
    ActualSummary,
    AgentProjectionDetail,
    GlobalSummary,
    ProjectedSummary,
)
from runrate.models.agent import AgentRecord
from runrate.models.study import AgentSummaryRecord

logger = logging.getLogger(__name__)


def fte_percentage(fte: float, total_employees: float) -> float:
    """Share of the workforce, in percent, that ``fte`` represents."""
    if total_employees <= 0:
        return 0.0
    return (fte / total_employees) * 100


class SummaryAggregator:
    def __init__(
        self,
        hours_per_year: float = DEFAULT_HOURS_PER_YEAR,
        settings: Settings | None = None,
    ):
        self.hours_per_year = hours_per_year
        self._settings = settings

    def _projectable(
        self, agents: Sequence[AgentRecord], division_id: Optional[str]
    ) -> list[AgentRecord]:
        return [
            a
            for a in agents
            if a.is_active and a.in_division(division_id) and a.has_projection_data()
        ]

    def projected_agents_detail(
        self,
        agents: Sequence[AgentRecord],
        division_id: Optional[str] = None,
    ) -> list[AgentProjectionDetail]:
        details = []
        for agent in self._projectable(agents, division_id):
            variables = agent.to_variables(self._settings)
            projection = calculate_agent_projections(variables, self.hours_per_year)
            details.append(
                AgentProjectionDetail(
                    id=agent.id,
                    name=agent.name,
                    category=agent.category,
                    projected_time_saved=projection.annual_time_saved_hours,
                    projected_cost_savings=projection.annual_cost_savings,
                    fte_equivalent=projection.fte_equivalent,
                    adoption_rate_percent=agent.adoption_rate_percent or 0.0,
                )
            )
        return details

    def projected_summary(
        self,
        agents: Sequence[AgentRecord],
        division_id: Optional[str] = None,
    ) -> ProjectedSummary:
        """Totals over active agents that have usage and a baseline time."""
        details = self.projected_agents_detail(agents, division_id)
        total_hours = sum(d.projected_time_saved for d in details)
        total_savings = sum(d.projected_cost_savings for d in details)
        count = len(details)
        logger.debug(
            "Projected summary for division %s: %d of %d agents contribute",
            division_id,
            count,
            len(agents),
        )

        return ProjectedSummary(
            total_time_saved=total_hours,
            total_savings=total_savings,
            active_agents=count,
            avg_savings_per_agent=total_savings / count if count > 0 else 0.0,
            fte_equivalent=calculate_fte(total_hours, self.hours_per_year),
        )

    def actual_summary(
        self,
        agent_summaries: Sequence[AgentSummaryRecord],
    ) -> ActualSummary:
        """Totals measured by completed studies."""
        total_hours = sum(s.total_time_saved_hours for s in agent_summaries)
        total_savings = sum(s.total_potential_savings for s in agent_summaries)
        total_studies = sum(s.total_studies for s in agent_summaries)
        count = len(agent_summaries)

        return ActualSummary(
            total_time_saved=total_hours,
            total_savings=total_savings,
            total_studies=total_studies,
            active_agents=count,
            avg_savings_per_agent=total_savings / count if count > 0 else 0.0,
            fte_equivalent=calculate_fte(total_hours, self.hours_per_year),
        )

    def global_summary(
        self,
        agents: Sequence[AgentRecord],
        agent_summaries: Sequence[AgentSummaryRecord],
        division_id: Optional[str] = None,
    ) -> GlobalSummary:
        """Projected and actual side by side.

        ``agent_summaries`` must already be limited to the division's agents.
        """
        projected = self.projected_summary(agents, division_id)
        actual = self.actual_summary(agent_summaries)
        return GlobalSummary(
            projected=projected,
            actual=actual,
            has_projected_data=projected.active_agents > 0,
            has_actual_data=actual.total_studies > 0,
        )
