"""What-if scenario modelling over the current set of agents."""

from __future__ import annotations

import dataclasses
import logging
from typing import Iterable, Optional, Sequence

from runrate.config.settings import DEFAULT_HOURS_PER_YEAR, Settings
from runrate.engine.projections import calculate_agent_projections
from runrate.engine.result import (
    ProjectionTotals,
    ScenarioComparison,
    ScenarioDelta,
    ScenarioPreset,
    ScenarioResult,
)
from runrate.models.agent import AgentRecord, AgentVariables
from runrate.models.scenario import ScenarioParameters

logger = logging.getLogger(__name__)


def _adjust(variables: AgentVariables, params: ScenarioParameters) -> AgentVariables:
    discount = variables.usage_discount_percent + params.discount_adjustment
    return dataclasses.replace(
        variables,
        avg_time_with_agent_minutes=(
            variables.avg_time_with_agent_minutes
            * (1 - params.efficiency_improvement / 100)
        ),
        avg_usage_count=variables.avg_usage_count * params.usage_multiplier,
        usage_discount_percent=max(0.0, min(100.0, discount)),
        avg_hourly_wage=variables.avg_hourly_wage * params.wage_multiplier,
    )


class ScenarioEngine:
    """Stateless engine that sums agent projections under adjusted variables."""

    def __init__(
        self,
        hours_per_year: float = DEFAULT_HOURS_PER_YEAR,
        settings: Settings | None = None,
    ):
        self.hours_per_year = hours_per_year
        self._settings = settings

    def _complete_variables(self, agents: Iterable[AgentRecord]) -> list[AgentVariables]:
        resolved: list[AgentVariables] = []
        for agent in agents:
            if not agent.is_active:
                continue
            if not agent.has_complete_variables():
                logger.debug("Skipping agent %s: incomplete projection variables", agent.id)
                continue
            resolved.append(agent.to_variables(self._settings))
        return resolved

    def _sum(self, variables: Iterable[AgentVariables]) -> ProjectionTotals:
        time_saved = cost_savings = fte = 0.0
        for v in variables:
            projection = calculate_agent_projections(v, self.hours_per_year)
            time_saved += projection.annual_time_saved_hours
            cost_savings += projection.annual_cost_savings
            fte += projection.fte_equivalent
        return ProjectionTotals(time_saved=time_saved, cost_savings=cost_savings, fte=fte)

    def calculate_baseline_projections(
        self, agents: Sequence[AgentRecord]
    ) -> ProjectionTotals:
        return self._sum(self._complete_variables(agents))

    def calculate_scenario_projections(
        self,
        agents: Sequence[AgentRecord],
        params: ScenarioParameters,
    ) -> ProjectionTotals:
        """Sum adjusted projections, then add ``new_agents_count`` average agents.

        The average is taken over every active agent passed in, including
        those skipped for incomplete variables. Inactive agents are ignored.
        """
        totals = self._sum(
            _adjust(v, params) for v in self._complete_variables(agents)
        )

        active_count = sum(1 for a in agents if a.is_active)
        if params.new_agents_count > 0 and active_count > 0:
            factor = params.new_agents_count / active_count
            totals = ProjectionTotals(
                time_saved=totals.time_saved + totals.time_saved * factor,
                cost_savings=totals.cost_savings + totals.cost_savings * factor,
                fte=totals.fte + totals.fte * factor,
            )
        return totals

    def calculate_scenario(
        self,
        agents: Sequence[AgentRecord],
        params: ScenarioParameters,
    ) -> ScenarioResult:
        baseline = self.calculate_baseline_projections(agents)
        scenario = self.calculate_scenario_projections(agents, params)
        logger.info(
            "Scenario over %d agents: %.1f hours (%+.1f vs baseline)",
            len(agents),
            scenario.time_saved,
            scenario.time_saved - baseline.time_saved,
        )

        return ScenarioResult(
            projected_time_saved=scenario.time_saved,
            projected_cost_savings=scenario.cost_savings,
            projected_fte=scenario.fte,
            delta_from_baseline=ScenarioDelta(
                time_saved=scenario.time_saved - baseline.time_saved,
                cost_savings=scenario.cost_savings - baseline.cost_savings,
                fte=scenario.fte - baseline.fte,
            ),
        )

    def compare_scenarios(
        self,
        agents: Sequence[AgentRecord],
        scenarios: Iterable[ScenarioPreset],
    ) -> list[ScenarioComparison]:
        """Run every scenario against the same agents, preserving order."""
        return [
            ScenarioComparison(
                name=s.name,
                description=s.description,
                parameters=s.parameters,
                result=self.calculate_scenario(agents, s.parameters),
            )
            for s in scenarios
        ]

    @staticmethod
    def create_preset_scenarios() -> list[ScenarioPreset]:
        return [
            ScenarioPreset(
                name="Conservative Growth",
                description="25% increase in usage with current efficiency",
                parameters=ScenarioParameters(usage_multiplier=1.25),
            ),
            ScenarioPreset(
                name="Aggressive Expansion",
                description="50% usage increase, 3 new agents, 10% efficiency gains",
                parameters=ScenarioParameters(
                    usage_multiplier=1.5,
                    new_agents_count=3,
                    efficiency_improvement=10,
                ),
            ),
            ScenarioPreset(
                name="Optimization Focus",
                description="20% efficiency improvement on existing agents",
                parameters=ScenarioParameters(
                    efficiency_improvement=20,
                    discount_adjustment=-10,
                ),
            ),
            ScenarioPreset(
                name="Wage Increase Impact",
                description="Assess impact of 15% wage increase",
                parameters=ScenarioParameters(wage_multiplier=1.15),
            ),
            ScenarioPreset(
                name="Reduced Adoption",
                description="20% decrease in usage, conservative discount",
                parameters=ScenarioParameters(
                    usage_multiplier=0.8,
                    discount_adjustment=10,
                ),
            ),
        ]

    def get_preset(self, name: str) -> Optional[ScenarioPreset]:
        return next((p for p in self.create_preset_scenarios() if p.name == name), None)
