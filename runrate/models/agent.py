from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from pydantic import BaseModel, ConfigDict

from .enums import AgentStatus

if TYPE_CHECKING:
    from runrate.config.settings import Settings


@dataclass(frozen=True)
class AgentVariables:
    """Fully-resolved projection variables for one agent.

    Every field is a plain number; defaults have already been applied by
    ``AgentRecord.to_variables`` so the calculation core never sees ``None``.
    """

    avg_time_without_agent_minutes: float
    avg_time_with_agent_minutes: float
    avg_usage_count: float
    usage_discount_percent: float
    avg_hourly_wage: float
    target_user_base: float = 0.0
    current_active_users: float = 0.0
    adoption_rate_percent: float = 100.0


class AgentRecord(BaseModel):
    """An agent row as supplied by the data layer. Variables may be unset."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str = ""
    category: Optional[str] = None
    status: AgentStatus = AgentStatus.ACTIVE
    division_id: Optional[str] = None

    avg_time_without_agent_minutes: Optional[float] = None
    avg_time_with_agent_minutes: Optional[float] = None
    avg_usage_count: Optional[float] = None
    default_usage_discount_percent: Optional[float] = None
    avg_hourly_wage: Optional[float] = None

    target_user_base: Optional[float] = None
    current_active_users: Optional[float] = None
    adoption_rate_percent: Optional[float] = None

    @property
    def is_active(self) -> bool:
        return self.status == AgentStatus.ACTIVE

    def has_complete_variables(self) -> bool:
        """All four core variables are set and non-zero."""
        return all(
            (
                self.avg_time_without_agent_minutes,
                self.avg_time_with_agent_minutes,
                self.avg_usage_count,
                self.avg_hourly_wage,
            )
        )

    def has_projection_data(self) -> bool:
        return (self.avg_time_without_agent_minutes or 0) > 0 and (
            self.avg_usage_count or 0
        ) > 0

    def has_contribution_data(self) -> bool:
        return (
            self.avg_time_without_agent_minutes is not None
            and self.avg_time_with_agent_minutes is not None
            and self.avg_usage_count is not None
            and self.avg_usage_count > 0
        )

    def in_division(self, division_id: Optional[str]) -> bool:
        """``None`` matches every agent, ``"unassigned"`` matches agents without one."""
        if division_id is None:
            return True
        if division_id == "unassigned":
            return self.division_id is None
        return self.division_id == division_id

    def resolved_adoption_rate(self) -> float:
        if self.adoption_rate_percent is not None:
            return self.adoption_rate_percent
        if self.target_user_base:
            from runrate.engine.adoption import calculate_adoption_rate

            return calculate_adoption_rate(
                self.current_active_users or 0, self.target_user_base
            )
        return 100.0

    def to_variables(self, settings: Settings | None = None) -> AgentVariables:
        """Resolve unset fields to their configured defaults."""
        if settings is None:
            from runrate.config.settings import get_settings

            settings = get_settings()

        discount = self.default_usage_discount_percent
        if discount is None:
            discount = settings.default_usage_discount_percent
        wage = self.avg_hourly_wage
        if wage is None:
            wage = settings.default_hourly_wage

        return AgentVariables(
            avg_time_without_agent_minutes=self.avg_time_without_agent_minutes or 0.0,
            avg_time_with_agent_minutes=self.avg_time_with_agent_minutes or 0.0,
            avg_usage_count=self.avg_usage_count or 0.0,
            usage_discount_percent=discount,
            avg_hourly_wage=wage,
            target_user_base=self.target_user_base or 0.0,
            current_active_users=self.current_active_users or 0.0,
            adoption_rate_percent=self.resolved_adoption_rate(),
        )
