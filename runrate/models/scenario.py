from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ScenarioParameters(BaseModel):
    """What-if knobs applied on top of every agent's baseline variables."""

    model_config = ConfigDict(frozen=True)

    usage_multiplier: float = Field(default=1.0, description="Scales avg usage count")
    wage_multiplier: float = Field(default=1.0, description="Scales avg hourly wage")
    new_agents_count: int = Field(
        default=0, ge=0, description="Synthetic average agents to add"
    )
    efficiency_improvement: float = Field(
        default=0.0, description="Percent reduction of time-with-agent"
    )
    discount_adjustment: float = Field(
        default=0.0, description="Points added to the usage discount, clamped to 0-100"
    )
