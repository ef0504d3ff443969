from __future__ import annotations

from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict

from .enums import CostPeriod


class PlatformCost(BaseModel):
    model_config = ConfigDict(frozen=True)

    month: date
    amount: float
    period: CostPeriod = CostPeriod.MONTHLY
    annual_amount: Optional[float] = None
    division_id: Optional[str] = None
    description: Optional[str] = None


class TokenUsage(BaseModel):
    model_config = ConfigDict(frozen=True)

    agent_id: str
    month: date
    token_count: int = 0
    cost: float = 0.0


class AITeamMember(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    role: str = ""
    monthly_cost: float
    fte_percentage: float = 100.0
    division_id: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None

    @property
    def is_active(self) -> bool:
        return self.end_date is None
