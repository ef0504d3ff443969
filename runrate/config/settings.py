from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings

# 40h/week x 52 weeks
DEFAULT_HOURS_PER_YEAR = 2080.0


class OrganizationSettings(BaseModel):
    """The stored organisation row; values override the environment defaults."""

    organization_name: Optional[str] = None
    total_employees: int = Field(default=100, ge=0)
    fiscal_year_start_month: int = Field(default=1, ge=1, le=12)
    standard_work_hours_per_year: float = Field(default=DEFAULT_HOURS_PER_YEAR, gt=0)
    notes: Optional[str] = None


class Settings(BaseSettings):
    standard_work_hours_per_year: float = DEFAULT_HOURS_PER_YEAR
    total_employees: int = 100
    default_usage_discount_percent: float = 50.0
    default_hourly_wage: float = 20.0
    trend_lookback_days: int = 90
    default_forecast_days: int = 30
    log_level: str = "INFO"

    class Config:
        env_prefix = "RUNRATE_"
        env_file = ".env"

    def with_organization(self, org: OrganizationSettings | None) -> Settings:
        """Overlay an organisation row on top of these settings."""
        if org is None:
            return self
        return self.model_copy(
            update={
                "standard_work_hours_per_year": org.standard_work_hours_per_year,
                "total_employees": org.total_employees,
            }
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()
