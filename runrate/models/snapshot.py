from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict

from .enums import SnapshotDataSource, SnapshotType


@dataclass(frozen=True)
class DataPoint:
    """One value of a time series."""

    date: date
    value: float


class HistoricalSnapshot(BaseModel):
    """A point-in-time aggregate from the append-only snapshot log.

    ``data_source`` marks synthetic seed data versus real measurements; it is
    carried for display only and never weights any calculation.
    """

    model_config = ConfigDict(frozen=True)

    agent_id: Optional[str] = None
    snapshot_date: date
    snapshot_type: SnapshotType = SnapshotType.DAILY
    total_studies: float = 0
    total_time_saved_hours: float = 0.0
    total_cost_savings: float = 0.0
    active_agents: int = 0
    data_source: Optional[SnapshotDataSource] = None
