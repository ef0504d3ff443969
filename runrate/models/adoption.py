from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict


class AdoptionHistoryEntry(BaseModel):
    """One recorded change of an agent's adoption rate."""

    model_config = ConfigDict(frozen=True)

    agent_id: str
    previous_adoption_rate: Optional[float] = None
    new_adoption_rate: Optional[float] = None
    previous_active_users: Optional[int] = None
    new_active_users: Optional[int] = None
    change_reason: Optional[str] = None
    created_at: datetime
