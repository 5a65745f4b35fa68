"""Scheduler job and run-log models."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class JobRecord(BaseModel):
    """A scheduled job as listed in the scheduler's registry."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: str
    agent_id: str = Field(alias="agentId")
    enabled: bool = False


class RunEvent(BaseModel):
    """One line of a job's run log. Only the timestamp matters here."""

    model_config = ConfigDict(extra="ignore", allow_inf_nan=False)

    ts: Optional[float] = None  # Epoch milliseconds; missing counts as 0
