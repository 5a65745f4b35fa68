"""Agent report models."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from bb_dashboard.models.agent import AgentId


class AgentReport(BaseModel):
    """Latest markdown report written by an agent."""

    agent: AgentId
    emoji: str
    content: str = ""
    mtime: Optional[datetime] = None
    exists: bool = False
