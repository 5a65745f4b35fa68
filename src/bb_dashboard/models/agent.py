"""Agent-related models."""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class AgentId(str, Enum):
    """Known agents on the office roster."""

    FRED = "fred"
    SCOUT = "scout"
    DUSTY = "dusty"
    HUGH = "hugh"
    TEKY = "teky"
    BUZZ = "buzz"
    MAC = "mac"
    DALE = "dale"
    REX = "rex"
    KAREN = "karen"
    CASH = "cash"


class AgentStatus(str, Enum):
    """Liveness inferred from run recency."""

    WORKING = "working"
    IDLE = "idle"
    OFFLINE = "offline"


class AgentProfile(BaseModel):
    """Display information for a roster agent."""

    id: AgentId
    label: str
    emoji: str


ROSTER: tuple[AgentProfile, ...] = (
    AgentProfile(id=AgentId.FRED, label="Fred", emoji="⭐"),
    AgentProfile(id=AgentId.SCOUT, label="Scout", emoji="🔭"),
    AgentProfile(id=AgentId.DUSTY, label="Dusty", emoji="🌾"),
    AgentProfile(id=AgentId.HUGH, label="Hugh", emoji="🤖"),
    AgentProfile(id=AgentId.TEKY, label="Teky", emoji="💻"),
    AgentProfile(id=AgentId.BUZZ, label="Buzz", emoji="⚡"),
    AgentProfile(id=AgentId.MAC, label="Mac", emoji="🔧"),
    AgentProfile(id=AgentId.DALE, label="Dale", emoji="📈"),
    AgentProfile(id=AgentId.REX, label="Rex", emoji="🔐"),
    AgentProfile(id=AgentId.KAREN, label="Karen", emoji="📋"),
    AgentProfile(id=AgentId.CASH, label="Cash", emoji="💰"),
)


class AgentStatusReport(BaseModel):
    """Status of every roster agent at one point in time."""

    model_config = ConfigDict(populate_by_name=True)

    statuses: dict[AgentId, AgentStatus]
    computed_at: datetime = Field(alias="computedAt")
    available: bool = True  # False when the scheduler files could not be read
    error: Optional[str] = None
