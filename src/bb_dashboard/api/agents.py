"""Agent roster and status API endpoints."""

from fastapi import APIRouter

from bb_dashboard.api.deps import AgentStatusDep
from bb_dashboard.models.agent import ROSTER, AgentProfile, AgentStatusReport

router = APIRouter(prefix="/api", tags=["agents"])


@router.get("/agent-status", response_model=AgentStatusReport)
async def agent_status(agent_status: AgentStatusDep) -> AgentStatusReport:
    """Current status of every roster agent, recomputed on each call."""
    return agent_status.snapshot()


@router.get("/agents", response_model=list[AgentProfile])
async def list_agents() -> list[AgentProfile]:
    """The fixed agent roster."""
    return list(ROSTER)
