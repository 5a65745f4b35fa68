"""Agent report API endpoints."""

from fastapi import APIRouter, HTTPException

from bb_dashboard.api.deps import ReportReaderDep
from bb_dashboard.models.agent import ROSTER
from bb_dashboard.models.report import AgentReport

router = APIRouter(prefix="/api/reports", tags=["reports"])


@router.get("", response_model=list[AgentReport])
async def list_reports(reports: ReportReaderDep) -> list[AgentReport]:
    """Latest report of every roster agent."""
    return reports.read_all()


@router.get("/{agent}", response_model=AgentReport)
async def get_report(agent: str, reports: ReportReaderDep) -> AgentReport:
    """Latest report of one agent."""
    for profile in ROSTER:
        if profile.id.value == agent:
            return reports.read(profile)
    raise HTTPException(status_code=404, detail="Agent not found")
