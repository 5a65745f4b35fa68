"""Audit history API endpoints."""

from fastapi import APIRouter

from bb_dashboard.api.deps import AuditReaderDep
from bb_dashboard.models.audit import AuditResponse

router = APIRouter(prefix="/api/audit", tags=["audit"])


@router.get("", response_model=AuditResponse)
async def get_audit(audit: AuditReaderDep) -> AuditResponse:
    """Latest daily audit and recent history."""
    return audit.load()
