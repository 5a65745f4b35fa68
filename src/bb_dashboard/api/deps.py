"""API dependencies."""

from typing import Annotated

from fastapi import Depends

from bb_dashboard.services.agent_status import AgentStatusService
from bb_dashboard.services.audit_reader import AuditReader
from bb_dashboard.services.kanban_store import KanbanStore
from bb_dashboard.services.report_reader import ReportReader
from bb_dashboard.services.system_info import SystemInfo
from bb_dashboard.services.workspace_browser import WorkspaceBrowser

# Global service instances
_agent_status: AgentStatusService | None = None
_kanban_store: KanbanStore | None = None
_report_reader: ReportReader | None = None
_workspace_browser: WorkspaceBrowser | None = None
_audit_reader: AuditReader | None = None
_system_info: SystemInfo | None = None


def init_services(
    agent_status: AgentStatusService,
    kanban_store: KanbanStore,
    report_reader: ReportReader,
    workspace_browser: WorkspaceBrowser,
    audit_reader: AuditReader,
    system_info: SystemInfo,
) -> None:
    """Initialize service instances."""
    global _agent_status, _kanban_store, _report_reader
    global _workspace_browser, _audit_reader, _system_info
    _agent_status = agent_status
    _kanban_store = kanban_store
    _report_reader = report_reader
    _workspace_browser = workspace_browser
    _audit_reader = audit_reader
    _system_info = system_info


def get_agent_status() -> AgentStatusService:
    """Get the agent status service."""
    if _agent_status is None:
        raise RuntimeError("Services not initialized")
    return _agent_status


def get_kanban_store() -> KanbanStore:
    """Get the kanban store."""
    if _kanban_store is None:
        raise RuntimeError("Services not initialized")
    return _kanban_store


def get_report_reader() -> ReportReader:
    """Get the report reader."""
    if _report_reader is None:
        raise RuntimeError("Services not initialized")
    return _report_reader


def get_workspace_browser() -> WorkspaceBrowser:
    """Get the workspace browser."""
    if _workspace_browser is None:
        raise RuntimeError("Services not initialized")
    return _workspace_browser


def get_audit_reader() -> AuditReader:
    """Get the audit reader."""
    if _audit_reader is None:
        raise RuntimeError("Services not initialized")
    return _audit_reader


def get_system_info() -> SystemInfo:
    """Get the system info collector."""
    if _system_info is None:
        raise RuntimeError("Services not initialized")
    return _system_info


# Type aliases for dependency injection
AgentStatusDep = Annotated[AgentStatusService, Depends(get_agent_status)]
KanbanStoreDep = Annotated[KanbanStore, Depends(get_kanban_store)]
ReportReaderDep = Annotated[ReportReader, Depends(get_report_reader)]
WorkspaceBrowserDep = Annotated[WorkspaceBrowser, Depends(get_workspace_browser)]
AuditReaderDep = Annotated[AuditReader, Depends(get_audit_reader)]
SystemInfoDep = Annotated[SystemInfo, Depends(get_system_info)]
