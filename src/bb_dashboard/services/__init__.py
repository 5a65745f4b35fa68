"""Dashboard services."""

from .agent_status import AgentStatusService
from .audit_reader import AuditReader
from .cron_source import CronSource
from .kanban_store import KanbanStore
from .report_reader import ReportReader
from .status_resolver import StatusResolver
from .system_info import SystemInfo
from .workspace_browser import WorkspaceBrowser

__all__ = [
    "AgentStatusService",
    "AuditReader",
    "CronSource",
    "KanbanStore",
    "ReportReader",
    "StatusResolver",
    "SystemInfo",
    "WorkspaceBrowser",
]
