"""API routers."""

from .agents import router as agents_router
from .audit import router as audit_router
from .files import router as files_router
from .kanban import router as kanban_router
from .reports import router as reports_router
from .system import router as system_router

__all__ = [
    "agents_router",
    "audit_router",
    "files_router",
    "kanban_router",
    "reports_router",
    "system_router",
]
