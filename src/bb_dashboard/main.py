"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from bb_dashboard import __version__
from bb_dashboard.api import (
    agents_router,
    audit_router,
    files_router,
    kanban_router,
    reports_router,
    system_router,
)
from bb_dashboard.api.deps import init_services
from bb_dashboard.core.config import Settings, settings
from bb_dashboard.services.agent_status import AgentStatusService
from bb_dashboard.services.audit_reader import AuditReader
from bb_dashboard.services.cron_source import CronSource
from bb_dashboard.services.kanban_store import KanbanStore
from bb_dashboard.services.report_reader import ReportReader
from bb_dashboard.services.status_resolver import StatusResolver
from bb_dashboard.services.system_info import SystemInfo
from bb_dashboard.services.workspace_browser import WorkspaceBrowser

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


def build_services(config: Settings) -> dict:
    """Create service instances from configuration."""
    return {
        "agent_status": AgentStatusService(
            source=CronSource(config.jobs_file, config.runs_dir),
            resolver=StatusResolver.from_settings(config),
        ),
        "kanban_store": KanbanStore(config.kanban_file),
        "report_reader": ReportReader(config.reports_dir),
        "workspace_browser": WorkspaceBrowser(
            config.workspace_dir,
            max_file_bytes=config.max_file_bytes,
            max_depth=config.tree_max_depth,
        ),
        "audit_reader": AuditReader(config.audit_dir, history_days=config.audit_history_days),
        "system_info": SystemInfo(
            config.gateway_command,
            gateway_timeout=config.gateway_timeout_seconds,
        ),
    }


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    logger.info(f"Starting BB Dashboard Server v{__version__}")
    logger.info(f"Cron data: {settings.cron_dir}")
    logger.info(f"Workspace: {settings.workspace_dir}")

    init_services(**build_services(settings))

    logger.info(f"Server ready on {settings.host}:{settings.port}")

    yield

    logger.info("Shutting down...")


app = FastAPI(
    title="BB Dashboard Server",
    description="Local API for the agent office dashboard",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(agents_router)
app.include_router(kanban_router)
app.include_router(reports_router)
app.include_router(files_router)
app.include_router(audit_router)
app.include_router(system_router)


@app.get("/")
async def root() -> dict:
    """Root endpoint with server info."""
    return {
        "name": "BB Dashboard Server",
        "version": __version__,
        "status": "running",
    }


def run() -> None:
    """Console entry point."""
    import uvicorn

    uvicorn.run(
        "bb_dashboard.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    run()
