"""Host and health API endpoints."""

import time

from fastapi import APIRouter

from bb_dashboard import __version__
from bb_dashboard.api.deps import SystemInfoDep

router = APIRouter(prefix="/api", tags=["system"])


@router.get("/system")
async def system(system_info: SystemInfoDep) -> dict:
    """Host stats and gateway status."""
    return await system_info.collect()


@router.get("/health")
async def health() -> dict:
    """Health check endpoint."""
    return {"ok": True, "ts": int(time.time() * 1000), "version": __version__}
