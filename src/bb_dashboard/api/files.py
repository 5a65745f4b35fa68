"""Workspace file browser API endpoints."""

import logging

from fastapi import APIRouter, HTTPException

from bb_dashboard.api.deps import WorkspaceBrowserDep
from bb_dashboard.core.exceptions import WorkspaceAccessError
from bb_dashboard.models.files import FileContent

router = APIRouter(prefix="/api/files", tags=["files"])
logger = logging.getLogger(__name__)


@router.get("/tree")
async def file_tree(workspace: WorkspaceBrowserDep) -> dict:
    """Nested listing of the workspace."""
    tree = workspace.tree()
    return {"tree": [node.model_dump(mode="json", exclude_none=True) for node in tree]}


@router.get("/content", response_model=FileContent)
async def file_content(path: str, workspace: WorkspaceBrowserDep) -> FileContent:
    """Read a workspace file.

    Args:
        path: Path relative to the workspace root

    Returns:
        File content, truncated to the configured size cap
    """
    try:
        return workspace.read(path)
    except WorkspaceAccessError as e:
        logger.warning(f"Rejected workspace read: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    except FileNotFoundError:
        raise HTTPException(status_code=404, detail=f"File not found: {path}")
