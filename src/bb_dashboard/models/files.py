"""Workspace browser models."""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel


class NodeType(str, Enum):
    FILE = "file"
    DIR = "dir"


class TreeNode(BaseModel):
    """A file or directory in the workspace tree."""

    name: str
    path: str  # Relative to the workspace root, posix separators
    type: NodeType
    size: Optional[int] = None
    mtime: Optional[datetime] = None
    children: Optional[list["TreeNode"]] = None


class FileContent(BaseModel):
    """Contents of a workspace file, capped in size."""

    content: str
    truncated: bool
    size: int
    mtime: datetime
