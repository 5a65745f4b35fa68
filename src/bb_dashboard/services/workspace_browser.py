"""Read-only, sandboxed browsing of the agent workspace."""

import logging
from datetime import datetime, timezone
from pathlib import Path

from bb_dashboard.core.exceptions import WorkspaceAccessError
from bb_dashboard.models.files import FileContent, NodeType, TreeNode

logger = logging.getLogger(__name__)

IGNORED_DIRS = frozenset({"node_modules", ".git", "__pycache__", ".venv"})


def _mtime(timestamp: float) -> datetime:
    return datetime.fromtimestamp(timestamp, tz=timezone.utc)


class WorkspaceBrowser:
    """Lists and reads files under a workspace root without ever leaving it."""

    def __init__(self, root: Path, max_file_bytes: int = 512 * 1024, max_depth: int = 6):
        self.root = Path(root)
        self.max_file_bytes = max_file_bytes
        self.max_depth = max_depth

    def tree(self) -> list[TreeNode]:
        """Nested listing of the workspace, directories first."""
        if not self.root.is_dir():
            logger.debug(f"Workspace root missing: {self.root}")
            return []
        return self._walk(self.root, self.root.resolve(), depth=0)

    def resolve(self, rel_path: str) -> Path:
        """Resolve a workspace-relative path, refusing anything outside the root.

        Raises:
            WorkspaceAccessError: If the path is absolute or escapes the root
        """
        if not rel_path or Path(rel_path).is_absolute():
            raise WorkspaceAccessError(f"Invalid path: {rel_path!r}")

        root = self.root.resolve()
        target = (root / rel_path).resolve()
        if not target.is_relative_to(root):
            raise WorkspaceAccessError(f"Path escapes workspace: {rel_path!r}")
        return target

    def read(self, rel_path: str) -> FileContent:
        """Read a workspace file, capped at ``max_file_bytes``.

        Raises:
            WorkspaceAccessError: If the path is outside the root or a directory
            FileNotFoundError: If the file does not exist
        """
        target = self.resolve(rel_path)
        if not target.exists():
            raise FileNotFoundError(rel_path)
        if not target.is_file():
            raise WorkspaceAccessError(f"Not a file: {rel_path!r}")

        stat = target.stat()
        with open(target, "rb") as f:
            data = f.read(self.max_file_bytes)

        return FileContent(
            content=data.decode("utf-8", errors="replace"),
            truncated=stat.st_size > self.max_file_bytes,
            size=stat.st_size,
            mtime=_mtime(stat.st_mtime),
        )

    def _walk(self, directory: Path, root: Path, depth: int) -> list[TreeNode]:
        try:
            entries = list(directory.iterdir())
        except OSError as e:
            logger.warning(f"Cannot list {directory}: {e}")
            return []

        dirs: list[TreeNode] = []
        files: list[TreeNode] = []

        for entry in sorted(entries, key=lambda p: p.name.lower()):
            if entry.name.startswith("."):
                continue

            try:
                resolved = entry.resolve()
                if not resolved.is_relative_to(root):
                    continue
                stat = entry.stat()
                is_dir = entry.is_dir()
            except OSError:
                # Broken symlink or vanished entry
                continue

            rel = entry.relative_to(self.root).as_posix()

            if is_dir:
                if entry.name in IGNORED_DIRS:
                    continue
                children = []
                if depth + 1 < self.max_depth:
                    children = self._walk(entry, root, depth + 1)
                dirs.append(TreeNode(
                    name=entry.name,
                    path=rel,
                    type=NodeType.DIR,
                    mtime=_mtime(stat.st_mtime),
                    children=children,
                ))
            else:
                files.append(TreeNode(
                    name=entry.name,
                    path=rel,
                    type=NodeType.FILE,
                    size=stat.st_size,
                    mtime=_mtime(stat.st_mtime),
                ))

        return dirs + files
