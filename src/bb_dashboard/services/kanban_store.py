"""Kanban board persisted as a single JSON document."""

import json
import logging
import os
import tempfile
import threading
from pathlib import Path
from uuid import uuid4

from pydantic import ValidationError

from bb_dashboard.core.exceptions import TaskNotFoundError
from bb_dashboard.models.kanban import Board, Task, TaskCreate, TaskUpdate, utcnow

logger = logging.getLogger(__name__)


class KanbanStore:
    """Manages board tasks stored in ``{"tasks": [...]}`` form."""

    def __init__(self, board_file: Path):
        self.board_file = Path(board_file)
        self._lock = threading.Lock()

    def list_tasks(self) -> list[Task]:
        """Get all tasks in stored order."""
        return self._load().tasks

    def get(self, task_id: str) -> Task:
        for task in self._load().tasks:
            if task.id == task_id:
                return task
        raise TaskNotFoundError(task_id)

    def create(self, request: TaskCreate) -> Task:
        """Create a new task."""
        with self._lock:
            board = self._load()
            task = Task(id=str(uuid4()), **request.model_dump())
            board.tasks.append(task)
            self._save(board)
        logger.info(f"Task created: {task.id} ({task.title})")
        return task

    def update(self, task_id: str, request: TaskUpdate) -> Task:
        """Apply a partial update to a task."""
        with self._lock:
            board = self._load()
            for i, task in enumerate(board.tasks):
                if task.id == task_id:
                    changes = request.model_dump(exclude_unset=True, exclude_none=True)
                    updated = task.model_copy(update={**changes, "updated_at": utcnow()})
                    board.tasks[i] = updated
                    self._save(board)
                    logger.info(f"Task updated: {task_id} {sorted(changes)}")
                    return updated
        raise TaskNotFoundError(task_id)

    def delete(self, task_id: str) -> None:
        """Delete a task."""
        with self._lock:
            board = self._load()
            remaining = [t for t in board.tasks if t.id != task_id]
            if len(remaining) == len(board.tasks):
                raise TaskNotFoundError(task_id)
            board.tasks = remaining
            self._save(board)
        logger.info(f"Task deleted: {task_id}")

    def _load(self) -> Board:
        if not self.board_file.exists():
            return Board()

        try:
            data = json.loads(self.board_file.read_text(encoding="utf-8"))
            return Board.model_validate(data)
        except (json.JSONDecodeError, UnicodeDecodeError, ValidationError) as e:
            logger.error(f"Kanban file is corrupt, starting empty: {e}")
            return Board()

    def _save(self, board: Board) -> None:
        self.board_file.parent.mkdir(parents=True, exist_ok=True)
        payload = board.model_dump(mode="json", by_alias=True)

        fd, tmp_path = tempfile.mkstemp(
            dir=self.board_file.parent, prefix=".kanban-", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(payload, f, indent=2, ensure_ascii=False)
            os.replace(tmp_path, self.board_file)
        except Exception:
            Path(tmp_path).unlink(missing_ok=True)
            raise
