"""Domain exceptions raised by dashboard services."""


class DashboardError(Exception):
    """Base class for dashboard service errors."""


class CronSourceUnavailable(DashboardError):
    """The scheduler's files cannot be read at all."""


class WorkspaceAccessError(DashboardError):
    """A requested path is outside the workspace or not a readable file."""


class TaskNotFoundError(DashboardError):
    """No kanban task with the given id."""

    def __init__(self, task_id: str):
        super().__init__(f"Task not found: {task_id}")
        self.task_id = task_id
