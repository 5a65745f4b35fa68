"""Pydantic models for API requests/responses and domain objects."""

from .agent import ROSTER, AgentId, AgentProfile, AgentStatus, AgentStatusReport
from .audit import AuditData, AuditHistoryEntry, AuditResponse, AuditSection, AuditStatus
from .files import FileContent, NodeType, TreeNode
from .job import JobRecord, RunEvent
from .kanban import Board, Column, Priority, Task, TaskCreate, TaskUpdate
from .report import AgentReport

__all__ = [
    "ROSTER",
    "AgentId",
    "AgentProfile",
    "AgentStatus",
    "AgentStatusReport",
    "AuditData",
    "AuditHistoryEntry",
    "AuditResponse",
    "AuditSection",
    "AuditStatus",
    "FileContent",
    "NodeType",
    "TreeNode",
    "JobRecord",
    "RunEvent",
    "Board",
    "Column",
    "Priority",
    "Task",
    "TaskCreate",
    "TaskUpdate",
    "AgentReport",
]
