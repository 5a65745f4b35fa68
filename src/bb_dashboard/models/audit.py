"""Audit result models."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class AuditStatus(str, Enum):
    OK = "ok"
    WARNING = "warning"
    CRITICAL = "critical"


class AuditSection(BaseModel):
    """One checked area of the daily audit."""

    name: str
    status: AuditStatus
    findings: list[str] = Field(default_factory=list)
    notes: Optional[str] = None


class AuditData(BaseModel):
    """A daily audit document as written by the audit agent."""

    model_config = ConfigDict(populate_by_name=True)

    date: str
    run_at: str = Field(alias="runAt")
    overall_status: AuditStatus = Field(alias="overallStatus")
    sections: list[AuditSection] = Field(default_factory=list)
    summary: str = ""


class AuditHistoryEntry(BaseModel):
    date: str
    data: AuditData


class AuditResponse(BaseModel):
    """Latest audit plus recent history, newest first."""

    latest: Optional[AuditData] = None
    history: list[AuditHistoryEntry] = Field(default_factory=list)
