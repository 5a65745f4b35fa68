"""Shared test fixtures."""

import json
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from bb_dashboard.api.deps import init_services
from bb_dashboard.core.config import Settings
from bb_dashboard.main import app, build_services

MINUTE_MS = 60 * 1000
HOUR_MS = 60 * MINUTE_MS


def write_jobs(cron_dir: Path, jobs: list[dict]) -> None:
    cron_dir.mkdir(parents=True, exist_ok=True)
    (cron_dir / "jobs.json").write_text(json.dumps({"jobs": jobs}))


def write_runs(cron_dir: Path, job_id: str, events: list[dict]) -> Path:
    runs_dir = cron_dir / "runs"
    runs_dir.mkdir(parents=True, exist_ok=True)
    path = runs_dir / f"{job_id}.jsonl"
    path.write_text("".join(json.dumps(e) + "\n" for e in events))
    return path


@pytest.fixture
def test_settings(tmp_path):
    """Settings pointing every data path into a temp directory."""
    return Settings(
        cron_dir=tmp_path / "cron",
        workspace_dir=tmp_path / "workspace",
        kanban_file=tmp_path / "dashboard" / "kanban.json",
        reports_dir=tmp_path / "reports",
        audit_dir=tmp_path / "audit",
        gateway_command=["definitely-not-a-real-gateway-binary"],
        gateway_timeout_seconds=1,
    )


@pytest.fixture
def client(test_settings):
    """Create a test client with services wired to temp directories."""
    init_services(**build_services(test_settings))
    return TestClient(app)
