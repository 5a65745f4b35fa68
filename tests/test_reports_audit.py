"""Tests for agent reports and audit history."""

import json

from bb_dashboard.models.agent import ROSTER, AgentId
from bb_dashboard.services.audit_reader import AuditReader
from bb_dashboard.services.report_reader import ReportReader


def audit_doc(day, status="ok"):
    return {
        "date": day,
        "runAt": f"{day}T06:00:00Z",
        "overallStatus": status,
        "sections": [{"name": "Disk", "status": status, "findings": ["80% used"]}],
        "summary": "All good" if status == "ok" else "Check disk",
    }


def test_reports_in_roster_order(tmp_path):
    """Test that every agent gets a report entry, present or not."""
    (tmp_path / "scout.md").write_text("# Scout\nFound 3 leads.")

    reports = ReportReader(tmp_path).read_all()

    assert [r.agent for r in reports] == [p.id for p in ROSTER]
    scout = next(r for r in reports if r.agent == AgentId.SCOUT)
    assert scout.exists is True
    assert scout.content.startswith("# Scout")
    assert scout.mtime is not None
    fred = reports[0]
    assert fred.exists is False
    assert fred.content == ""
    assert fred.mtime is None


def test_reports_api(client, test_settings):
    """Test the report endpoints."""
    test_settings.reports_dir.mkdir(parents=True)
    (test_settings.reports_dir / "cash.md").write_text("Budget ok")

    response = client.get("/api/reports")
    assert response.status_code == 200
    assert len(response.json()) == len(ROSTER)

    response = client.get("/api/reports/cash")
    assert response.status_code == 200
    assert response.json()["content"] == "Budget ok"
    assert response.json()["emoji"] == "💰"

    assert client.get("/api/reports/nobody").status_code == 404


def test_audit_latest_and_history(tmp_path):
    """Test that audits are ordered newest first and bad files skipped."""
    for day, status in [("2026-10-14", "ok"), ("2026-10-16", "warning"), ("2026-10-15", "ok")]:
        (tmp_path / f"{day}.json").write_text(json.dumps(audit_doc(day, status)))
    (tmp_path / "2026-10-17.json").write_text("{broken")
    (tmp_path / "notes.json").write_text(json.dumps(audit_doc("2026-10-18")))

    result = AuditReader(tmp_path, history_days=2).load()

    assert result.latest.date == "2026-10-16"
    assert result.latest.overall_status == "warning"
    assert [h.date for h in result.history] == ["2026-10-16", "2026-10-15"]


def test_audit_missing_dir(tmp_path):
    """Test that no audit directory means no audits."""
    result = AuditReader(tmp_path / "none").load()
    assert result.latest is None
    assert result.history == []


def test_audit_api(client, test_settings):
    """Test the audit endpoint uses the frontend's field names."""
    test_settings.audit_dir.mkdir(parents=True)
    (test_settings.audit_dir / "2026-10-17.json").write_text(json.dumps(audit_doc("2026-10-17")))

    response = client.get("/api/audit")
    assert response.status_code == 200
    data = response.json()
    assert data["latest"]["overallStatus"] == "ok"
    assert data["latest"]["runAt"] == "2026-10-17T06:00:00Z"
    assert data["history"][0]["date"] == "2026-10-17"
