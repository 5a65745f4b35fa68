"""Tests for configuration loading."""

from pathlib import Path

from bb_dashboard.core.config import Settings


def test_default_settings():
    """Test that default settings load correctly."""
    settings = Settings()

    assert settings.port == 4001
    assert settings.working_window_seconds == 900
    assert settings.idle_window_seconds == 43200
    assert settings.agent_aliases == {"main": "fred"}
    assert settings.jobs_file == settings.cron_dir / "jobs.json"
    assert settings.runs_dir == settings.cron_dir / "runs"


def test_settings_from_env(monkeypatch):
    """Test loading settings from environment variables."""
    monkeypatch.setenv("BB_PORT", "9000")
    monkeypatch.setenv("BB_CRON_DIR", "/srv/cron")
    monkeypatch.setenv("BB_WORKING_WINDOW_SECONDS", "600")
    monkeypatch.setenv("BB_AGENT_ALIASES", '{"main": "fred", "ops": "mac"}')

    settings = Settings()

    assert settings.port == 9000
    assert settings.cron_dir == Path("/srv/cron")
    assert settings.jobs_file == Path("/srv/cron/jobs.json")
    assert settings.working_window_seconds == 600
    assert settings.agent_aliases["ops"] == "mac"
