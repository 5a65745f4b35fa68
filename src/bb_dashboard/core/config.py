"""Server configuration."""

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

OPENCLAW_HOME = Path.home() / ".openclaw"


class Settings(BaseSettings):
    """Server configuration loaded from environment."""

    model_config = SettingsConfigDict(
        env_prefix="BB_",
        env_file=".env",
        env_parse_none_str="null",
        extra="ignore",
    )

    # Server settings
    host: str = "127.0.0.1"
    port: int = 4001
    debug: bool = False
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])

    # Scheduler data (jobs.json + runs/<job_id>.jsonl)
    cron_dir: Path = OPENCLAW_HOME / "cron"

    # Dashboard data
    workspace_dir: Path = OPENCLAW_HOME / "workspace"
    kanban_file: Path = OPENCLAW_HOME / "dashboard" / "kanban.json"
    reports_dir: Path = OPENCLAW_HOME / "workspace" / "reports"
    audit_dir: Path = OPENCLAW_HOME / "workspace" / "audit"

    # Agent status thresholds
    working_window_seconds: int = 15 * 60  # Ran within this -> working
    idle_window_seconds: Optional[int] = 12 * 60 * 60  # None: any past run is idle
    agent_aliases: dict[str, str] = Field(default_factory=lambda: {"main": "fred"})

    # Workspace browser
    max_file_bytes: int = 512 * 1024
    tree_max_depth: int = 6

    # Audit
    audit_history_days: int = 14

    # Gateway status probe
    gateway_command: list[str] = Field(
        default_factory=lambda: ["openclaw", "gateway", "status"]
    )
    gateway_timeout_seconds: float = 5.0

    @property
    def jobs_file(self) -> Path:
        """Job registry written by the scheduler."""
        return self.cron_dir / "jobs.json"

    @property
    def runs_dir(self) -> Path:
        """Directory holding one JSONL run log per job."""
        return self.cron_dir / "runs"


settings = Settings()
