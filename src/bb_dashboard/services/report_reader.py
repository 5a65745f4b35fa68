"""Per-agent markdown reports written by the agents themselves."""

import logging
from datetime import datetime, timezone
from pathlib import Path

from bb_dashboard.models.agent import ROSTER, AgentProfile
from bb_dashboard.models.report import AgentReport

logger = logging.getLogger(__name__)


class ReportReader:
    """Reads ``<reports_dir>/<agent>.md`` for each roster agent."""

    def __init__(self, reports_dir: Path):
        self.reports_dir = Path(reports_dir)

    def read_all(self) -> list[AgentReport]:
        """Get every agent's report in roster order."""
        return [self.read(profile) for profile in ROSTER]

    def read(self, profile: AgentProfile) -> AgentReport:
        """Get one agent's report; missing or unreadable reports are empty."""
        path = self.reports_dir / f"{profile.id.value}.md"
        empty = AgentReport(agent=profile.id, emoji=profile.emoji)

        try:
            stat = path.stat()
            content = path.read_text(encoding="utf-8", errors="replace")
        except FileNotFoundError:
            return empty
        except OSError as e:
            logger.warning(f"Cannot read report {path}: {e}")
            return empty

        return AgentReport(
            agent=profile.id,
            emoji=profile.emoji,
            content=content,
            mtime=datetime.fromtimestamp(stat.st_mtime, tz=timezone.utc),
            exists=True,
        )
