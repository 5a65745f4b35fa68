"""Agent status snapshots for the office view."""

import logging
import time
from datetime import datetime, timezone
from typing import Callable, Optional

from bb_dashboard.core.exceptions import CronSourceUnavailable
from bb_dashboard.models.agent import AgentId, AgentStatus, AgentStatusReport
from bb_dashboard.services.cron_source import CronSource
from bb_dashboard.services.status_resolver import StatusResolver

logger = logging.getLogger(__name__)


def epoch_ms() -> float:
    """Current wall-clock time in epoch milliseconds."""
    return time.time() * 1000


class AgentStatusService:
    """Reads the scheduler's files and resolves agent statuses on demand."""

    def __init__(
        self,
        source: CronSource,
        resolver: StatusResolver,
        clock: Callable[[], float] = epoch_ms,
    ):
        self.source = source
        self.resolver = resolver
        self.clock = clock

    def snapshot(self, now: Optional[float] = None) -> AgentStatusReport:
        """Compute a fresh status report.

        If the registry cannot be read every agent is reported offline and
        the report is flagged unavailable.
        """
        if now is None:
            now = self.clock()
        computed_at = datetime.fromtimestamp(now / 1000, tz=timezone.utc)

        try:
            jobs = self.source.load_jobs()
        except CronSourceUnavailable as e:
            logger.error(f"Agent status unavailable: {e}")
            return AgentStatusReport(
                statuses={agent: AgentStatus.OFFLINE for agent in AgentId},
                computed_at=computed_at,
                available=False,
                error=str(e),
            )

        statuses = self.resolver.resolve(jobs, self.source.run_tails(jobs), now)
        return AgentStatusReport(statuses=statuses, computed_at=computed_at)
