"""Agent status inference from job run recency."""

import logging
from typing import Any, Iterable, Mapping, Optional, Union

from pydantic import ValidationError

from bb_dashboard.core.config import Settings
from bb_dashboard.models.agent import AgentId, AgentStatus
from bb_dashboard.models.job import JobRecord, RunEvent

logger = logging.getLogger(__name__)

JobLike = Union[JobRecord, Mapping[str, Any]]
RunLike = Union[RunEvent, Mapping[str, Any], None]


class StatusResolver:
    """Maps a job registry and run-log tails to a status per roster agent.

    The resolver is a pure function of its inputs and the injected ``now``:
    it does no I/O and keeps no state between calls. Each agent's status is
    decided by the most recent run across all of its enabled jobs.
    """

    def __init__(
        self,
        working_window_ms: float,
        idle_window_ms: Optional[float] = None,
        aliases: Optional[Mapping[str, str]] = None,
    ):
        """
        Args:
            working_window_ms: Runs younger than this mean ``working``
            idle_window_ms: Runs younger than this mean ``idle``. ``None``
                means any recorded run keeps the agent at least idle.
            aliases: Registry agent ids mapped to roster ids (e.g. main -> fred)
        """
        if working_window_ms <= 0:
            raise ValueError("working window must be positive")
        if idle_window_ms is not None and idle_window_ms <= working_window_ms:
            raise ValueError("idle window must be longer than the working window")

        self.working_window_ms = working_window_ms
        self.idle_window_ms = idle_window_ms
        self.aliases = dict(aliases or {})

    @classmethod
    def from_settings(cls, settings: Settings) -> "StatusResolver":
        idle = settings.idle_window_seconds
        return cls(
            working_window_ms=settings.working_window_seconds * 1000,
            idle_window_ms=idle * 1000 if idle is not None else None,
            aliases=settings.agent_aliases,
        )

    def agent_for(self, registry_agent_id: str) -> Optional[AgentId]:
        """Resolve a registry agent id to a roster agent, or None if unknown."""
        name = self.aliases.get(registry_agent_id, registry_agent_id)
        try:
            return AgentId(name)
        except ValueError:
            return None

    def classify(self, age_ms: float) -> AgentStatus:
        """Bucket the age of an agent's most recent run."""
        if age_ms < self.working_window_ms:
            return AgentStatus.WORKING
        if self.idle_window_ms is None or age_ms < self.idle_window_ms:
            return AgentStatus.IDLE
        return AgentStatus.OFFLINE

    def resolve(
        self,
        jobs: Optional[Iterable[JobLike]],
        run_tails: Optional[Mapping[str, RunLike]],
        now: float,
    ) -> dict[AgentId, AgentStatus]:
        """Compute the status of every roster agent.

        Args:
            jobs: Registry entries; malformed ones are skipped
            run_tails: Last parsed run event per job id (None when no data)
            now: Current time in epoch milliseconds

        Returns:
            A status for every ``AgentId``
        """
        statuses = {agent: AgentStatus.OFFLINE for agent in AgentId}
        run_tails = run_tails or {}
        youngest: dict[AgentId, float] = {}

        for job in _valid_jobs(jobs or ()):
            if not job.enabled:
                continue
            agent = self.agent_for(job.agent_id)
            if agent is None:
                logger.debug(f"Skipping job {job.id}: unknown agent {job.agent_id!r}")
                continue
            event = _as_run_event(run_tails.get(job.id))
            if event is None:
                continue

            age = now - (event.ts or 0)
            if agent not in youngest or age < youngest[agent]:
                youngest[agent] = age

        for agent, age in youngest.items():
            statuses[agent] = self.classify(age)

        return statuses


def _valid_jobs(jobs: Iterable[JobLike]) -> Iterable[JobRecord]:
    for entry in jobs:
        if isinstance(entry, JobRecord):
            yield entry
            continue
        try:
            yield JobRecord.model_validate(entry)
        except ValidationError:
            logger.debug(f"Skipping malformed job entry: {entry!r}")


def _as_run_event(value: RunLike) -> Optional[RunEvent]:
    if value is None or isinstance(value, RunEvent):
        return value
    try:
        return RunEvent.model_validate(value)
    except ValidationError:
        return None
