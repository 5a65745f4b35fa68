"""Read-only access to the scheduler's job registry and run logs."""

import json
import logging
import os
from pathlib import Path
from typing import Iterable, Optional

from pydantic import ValidationError

from bb_dashboard.core.exceptions import CronSourceUnavailable
from bb_dashboard.models.job import JobRecord, RunEvent

logger = logging.getLogger(__name__)

TAIL_BLOCK_SIZE = 4096


class CronSource:
    """Reads the job registry and the per-job ``<job_id>.jsonl`` run logs.

    Missing or malformed data is treated as "no signal". Only a registry
    that exists but cannot be read raises ``CronSourceUnavailable``.
    """

    def __init__(self, jobs_file: Path, runs_dir: Path):
        self.jobs_file = Path(jobs_file)
        self.runs_dir = Path(runs_dir)

    def load_jobs(self) -> list[JobRecord]:
        """Load the job registry, skipping malformed entries."""
        try:
            raw = self.jobs_file.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.debug(f"No job registry at {self.jobs_file}")
            return []
        except UnicodeDecodeError:
            logger.warning(f"Job registry is not valid UTF-8: {self.jobs_file}")
            return []
        except OSError as e:
            raise CronSourceUnavailable(f"Cannot read {self.jobs_file}: {e}") from e

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.warning(f"Job registry is not valid JSON: {e}")
            return []

        entries = data.get("jobs") if isinstance(data, dict) else None
        if not isinstance(entries, list):
            logger.warning("Job registry has no 'jobs' list")
            return []

        jobs = []
        for entry in entries:
            try:
                jobs.append(JobRecord.model_validate(entry))
            except ValidationError:
                logger.debug(f"Skipping malformed job entry: {entry!r}")
        return jobs

    def run_log_path(self, job_id: str) -> Optional[Path]:
        """Path of a job's run log, or None if the id is not a plain name."""
        if not job_id or job_id in (".", "..") or Path(job_id).name != job_id:
            return None
        return self.runs_dir / f"{job_id}.jsonl"

    def last_run(self, job_id: str) -> Optional[RunEvent]:
        """Parse the last non-empty line of a job's run log.

        Returns None when the log is missing, empty, or its last line is not
        a JSON object.
        """
        path = self.run_log_path(job_id)
        if path is None:
            logger.debug(f"Ignoring unsafe job id: {job_id!r}")
            return None

        try:
            line = read_last_line(path)
        except FileNotFoundError:
            return None
        except OSError as e:
            logger.warning(f"Cannot read run log {path}: {e}")
            return None

        if line is None:
            return None

        try:
            data = json.loads(line)
        except json.JSONDecodeError:
            logger.debug(f"Last line of {path} is not valid JSON")
            return None

        if not isinstance(data, dict):
            return None

        try:
            return RunEvent.model_validate(data)
        except ValidationError:
            logger.debug(f"Last line of {path} has no usable timestamp")
            return None

    def run_tails(self, jobs: Iterable[JobRecord]) -> dict[str, Optional[RunEvent]]:
        """Last run event for every enabled job."""
        return {job.id: self.last_run(job.id) for job in jobs if job.enabled}


def read_last_line(path: Path, block_size: int = TAIL_BLOCK_SIZE) -> Optional[str]:
    """Return the last non-blank line of a file, reading from the end.

    Returns None for an empty or whitespace-only file.
    """
    with open(path, "rb") as f:
        f.seek(0, os.SEEK_END)
        pos = f.tell()
        buf = b""

        while pos > 0:
            step = min(block_size, pos)
            pos -= step
            f.seek(pos)
            buf = f.read(step) + buf

            content = buf.rstrip()
            if not content:
                continue
            newline = content.rfind(b"\n")
            if newline != -1:
                return content[newline + 1:].decode("utf-8", errors="replace")

    content = buf.strip()
    if not content:
        return None
    return content.decode("utf-8", errors="replace")
