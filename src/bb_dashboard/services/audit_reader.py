"""Daily audit results stored as one JSON file per day."""

import json
import logging
from datetime import date
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from bb_dashboard.models.audit import AuditData, AuditHistoryEntry, AuditResponse

logger = logging.getLogger(__name__)


class AuditReader:
    """Reads ``<audit_dir>/<YYYY-MM-DD>.json`` files."""

    def __init__(self, audit_dir: Path, history_days: int = 14):
        self.audit_dir = Path(audit_dir)
        self.history_days = history_days

    def load(self) -> AuditResponse:
        """Latest audit plus up to ``history_days`` entries, newest first."""
        history: list[AuditHistoryEntry] = []

        for day, path in self._dated_files():
            if len(history) >= self.history_days:
                break
            data = self._read(path)
            if data is not None:
                history.append(AuditHistoryEntry(date=day.isoformat(), data=data))

        return AuditResponse(
            latest=history[0].data if history else None,
            history=history,
        )

    def _dated_files(self) -> list[tuple[date, Path]]:
        if not self.audit_dir.is_dir():
            return []

        dated = []
        for path in self.audit_dir.glob("*.json"):
            try:
                day = date.fromisoformat(path.stem)
            except ValueError:
                logger.debug(f"Ignoring non-dated audit file: {path.name}")
                continue
            dated.append((day, path))

        return sorted(dated, reverse=True)

    def _read(self, path: Path) -> Optional[AuditData]:
        try:
            return AuditData.model_validate(json.loads(path.read_text(encoding="utf-8")))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError, ValidationError) as e:
            logger.warning(f"Skipping unreadable audit {path.name}: {e}")
            return None
