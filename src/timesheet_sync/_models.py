"""Define dataclasses and types for timesheet sync.

'why': capture configuration, payloads and outcomes in typed, testable shapes
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Literal


class LogLevel(str, Enum):
    """Enumerate supported logging levels."""

    CRITICAL = "CRITICAL"
    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"
    DEBUG = "DEBUG"


class InvalidDatePolicy(str, Enum):
    """Choose what happens to a row whose dates cannot be parsed."""

    SKIP = "skip"
    ABORT = "abort"


@dataclass(frozen=True)
class ApiConfig:
    """Capture connection and auth parameters read from config.json."""

    cookie_header: str
    authorization: str
    origin: str
    referer: str
    content_type: str
    api_url: str
    payload_id: str | None = None


@dataclass(frozen=True)
class SyncOptions:
    """Capture every input of a sync run."""

    csv_path: Path
    mapping_path: Path
    config_path: Path
    log_path: Path
    payload_id: str | None
    timeout: float
    invalid_dates: InvalidDatePolicy
    dry_run: bool
    log_level: LogLevel


@dataclass(frozen=True)
class Interval:
    """Tag a single time span with the project it is billed to."""

    start_time: str
    end_time: str
    project_id: str

    def to_json(self) -> dict[str, str]:
        return {
            "startTime": self.start_time,
            "endTime": self.end_time,
            "projectId": self.project_id,
        }


@dataclass(frozen=True)
class Payload:
    """Body of the interval update request."""

    id: str
    intervals: tuple[Interval, ...]
    start_time: str
    end_time: str

    def to_json(self) -> dict[str, object]:
        """Return the wire representation expected by the API."""

        return {
            "id": self.id,
            "intervals": [interval.to_json() for interval in self.intervals],
            "startTime": self.start_time,
            "endTime": self.end_time,
        }


RowStatus = Literal["succeeded", "skipped", "failed"]


@dataclass(frozen=True)
class RowOutcome:
    """Communicate what happened to one CSV row."""

    line_number: int
    task: str | None
    status: RowStatus
    description: str


@dataclass(frozen=True)
class RunSummary:
    """Aggregate row outcomes of a single run."""

    outcomes: tuple[RowOutcome, ...]

    @property
    def succeeded(self) -> int:
        return self._count("succeeded")

    @property
    def skipped(self) -> int:
        return self._count("skipped")

    @property
    def failed(self) -> int:
        return self._count("failed")

    @property
    def ok(self) -> bool:
        return self.failed == 0

    def _count(self, status: RowStatus) -> int:
        return sum(1 for outcome in self.outcomes if outcome.status == status)
