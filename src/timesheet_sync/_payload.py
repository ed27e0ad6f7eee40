"""Build interval update payloads from CSV rows.

'why': keep the day-boundary arithmetic pure and separately testable
"""
from __future__ import annotations

from collections.abc import Mapping
from datetime import UTC, date, datetime, timedelta
from typing import Final

from ._csv import END_COLUMN, START_COLUMN
from ._errors import InvalidDateFormat
from ._models import Interval, Payload


_BOUNDARY_TIME: Final[str] = "T23:00:00.000Z"


def parse_timestamp(value: str | None) -> datetime:
    """Parse an ISO 8601 date-time, treating values without an offset as UTC."""

    text = (value or "").strip()
    if not text:
        raise InvalidDateFormat("date-time value is missing")
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError as exc:
        raise InvalidDateFormat(f"invalid date-time: {value!r}") from exc
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=UTC)
    return parsed.astimezone(UTC)


def previous_day_boundary(moment: datetime) -> str:
    """Return 23:00 UTC of the calendar day before `moment`."""

    return _boundary(_utc_date(moment) - timedelta(days=1))


def same_day_boundary(moment: datetime) -> str:
    """Return 23:00 UTC of the calendar day of `moment`."""

    return _boundary(_utc_date(moment))


def build_payload(row: Mapping[str, str | None], project_id: str, payload_id: str) -> Payload:
    """Assemble the request body for one CSV row.

    The interval keeps the raw CSV strings; only the outer window is derived
    from the parsed dates. Raises InvalidDateFormat when either date is unusable.
    """

    raw_start = row.get(START_COLUMN)
    raw_end = row.get(END_COLUMN)
    interval_start = parse_timestamp(raw_start)
    interval_end = parse_timestamp(raw_end)

    interval = Interval(
        start_time=raw_start or "",
        end_time=raw_end or "",
        project_id=project_id,
    )
    return Payload(
        id=payload_id,
        intervals=(interval,),
        start_time=previous_day_boundary(interval_start),
        end_time=same_day_boundary(interval_end),
    )


def _utc_date(moment: datetime) -> date:
    if moment.tzinfo is None:
        return moment.date()
    return moment.astimezone(UTC).date()


def _boundary(day: date) -> str:
    return day.isoformat() + _BOUNDARY_TIME
