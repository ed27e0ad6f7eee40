"""Append an audit record for every outgoing request."""
from __future__ import annotations

import json
from collections.abc import Mapping
from datetime import UTC, datetime
from pathlib import Path
from typing import Final

from ._errors import RequestLogError
from ._models import Payload


SEPARATOR: Final[str] = "-" * 43


def format_log_entry(payload: Payload, headers: Mapping[str, str], at: datetime) -> str:
    """Return the text block recorded for one request."""

    timestamp = at.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")
    return (
        f"Request Time: {timestamp}\n"
        f"Headers: {json.dumps(dict(headers), indent=2)}\n"
        f"Payload: {json.dumps(payload.to_json(), indent=2)}\n"
        f"{SEPARATOR}\n"
    )


def log_request(path: Path, payload: Payload, headers: Mapping[str, str]) -> None:
    """Append the request block to `path`, creating the file when absent."""

    entry = format_log_entry(payload, headers, datetime.now(UTC))
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("a", encoding="utf-8") as handle:
            _ = handle.write(entry)
    except OSError as exc:
        raise RequestLogError(f"cannot append to request log {path}: {exc}") from exc
