"""Command-line entry point for a sync run.

Axis of change: argparse wiring and `.env` defaults for the run options.
"""
from __future__ import annotations

import argparse
import sys
import textwrap
from collections.abc import Mapping, Sequence
from datetime import date
from pathlib import Path
from typing import Final

from dotenv import dotenv_values

from ._config import build_options
from ._core import sync_timesheet
from ._errors import TimesheetSyncError
from ._logging import get_logger
from ._models import InvalidDatePolicy, LogLevel, SyncOptions

_ENV_PREFIX: Final[str] = "TIMESHEET_SYNC_"
_DEFAULT_ENV_FILE: Final[str] = ".env"

EXIT_OK: Final[int] = 0
EXIT_ROW_FAILURES: Final[int] = 1
EXIT_FATAL: Final[int] = 2


def main(argv: Sequence[str] | None = None) -> int:
    """Run a sync from the command line and return the process exit code.

    'why': 0 when every row went through or was skipped, 1 when any row failed, 2 on fatal errors
    """

    logger = get_logger()
    namespace = _parse_args(argv)
    env = _load_env(Path(namespace.env_file))
    try:
        options = _options_from(namespace, env)
        summary = sync_timesheet(options)
    except TimesheetSyncError as exc:
        logger.error("Error: %s", exc)
        return EXIT_FATAL

    return EXIT_OK if summary.ok else EXIT_ROW_FAILURES


def default_csv_name(today: date | None = None) -> str:
    """Return the date-stamped export name used when --csv is not given."""

    return f"{(today or date.today()).isoformat()}.csv"


# --- Private helpers ---


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="timesheet-sync",
        description="Submit time entries from a CSV export to the interval update API.",
        epilog=textwrap.dedent("""\
            examples:
                timesheet-sync --csv 2024-11-01.csv --payload-id 673cab8c2b00164687c238b5
                timesheet-sync --csv 2024-11-01.csv --dry-run --log-level DEBUG
        """),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    _ = parser.add_argument("--csv", dest="csv_path", help="time entry export (default: <today>.csv)")
    _ = parser.add_argument("--mapping", dest="mapping_path", help="company to project id JSON (default: mapping.json)")
    _ = parser.add_argument("--config", dest="config_path", help="API connection JSON (default: config.json)")
    _ = parser.add_argument("--log-file", dest="log_path", help="request audit log (default: api_requests.log)")
    _ = parser.add_argument("--payload-id", help="id sent with every payload (default: payloadId from config)")
    _ = parser.add_argument("--timeout", type=float, help="per-request timeout in seconds (default: 30)")
    _ = parser.add_argument(
        "--on-invalid-date",
        dest="invalid_dates",
        choices=[policy.value for policy in InvalidDatePolicy],
        help="skip rows with unparsable dates or abort the run (default: skip)",
    )
    _ = parser.add_argument("--dry-run", action="store_true", help="build payloads without logging or sending them")
    _ = parser.add_argument(
        "--log-level",
        choices=[level.value for level in LogLevel],
        default=LogLevel.INFO.value,
        help="console verbosity (default: INFO)",
    )
    _ = parser.add_argument("--env-file", default=_DEFAULT_ENV_FILE, help="dotenv file with TIMESHEET_SYNC_* defaults")
    return parser.parse_args(list(argv) if argv is not None else sys.argv[1:])


def _load_env(path: Path) -> Mapping[str, str | None]:
    if not path.is_file():
        return {}
    return dotenv_values(path)


def _env_value(env: Mapping[str, str | None], key: str) -> str | None:
    value = env.get(_ENV_PREFIX + key)
    if value is None or not value.strip():
        return None
    return value.strip()


def _options_from(namespace: argparse.Namespace, env: Mapping[str, str | None]) -> SyncOptions:
    return build_options(
        csv_path=namespace.csv_path or _env_value(env, "CSV") or default_csv_name(),
        mapping_path=namespace.mapping_path or _env_value(env, "MAPPING") or "mapping.json",
        config_path=namespace.config_path or _env_value(env, "CONFIG") or "config.json",
        log_path=namespace.log_path or _env_value(env, "LOG_FILE") or "api_requests.log",
        payload_id=namespace.payload_id or _env_value(env, "PAYLOAD_ID"),
        timeout=namespace.timeout,
        invalid_dates=namespace.invalid_dates,
        dry_run=namespace.dry_run,
        log_level=namespace.log_level,
    )
