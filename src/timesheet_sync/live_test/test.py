"""Minimal live harness for a sync run against the real API.

Run with: uv run live_check
Reads credentials and paths from `.env` next to this file; nothing is sent with
TIMESHEET_SYNC_DRY_RUN=1.
"""

from __future__ import annotations

import sys
from pathlib import Path

from dotenv import dotenv_values

from timesheet_sync import build_options, sync_timesheet

ROOT = Path(__file__).resolve().parent
ENV = dotenv_values(ROOT / ".env")


def _env_value(key: str, default: str | None = None) -> str | None:
    value = ENV.get(key)
    if value is None or not value.strip():
        return default
    return value.strip()


def main() -> int:
    data_dir = ROOT / "data"
    options = build_options(
        csv_path=_env_value("TIMESHEET_SYNC_CSV", str(data_dir / "entries.csv")) or "",
        mapping_path=_env_value("TIMESHEET_SYNC_MAPPING", str(data_dir / "mapping.json")) or "",
        config_path=_env_value("TIMESHEET_SYNC_CONFIG", str(data_dir / "config.json")) or "",
        log_path=ROOT / "api_requests.log",
        payload_id=_env_value("TIMESHEET_SYNC_PAYLOAD_ID"),
        dry_run=_env_value("TIMESHEET_SYNC_DRY_RUN", "0") == "1",
        log_level="DEBUG",
    )
    summary = sync_timesheet(options)

    print("=" * 70)
    for outcome in summary.outcomes:
        print(f"line {outcome.line_number:>4}  {outcome.status:<9}  {outcome.task}  {outcome.description}")
    print("=" * 70)
    print(f"succeeded={summary.succeeded} skipped={summary.skipped} failed={summary.failed}")
    return 0 if summary.ok else 1


if __name__ == "__main__":
    sys.exit(main())
