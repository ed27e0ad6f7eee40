"""Read the time entry export into memory."""
from __future__ import annotations

import csv
from pathlib import Path
from typing import Final

from ._errors import CSVLoadError


TASK_COLUMN: Final[str] = "Task"
START_COLUMN: Final[str] = "Date\\Started"
END_COLUMN: Final[str] = "End"


def read_rows(path: Path) -> list[dict[str, str]]:
    """Return every data row of `path` keyed by its header, in file order.

    Required columns are not checked here; a missing column shows up as a
    missing value when the row is processed.
    """

    delimiter = "\t" if path.suffix.lower() == ".tsv" else ","
    try:
        with path.open("r", encoding="utf-8-sig", newline="") as handle:
            reader = csv.DictReader(handle, delimiter=delimiter)
            return [dict(row) for row in reader]
    except (OSError, UnicodeDecodeError, csv.Error) as exc:
        raise CSVLoadError(f"cannot read CSV file {path}: {exc}") from exc
