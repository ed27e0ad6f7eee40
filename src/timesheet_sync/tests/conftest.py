"""Provide shared pytest fixtures.

'why': centralize fixture paths and option building across scenarios
"""
from __future__ import annotations

import shutil
from pathlib import Path

import pytest

from timesheet_sync import SyncOptions, build_options
from timesheet_sync._logging import get_logger

from ._utils import PAYLOAD_ID

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def workdir(tmp_path: Path) -> Path:
    """Copy the input fixtures into an isolated directory.

    'why': keep request logs and edited inputs out of the repository
    """

    for name in ("sample.csv", "mapping.json", "config.json"):
        _ = shutil.copy(FIXTURES / name, tmp_path / name)
    return tmp_path


@pytest.fixture
def sample_csv_path(workdir: Path) -> Path:
    return workdir / "sample.csv"


@pytest.fixture
def sample_mapping_path(workdir: Path) -> Path:
    return workdir / "mapping.json"


@pytest.fixture
def sample_config_path(workdir: Path) -> Path:
    return workdir / "config.json"


@pytest.fixture
def log_path(workdir: Path) -> Path:
    return workdir / "logs" / "api_requests.log"


@pytest.fixture
def sync_options(
    sample_csv_path: Path,
    sample_mapping_path: Path,
    sample_config_path: Path,
    log_path: Path,
) -> SyncOptions:
    """Return options pointing at the copied fixtures with a fixed payload id."""

    return build_options(
        csv_path=sample_csv_path,
        mapping_path=sample_mapping_path,
        config_path=sample_config_path,
        log_path=log_path,
        payload_id=PAYLOAD_ID,
        timeout=5,
    )


@pytest.fixture
def propagating_logger(monkeypatch: pytest.MonkeyPatch) -> None:
    """Let caplog see records from the package logger.

    'why': the package logger does not propagate to the root logger by default
    """

    monkeypatch.setattr(get_logger(), "propagate", True)
