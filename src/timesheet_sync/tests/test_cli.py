"""Cover the command-line entry point and its exit codes."""
from __future__ import annotations

import json
from datetime import date
from pathlib import Path

import pytest

from timesheet_sync.cli import EXIT_FATAL, EXIT_OK, EXIT_ROW_FAILURES, default_csv_name, main

from ._utils import PAYLOAD_ID, install_mock_transport, json_failure, json_success


def _args(workdir: Path, *extra: str) -> list[str]:
    return [
        "--csv",
        str(workdir / "sample.csv"),
        "--mapping",
        str(workdir / "mapping.json"),
        "--config",
        str(workdir / "config.json"),
        "--log-file",
        str(workdir / "api_requests.log"),
        "--env-file",
        str(workdir / ".env"),
        *extra,
    ]


def test_default_csv_name_is_date_stamped() -> None:
    assert default_csv_name(date(2024, 11, 1)) == "2024-11-01.csv"


def test_main_returns_ok_when_all_rows_succeed(workdir: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    capture = json_success({"status": "saved"})
    install_mock_transport(monkeypatch, capture)

    exit_code = main(_args(workdir, "--payload-id", PAYLOAD_ID))

    assert exit_code == EXIT_OK
    assert len(capture.requests) == 2
    assert (workdir / "api_requests.log").exists()


def test_main_reports_row_failures(workdir: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    capture = json_failure({"message": "session expired"}, status_code=401)
    install_mock_transport(monkeypatch, capture)

    exit_code = main(_args(workdir, "--payload-id", PAYLOAD_ID))

    assert exit_code == EXIT_ROW_FAILURES
    assert len(capture.requests) == 2


def test_main_reports_fatal_errors(workdir: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    capture = json_success({})
    install_mock_transport(monkeypatch, capture)
    (workdir / "sample.csv").unlink()

    exit_code = main(_args(workdir, "--payload-id", PAYLOAD_ID))

    assert exit_code == EXIT_FATAL
    assert capture.requests == []


def test_main_reads_payload_id_from_env_file(workdir: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    _ = (workdir / ".env").write_text("TIMESHEET_SYNC_PAYLOAD_ID=from-env\n", encoding="utf-8")
    capture = json_success({})
    install_mock_transport(monkeypatch, capture)

    exit_code = main(_args(workdir))

    assert exit_code == EXIT_OK
    assert {body["id"] for body in capture.payloads()} == {"from-env"}


def test_main_dry_run_makes_no_requests(workdir: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    capture = json_success({})
    install_mock_transport(monkeypatch, capture)

    exit_code = main(_args(workdir, "--payload-id", PAYLOAD_ID, "--dry-run"))

    assert exit_code == EXIT_OK
    assert capture.requests == []
    assert not (workdir / "api_requests.log").exists()


def test_main_rejects_non_ascii_header_config(workdir: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """A header value httpx cannot encode ends the run with the fatal exit code before any row."""

    config_path = workdir / "config.json"
    config = json.loads(config_path.read_text(encoding="utf-8"))
    config["Referer"] = "https://timesheet.example.com/équipe"
    _ = config_path.write_text(json.dumps(config), encoding="utf-8")
    capture = json_success({})
    install_mock_transport(monkeypatch, capture)

    exit_code = main(_args(workdir, "--payload-id", PAYLOAD_ID))

    assert exit_code == EXIT_FATAL
    assert capture.requests == []
    assert not (workdir / "api_requests.log").exists()
