"""Drive a sync run: load inputs once, then submit rows one at a time.

'why': keep the per-row policy (skip, fail, continue) in one place and report it as a summary
"""
from __future__ import annotations

import asyncio
import json
from collections.abc import Mapping

from ._config import load_api_config
from ._csv import TASK_COLUMN, read_rows
from ._errors import ClientConfigurationError, IntervalApiUnavailable, InvalidDateFormat, RequestLogError
from ._http import build_headers, describe_failure, describe_success, submit_interval_update
from ._logging import get_logger
from ._mapping import load_mapping
from ._models import ApiConfig, InvalidDatePolicy, Payload, RowOutcome, RunSummary, SyncOptions
from ._payload import build_payload
from ._request_log import log_request


_logger = get_logger()

_FIRST_DATA_LINE = 2


def sync_timesheet(options: SyncOptions) -> RunSummary:
    """Run a full sync and block until every row has been handled."""

    return asyncio.run(sync_timesheet_async(options))


async def sync_timesheet_async(options: SyncOptions) -> RunSummary:
    """Submit every mapped row of the CSV export, strictly in file order.

    Loading errors propagate. Per-row failures are recorded and never stop the batch,
    except InvalidDateFormat under the abort policy.
    """

    config = load_api_config(options.config_path)
    payload_id = _resolved_payload_id(options, config)
    mapping = load_mapping(options.mapping_path)
    rows = read_rows(options.csv_path)
    headers = build_headers(config)

    _logger.info("processing %s rows from %s", len(rows), options.csv_path)
    outcomes: list[RowOutcome] = []
    for line_number, row in enumerate(rows, start=_FIRST_DATA_LINE):
        outcome = await _process_row(
            row,
            line_number=line_number,
            mapping=mapping,
            payload_id=payload_id,
            config=config,
            headers=headers,
            options=options,
        )
        outcomes.append(outcome)

    summary = RunSummary(outcomes=tuple(outcomes))
    _logger.info(
        "processed %s rows: %s succeeded, %s skipped, %s failed",
        len(summary.outcomes),
        summary.succeeded,
        summary.skipped,
        summary.failed,
    )
    return summary


async def _process_row(
    row: Mapping[str, str | None],
    *,
    line_number: int,
    mapping: Mapping[str, str],
    payload_id: str,
    config: ApiConfig,
    headers: dict[str, str],
    options: SyncOptions,
) -> RowOutcome:
    company = row.get(TASK_COLUMN)
    project_id = mapping.get(company) if company is not None else None
    if not project_id:
        _logger.warning("No project ID found for company: %s", company)
        return RowOutcome(line_number, company, "skipped", "no project id mapped")

    try:
        payload = build_payload(row, project_id, payload_id)
    except InvalidDateFormat as exc:
        if options.invalid_dates is InvalidDatePolicy.ABORT:
            raise InvalidDateFormat(f"line {line_number}: {exc}") from exc
        _logger.warning("skipping line %s (%s): %s", line_number, company, exc)
        return RowOutcome(line_number, company, "skipped", str(exc))

    if options.dry_run:
        _logger.info("dry run, line %s payload: %s", line_number, json.dumps(payload.to_json()))
        return RowOutcome(line_number, company, "skipped", "dry run")

    return await _submit(
        payload,
        line_number=line_number,
        company=company,
        config=config,
        headers=headers,
        options=options,
    )


async def _submit(
    payload: Payload,
    *,
    line_number: int,
    company: str | None,
    config: ApiConfig,
    headers: dict[str, str],
    options: SyncOptions,
) -> RowOutcome:
    try:
        log_request(options.log_path, payload, headers)
    except RequestLogError as exc:
        _logger.error("line %s not submitted: %s", line_number, exc)
        return RowOutcome(line_number, company, "failed", str(exc))

    try:
        response = await submit_interval_update(
            url=config.api_url,
            payload=payload,
            headers=headers,
            timeout=options.timeout,
        )
    except IntervalApiUnavailable as exc:
        _logger.error("Network Error: %s", exc)
        return RowOutcome(line_number, company, "failed", str(exc))

    if not response.is_success:
        description = describe_failure(response)
        _logger.error("Network Error: %s", description)
        return RowOutcome(line_number, company, "failed", description)

    _logger.info("API call succeeded: %s", describe_success(response))
    return RowOutcome(line_number, company, "succeeded", f"HTTP {response.status_code}")


def _resolved_payload_id(options: SyncOptions, config: ApiConfig) -> str:
    payload_id = options.payload_id or config.payload_id
    if not payload_id:
        raise ClientConfigurationError(
            f"payload id required; pass payload_id or set payloadId in {options.config_path}"
        )
    return payload_id
