"""Expose the sync entry points and public types.

'why': provide a small, explicit surface for loading options and running a sync
"""
from ._config import build_options, load_api_config
from ._core import sync_timesheet, sync_timesheet_async
from ._errors import (
    ClientConfigurationError,
    ConfigLoadError,
    CSVLoadError,
    IntervalApiUnavailable,
    InvalidDateFormat,
    MappingLoadError,
    RequestLogError,
    TimesheetSyncError,
)
from ._models import (
    ApiConfig,
    InvalidDatePolicy,
    Interval,
    LogLevel,
    Payload,
    RowOutcome,
    RunSummary,
    SyncOptions,
)
from ._payload import build_payload, previous_day_boundary, same_day_boundary

__all__ = [
    "ApiConfig",
    "ClientConfigurationError",
    "ConfigLoadError",
    "CSVLoadError",
    "IntervalApiUnavailable",
    "Interval",
    "InvalidDateFormat",
    "InvalidDatePolicy",
    "LogLevel",
    "MappingLoadError",
    "Payload",
    "RequestLogError",
    "RowOutcome",
    "RunSummary",
    "SyncOptions",
    "TimesheetSyncError",
    "build_options",
    "build_payload",
    "load_api_config",
    "previous_day_boundary",
    "same_day_boundary",
    "sync_timesheet",
    "sync_timesheet_async",
]

__version__ = "0.0.1"
