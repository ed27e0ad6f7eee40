"""Define the exception hierarchy for timesheet sync.

'why': let callers separate fatal setup failures from per-row problems
"""
from __future__ import annotations


class TimesheetSyncError(Exception):
    """Base class for every error raised by the package."""


class ClientConfigurationError(TimesheetSyncError):
    """Raised when run options are missing or invalid."""


class ConfigLoadError(TimesheetSyncError):
    """Raised when the API config file cannot be read or parsed."""


class MappingLoadError(TimesheetSyncError):
    """Raised when the company mapping file cannot be read or parsed."""


class CSVLoadError(TimesheetSyncError):
    """Raised when the time entry export cannot be read."""


class InvalidDateFormat(TimesheetSyncError):
    """Raised when a row carries a missing or unparsable date-time."""


class RequestLogError(TimesheetSyncError):
    """Raised when the audit log entry cannot be written."""


class IntervalApiUnavailable(TimesheetSyncError):
    """Raised when the interval API cannot be reached."""
