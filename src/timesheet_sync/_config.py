"""Load the API config file and normalize run options.

'why': read connection settings once per run and reject invalid options before any I/O
"""
from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Final, cast

from ._errors import ClientConfigurationError, ConfigLoadError
from ._logging import get_logger, set_log_level
from ._models import ApiConfig, InvalidDatePolicy, LogLevel, SyncOptions


_logger = get_logger()

DEFAULT_TIMEOUT: Final[float] = 30.0

_CONFIG_KEYS: Final[dict[str, str]] = {
    "cookie_header": "cookieHeader",
    "authorization": "Authorization",
    "origin": "Origin",
    "referer": "Referer",
    "content_type": "contentType",
    "api_url": "apiUrl",
}

_HEADER_ATTRIBUTES: Final[frozenset[str]] = frozenset(_CONFIG_KEYS) - {"api_url"}


def load_api_config(path: Path) -> ApiConfig:
    """Return the ApiConfig stored at `path`.

    Field presence is not checked; missing fields become empty strings and
    surface as authentication failures once the API is called. Header fields
    must be ASCII.
    """

    raw = _read_json_object(path)
    values: dict[str, str] = {}
    for attribute, key in _CONFIG_KEYS.items():
        value = raw.get(key)
        if value is None:
            _logger.debug("config %s has no %s field", path, key)
            value = ""
        text = str(value)
        if attribute in _HEADER_ATTRIBUTES and not text.isascii():
            raise ConfigLoadError(f"config file {path}: {key} must contain ASCII characters only")
        values[attribute] = text
    payload_id = _normalized_identifier(raw.get("payloadId"))
    return ApiConfig(payload_id=payload_id, **values)


def build_options(
    *,
    csv_path: str | Path,
    mapping_path: str | Path = "mapping.json",
    config_path: str | Path = "config.json",
    log_path: str | Path = "api_requests.log",
    payload_id: str | None = None,
    timeout: float | None = None,
    invalid_dates: InvalidDatePolicy | str | None = None,
    dry_run: bool | None = None,
    log_level: LogLevel | str | None = None,
) -> SyncOptions:
    """Validate inputs and return an immutable SyncOptions.

    'why': turn loose CLI or caller values into one explicit, checked record
    """

    if payload_id is not None and not payload_id.strip():
        raise ClientConfigurationError("payload_id must be a non-empty string when provided")

    level = _normalized_level(log_level)
    options = SyncOptions(
        csv_path=Path(csv_path),
        mapping_path=Path(mapping_path),
        config_path=Path(config_path),
        log_path=Path(log_path),
        payload_id=_normalized_identifier(payload_id),
        timeout=_validated_timeout(timeout),
        invalid_dates=_normalized_policy(invalid_dates),
        dry_run=bool(dry_run),
        log_level=level,
    )
    set_log_level(level)
    return options


def _read_json_object(path: Path) -> dict[str, object]:
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigLoadError(f"cannot read config file {path}: {exc}") from exc
    try:
        raw = cast(object, json.loads(content))
    except json.JSONDecodeError as exc:
        raise ConfigLoadError(f"config file {path} must be valid JSON: {exc}") from exc
    if not isinstance(raw, Mapping):
        raise ConfigLoadError(f"config file {path} must contain a JSON object")
    return dict(cast(Mapping[str, object], raw))


def _normalized_level(level: LogLevel | str | None) -> LogLevel:
    if level is None:
        return LogLevel.INFO
    if isinstance(level, LogLevel):
        return level
    try:
        return LogLevel(level.strip().upper())
    except ValueError as exc:
        raise ClientConfigurationError(f"unsupported log_level: {level}") from exc


def _validated_timeout(timeout: float | None) -> float:
    if timeout is None:
        return DEFAULT_TIMEOUT
    if timeout <= 0:
        raise ClientConfigurationError("timeout must be positive when provided")
    return float(timeout)


def _normalized_policy(value: InvalidDatePolicy | str | None) -> InvalidDatePolicy:
    if value is None:
        return InvalidDatePolicy.SKIP
    if isinstance(value, InvalidDatePolicy):
        return value
    try:
        return InvalidDatePolicy(value.strip().lower())
    except ValueError as exc:
        raise ClientConfigurationError(f"unsupported invalid date policy: {value}") from exc


def _normalized_identifier(value: object) -> str | None:
    if value is None:
        return None
    candidate = str(value).strip()
    return candidate or None
