"""Load the company to project id lookup table."""
from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import cast

from ._errors import MappingLoadError
from ._logging import get_logger


_logger = get_logger()


def load_mapping(path: Path) -> dict[str, str]:
    """Return the flat company name to project id mapping stored at `path`.

    Entries whose value is not a string are dropped with a warning.
    """

    try:
        content = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise MappingLoadError(f"cannot read mapping file {path}: {exc}") from exc
    try:
        raw = cast(object, json.loads(content))
    except json.JSONDecodeError as exc:
        raise MappingLoadError(f"mapping file {path} must be valid JSON: {exc}") from exc
    if not isinstance(raw, Mapping):
        raise MappingLoadError(f"mapping file {path} must contain a JSON object")

    mapping: dict[str, str] = {}
    for company, project_id in cast(Mapping[str, object], raw).items():
        if not isinstance(project_id, str):
            _logger.warning("mapping entry %r ignored: project id must be a string", company)
            continue
        mapping[company] = project_id
    _logger.debug("loaded %s mapping entries from %s", len(mapping), path)
    return mapping
