"""HTTP helpers for the interval update API."""
from __future__ import annotations

import json
from typing import Final

import httpx

from ._errors import IntervalApiUnavailable
from ._models import ApiConfig, Payload

DEFAULT_CONTENT_TYPE: Final[str] = "application/json"


def build_headers(config: ApiConfig) -> dict[str, str]:
    """Return the fixed header set sent with every interval update."""

    return {
        "Cookie": config.cookie_header,
        "Authorization": config.authorization,
        "Origin": config.origin,
        "Referer": config.referer,
        "Content-Type": config.content_type or DEFAULT_CONTENT_TYPE,
    }


async def submit_interval_update(
    *,
    url: str,
    payload: Payload,
    headers: dict[str, str],
    timeout: float,
) -> httpx.Response:
    """PATCH the payload to `url` and return the raw response.

    Non-2xx responses are returned as-is; transport failures raise IntervalApiUnavailable.
    """

    body = json.dumps(payload.to_json()).encode("utf-8")
    try:
        async with httpx.AsyncClient(timeout=httpx.Timeout(timeout)) as client:
            return await client.patch(url, content=body, headers=headers)
    except (httpx.HTTPError, httpx.InvalidURL, UnicodeEncodeError) as exc:
        raise IntervalApiUnavailable(str(exc) or type(exc).__name__) from exc


def describe_failure(response: httpx.Response) -> str:
    """Prefer the server-provided error body over a generic status message."""

    text = response.text.strip()
    if text:
        return text
    return f"HTTP {response.status_code}"


def describe_success(response: httpx.Response) -> object:
    try:
        return response.json()
    except ValueError:
        return response.text
