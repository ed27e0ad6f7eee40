"""Offer reusable test utilities.

'why': centralize HTTP mocking and request capture for scenario assertions
"""
from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from dataclasses import dataclass

import httpx
from pytest import MonkeyPatch

PAYLOAD_ID = "673cab8c2b00164687c238b5"


@dataclass(slots=True)
class MockTransportCapture:
    """Capture requests emitted during a mocked exchange.

    'why': allow tests to assert on request construction without global state
    """

    transport: httpx.MockTransport
    requests: list[httpx.Request]

    def payloads(self) -> list[dict[str, object]]:
        """Decode the JSON body of every recorded request."""

        return [json.loads(request.content.decode("utf-8")) for request in self.requests]


def json_success(payload: Mapping[str, object], *, status_code: int = 200) -> MockTransportCapture:
    """Return a mock transport yielding a JSON success payload."""

    recorded: list[httpx.Request] = []

    async def handler(request: httpx.Request) -> httpx.Response:
        recorded.append(request)
        return httpx.Response(status_code, json=payload, request=request)

    return MockTransportCapture(httpx.MockTransport(handler), recorded)


def json_failure(payload: dict[str, object], *, status_code: int) -> MockTransportCapture:
    """Return a mock transport returning a JSON failure payload.

    'why': drive per-row failure scenarios with realistic API responses
    """

    return status_sequence([(status_code, payload)])


def status_sequence(responses: Sequence[tuple[int, Mapping[str, object] | None]]) -> MockTransportCapture:
    """Return a mock transport answering each request with the next scripted response.

    The last response repeats once the script is exhausted; `None` sends an empty body.
    """

    recorded: list[httpx.Request] = []

    async def handler(request: httpx.Request) -> httpx.Response:
        index = min(len(recorded), len(responses) - 1)
        recorded.append(request)
        status_code, body = responses[index]
        if body is None:
            return httpx.Response(status_code, request=request)
        headers = {"content-type": "application/json"}
        content = json.dumps(body).encode("utf-8")
        return httpx.Response(status_code, headers=headers, content=content, request=request)

    return MockTransportCapture(httpx.MockTransport(handler), recorded)


def transport_error(exc: Exception) -> MockTransportCapture:
    """Return a mock transport that raises the provided exception.

    'why': simplify negative-path tests covering transport failures
    """

    recorded: list[httpx.Request] = []

    async def handler(request: httpx.Request) -> httpx.Response:
        recorded.append(request)
        raise exc

    return MockTransportCapture(httpx.MockTransport(handler), recorded)


def install_mock_transport(monkeypatch: MonkeyPatch, capture: MockTransportCapture) -> None:
    """Patch `httpx.AsyncClient` within `_http` to use the provided transport.

    'why': ensure the code under test routes through controlled mock transports
    """

    original_async_client = httpx.AsyncClient

    class _PatchedAsyncClient(original_async_client):
        def __init__(self, *args: object, **kwargs: object) -> None:  # type: ignore[override]
            kwdict: dict[str, object] = dict(kwargs)
            kwdict["transport"] = capture.transport
            super().__init__(*args, **kwdict)

    monkeypatch.setattr("timesheet_sync._http.httpx.AsyncClient", _PatchedAsyncClient)
