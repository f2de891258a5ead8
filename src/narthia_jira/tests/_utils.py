"""Offer reusable test utilities.

'why': centralize HTTP mocking, forge host fakes, and request capture for scenario assertions
"""
from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field

import httpx
from pytest import MonkeyPatch

from narthia_jira import Route


@dataclass(slots=True)
class MockTransportCapture:
    """Capture requests emitted during a mocked exchange.

    'why': allow tests to assert on request construction without global state
    """

    transport: httpx.MockTransport
    requests: list[httpx.Request]


def json_success(payload: object, *, status_code: int = 200) -> MockTransportCapture:
    """Return a mock transport yielding a JSON success payload."""

    recorded: list[httpx.Request] = []

    async def handler(request: httpx.Request) -> httpx.Response:
        recorded.append(request)
        return httpx.Response(status_code, json=payload, request=request)

    return MockTransportCapture(httpx.MockTransport(handler), recorded)


def empty_success(*, status_code: int = 204) -> MockTransportCapture:
    """Return a mock transport yielding a bodiless success.

    'why': exercise endpoints that declare no response body
    """

    recorded: list[httpx.Request] = []

    async def handler(request: httpx.Request) -> httpx.Response:
        recorded.append(request)
        return httpx.Response(status_code, request=request)

    return MockTransportCapture(httpx.MockTransport(handler), recorded)


def json_failure(payload: Mapping[str, object], *, status_code: int) -> MockTransportCapture:
    """Return a mock transport returning a JSON failure payload.

    'why': drive API error scenarios with realistic Jira error bodies
    """

    recorded: list[httpx.Request] = []

    async def handler(request: httpx.Request) -> httpx.Response:
        recorded.append(request)
        body = json.dumps(payload).encode("utf-8")
        return httpx.Response(status_code, headers={"content-type": "application/json"}, content=body, request=request)

    return MockTransportCapture(httpx.MockTransport(handler), recorded)


def text_response(text: str, *, status_code: int) -> MockTransportCapture:
    """Return a mock transport answering with a plain-text body.

    'why': cover the non-JSON error and success fallbacks
    """

    recorded: list[httpx.Request] = []

    async def handler(request: httpx.Request) -> httpx.Response:
        recorded.append(request)
        return httpx.Response(
            status_code,
            headers={"content-type": "text/plain"},
            content=text.encode("utf-8"),
            request=request,
        )

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

    'why': ensure the client under test routes through controlled mock transports
    """

    original_async_client = httpx.AsyncClient

    class _PatchedAsyncClient(original_async_client):
        def __init__(self, *args: object, **kwargs: object) -> None:  # type: ignore[override]
            kwdict: dict[str, object] = dict(kwargs)
            kwdict["transport"] = capture.transport
            super().__init__(*args, **kwdict)

    monkeypatch.setattr("narthia_jira._http.httpx.AsyncClient", _PatchedAsyncClient)


@dataclass(slots=True)
class ForgeCall:
    """One request observed by the fake forge host."""

    identity: str
    route: Route
    method: str
    headers: dict[str, str]
    content: str | bytes | None


@dataclass
class FakeForgeAPI:
    """Stand in for the Forge runtime's capability handle.

    'why': record identity selection and request shape without a host runtime
    """

    response: httpx.Response = field(default_factory=lambda: httpx.Response(200, json={}))
    error: Exception | None = None
    calls: list[ForgeCall] = field(default_factory=list)

    def as_app(self) -> _FakeRequester:
        return _FakeRequester(self, "app")

    def as_user(self) -> _FakeRequester:
        return _FakeRequester(self, "user")


@dataclass(slots=True)
class _FakeRequester:
    host: FakeForgeAPI
    identity: str

    async def request_jira(
        self,
        route: Route,
        *,
        method: str,
        headers: Mapping[str, str],
        content: str | bytes | None,
    ) -> httpx.Response:
        self.host.calls.append(ForgeCall(self.identity, route, method, dict(headers), content))
        if self.host.error is not None:
            raise self.host.error
        return self.host.response
