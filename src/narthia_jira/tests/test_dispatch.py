"""Test direct-mode dispatch end to end.

'why': guarantee requests reach the Jira site with the right target, headers, and body, and that outcomes normalize
"""
from __future__ import annotations

import json

import httpx
import pytest

from narthia_jira import (
    JiraClient,
    JiraConfig,
    JiraFailure,
    JiraSuccess,
    RequestDescriptor,
    UnsupportedClientTypeError,
)
from narthia_jira._config import build_settings
from narthia_jira._dispatch import dispatch
from narthia_jira._headers import basic_authorization
from narthia_jira._logging import get_logger
from narthia_jira._models import DefaultAuth, LogLevel, Settings

from ._utils import (
    empty_success,
    install_mock_transport,
    json_failure,
    json_success,
    text_response,
    transport_error,
)


@pytest.mark.asyncio
async def test_get_issue_reaches_rendered_target(client: JiraClient, monkeypatch: pytest.MonkeyPatch) -> None:
    """Return parsed JSON from a direct GET.

    'why': verify the base URL, rendered path, and basic-auth header on the wire
    """

    # Given: the site answers with an issue payload
    capture = json_success({"key": "PROJ-123", "fields": {"summary": "Broken build"}})
    install_mock_transport(monkeypatch, capture)

    # When: an issue is requested by key
    result = await client.request_async(
        RequestDescriptor(
            method="GET",
            path="/rest/api/3/issue/{issueKeyOrId}",
            path_params={"issueKeyOrId": "PROJ-123"},
        )
    )

    # Then: one request hits the rendered target and the body comes back as data
    assert result == JiraSuccess(status=200, data={"key": "PROJ-123", "fields": {"summary": "Broken build"}})
    assert len(capture.requests) == 1
    request = capture.requests[0]
    assert request.method == "GET"
    assert str(request.url) == "https://example.atlassian.net/rest/api/3/issue/PROJ-123"
    assert request.headers["Authorization"] == basic_authorization("dev@example.com", "secret-token")
    assert request.headers["Accept"] == "application/json"


@pytest.mark.asyncio
async def test_query_omits_unset_values(client: JiraClient, monkeypatch: pytest.MonkeyPatch) -> None:
    capture = json_success({"values": []})
    install_mock_transport(monkeypatch, capture)

    _ = await client.request_async(
        RequestDescriptor(
            method="GET",
            path="/rest/api/3/project/search",
            query_params={"startAt": 0, "maxResults": None},
        )
    )

    url = capture.requests[0].url
    assert url.params.get("startAt") == "0"
    assert "maxResults" not in url.params


@pytest.mark.asyncio
async def test_body_is_sent_verbatim(client: JiraClient, monkeypatch: pytest.MonkeyPatch) -> None:
    capture = json_success({"id": "10000"}, status_code=201)
    install_mock_transport(monkeypatch, capture)
    body = json.dumps({"fields": {"summary": "New issue"}})

    result = await client.request_async(RequestDescriptor(method="POST", path="/rest/api/3/issue", body=body))

    assert result.status == 201
    assert capture.requests[0].content == body.encode("utf-8")
    assert capture.requests[0].headers["Content-Type"] == "application/json"


@pytest.mark.asyncio
async def test_empty_body_is_omitted(client: JiraClient, monkeypatch: pytest.MonkeyPatch) -> None:
    capture = empty_success()
    install_mock_transport(monkeypatch, capture)

    result = await client.request_async(
        RequestDescriptor(method="DELETE", path="/rest/api/3/issue/PROJ-1", body="", expects_body=False)
    )

    assert result == JiraSuccess(status=204, data=None)
    assert capture.requests[0].content == b""


@pytest.mark.asyncio
async def test_experimental_and_override_headers(client: JiraClient, monkeypatch: pytest.MonkeyPatch) -> None:
    capture = json_success({})
    install_mock_transport(monkeypatch, capture)

    _ = await client.request_async(
        RequestDescriptor(
            method="GET",
            path="/rest/api/3/myself",
            experimental=True,
            headers={"accept": "application/xml"},
        )
    )

    headers = capture.requests[0].headers
    assert headers["X-ExperimentalApi"] == "opt-in"
    assert headers.get_list("accept") == ["application/xml"]


@pytest.mark.asyncio
async def test_json_error_response(client: JiraClient, monkeypatch: pytest.MonkeyPatch) -> None:
    payload = {"errorMessages": ["You do not have permission"], "errors": {}}
    install_mock_transport(monkeypatch, json_failure(payload, status_code=403))

    result = await client.request_async(RequestDescriptor(method="GET", path="/rest/api/3/issue/PROJ-9"))

    assert result == JiraFailure(status=403, error=payload)


@pytest.mark.asyncio
async def test_plain_text_not_found(client: JiraClient, monkeypatch: pytest.MonkeyPatch) -> None:
    """A non-JSON 404 yields the status text as the error message."""

    install_mock_transport(monkeypatch, text_response("Not Found", status_code=404))

    result = await client.request_async(RequestDescriptor(method="GET", path="/rest/api/3/issue/NOPE-1"))

    assert result == JiraFailure(status=404, error={"message": "Not Found"})


@pytest.mark.asyncio
async def test_network_failure_is_status_zero(
    client: JiraClient,
    monkeypatch: pytest.MonkeyPatch,
    caplog: pytest.LogCaptureFixture,
) -> None:
    """Transport exceptions resolve to a failure result and a warning, never a raise."""

    install_mock_transport(monkeypatch, transport_error(httpx.ConnectError("Name or service not known")))
    monkeypatch.setattr(get_logger(), "propagate", True)

    result = await client.request_async(RequestDescriptor(method="GET", path="/rest/api/3/myself"))

    assert result == JiraFailure(status=0, error="Name or service not known")
    assert "transport failure" in caplog.text


@pytest.mark.asyncio
async def test_timeout_is_reported_as_transport_failure(
    client: JiraClient,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    install_mock_transport(monkeypatch, transport_error(httpx.ReadTimeout("timed out")))

    result = await client.request_async(RequestDescriptor(method="GET", path="/rest/api/3/myself"))

    assert isinstance(result, JiraFailure)
    assert result.status == 0
    assert result.error == "timed out"


@pytest.mark.asyncio
async def test_unsupported_client_type_raises() -> None:
    """A config that bypassed validation is a programming error, not a result."""

    auth = DefaultAuth(email="dev@example.com", api_token="t", base_url="https://example.atlassian.net")
    settings = Settings(
        config=JiraConfig(type="carrier-pigeon", auth=auth),  # type: ignore[arg-type]
        timeout=None,
        log_level=LogLevel.INFO,
    )

    with pytest.raises(UnsupportedClientTypeError):
        _ = await dispatch(settings, RequestDescriptor(method="GET", path="/rest/api/3/myself"))


def test_blocking_request(default_config: dict[str, object], monkeypatch: pytest.MonkeyPatch) -> None:
    capture = json_success({"version": "1001.0.0"})
    install_mock_transport(monkeypatch, capture)
    client = JiraClient(build_settings(default_config).config)

    result = client.request(RequestDescriptor(method="GET", path="/rest/api/3/serverInfo"))

    assert result == JiraSuccess(status=200, data={"version": "1001.0.0"})
