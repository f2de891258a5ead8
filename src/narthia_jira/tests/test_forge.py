"""Test forge-mode dispatch through the host capability handle.

'why': proxied calls must pick the right identity and hand the host a credential-free request
"""
from __future__ import annotations

import httpx
import pytest

from narthia_jira import ActAs, JiraClient, JiraFailure, JiraSuccess, RequestDescriptor, Route
from narthia_jira._dispatch import DEFAULT_ACT_AS

from ._utils import FakeForgeAPI, install_mock_transport, json_success


@pytest.mark.asyncio
async def test_defaults_to_app_identity(forge_client: JiraClient, forge_api: FakeForgeAPI) -> None:
    """A call without an identity selector runs as the installed app.

    'why': the fallback identity is fixed rather than inherited from whichever code path ran
    """

    # Given: a forge client whose host answers 200
    forge_api.response = httpx.Response(200, json={"accountId": "557058:abc"})

    # When: a call is made with no act_as option
    result = await forge_client.request_async(RequestDescriptor(method="GET", path="/rest/api/3/myself"))

    # Then: the host saw exactly one app-identity request
    assert DEFAULT_ACT_AS is ActAs.APP
    assert result == JiraSuccess(status=200, data={"accountId": "557058:abc"})
    assert [call.identity for call in forge_api.calls] == ["app"]


@pytest.mark.asyncio
async def test_user_identity_on_request(forge_client: JiraClient, forge_api: FakeForgeAPI) -> None:
    _ = await forge_client.request_async(
        RequestDescriptor(method="GET", path="/rest/api/3/myself", act_as=ActAs.USER)
    )

    assert [call.identity for call in forge_api.calls] == ["user"]


@pytest.mark.asyncio
async def test_host_receives_route_and_headers(forge_client: JiraClient, forge_api: FakeForgeAPI) -> None:
    """The rendered target travels as a Route; no Authorization header is composed."""

    _ = await forge_client.request_async(
        RequestDescriptor(
            method="PUT",
            path="/rest/api/3/issue/{issueIdOrKey}",
            path_params={"issueIdOrKey": "PROJ-7"},
            query_params={"notifyUsers": False},
            body='{"fields":{}}',
            experimental=True,
        )
    )

    call = forge_api.calls[0]
    assert call.route == Route("/rest/api/3/issue/PROJ-7?notifyUsers=false")
    assert call.method == "PUT"
    assert call.content == '{"fields":{}}'
    assert "Authorization" not in call.headers
    assert call.headers["Content-Type"] == "application/json"
    assert call.headers["X-ExperimentalApi"] == "opt-in"


@pytest.mark.asyncio
async def test_forge_never_uses_direct_transport(
    forge_client: JiraClient,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    capture = json_success({})
    install_mock_transport(monkeypatch, capture)

    _ = await forge_client.request_async(RequestDescriptor(method="GET", path="/rest/api/3/myself"))

    assert capture.requests == []


@pytest.mark.asyncio
async def test_host_error_response_normalizes(forge_client: JiraClient, forge_api: FakeForgeAPI) -> None:
    forge_api.response = httpx.Response(401, content=b"Unauthorized")

    result = await forge_client.request_async(RequestDescriptor(method="GET", path="/rest/api/3/myself"))

    assert result == JiraFailure(status=401, error={"message": "Unauthorized"})


@pytest.mark.asyncio
async def test_host_exception_becomes_status_zero(forge_client: JiraClient, forge_api: FakeForgeAPI) -> None:
    forge_api.error = RuntimeError("egress blocked")

    result = await forge_client.request_async(RequestDescriptor(method="GET", path="/rest/api/3/myself"))

    assert result == JiraFailure(status=0, error="egress blocked")


@pytest.mark.asyncio
async def test_bodiless_success_has_no_data(forge_client: JiraClient, forge_api: FakeForgeAPI) -> None:
    forge_api.response = httpx.Response(204)

    result = await forge_client.request_async(
        RequestDescriptor(method="DELETE", path="/rest/api/3/issue/PROJ-7", expects_body=False)
    )

    assert result == JiraSuccess(status=204, data=None)
