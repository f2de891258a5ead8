"""Test the client facade over the endpoint tables.

'why': callers reach every endpoint as `client.<group>.<operation>(...)`, in either dispatch mode
"""
from __future__ import annotations

import json

import pytest

from narthia_jira import ActAs, JiraClient, JiraFailure, JiraSuccess, UnknownOperationError

from ._utils import FakeForgeAPI, empty_success, install_mock_transport, json_success, text_response


@pytest.mark.asyncio
async def test_get_issue_by_key(client: JiraClient, monkeypatch: pytest.MonkeyPatch) -> None:
    """Fetch an issue through its named operation.

    'why': verify keyword arguments become the rendered path and repeated query keys
    """

    # Given: the site returns an issue
    capture = json_success({"key": "PROJ-123"})
    install_mock_transport(monkeypatch, capture)

    # When: the issue is fetched with multi-valued properties
    result = await client.issues.get_issue(issue_id_or_key="PROJ-123", properties=["p1", "p2"], fields_by_keys=None)

    # Then: the target carries the key and one properties pair per value
    assert result == JiraSuccess(status=200, data={"key": "PROJ-123"})
    url = capture.requests[0].url
    assert url.path == "/rest/api/3/issue/PROJ-123"
    assert url.params.get_list("properties") == ["p1", "p2"]
    assert "fieldsByKeys" not in url.params


@pytest.mark.asyncio
async def test_search_with_pagination(client: JiraClient, monkeypatch: pytest.MonkeyPatch) -> None:
    capture = json_success({"issues": [], "total": 0})
    install_mock_transport(monkeypatch, capture)

    result = await client.issue_search.search_for_issues_using_jql(jql="project = PROJ", start_at=0, max_results=None)

    assert result.success is True
    params = capture.requests[0].url.params
    assert params.get("jql") == "project = PROJ"
    assert params.get("startAt") == "0"
    assert "maxResults" not in params


@pytest.mark.asyncio
async def test_add_comment_posts_json(client: JiraClient, monkeypatch: pytest.MonkeyPatch) -> None:
    capture = json_success({"id": "10010"}, status_code=201)
    install_mock_transport(monkeypatch, capture)
    comment = {"body": {"type": "doc", "version": 1, "content": []}}

    result = await client.issue_comments.add_comment(issue_id_or_key="PROJ-1", body=comment)

    assert result == JiraSuccess(status=201, data={"id": "10010"})
    request = capture.requests[0]
    assert request.method == "POST"
    assert request.url.path == "/rest/api/3/issue/PROJ-1/comment"
    assert json.loads(request.content) == comment


@pytest.mark.asyncio
async def test_bodiless_endpoint_returns_no_data(client: JiraClient, monkeypatch: pytest.MonkeyPatch) -> None:
    install_mock_transport(monkeypatch, empty_success())

    result = await client.issue_comments.delete_comment(issue_id_or_key="PROJ-1", id="10010")

    assert result == JiraSuccess(status=204, data=None)


@pytest.mark.asyncio
async def test_agile_endpoint(client: JiraClient, monkeypatch: pytest.MonkeyPatch) -> None:
    capture = json_success({"values": [{"id": 1, "name": "PROJ board"}]})
    install_mock_transport(monkeypatch, capture)

    result = await client.board.get_all_boards(type=["scrum"], project_key_or_id="PROJ")

    assert result.success is True
    assert capture.requests[0].url.path == "/rest/agile/1.0/board"
    assert capture.requests[0].url.params.get("projectKeyOrId") == "PROJ"


@pytest.mark.asyncio
async def test_endpoint_failure_is_a_result(client: JiraClient, monkeypatch: pytest.MonkeyPatch) -> None:
    install_mock_transport(monkeypatch, text_response("Not Found", status_code=404))

    result = await client.issues.get_issue(issue_id_or_key="NOPE-1")

    assert result == JiraFailure(status=404, error={"message": "Not Found"})


@pytest.mark.asyncio
async def test_per_call_header_override(client: JiraClient, monkeypatch: pytest.MonkeyPatch) -> None:
    capture = json_success({})
    install_mock_transport(monkeypatch, capture)

    _ = await client.myself.get_current_user(headers={"X-Force-Accept-Language": "true"})

    assert capture.requests[0].headers["X-Force-Accept-Language"] == "true"


@pytest.mark.asyncio
async def test_forge_operation_selects_identity(forge_client: JiraClient, forge_api: FakeForgeAPI) -> None:
    _ = await forge_client.myself.get_current_user()
    _ = await forge_client.myself.get_current_user(act_as=ActAs.USER)

    assert [call.identity for call in forge_api.calls] == ["app", "user"]
    assert str(forge_api.calls[0].route) == "/rest/api/3/myself"


@pytest.mark.asyncio
async def test_unexpected_keyword_raises(client: JiraClient) -> None:
    with pytest.raises(TypeError):
        _ = await client.myself.get_current_user(issue_id_or_key="PROJ-1")


def test_unknown_group_raises(client: JiraClient) -> None:
    with pytest.raises(UnknownOperationError) as exc:
        _ = client.not_a_group

    assert "not_a_group" in str(exc.value)
    assert not hasattr(client, "_private")


def test_groups_are_cached_and_listed(client: JiraClient) -> None:
    assert client.issues is client.issues
    groups = client.operation_groups()
    assert {"issues", "groups", "board", "myself"} <= set(groups)
    assert list(groups) == sorted(groups)
    assert "issues" in dir(client)


def test_operation_repr_and_doc(client: JiraClient) -> None:
    operation = client.server_info.get_server_info

    assert operation.__doc__ == "GET /rest/api/3/serverInfo"
    assert "server_info.get_server_info" in repr(operation)


@pytest.mark.asyncio
async def test_read_workflows_posts_payload(client: JiraClient, monkeypatch: pytest.MonkeyPatch) -> None:
    """Send the bulk workflow read payload alongside its expand query.

    'why': Jira requires the workflow selection in the request body
    """

    # Given: the site answers with workflow data
    capture = json_success({"workflows": [], "statuses": []})
    install_mock_transport(monkeypatch, capture)

    # When: workflows are read by name
    result = await client.workflows.read_workflows(body={"workflowNames": ["Default"]}, expand="values.transitions")

    # Then: the payload and query both reach the wire
    assert result.success is True
    request = capture.requests[0]
    assert request.url.path == "/rest/api/3/workflows"
    assert request.url.params.get("expand") == "values.transitions"
    assert json.loads(request.content) == {"workflowNames": ["Default"]}
