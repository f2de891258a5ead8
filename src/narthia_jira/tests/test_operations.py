"""Test the table-driven operation layer.

'why': hundreds of endpoints share one invoke path, so its argument mapping and the tables themselves must be sound
"""
from __future__ import annotations

import json

import pytest

from narthia_jira import ActAs, JiraSuccess, Operation, RequestDescriptor, UnknownOperationError
from narthia_jira._models import JiraResult
from narthia_jira._operations import OperationGroup, build_request, python_name, serialize_body
from narthia_jira._params import placeholders
from narthia_jira.endpoints import GROUPS


@pytest.mark.parametrize(
    ("wire", "expected"),
    [
        ("issueIdOrKey", "issue_id_or_key"),
        ("startAt", "start_at"),
        ("id", "id"),
        ("projectIds", "project_ids"),
        ("accountIdLocation", "account_id_location"),
        ("JQL", "jql"),
        ("from", "from_"),
        ("_expand", "expand"),
    ],
)
def test_python_name(wire: str, expected: str) -> None:
    assert python_name(wire) == expected


def test_operation_exposes_keyword_arguments() -> None:
    operation = Operation("GET", "/rest/api/3/issue/{issueIdOrKey}", query=("fields", "startAt"))

    assert operation.path_arguments == {"issue_id_or_key": "issueIdOrKey"}
    assert operation.query_arguments == {"fields": "fields", "start_at": "startAt"}


def test_build_request_maps_arguments_to_wire_names() -> None:
    """Keyword arguments land in path or query params under their wire names."""

    operation = GROUPS["issues"]["get_issue"]

    request = build_request(
        "issues.get_issue",
        operation,
        {"issue_id_or_key": "PROJ-123", "fields": ["summary"], "properties": ["a", "b"]},
        act_as=ActAs.USER,
    )

    assert request == RequestDescriptor(
        method="GET",
        path="/rest/api/3/issue/{issueIdOrKey}",
        path_params={"issueIdOrKey": "PROJ-123"},
        query_params={"fields": ["summary"], "properties": ["a", "b"]},
        multi_valued=frozenset({"properties"}),
        act_as=ActAs.USER,
    )


def test_build_request_serializes_json_bodies() -> None:
    operation = GROUPS["issue_comments"]["add_comment"]

    request = build_request(
        "issue_comments.add_comment",
        operation,
        {"issue_id_or_key": "PROJ-1"},
        body={"body": {"type": "doc", "version": 1, "content": []}},
    )

    assert request.method == "POST"
    assert isinstance(request.body, str)
    assert json.loads(request.body) == {"body": {"type": "doc", "version": 1, "content": []}}


def test_build_request_rejects_unknown_arguments() -> None:
    with pytest.raises(TypeError) as exc:
        _ = build_request("myself.get_current_user", GROUPS["myself"]["get_current_user"], {"issue_key": "X"})

    assert "issue_key" in str(exc.value)


def test_build_request_rejects_body_on_bodiless_endpoint() -> None:
    with pytest.raises(TypeError) as exc:
        _ = build_request("server_info.get_server_info", GROUPS["server_info"]["get_server_info"], {}, body={})

    assert "does not accept a request body" in str(exc.value)


def test_serialize_body_passes_text_through() -> None:
    assert serialize_body(None) is None
    assert serialize_body("raw") == "raw"
    assert serialize_body(b"\x00") == b"\x00"
    assert serialize_body({"name": "Ünïcode"}) == '{"name":"Ünïcode"}'


@pytest.mark.asyncio
async def test_group_binds_operations_to_sender() -> None:
    """Calling an operation hands its descriptor to the group's sender."""

    sent: list[RequestDescriptor] = []

    async def sender(request: RequestDescriptor) -> JiraResult[object]:
        sent.append(request)
        return JiraSuccess(status=204)

    group = OperationGroup("issue_comments", GROUPS["issue_comments"], sender)

    result = await group.delete_comment(issue_id_or_key="PROJ-1", id=10010)

    assert result == JiraSuccess(status=204)
    assert sent[0].method == "DELETE"
    assert sent[0].path_params == {"issueIdOrKey": "PROJ-1", "id": 10010}
    assert sent[0].expects_body is False


def test_group_rejects_unknown_operation() -> None:
    async def sender(request: RequestDescriptor) -> JiraResult[object]:  # pragma: no cover - never called
        raise AssertionError(request)

    group = OperationGroup("myself", GROUPS["myself"], sender)

    with pytest.raises(UnknownOperationError) as exc:
        _ = group.delete_everything

    assert "myself" in str(exc.value)
    assert "get_current_user" in dir(group)
    assert "get_current_user" in list(group)


def test_every_group_name_is_an_identifier() -> None:
    assert GROUPS
    for name in GROUPS:
        assert name.isidentifier() and not name.startswith("_"), name


@pytest.mark.parametrize("group_name", sorted(GROUPS))
def test_tables_are_well_formed(group_name: str) -> None:
    """Every entry has a valid method, a REST path, and consistent parameter declarations."""

    for name, operation in GROUPS[group_name].items():
        assert name.isidentifier(), name
        assert operation.method in {"GET", "POST", "PUT", "DELETE"}, name
        assert operation.path.startswith("/rest/"), name
        assert set(operation.multi) <= set(operation.query), name
        names = list(operation.path_arguments) + list(operation.query_arguments)
        assert "body" not in names and "headers" not in names and "act_as" not in names, name
        assert len(placeholders(operation.path)) >= len(operation.path_arguments), name


def test_known_api_families_are_registered() -> None:
    paths = {operation.path for table in GROUPS.values() for operation in table.values()}

    assert "/rest/api/3/myself" in paths
    assert "/rest/agile/1.0/board" in paths
    assert any(path.startswith("/rest/servicedeskapi/") for path in paths)
    assert any(path.startswith("/rest/deployments/0.1/") for path in paths)


@pytest.mark.parametrize(
    "name",
    ["read_workflows", "update_workflows", "validate_create_workflows", "validate_update_workflows"],
)
def test_bulk_workflow_endpoints_take_a_body(name: str) -> None:
    """Bulk workflow reads, updates, and validations post their payload as JSON."""

    operation = GROUPS["workflows"][name]

    request = build_request(f"workflows.{name}", operation, {}, body={"workflowNames": ["Default"]})

    assert operation.body is True
    assert request.method == "POST"
    assert request.body == '{"workflowNames":["Default"]}'


def test_request_type_property_takes_a_body() -> None:
    operation = GROUPS["servicedesk"]["set_property"]

    assert operation.path.endswith("/requesttype/{requestTypeId}/property/{propertyKey}")
    assert operation.body is True
