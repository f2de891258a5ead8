"""Jira Software agile REST API endpoints.

'why': boards, sprints, epics, and backlog ranking live under /rest/agile/1.0
"""
# ruff: noqa: E501
from __future__ import annotations

from typing import Final

from .._operations import Operation, OperationTable

BACKLOG: Final[OperationTable] = {
    "move_issues_to_backlog": Operation("POST", "/rest/agile/1.0/backlog/issue", body=True, returns=False),
    "move_issues_to_backlog_for_board": Operation("POST", "/rest/agile/1.0/backlog/{boardId}/issue", body=True),
}

BOARD_ISSUE: Final[OperationTable] = {
    "estimate_issue_for_board": Operation("PUT", "/rest/agile/1.0/issue/{issueIdOrKey}/estimation", query=("boardId",), body=True),
    "get_issue": Operation("GET", "/rest/agile/1.0/issue/{issueIdOrKey}", query=("fields", "expand", "updateHistory"), multi=("fields",)),
    "get_issue_estimation_for_board": Operation("GET", "/rest/agile/1.0/issue/{issueIdOrKey}/estimation", query=("boardId",)),
    "rank_issues": Operation("PUT", "/rest/agile/1.0/issue/rank", body=True),
}

BOARD: Final[OperationTable] = {
    "create_board": Operation("POST", "/rest/agile/1.0/board", body=True),
    "delete_board": Operation("DELETE", "/rest/agile/1.0/board/{boardId}", returns=False),
    "delete_board_property": Operation("DELETE", "/rest/agile/1.0/board/{boardId}/properties/{propertyKey}", returns=False),
    "get_all_boards": Operation("GET", "/rest/agile/1.0/board", query=("startAt", "maxResults", "type", "name", "projectKeyOrId", "accountIdLocation", "projectLocation", "includePrivate", "negateLocationFiltering", "orderBy", "expand", "projectTypeLocation", "filterId"), multi=("projectTypeLocation",)),
    "get_all_quick_filters": Operation("GET", "/rest/agile/1.0/board/{boardId}/quickfilter", query=("startAt", "maxResults")),
    "get_all_sprints": Operation("GET", "/rest/agile/1.0/board/{boardId}/sprint", query=("startAt", "maxResults", "state")),
    "get_all_versions": Operation("GET", "/rest/agile/1.0/board/{boardId}/version", query=("startAt", "maxResults", "released")),
    "get_board": Operation("GET", "/rest/agile/1.0/board/{boardId}"),
    "get_board_by_filter_id": Operation("GET", "/rest/agile/1.0/board/filter/{filterId}", query=("startAt", "maxResults")),
    "get_board_issues_for_epic": Operation("GET", "/rest/agile/1.0/board/{boardId}/epic/{epicId}/issue", query=("startAt", "maxResults", "jql", "validateQuery", "fields", "expand"), multi=("fields",)),
    "get_board_issues_for_sprint": Operation("GET", "/rest/agile/1.0/board/{boardId}/sprint/{sprintId}/issue", query=("startAt", "maxResults", "jql", "validateQuery", "fields", "expand"), multi=("fields",)),
    "get_board_property": Operation("GET", "/rest/agile/1.0/board/{boardId}/properties/{propertyKey}"),
    "get_board_property_keys": Operation("GET", "/rest/agile/1.0/board/{boardId}/properties"),
    "get_configuration": Operation("GET", "/rest/agile/1.0/board/{boardId}/configuration"),
    "get_epics": Operation("GET", "/rest/agile/1.0/board/{boardId}/epic", query=("startAt", "maxResults", "done")),
    "get_features_for_board": Operation("GET", "/rest/agile/1.0/board/{boardId}/features"),
    "get_issues_for_backlog": Operation("GET", "/rest/agile/1.0/board/{boardId}/backlog", query=("startAt", "maxResults", "jql", "validateQuery", "fields", "expand"), multi=("fields",)),
    "get_issues_for_board": Operation("GET", "/rest/agile/1.0/board/{boardId}/issue", query=("startAt", "maxResults", "jql", "validateQuery", "fields", "expand"), multi=("fields",)),
    "get_issues_without_epic_for_board": Operation("GET", "/rest/agile/1.0/board/{boardId}/epic/none/issue", query=("startAt", "maxResults", "jql", "validateQuery", "fields", "expand"), multi=("fields",)),
    "get_projects": Operation("GET", "/rest/agile/1.0/board/{boardId}/project", query=("startAt", "maxResults")),
    "get_projects_full": Operation("GET", "/rest/agile/1.0/board/{boardId}/project/full", returns=False),
    "get_quick_filter": Operation("GET", "/rest/agile/1.0/board/{boardId}/quickfilter/{quickFilterId}"),
    "get_reports_for_board": Operation("GET", "/rest/agile/1.0/board/{boardId}/reports"),
    "move_issues_to_board": Operation("POST", "/rest/agile/1.0/board/{boardId}/issue", body=True),
    "set_board_property": Operation("PUT", "/rest/agile/1.0/board/{boardId}/properties/{propertyKey}", body=True),
    "toggle_features": Operation("PUT", "/rest/agile/1.0/board/{boardId}/features", body=True),
}

EPIC: Final[OperationTable] = {
    "get_epic": Operation("GET", "/rest/agile/1.0/epic/{epicIdOrKey}"),
    "get_issues_for_epic": Operation("GET", "/rest/agile/1.0/epic/{epicIdOrKey}/issue", query=("startAt", "maxResults", "jql", "validateQuery", "fields", "expand"), multi=("fields",)),
    "get_issues_without_epic": Operation("GET", "/rest/agile/1.0/epic/none/issue", query=("startAt", "maxResults", "jql", "validateQuery", "fields", "expand"), multi=("fields",)),
    "move_issues_to_epic": Operation("POST", "/rest/agile/1.0/epic/{epicIdOrKey}/issue", body=True, returns=False),
    "partially_update_epic": Operation("POST", "/rest/agile/1.0/epic/{epicIdOrKey}", body=True),
    "rank_epics": Operation("PUT", "/rest/agile/1.0/epic/{epicIdOrKey}/rank", body=True, returns=False),
    "remove_issues_from_epic": Operation("POST", "/rest/agile/1.0/epic/none/issue", body=True, returns=False),
}

SPRINT: Final[OperationTable] = {
    "create_sprint": Operation("POST", "/rest/agile/1.0/sprint", body=True),
    "delete_property": Operation("DELETE", "/rest/agile/1.0/sprint/{sprintId}/properties/{propertyKey}", returns=False),
    "delete_sprint": Operation("DELETE", "/rest/agile/1.0/sprint/{sprintId}", returns=False),
    "get_issues_for_sprint": Operation("GET", "/rest/agile/1.0/sprint/{sprintId}/issue", query=("startAt", "maxResults", "jql", "validateQuery", "fields", "expand"), multi=("fields",)),
    "get_properties_keys": Operation("GET", "/rest/agile/1.0/sprint/{sprintId}/properties"),
    "get_property": Operation("GET", "/rest/agile/1.0/sprint/{sprintId}/properties/{propertyKey}"),
    "get_sprint": Operation("GET", "/rest/agile/1.0/sprint/{sprintId}"),
    "move_issues_to_sprint_and_rank": Operation("POST", "/rest/agile/1.0/sprint/{sprintId}/issue", body=True, returns=False),
    "partially_update_sprint": Operation("POST", "/rest/agile/1.0/sprint/{sprintId}", body=True),
    "set_property": Operation("PUT", "/rest/agile/1.0/sprint/{sprintId}/properties/{propertyKey}", body=True),
    "swap_sprint": Operation("POST", "/rest/agile/1.0/sprint/{sprintId}/swap", body=True, returns=False),
    "update_sprint": Operation("PUT", "/rest/agile/1.0/sprint/{sprintId}", body=True),
}

GROUPS: Final[dict[str, OperationTable]] = {
    "backlog": BACKLOG,
    "board_issue": BOARD_ISSUE,
    "board": BOARD,
    "epic": EPIC,
    "sprint": SPRINT,
}
