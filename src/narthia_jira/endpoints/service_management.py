"""Jira Service Management REST API endpoints.

'why': service desks, customers, organizations, and knowledge base articles under /rest/servicedeskapi
"""
# ruff: noqa: E501
from __future__ import annotations

from typing import Final

from .._operations import Operation, OperationTable

ASSETS: Final[OperationTable] = {
    "get_assets_workspaces": Operation("GET", "/rest/servicedeskapi/assets/workspace", query=("start", "limit")),
    "get_insight_workspaces": Operation("GET", "/rest/servicedeskapi/insight/workspace", query=("start", "limit")),
}

CUSTOMER: Final[OperationTable] = {
    "create_customer": Operation("POST", "/rest/servicedeskapi/customer", query=("strictConflictStatusCode",), body=True),
}

INFO: Final[OperationTable] = {
    "get_info": Operation("GET", "/rest/servicedeskapi/info"),
}

KNOWLEDGEBASE: Final[OperationTable] = {
    "get_articles": Operation("GET", "/rest/servicedeskapi/knowledgebase/article", query=("query", "highlight", "start", "limit", "cursor", "prev")),
}

ORGANIZATION: Final[OperationTable] = {
    "add_organization": Operation("POST", "/rest/servicedeskapi/servicedesk/{serviceDeskId}/organization", body=True, returns=False),
    "add_users_to_organization": Operation("POST", "/rest/servicedeskapi/organization/{organizationId}/user", body=True, returns=False),
    "create_organization": Operation("POST", "/rest/servicedeskapi/organization", body=True),
    "delete_organization": Operation("DELETE", "/rest/servicedeskapi/organization/{organizationId}", returns=False),
    "delete_property": Operation("DELETE", "/rest/servicedeskapi/organization/{organizationId}/property/{propertyKey}", returns=False),
    "get_organization": Operation("GET", "/rest/servicedeskapi/organization/{organizationId}"),
    "get_organizations": Operation("GET", "/rest/servicedeskapi/organization", query=("start", "limit", "accountId")),
    "get_organizations_by_service_desk_id": Operation("GET", "/rest/servicedeskapi/servicedesk/{serviceDeskId}/organization", query=("start", "limit", "accountId")),
    "get_properties_keys": Operation("GET", "/rest/servicedeskapi/organization/{organizationId}/property"),
    "get_property": Operation("GET", "/rest/servicedeskapi/organization/{organizationId}/property/{propertyKey}"),
    "get_users_in_organization": Operation("GET", "/rest/servicedeskapi/organization/{organizationId}/user", query=("start", "limit")),
    "remove_organization": Operation("DELETE", "/rest/servicedeskapi/servicedesk/{serviceDeskId}/organization", body=True, returns=False),
    "remove_users_from_organization": Operation("DELETE", "/rest/servicedeskapi/organization/{organizationId}/user", body=True, returns=False),
    "set_property": Operation("PUT", "/rest/servicedeskapi/organization/{organizationId}/property/{propertyKey}", body=True),
}

REQUESTTYPE: Final[OperationTable] = {
    "get_all_request_types": Operation("GET", "/rest/servicedeskapi/requesttype", query=("searchQuery", "serviceDeskId", "start", "limit", "expand", "includeHiddenRequestTypesInSearch", "restrictionStatus"), multi=("serviceDeskId", "expand")),
}

SERVICEDESK: Final[OperationTable] = {
    "add_customers": Operation("POST", "/rest/servicedeskapi/servicedesk/{serviceDeskId}/customer", body=True, returns=False),
    "attach_temporary_file": Operation("POST", "/rest/servicedeskapi/servicedesk/{serviceDeskId}/attachTemporaryFile", body=True),
    "check_request_type_permissions": Operation("POST", "/rest/servicedeskapi/servicedesk/{serviceDeskId}/requesttype/permissions/check", body=True),
    "create_request_type": Operation("POST", "/rest/servicedeskapi/servicedesk/{serviceDeskId}/requesttype", body=True),
    "delete_property": Operation("DELETE", "/rest/servicedeskapi/servicedesk/{serviceDeskId}/requesttype/{requestTypeId}/property/{propertyKey}", returns=False),
    "delete_request_type": Operation("DELETE", "/rest/servicedeskapi/servicedesk/{serviceDeskId}/requesttype/{requestTypeId}", returns=False),
    "get_articles": Operation("GET", "/rest/servicedeskapi/servicedesk/{serviceDeskId}/knowledgebase/article", query=("query", "highlight", "start", "limit", "cursor", "prev")),
    "get_customers": Operation("GET", "/rest/servicedeskapi/servicedesk/{serviceDeskId}/customer", query=("query", "start", "limit")),
    "get_issues_in_queue": Operation("GET", "/rest/servicedeskapi/servicedesk/{serviceDeskId}/queue/{queueId}/issue", query=("start", "limit")),
    "get_properties_keys": Operation("GET", "/rest/servicedeskapi/servicedesk/{serviceDeskId}/requesttype/{requestTypeId}/property"),
    "get_property": Operation("GET", "/rest/servicedeskapi/servicedesk/{serviceDeskId}/requesttype/{requestTypeId}/property/{propertyKey}"),
    "get_queue": Operation("GET", "/rest/servicedeskapi/servicedesk/{serviceDeskId}/queue/{queueId}", query=("includeCount",)),
    "get_queues": Operation("GET", "/rest/servicedeskapi/servicedesk/{serviceDeskId}/queue", query=("includeCount", "start", "limit")),
    "get_request_type_by_id": Operation("GET", "/rest/servicedeskapi/servicedesk/{serviceDeskId}/requesttype/{requestTypeId}", query=("expand",), multi=("expand",)),
    "get_request_type_fields": Operation("GET", "/rest/servicedeskapi/servicedesk/{serviceDeskId}/requesttype/{requestTypeId}/field", query=("expand",), multi=("expand",)),
    "get_request_type_groups": Operation("GET", "/rest/servicedeskapi/servicedesk/{serviceDeskId}/requesttypegroup", query=("start", "limit")),
    "get_request_types": Operation("GET", "/rest/servicedeskapi/servicedesk/{serviceDeskId}/requesttype", query=("groupId", "expand", "searchQuery", "start", "limit", "includeHiddenRequestTypesInSearch", "restrictionStatus"), multi=("expand",)),
    "get_service_desk_by_id": Operation("GET", "/rest/servicedeskapi/servicedesk/{serviceDeskId}"),
    "get_service_desks": Operation("GET", "/rest/servicedeskapi/servicedesk", query=("start", "limit")),
    "remove_customers": Operation("DELETE", "/rest/servicedeskapi/servicedesk/{serviceDeskId}/customer", body=True, returns=False),
    "set_property": Operation("PUT", "/rest/servicedeskapi/servicedesk/{serviceDeskId}/requesttype/{requestTypeId}/property/{propertyKey}", body=True),
}

GROUPS: Final[dict[str, OperationTable]] = {
    "assets": ASSETS,
    "customer": CUSTOMER,
    "info": INFO,
    "knowledgebase": KNOWLEDGEBASE,
    "organization": ORGANIZATION,
    "requesttype": REQUESTTYPE,
    "servicedesk": SERVICEDESK,
}
