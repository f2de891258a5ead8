"""Jira platform REST API v3, Connect, and Forge app endpoints.

'why': one table per resource group; entries mirror the published REST contract
"""
# ruff: noqa: E501
from __future__ import annotations

from typing import Final

from .._operations import Operation, OperationTable

ANNOUNCEMENT_BANNER: Final[OperationTable] = {
    "get_banner": Operation("GET", "/rest/api/3/announcementBanner"),
    "set_banner": Operation("PUT", "/rest/api/3/announcementBanner", body=True, returns=False),
}

APP_DATA_POLICIES: Final[OperationTable] = {
    "get_policies": Operation("GET", "/rest/api/3/data-policy/project", query=("ids",)),
    "get_policy": Operation("GET", "/rest/api/3/data-policy"),
}

APP_MIGRATION: Final[OperationTable] = {
    "app_issue_field_value_update_resource_update_issue_fields_put": Operation("PUT", "/rest/atlassian-connect/1/migration/field", body=True),
    "migration_resource_update_entity_properties_value_put": Operation("PUT", "/rest/atlassian-connect/1/migration/properties/{entityType}", body=True, returns=False),
    "migration_resource_workflow_rule_search_post": Operation("POST", "/rest/atlassian-connect/1/migration/workflow/rule/search", body=True),
}

APP_PROPERTIES: Final[OperationTable] = {
    "addon_properties_resource_delete_addon_property_delete": Operation("DELETE", "/rest/atlassian-connect/1/addons/{addonKey}/properties/{propertyKey}", returns=False),
    "addon_properties_resource_get_addon_properties_get": Operation("GET", "/rest/atlassian-connect/1/addons/{addonKey}/properties"),
    "addon_properties_resource_get_addon_property_get": Operation("GET", "/rest/atlassian-connect/1/addons/{addonKey}/properties/{propertyKey}"),
    "addon_properties_resource_put_addon_property_put": Operation("PUT", "/rest/atlassian-connect/1/addons/{addonKey}/properties/{propertyKey}", body=True),
    "delete_forge_app_property": Operation("DELETE", "/rest/forge/1/app/properties/{propertyKey}", returns=False),
    "put_forge_app_property": Operation("PUT", "/rest/forge/1/app/properties/{propertyKey}", body=True),
}

APPLICATION_ROLES: Final[OperationTable] = {
    "get_all_application_roles": Operation("GET", "/rest/api/3/applicationrole"),
    "get_application_role": Operation("GET", "/rest/api/3/applicationrole/{key}"),
}

AUDIT_RECORDS: Final[OperationTable] = {
    "get_audit_records": Operation("GET", "/rest/api/3/auditing/record", query=("offset", "limit", "filter", "from", "to")),
}

AVATARS: Final[OperationTable] = {
    "delete_avatar": Operation("DELETE", "/rest/api/3/universal_avatar/type/{type}/owner/{owningObjectId}/avatar/{id}", returns=False),
    "get_all_system_avatars": Operation("GET", "/rest/api/3/avatar/{type}/system"),
    "get_avatar_image_by_id": Operation("GET", "/rest/api/3/universal_avatar/view/type/{type}/avatar/{id}", query=("size", "format")),
    "get_avatar_image_by_owner": Operation("GET", "/rest/api/3/universal_avatar/view/type/{type}/owner/{entityId}", query=("size", "format")),
    "get_avatar_image_by_type": Operation("GET", "/rest/api/3/universal_avatar/view/type/{type}", query=("size", "format")),
    "get_avatars": Operation("GET", "/rest/api/3/universal_avatar/type/{type}/owner/{entityId}"),
    "store_avatar": Operation("POST", "/rest/api/3/universal_avatar/type/{type}/owner/{entityId}", query=("x", "y", "size"), body=True),
}

CLASSIFICATION_LEVELS: Final[OperationTable] = {
    "get_all_user_data_classification_levels": Operation("GET", "/rest/api/3/classification-levels", query=("status", "orderBy"), multi=("status",)),
}

DASHBOARDS: Final[OperationTable] = {
    "add_gadget": Operation("POST", "/rest/api/3/dashboard/{dashboardId}/gadget", body=True),
    "bulk_edit_dashboards": Operation("PUT", "/rest/api/3/dashboard/bulk", body=True),
    "copy_dashboard": Operation("POST", "/rest/api/3/dashboard/{id}/copy", query=("extendAdminPermissions",), body=True),
    "create_dashboard": Operation("POST", "/rest/api/3/dashboard", query=("extendAdminPermissions",), body=True),
    "delete_dashboard": Operation("DELETE", "/rest/api/3/dashboard/{id}", returns=False),
    "delete_dashboard_item_property": Operation("DELETE", "/rest/api/3/dashboard/{dashboardId}/items/{itemId}/properties/{propertyKey}", returns=False),
    "get_all_available_dashboard_gadgets": Operation("GET", "/rest/api/3/dashboard/gadgets"),
    "get_all_dashboards": Operation("GET", "/rest/api/3/dashboard", query=("filter", "startAt", "maxResults")),
    "get_all_gadgets": Operation("GET", "/rest/api/3/dashboard/{dashboardId}/gadget", query=("moduleKey", "uri", "gadgetId"), multi=("moduleKey", "uri", "gadgetId")),
    "get_dashboard": Operation("GET", "/rest/api/3/dashboard/{id}"),
    "get_dashboard_item_property": Operation("GET", "/rest/api/3/dashboard/{dashboardId}/items/{itemId}/properties/{propertyKey}"),
    "get_dashboard_item_property_keys": Operation("GET", "/rest/api/3/dashboard/{dashboardId}/items/{itemId}/properties"),
    "get_dashboards_paginated": Operation("GET", "/rest/api/3/dashboard", query=("dashboardName", "accountId", "owner", "groupname", "groupId", "projectId", "orderBy", "startAt", "maxResults", "status", "expand")),
    "remove_gadget": Operation("DELETE", "/rest/api/3/dashboard/{dashboardId}/gadget/{gadgetId}", returns=False),
    "set_dashboard_item_property": Operation("PUT", "/rest/api/3/dashboard/{dashboardId}/items/{itemId}/properties/{propertyKey}", body=True),
    "update_dashboard": Operation("PUT", "/rest/api/3/dashboard/{id}", query=("extendAdminPermissions",), body=True),
    "update_gadget": Operation("PUT", "/rest/api/3/dashboard/{dashboardId}/gadget/{gadgetId}", body=True, returns=False),
}

DYNAMIC_MODULES: Final[OperationTable] = {
    "dynamic_modules_resource_get_modules_get": Operation("GET", "/rest/atlassian-connect/1/app/module/dynamic"),
    "dynamic_modules_resource_register_modules_post": Operation("POST", "/rest/atlassian-connect/1/app/module/dynamic", body=True, returns=False),
    "dynamic_modules_resource_remove_modules_delete": Operation("DELETE", "/rest/atlassian-connect/1/app/module/dynamic", query=("moduleKey",), multi=("moduleKey",), returns=False),
}

FILTER_SHARING: Final[OperationTable] = {
    "add_share_permission": Operation("POST", "/rest/api/3/filter/{id}/permission", body=True),
    "delete_share_permission": Operation("DELETE", "/rest/api/3/filter/{id}/permission/{permissionId}", returns=False),
    "get_default_share_scope": Operation("GET", "/rest/api/3/filter/defaultShareScope"),
    "get_share_permission": Operation("GET", "/rest/api/3/filter/{id}/permission/{permissionId}"),
    "get_share_permissions": Operation("GET", "/rest/api/3/filter/{id}/permission"),
    "set_default_share_scope": Operation("PUT", "/rest/api/3/filter/defaultShareScope", body=True),
}

FILTERS: Final[OperationTable] = {
    "change_filter_owner": Operation("PUT", "/rest/api/3/filter/{id}/owner", body=True, returns=False),
    "create_filter": Operation("POST", "/rest/api/3/filter", query=("expand", "overrideSharePermissions"), body=True),
    "delete_favourite_for_filter": Operation("DELETE", "/rest/api/3/filter/{id}/favourite", query=("expand",)),
    "delete_filter": Operation("DELETE", "/rest/api/3/filter/{id}", returns=False),
    "get_columns": Operation("GET", "/rest/api/3/filter/{id}/columns"),
    "get_favourite_filters": Operation("GET", "/rest/api/3/filter/favourite", query=("expand",)),
    "get_filter": Operation("GET", "/rest/api/3/filter/{id}", query=("expand", "overrideSharePermissions")),
    "get_filters_paginated": Operation("GET", "/rest/api/3/filter/search", query=("filterName", "accountId", "owner", "groupname", "groupId", "projectId", "id", "orderBy", "startAt", "maxResults", "expand", "overrideSharePermissions", "isSubstringMatch"), multi=("id",)),
    "get_my_filters": Operation("GET", "/rest/api/3/filter/my", query=("expand", "includeFavourites")),
    "reset_columns": Operation("DELETE", "/rest/api/3/filter/{id}/columns", returns=False),
    "set_columns": Operation("PUT", "/rest/api/3/filter/{id}/columns", body=True),
    "set_favourite_for_filter": Operation("PUT", "/rest/api/3/filter/{id}/favourite", query=("expand",)),
    "update_filter": Operation("PUT", "/rest/api/3/filter/{id}", query=("expand", "overrideSharePermissions"), body=True),
}

GROUP_AND_USER_PICKER: Final[OperationTable] = {
    "find_users_and_groups": Operation("GET", "/rest/api/3/groupuserpicker", query=("query", "maxResults", "showAvatar", "fieldId", "projectId", "issueTypeId", "avatarSize", "caseInsensitive", "excludeConnectAddons"), multi=("projectId", "issueTypeId")),
}

USER_GROUPS: Final[OperationTable] = {
    "add_user_to_group": Operation("POST", "/rest/api/3/group/user", query=("groupname", "groupId"), body=True),
    "bulk_get_groups": Operation("GET", "/rest/api/3/group/bulk", query=("startAt", "maxResults", "groupId", "groupName", "accessType", "applicationKey"), multi=("groupId", "groupName")),
    "create_group": Operation("POST", "/rest/api/3/group", body=True),
    "find_groups": Operation("GET", "/rest/api/3/groups/picker", query=("accountId", "query", "exclude", "excludeId", "maxResults", "caseInsensitive", "userName"), multi=("exclude", "excludeId")),
    "get_group": Operation("GET", "/rest/api/3/group", query=("groupname", "groupId", "expand")),
    "get_users_from_group": Operation("GET", "/rest/api/3/group/member", query=("groupname", "groupId", "includeInactiveUsers", "startAt", "maxResults")),
    "remove_group": Operation("DELETE", "/rest/api/3/group", query=("groupname", "groupId", "swapGroup", "swapGroupId"), returns=False),
    "remove_user_from_group": Operation("DELETE", "/rest/api/3/group/user", query=("groupname", "groupId", "username", "accountId"), returns=False),
}

ISSUE_ATTACHMENTS: Final[OperationTable] = {
    "add_attachment": Operation("POST", "/rest/api/3/issue/{issueIdOrKey}/attachments", body=True),
    "expand_attachment_for_humans": Operation("GET", "/rest/api/3/attachment/{id}/expand/human"),
    "expand_attachment_for_machines": Operation("GET", "/rest/api/3/attachment/{id}/expand/raw"),
    "get_attachment": Operation("GET", "/rest/api/3/attachment/{id}"),
    "get_attachment_content": Operation("GET", "/rest/api/3/attachment/content/{id}", query=("redirect",)),
    "get_attachment_meta": Operation("GET", "/rest/api/3/attachment/meta"),
    "get_attachment_thumbnail": Operation("GET", "/rest/api/3/attachment/thumbnail/{id}", query=("redirect", "fallbackToDefault", "width", "height")),
    "remove_attachment": Operation("DELETE", "/rest/api/3/attachment/{id}", returns=False),
}

ISSUE_BULK_OPERATIONS: Final[OperationTable] = {
    "get_available_transitions": Operation("GET", "/rest/api/3/bulk/issues/transition", query=("issueIdsOrKeys", "endingBefore", "startingAfter")),
    "get_bulk_editable_fields": Operation("GET", "/rest/api/3/bulk/issues/fields", query=("issueIdsOrKeys", "searchText", "endingBefore", "startingAfter")),
    "get_bulk_operation_progress": Operation("GET", "/rest/api/3/bulk/queue/{taskId}"),
    "submit_bulk_delete": Operation("POST", "/rest/api/3/bulk/issues/delete", body=True),
    "submit_bulk_edit": Operation("POST", "/rest/api/3/bulk/issues/fields", body=True),
    "submit_bulk_move": Operation("POST", "/rest/api/3/bulk/issues/move", body=True),
    "submit_bulk_transition": Operation("POST", "/rest/api/3/bulk/issues/transition", body=True),
    "submit_bulk_unwatch": Operation("POST", "/rest/api/3/bulk/issues/unwatch", body=True),
    "submit_bulk_watch": Operation("POST", "/rest/api/3/bulk/issues/watch", body=True),
}

ISSUE_COMMENT_PROPERTIES: Final[OperationTable] = {
    "delete_comment_property": Operation("DELETE", "/rest/api/3/comment/{commentId}/properties/{propertyKey}", returns=False),
    "get_comment_property": Operation("GET", "/rest/api/3/comment/{commentId}/properties/{propertyKey}"),
    "get_comment_property_keys": Operation("GET", "/rest/api/3/comment/{commentId}/properties"),
    "set_comment_property": Operation("PUT", "/rest/api/3/comment/{commentId}/properties/{propertyKey}", body=True),
}

ISSUE_COMMENTS: Final[OperationTable] = {
    "add_comment": Operation("POST", "/rest/api/3/issue/{issueIdOrKey}/comment", query=("expand",), body=True),
    "delete_comment": Operation("DELETE", "/rest/api/3/issue/{issueIdOrKey}/comment/{id}", returns=False),
    "get_comment": Operation("GET", "/rest/api/3/issue/{issueIdOrKey}/comment/{id}", query=("expand",)),
    "get_comments": Operation("GET", "/rest/api/3/issue/{issueIdOrKey}/comment", query=("startAt", "maxResults", "orderBy", "expand")),
    "get_comments_by_ids": Operation("POST", "/rest/api/3/comment/list", query=("expand",), body=True),
    "update_comment": Operation("PUT", "/rest/api/3/issue/{issueIdOrKey}/comment/{id}", query=("notifyUsers", "overrideEditableFlag", "expand"), body=True),
}

ISSUE_CUSTOM_FIELD_ASSOCIATIONS: Final[OperationTable] = {
    "create_associations": Operation("PUT", "/rest/api/3/field/association", body=True, returns=False),
    "remove_associations": Operation("DELETE", "/rest/api/3/field/association", body=True, returns=False),
}

ISSUE_CUSTOM_FIELD_CONFIGURATION_APPS: Final[OperationTable] = {
    "get_custom_field_configuration": Operation("GET", "/rest/api/3/app/field/{fieldIdOrKey}/context/configuration", query=("id", "fieldContextId", "issueId", "projectKeyOrId", "issueTypeId", "startAt", "maxResults"), multi=("id", "fieldContextId")),
    "get_custom_fields_configurations": Operation("POST", "/rest/api/3/app/field/context/configuration/list", query=("id", "fieldContextId", "issueId", "projectKeyOrId", "issueTypeId", "startAt", "maxResults"), multi=("id", "fieldContextId"), body=True),
    "update_custom_field_configuration": Operation("PUT", "/rest/api/3/app/field/{fieldIdOrKey}/context/configuration", body=True),
}

ISSUE_CUSTOM_FIELD_CONTEXTS: Final[OperationTable] = {
    "add_issue_types_to_context": Operation("PUT", "/rest/api/3/field/{fieldId}/context/{contextId}/issuetype", body=True, returns=False),
    "assign_projects_to_custom_field_context": Operation("PUT", "/rest/api/3/field/{fieldId}/context/{contextId}/project", body=True, returns=False),
    "create_custom_field_context": Operation("POST", "/rest/api/3/field/{fieldId}/context", body=True),
    "delete_custom_field_context": Operation("DELETE", "/rest/api/3/field/{fieldId}/context/{contextId}", returns=False),
    "get_contexts_for_field": Operation("GET", "/rest/api/3/field/{fieldId}/context", query=("isAnyIssueType", "isGlobalContext", "contextId", "startAt", "maxResults"), multi=("contextId",)),
    "get_custom_field_contexts_for_projects_and_issue_types": Operation("POST", "/rest/api/3/field/{fieldId}/context/mapping", query=("startAt", "maxResults"), body=True),
    "get_default_values": Operation("GET", "/rest/api/3/field/{fieldId}/context/defaultValue", query=("contextId", "startAt", "maxResults"), multi=("contextId",)),
    "get_issue_type_mappings_for_contexts": Operation("GET", "/rest/api/3/field/{fieldId}/context/issuetypemapping", query=("contextId", "startAt", "maxResults"), multi=("contextId",)),
    "get_project_context_mapping": Operation("GET", "/rest/api/3/field/{fieldId}/context/projectmapping", query=("contextId", "startAt", "maxResults"), multi=("contextId",)),
    "remove_custom_field_context_from_projects": Operation("POST", "/rest/api/3/field/{fieldId}/context/{contextId}/project/remove", body=True, returns=False),
    "remove_issue_types_from_context": Operation("POST", "/rest/api/3/field/{fieldId}/context/{contextId}/issuetype/remove", body=True, returns=False),
    "set_default_values": Operation("PUT", "/rest/api/3/field/{fieldId}/context/defaultValue", body=True, returns=False),
    "update_custom_field_context": Operation("PUT", "/rest/api/3/field/{fieldId}/context/{contextId}", body=True, returns=False),
}

ISSUE_CUSTOM_FIELD_OPTIONS_APPS: Final[OperationTable] = {
    "create_issue_field_option": Operation("POST", "/rest/api/3/field/{fieldKey}/option", body=True),
    "delete_issue_field_option": Operation("DELETE", "/rest/api/3/field/{fieldKey}/option/{optionId}", returns=False),
    "get_all_issue_field_options": Operation("GET", "/rest/api/3/field/{fieldKey}/option", query=("startAt", "maxResults")),
    "get_issue_field_option": Operation("GET", "/rest/api/3/field/{fieldKey}/option/{optionId}"),
    "get_selectable_issue_field_options": Operation("GET", "/rest/api/3/field/{fieldKey}/option/suggestions/edit", query=("startAt", "maxResults", "projectId")),
    "get_visible_issue_field_options": Operation("GET", "/rest/api/3/field/{fieldKey}/option/suggestions/search", query=("startAt", "maxResults", "projectId")),
    "replace_issue_field_option": Operation("DELETE", "/rest/api/3/field/{fieldKey}/option/{optionId}/issue", query=("replaceWith", "jql", "overrideScreenSecurity", "overrideEditableFlag"), returns=False),
    "update_issue_field_option": Operation("PUT", "/rest/api/3/field/{fieldKey}/option/{optionId}", body=True),
}

ISSUE_CUSTOM_FIELD_OPTIONS: Final[OperationTable] = {
    "create_custom_field_option": Operation("POST", "/rest/api/3/field/{fieldId}/context/{contextId}/option", body=True),
    "delete_custom_field_option": Operation("DELETE", "/rest/api/3/field/{fieldId}/context/{contextId}/option/{optionId}", returns=False),
    "get_custom_field_option": Operation("GET", "/rest/api/3/customFieldOption/{id}"),
    "get_options_for_context": Operation("GET", "/rest/api/3/field/{fieldId}/context/{contextId}/option", query=("optionId", "onlyOptions", "startAt", "maxResults")),
    "reorder_custom_field_options": Operation("PUT", "/rest/api/3/field/{fieldId}/context/{contextId}/option/move", body=True, returns=False),
    "replace_custom_field_option": Operation("DELETE", "/rest/api/3/field/{fieldId}/context/{contextId}/option/{optionId}/issue", query=("replaceWith", "jql"), returns=False),
    "update_custom_field_option": Operation("PUT", "/rest/api/3/field/{fieldId}/context/{contextId}/option", body=True),
}

ISSUE_CUSTOM_FIELD_VALUES_APPS: Final[OperationTable] = {
    "update_custom_field_value": Operation("PUT", "/rest/api/3/app/field/{fieldIdOrKey}/value", query=("generateChangelog",), body=True, returns=False),
    "update_multiple_custom_field_values": Operation("POST", "/rest/api/3/app/field/value", query=("generateChangelog",), body=True, returns=False),
}

ISSUE_FIELD_CONFIGURATIONS: Final[OperationTable] = {
    "assign_field_configuration_scheme_to_project": Operation("PUT", "/rest/api/3/fieldconfigurationscheme/project", body=True, returns=False),
    "create_field_configuration": Operation("POST", "/rest/api/3/fieldconfiguration", body=True),
    "create_field_configuration_scheme": Operation("POST", "/rest/api/3/fieldconfigurationscheme", body=True),
    "delete_field_configuration": Operation("DELETE", "/rest/api/3/fieldconfiguration/{id}", returns=False),
    "delete_field_configuration_scheme": Operation("DELETE", "/rest/api/3/fieldconfigurationscheme/{id}", returns=False),
    "get_all_field_configurations": Operation("GET", "/rest/api/3/fieldconfiguration", query=("startAt", "maxResults", "id", "isDefault", "query"), multi=("id",)),
    "get_all_field_configuration_schemes": Operation("GET", "/rest/api/3/fieldconfigurationscheme", query=("startAt", "maxResults", "id"), multi=("id",)),
    "get_field_configuration_items": Operation("GET", "/rest/api/3/fieldconfiguration/{id}/fields", query=("startAt", "maxResults")),
    "get_field_configuration_scheme_mappings": Operation("GET", "/rest/api/3/fieldconfigurationscheme/mapping", query=("startAt", "maxResults", "fieldConfigurationSchemeId"), multi=("fieldConfigurationSchemeId",)),
    "get_field_configuration_scheme_project_mapping": Operation("GET", "/rest/api/3/fieldconfigurationscheme/project", query=("startAt", "maxResults", "projectId"), multi=("projectId",)),
    "remove_issue_types_from_global_field_configuration_scheme": Operation("POST", "/rest/api/3/fieldconfigurationscheme/{id}/mapping/delete", body=True, returns=False),
    "set_field_configuration_scheme_mapping": Operation("PUT", "/rest/api/3/fieldconfigurationscheme/{id}/mapping", body=True, returns=False),
    "update_field_configuration": Operation("PUT", "/rest/api/3/fieldconfiguration/{id}", body=True, returns=False),
    "update_field_configuration_items": Operation("PUT", "/rest/api/3/fieldconfiguration/{id}/fields", body=True, returns=False),
    "update_field_configuration_scheme": Operation("PUT", "/rest/api/3/fieldconfigurationscheme/{id}", body=True, returns=False),
}

ISSUE_FIELDS: Final[OperationTable] = {
    "create_custom_field": Operation("POST", "/rest/api/3/field", body=True),
    "delete_custom_field": Operation("DELETE", "/rest/api/3/field/{id}", returns=False),
    "get_contexts_for_field_deprecated": Operation("GET", "/rest/api/3/field/{fieldId}/contexts", query=("startAt", "maxResults")),
    "get_fields": Operation("GET", "/rest/api/3/field"),
    "get_fields_paginated": Operation("GET", "/rest/api/3/field/search", query=("startAt", "maxResults", "type", "id", "query", "orderBy", "expand", "projectIds"), multi=("type", "id", "projectIds")),
    "get_trashed_fields_paginated": Operation("GET", "/rest/api/3/field/search/trashed", query=("startAt", "maxResults", "id", "query", "expand", "orderBy"), multi=("id",)),
    "restore_custom_field": Operation("POST", "/rest/api/3/field/{id}/restore"),
    "trash_custom_field": Operation("POST", "/rest/api/3/field/{id}/trash"),
    "update_custom_field": Operation("PUT", "/rest/api/3/field/{fieldId}", body=True, returns=False),
}

ISSUE_LINK_TYPES: Final[OperationTable] = {
    "create_issue_link_type": Operation("POST", "/rest/api/3/issueLinkType", body=True),
    "delete_issue_link_type": Operation("DELETE", "/rest/api/3/issueLinkType/{issueLinkTypeId}", returns=False),
    "get_issue_link_type": Operation("GET", "/rest/api/3/issueLinkType/{issueLinkTypeId}"),
    "get_issue_link_types": Operation("GET", "/rest/api/3/issueLinkType"),
    "update_issue_link_type": Operation("PUT", "/rest/api/3/issueLinkType/{issueLinkTypeId}", body=True),
}

ISSUE_LINKS: Final[OperationTable] = {
    "delete_issue_link": Operation("DELETE", "/rest/api/3/issueLink/{linkId}", returns=False),
    "get_issue_link": Operation("GET", "/rest/api/3/issueLink/{linkId}"),
    "link_issues": Operation("POST", "/rest/api/3/issueLink", body=True),
}

ISSUE_NAVIGATOR_SETTINGS: Final[OperationTable] = {
    "get_issue_navigator_default_columns": Operation("GET", "/rest/api/3/settings/columns"),
    "set_issue_navigator_default_columns": Operation("PUT", "/rest/api/3/settings/columns", body=True, returns=False),
}

ISSUE_NOTIFICATION_SCHEMES: Final[OperationTable] = {
    "add_notifications": Operation("PUT", "/rest/api/3/notificationscheme/{id}/notification", body=True, returns=False),
    "create_notification_scheme": Operation("POST", "/rest/api/3/notificationscheme", body=True),
    "delete_notification_scheme": Operation("DELETE", "/rest/api/3/notificationscheme/{notificationSchemeId}", returns=False),
    "get_notification_scheme": Operation("GET", "/rest/api/3/notificationscheme/{id}", query=("expand",)),
    "get_notification_schemes": Operation("GET", "/rest/api/3/notificationscheme", query=("startAt", "maxResults", "id", "projectId", "onlyDefault", "expand"), multi=("id", "projectId")),
    "get_notification_scheme_to_project_mappings": Operation("GET", "/rest/api/3/notificationscheme/project", query=("startAt", "maxResults", "notificationSchemeId", "projectId"), multi=("notificationSchemeId", "projectId")),
    "remove_notification_from_notification_scheme": Operation("DELETE", "/rest/api/3/notificationscheme/{notificationSchemeId}/notification/{notificationId}", returns=False),
    "update_notification_scheme": Operation("PUT", "/rest/api/3/notificationscheme/{id}", body=True, returns=False),
}

ISSUE_PRIORITIES: Final[OperationTable] = {
    "create_priority": Operation("POST", "/rest/api/3/priority", body=True),
    "delete_priority": Operation("DELETE", "/rest/api/3/priority/{id}", returns=False),
    "get_priorities": Operation("GET", "/rest/api/3/priority"),
    "get_priority": Operation("GET", "/rest/api/3/priority/{id}"),
    "move_priorities": Operation("PUT", "/rest/api/3/priority/move", body=True, returns=False),
    "search_priorities": Operation("GET", "/rest/api/3/priority/search", query=("startAt", "maxResults", "id", "projectId", "priorityName", "onlyDefault", "expand"), multi=("id", "projectId")),
    "set_default_priority": Operation("PUT", "/rest/api/3/priority/default", body=True, returns=False),
    "update_priority": Operation("PUT", "/rest/api/3/priority/{id}", body=True, returns=False),
}

ISSUE_PROPERTIES: Final[OperationTable] = {
    "bulk_delete_issue_property": Operation("DELETE", "/rest/api/3/issue/properties/{propertyKey}", body=True, returns=False),
    "bulk_set_issue_properties_by_issue": Operation("POST", "/rest/api/3/issue/properties/multi", body=True, returns=False),
    "bulk_set_issue_property": Operation("PUT", "/rest/api/3/issue/properties/{propertyKey}", body=True, returns=False),
    "bulk_set_issues_properties_list": Operation("POST", "/rest/api/3/issue/properties", body=True, returns=False),
    "delete_issue_property": Operation("DELETE", "/rest/api/3/issue/{issueIdOrKey}/properties/{propertyKey}", returns=False),
    "get_issue_property": Operation("GET", "/rest/api/3/issue/{issueIdOrKey}/properties/{propertyKey}"),
    "get_issue_property_keys": Operation("GET", "/rest/api/3/issue/{issueIdOrKey}/properties"),
    "set_issue_property": Operation("PUT", "/rest/api/3/issue/{issueIdOrKey}/properties/{propertyKey}", body=True),
}

ISSUE_REDACTION: Final[OperationTable] = {
    "get_redaction_status": Operation("GET", "/rest/api/3/redact/status/{jobId}"),
    "redact": Operation("POST", "/rest/api/3/redact", body=True),
}

ISSUE_REMOTE_LINKS: Final[OperationTable] = {
    "create_or_update_remote_issue_link": Operation("POST", "/rest/api/3/issue/{issueIdOrKey}/remotelink", body=True),
    "delete_remote_issue_link_by_global_id": Operation("DELETE", "/rest/api/3/issue/{issueIdOrKey}/remotelink", query=("globalId",), returns=False),
    "delete_remote_issue_link_by_id": Operation("DELETE", "/rest/api/3/issue/{issueIdOrKey}/remotelink/{linkId}", returns=False),
    "get_remote_issue_link_by_id": Operation("GET", "/rest/api/3/issue/{issueIdOrKey}/remotelink/{linkId}"),
    "get_remote_issue_links": Operation("GET", "/rest/api/3/issue/{issueIdOrKey}/remotelink", query=("globalId",)),
    "update_remote_issue_link": Operation("PUT", "/rest/api/3/issue/{issueIdOrKey}/remotelink/{linkId}", body=True, returns=False),
}

ISSUE_RESOLUTIONS: Final[OperationTable] = {
    "create_resolution": Operation("POST", "/rest/api/3/resolution", body=True),
    "delete_resolution": Operation("DELETE", "/rest/api/3/resolution/{id}", query=("replaceWith",), returns=False),
    "get_resolution": Operation("GET", "/rest/api/3/resolution/{id}"),
    "get_resolutions": Operation("GET", "/rest/api/3/resolution"),
    "move_resolutions": Operation("PUT", "/rest/api/3/resolution/move", body=True, returns=False),
    "search_resolutions": Operation("GET", "/rest/api/3/resolution/search", query=("startAt", "maxResults", "id", "onlyDefault"), multi=("id",)),
    "set_default_resolution": Operation("PUT", "/rest/api/3/resolution/default", body=True, returns=False),
    "update_resolution": Operation("PUT", "/rest/api/3/resolution/{id}", body=True, returns=False),
}

ISSUE_SEARCH: Final[OperationTable] = {
    "count_issues": Operation("POST", "/rest/api/3/search/approximate-count", body=True),
    "get_issue_picker_resource": Operation("GET", "/rest/api/3/issue/picker", query=("query", "currentJQL", "currentIssueKey", "currentProjectId", "showSubTasks", "showSubTaskParent")),
    "match_issues": Operation("POST", "/rest/api/3/jql/match", body=True),
    "search_and_reconsile_issues_using_jql": Operation("GET", "/rest/api/3/search/jql", query=("jql", "nextPageToken", "maxResults", "fields", "expand", "properties", "fieldsByKeys", "failFast", "reconcileIssues"), multi=("properties", "reconcileIssues")),
    "search_and_reconsile_issues_using_jql_post": Operation("POST", "/rest/api/3/search/jql", body=True),
    "search_for_issues_using_jql": Operation("GET", "/rest/api/3/search", query=("jql", "startAt", "maxResults", "validateQuery", "fields", "expand", "properties", "fieldsByKeys", "failFast"), multi=("properties",)),
    "search_for_issues_using_jql_post": Operation("POST", "/rest/api/3/search", body=True),
}

ISSUE_SECURITY_LEVEL: Final[OperationTable] = {
    "get_issue_security_level": Operation("GET", "/rest/api/3/securitylevel/{id}"),
    "get_issue_security_level_members": Operation("GET", "/rest/api/3/issuesecurityschemes/{issueSecuritySchemeId}/members", query=("startAt", "maxResults", "issueSecurityLevelId", "expand"), multi=("issueSecurityLevelId",)),
}

ISSUE_SECURITY_SCHEMES: Final[OperationTable] = {
    "add_security_level": Operation("PUT", "/rest/api/3/issuesecurityschemes/{schemeId}/level", body=True, returns=False),
    "add_security_level_members": Operation("PUT", "/rest/api/3/issuesecurityschemes/{schemeId}/level/{levelId}/member", body=True, returns=False),
    "associate_schemes_to_projects": Operation("PUT", "/rest/api/3/issuesecurityschemes/project", body=True, returns=False),
    "create_issue_security_scheme": Operation("POST", "/rest/api/3/issuesecurityschemes", body=True),
    "delete_security_scheme": Operation("DELETE", "/rest/api/3/issuesecurityschemes/{schemeId}", returns=False),
    "get_issue_security_scheme": Operation("GET", "/rest/api/3/issuesecurityschemes/{id}"),
    "get_issue_security_schemes": Operation("GET", "/rest/api/3/issuesecurityschemes"),
    "get_security_level_members": Operation("GET", "/rest/api/3/issuesecurityschemes/level/member", query=("startAt", "maxResults", "id", "schemeId", "levelId", "expand"), multi=("id", "schemeId", "levelId")),
    "get_security_levels": Operation("GET", "/rest/api/3/issuesecurityschemes/level", query=("startAt", "maxResults", "id", "schemeId", "onlyDefault"), multi=("id", "schemeId")),
    "remove_level": Operation("DELETE", "/rest/api/3/issuesecurityschemes/{schemeId}/level/{levelId}", query=("replaceWith",), returns=False),
    "remove_member_from_security_level": Operation("DELETE", "/rest/api/3/issuesecurityschemes/{schemeId}/level/{levelId}/member/{memberId}", returns=False),
    "search_projects_using_security_schemes": Operation("GET", "/rest/api/3/issuesecurityschemes/project", query=("startAt", "maxResults", "issueSecuritySchemeId", "projectId"), multi=("issueSecuritySchemeId", "projectId")),
    "search_security_schemes": Operation("GET", "/rest/api/3/issuesecurityschemes/search", query=("startAt", "maxResults", "id", "projectId"), multi=("id", "projectId")),
    "set_default_levels": Operation("PUT", "/rest/api/3/issuesecurityschemes/level/default", body=True, returns=False),
    "update_issue_security_scheme": Operation("PUT", "/rest/api/3/issuesecurityschemes/{id}", body=True, returns=False),
    "update_security_level": Operation("PUT", "/rest/api/3/issuesecurityschemes/{schemeId}/level/{levelId}", body=True, returns=False),
}

ISSUE_TYPE_PROPERTIES: Final[OperationTable] = {
    "delete_issue_type_property": Operation("DELETE", "/rest/api/3/issuetype/{issueTypeId}/properties/{propertyKey}", returns=False),
    "get_issue_type_property": Operation("GET", "/rest/api/3/issuetype/{issueTypeId}/properties/{propertyKey}"),
    "get_issue_type_property_keys": Operation("GET", "/rest/api/3/issuetype/{issueTypeId}/properties"),
    "set_issue_type_property": Operation("PUT", "/rest/api/3/issuetype/{issueTypeId}/properties/{propertyKey}", body=True),
}

ISSUE_TYPE_SCHEMES: Final[OperationTable] = {
    "add_issue_types_to_issue_type_scheme": Operation("PUT", "/rest/api/3/issuetypescheme/{issueTypeSchemeId}/issuetype", body=True, returns=False),
    "assign_issue_type_scheme_to_project": Operation("PUT", "/rest/api/3/issuetypescheme/project", body=True, returns=False),
    "create_issue_type_scheme": Operation("POST", "/rest/api/3/issuetypescheme", body=True),
    "delete_issue_type_scheme": Operation("DELETE", "/rest/api/3/issuetypescheme/{issueTypeSchemeId}", returns=False),
    "get_all_issue_type_schemes": Operation("GET", "/rest/api/3/issuetypescheme", query=("startAt", "maxResults", "id", "orderBy", "expand", "queryString"), multi=("id",)),
    "get_issue_type_scheme_for_projects": Operation("GET", "/rest/api/3/issuetypescheme/project", query=("startAt", "maxResults", "projectId"), multi=("projectId",)),
    "get_issue_type_schemes_mapping": Operation("GET", "/rest/api/3/issuetypescheme/mapping", query=("startAt", "maxResults", "issueTypeSchemeId"), multi=("issueTypeSchemeId",)),
    "remove_issue_type_from_issue_type_scheme": Operation("DELETE", "/rest/api/3/issuetypescheme/{issueTypeSchemeId}/issuetype/{issueTypeId}", returns=False),
    "reorder_issue_types_in_issue_type_scheme": Operation("PUT", "/rest/api/3/issuetypescheme/{issueTypeSchemeId}/issuetype/move", body=True, returns=False),
    "update_issue_type_scheme": Operation("PUT", "/rest/api/3/issuetypescheme/{issueTypeSchemeId}", body=True, returns=False),
}

ISSUE_TYPE_SCREEN_SCHEMES: Final[OperationTable] = {
    "append_mappings_for_issue_type_screen_scheme": Operation("PUT", "/rest/api/3/issuetypescreenscheme/{issueTypeScreenSchemeId}/mapping", body=True, returns=False),
    "assign_issue_type_screen_scheme_to_project": Operation("PUT", "/rest/api/3/issuetypescreenscheme/project", body=True, returns=False),
    "create_issue_type_screen_scheme": Operation("POST", "/rest/api/3/issuetypescreenscheme", body=True),
    "delete_issue_type_screen_scheme": Operation("DELETE", "/rest/api/3/issuetypescreenscheme/{issueTypeScreenSchemeId}", returns=False),
    "get_issue_type_screen_scheme_mappings": Operation("GET", "/rest/api/3/issuetypescreenscheme/mapping", query=("startAt", "maxResults", "issueTypeScreenSchemeId"), multi=("issueTypeScreenSchemeId",)),
    "get_issue_type_screen_scheme_project_associations": Operation("GET", "/rest/api/3/issuetypescreenscheme/project", query=("startAt", "maxResults", "projectId"), multi=("projectId",)),
    "get_issue_type_screen_schemes": Operation("GET", "/rest/api/3/issuetypescreenscheme", query=("startAt", "maxResults", "id", "queryString", "orderBy", "expand"), multi=("id",)),
    "get_projects_for_issue_type_screen_scheme": Operation("GET", "/rest/api/3/issuetypescreenscheme/{issueTypeScreenSchemeId}/project", query=("startAt", "maxResults", "query")),
    "remove_mappings_from_issue_type_screen_scheme": Operation("POST", "/rest/api/3/issuetypescreenscheme/{issueTypeScreenSchemeId}/mapping/remove", body=True, returns=False),
    "update_default_screen_scheme": Operation("PUT", "/rest/api/3/issuetypescreenscheme/{issueTypeScreenSchemeId}/mapping/default", body=True, returns=False),
    "update_issue_type_screen_scheme": Operation("PUT", "/rest/api/3/issuetypescreenscheme/{issueTypeScreenSchemeId}", body=True, returns=False),
}

ISSUE_TYPES: Final[OperationTable] = {
    "create_issue_type": Operation("POST", "/rest/api/3/issuetype", body=True),
    "create_issue_type_avatar": Operation("POST", "/rest/api/3/issuetype/{id}/avatar2", query=("x", "y", "size"), body=True),
    "delete_issue_type": Operation("DELETE", "/rest/api/3/issuetype/{id}", query=("alternativeIssueTypeId",), returns=False),
    "get_alternative_issue_types": Operation("GET", "/rest/api/3/issuetype/{id}/alternatives"),
    "get_issue_all_types": Operation("GET", "/rest/api/3/issuetype"),
    "get_issue_type": Operation("GET", "/rest/api/3/issuetype/{id}"),
    "get_issue_types_for_project": Operation("GET", "/rest/api/3/issuetype/project", query=("projectId", "level")),
    "update_issue_type": Operation("PUT", "/rest/api/3/issuetype/{id}", body=True),
}

ISSUE_VOTES: Final[OperationTable] = {
    "add_vote": Operation("POST", "/rest/api/3/issue/{issueIdOrKey}/votes", returns=False),
    "get_votes": Operation("GET", "/rest/api/3/issue/{issueIdOrKey}/votes"),
    "remove_vote": Operation("DELETE", "/rest/api/3/issue/{issueIdOrKey}/votes", returns=False),
}

ISSUE_WATCHERS: Final[OperationTable] = {
    "add_watcher": Operation("POST", "/rest/api/3/issue/{issueIdOrKey}/watchers", body=True, returns=False),
    "get_issue_watchers": Operation("GET", "/rest/api/3/issue/{issueIdOrKey}/watchers"),
    "get_is_watching_issue_bulk": Operation("POST", "/rest/api/3/issue/watching", body=True),
    "remove_watcher": Operation("DELETE", "/rest/api/3/issue/{issueIdOrKey}/watchers", query=("username", "accountId"), returns=False),
}

ISSUE_WORKLOG_PROPERTIES: Final[OperationTable] = {
    "delete_worklog_property": Operation("DELETE", "/rest/api/3/issue/{issueIdOrKey}/worklog/{worklogId}/properties/{propertyKey}", returns=False),
    "get_worklog_property": Operation("GET", "/rest/api/3/issue/{issueIdOrKey}/worklog/{worklogId}/properties/{propertyKey}"),
    "get_worklog_property_keys": Operation("GET", "/rest/api/3/issue/{issueIdOrKey}/worklog/{worklogId}/properties"),
    "set_worklog_property": Operation("PUT", "/rest/api/3/issue/{issueIdOrKey}/worklog/{worklogId}/properties/{propertyKey}", body=True),
}

ISSUE_WORKLOGS: Final[OperationTable] = {
    "add_worklog": Operation("POST", "/rest/api/3/issue/{issueIdOrKey}/worklog", query=("notifyUsers", "adjustEstimate", "newEstimate", "reduceBy", "expand", "overrideEditableFlag"), body=True),
    "bulk_delete_worklogs": Operation("DELETE", "/rest/api/3/issue/{issueIdOrKey}/worklog", query=("adjustEstimate", "overrideEditableFlag"), body=True, returns=False),
    "bulk_move_worklogs": Operation("POST", "/rest/api/3/issue/{issueIdOrKey}/worklog/move", query=("adjustEstimate", "overrideEditableFlag"), body=True, returns=False),
    "delete_worklog": Operation("DELETE", "/rest/api/3/issue/{issueIdOrKey}/worklog/{id}", query=("notifyUsers", "adjustEstimate", "newEstimate", "increaseBy", "overrideEditableFlag"), returns=False),
    "get_ids_of_worklogs_deleted_since": Operation("GET", "/rest/api/3/worklog/deleted", query=("since",)),
    "get_ids_of_worklogs_modified_since": Operation("GET", "/rest/api/3/worklog/updated", query=("since", "expand")),
    "get_issue_worklog": Operation("GET", "/rest/api/3/issue/{issueIdOrKey}/worklog", query=("startAt", "maxResults", "startedAfter", "startedBefore", "expand")),
    "get_worklog": Operation("GET", "/rest/api/3/issue/{issueIdOrKey}/worklog/{id}", query=("expand",)),
    "get_worklogs_for_ids": Operation("POST", "/rest/api/3/worklog/list", query=("expand",), body=True),
    "update_worklog": Operation("PUT", "/rest/api/3/issue/{issueIdOrKey}/worklog/{id}", query=("notifyUsers", "adjustEstimate", "newEstimate", "expand", "overrideEditableFlag"), body=True),
}

ISSUES: Final[OperationTable] = {
    "archive_issues": Operation("PUT", "/rest/api/3/issue/archive", body=True),
    "archive_issues_async": Operation("POST", "/rest/api/3/issue/archive", body=True),
    "assign_issue": Operation("PUT", "/rest/api/3/issue/{issueIdOrKey}/assignee", body=True, returns=False),
    "bulk_fetch_issues": Operation("POST", "/rest/api/3/issue/bulkfetch", body=True),
    "create_issue": Operation("POST", "/rest/api/3/issue", query=("updateHistory",), body=True),
    "create_issues": Operation("POST", "/rest/api/3/issue/bulk", body=True),
    "delete_issue": Operation("DELETE", "/rest/api/3/issue/{issueIdOrKey}", query=("deleteSubtasks",), returns=False),
    "do_transition": Operation("POST", "/rest/api/3/issue/{issueIdOrKey}/transitions", body=True, returns=False),
    "edit_issue": Operation("PUT", "/rest/api/3/issue/{issueIdOrKey}", query=("notifyUsers", "overrideScreenSecurity", "overrideEditableFlag", "returnIssue", "expand"), body=True),
    "export_archived_issues": Operation("PUT", "/rest/api/3/issues/archive/export", body=True),
    "get_bulk_changelogs": Operation("POST", "/rest/api/3/changelog/bulkfetch", body=True),
    "get_change_logs": Operation("GET", "/rest/api/3/issue/{issueIdOrKey}/changelog", query=("startAt", "maxResults")),
    "get_change_logs_by_ids": Operation("POST", "/rest/api/3/issue/{issueIdOrKey}/changelog/list", body=True),
    "get_create_issue_meta": Operation("GET", "/rest/api/3/issue/createmeta", query=("projectIds", "projectKeys", "issuetypeIds", "issuetypeNames", "expand"), multi=("projectIds", "projectKeys", "issuetypeIds", "issuetypeNames")),
    "get_create_issue_meta_issue_type_id": Operation("GET", "/rest/api/3/issue/createmeta/{projectIdOrKey}/issuetypes/{issueTypeId}", query=("startAt", "maxResults")),
    "get_create_issue_meta_issue_types": Operation("GET", "/rest/api/3/issue/createmeta/{projectIdOrKey}/issuetypes", query=("startAt", "maxResults")),
    "get_edit_issue_meta": Operation("GET", "/rest/api/3/issue/{issueIdOrKey}/editmeta", query=("overrideScreenSecurity", "overrideEditableFlag")),
    "get_events": Operation("GET", "/rest/api/3/events"),
    "get_issue": Operation("GET", "/rest/api/3/issue/{issueIdOrKey}", query=("fields", "fieldsByKeys", "expand", "properties", "updateHistory", "failFast"), multi=("properties",)),
    "get_issue_limit_report": Operation("GET", "/rest/api/3/issue/limit/report", query=("isReturningKeys",)),
    "get_transitions": Operation("GET", "/rest/api/3/issue/{issueIdOrKey}/transitions", query=("expand", "transitionId", "skipRemoteOnlyCondition", "includeUnavailableTransitions", "sortByOpsBarAndStatus")),
    "notify": Operation("POST", "/rest/api/3/issue/{issueIdOrKey}/notify", body=True),
    "unarchive_issues": Operation("PUT", "/rest/api/3/issue/unarchive", body=True),
}

JIRA_EXPRESSIONS: Final[OperationTable] = {
    "analyse_expression": Operation("POST", "/rest/api/3/expression/analyse", query=("check",), body=True),
    "evaluate_jira_expression": Operation("POST", "/rest/api/3/expression/eval", query=("expand",), body=True),
    "evaluate_jsis_jira_expression": Operation("POST", "/rest/api/3/expression/evaluate", query=("expand",), body=True),
}

JIRA_SETTINGS: Final[OperationTable] = {
    "get_advanced_settings": Operation("GET", "/rest/api/3/application-properties/advanced-settings"),
    "get_application_property": Operation("GET", "/rest/api/3/application-properties", query=("key", "permissionLevel", "keyFilter")),
    "get_configuration": Operation("GET", "/rest/api/3/configuration"),
    "set_application_property": Operation("PUT", "/rest/api/3/application-properties/{id}", body=True),
}

JQL_FUNCTIONS_APPS: Final[OperationTable] = {
    "get_precomputations": Operation("GET", "/rest/api/3/jql/function/computation", query=("functionKey", "startAt", "maxResults", "orderBy"), multi=("functionKey",)),
    "get_precomputations_by_id": Operation("POST", "/rest/api/3/jql/function/computation/search", query=("orderBy",), body=True),
    "update_precomputations": Operation("POST", "/rest/api/3/jql/function/computation", query=("skipNotFoundPrecomputations",), body=True),
}

JQL: Final[OperationTable] = {
    "get_auto_complete": Operation("GET", "/rest/api/3/jql/autocompletedata"),
    "get_auto_complete_post": Operation("POST", "/rest/api/3/jql/autocompletedata", body=True),
    "get_field_auto_complete_for_query_string": Operation("GET", "/rest/api/3/jql/autocompletedata/suggestions", query=("fieldName", "fieldValue", "predicateName", "predicateValue")),
    "migrate_queries": Operation("POST", "/rest/api/3/jql/pdcleaner", body=True),
    "parse_jql_queries": Operation("POST", "/rest/api/3/jql/parse", query=("validation",), body=True),
    "sanitise_jql_queries": Operation("POST", "/rest/api/3/jql/sanitize", body=True),
}

LABELS: Final[OperationTable] = {
    "get_all_labels": Operation("GET", "/rest/api/3/label", query=("startAt", "maxResults")),
}

LICENSE_METRICS: Final[OperationTable] = {
    "get_approximate_application_license_count": Operation("GET", "/rest/api/3/license/approximateLicenseCount/product/{applicationKey}"),
    "get_approximate_license_count": Operation("GET", "/rest/api/3/license/approximateLicenseCount"),
    "get_license": Operation("GET", "/rest/api/3/instance/license"),
}

MYSELF: Final[OperationTable] = {
    "get_current_user": Operation("GET", "/rest/api/3/myself", query=("expand",)),
    "get_locale": Operation("GET", "/rest/api/3/mypreferences/locale"),
    "get_preference": Operation("GET", "/rest/api/3/mypreferences", query=("key",)),
    "remove_preference": Operation("DELETE", "/rest/api/3/mypreferences", query=("key",), returns=False),
    "set_locale": Operation("PUT", "/rest/api/3/mypreferences/locale", body=True, returns=False),
    "set_preference": Operation("PUT", "/rest/api/3/mypreferences", query=("key",), body=True, returns=False),
}

PERMISSION_SCHEMES: Final[OperationTable] = {
    "create_permission_grant": Operation("POST", "/rest/api/3/permissionscheme/{schemeId}/permission", query=("expand",), body=True),
    "create_permission_scheme": Operation("POST", "/rest/api/3/permissionscheme", query=("expand",), body=True),
    "delete_permission_scheme": Operation("DELETE", "/rest/api/3/permissionscheme/{schemeId}", returns=False),
    "delete_permission_scheme_entity": Operation("DELETE", "/rest/api/3/permissionscheme/{schemeId}/permission/{permissionId}", returns=False),
    "get_all_permission_schemes": Operation("GET", "/rest/api/3/permissionscheme", query=("expand",)),
    "get_permission_scheme": Operation("GET", "/rest/api/3/permissionscheme/{schemeId}", query=("expand",)),
    "get_permission_scheme_grant": Operation("GET", "/rest/api/3/permissionscheme/{schemeId}/permission/{permissionId}", query=("expand",)),
    "get_permission_scheme_grants": Operation("GET", "/rest/api/3/permissionscheme/{schemeId}/permission", query=("expand",)),
    "update_permission_scheme": Operation("PUT", "/rest/api/3/permissionscheme/{schemeId}", query=("expand",), body=True),
}

PERMISSIONS: Final[OperationTable] = {
    "get_all_permissions": Operation("GET", "/rest/api/3/permissions"),
    "get_bulk_permissions": Operation("POST", "/rest/api/3/permissions/check", body=True),
    "get_my_permissions": Operation("GET", "/rest/api/3/mypermissions", query=("projectKey", "projectId", "issueKey", "issueId", "permissions", "projectUuid", "projectConfigurationUuid", "commentId")),
    "get_permitted_projects": Operation("POST", "/rest/api/3/permissions/project", body=True),
}

PLANS: Final[OperationTable] = {
    "archive_plan": Operation("PUT", "/rest/api/3/plans/plan/{planId}/archive", returns=False),
    "create_plan": Operation("POST", "/rest/api/3/plans/plan", query=("useGroupId",), body=True),
    "duplicate_plan": Operation("POST", "/rest/api/3/plans/plan/{planId}/duplicate", body=True),
    "get_plan": Operation("GET", "/rest/api/3/plans/plan/{planId}", query=("useGroupId",)),
    "get_plans": Operation("GET", "/rest/api/3/plans/plan", query=("includeTrashed", "includeArchived", "cursor", "maxResults")),
    "trash_plan": Operation("PUT", "/rest/api/3/plans/plan/{planId}/trash", returns=False),
    "update_plan": Operation("PUT", "/rest/api/3/plans/plan/{planId}", query=("useGroupId",), body=True, returns=False),
}

PRIORITY_SCHEMES: Final[OperationTable] = {
    "create_priority_scheme": Operation("POST", "/rest/api/3/priorityscheme", body=True),
    "delete_priority_scheme": Operation("DELETE", "/rest/api/3/priorityscheme/{schemeId}", returns=False),
    "get_available_priorities_by_priority_scheme": Operation("GET", "/rest/api/3/priorityscheme/priorities/available", query=("startAt", "maxResults", "query", "schemeId", "exclude"), multi=("exclude",)),
    "get_priorities_by_priority_scheme": Operation("GET", "/rest/api/3/priorityscheme/{schemeId}/priorities", query=("startAt", "maxResults")),
    "get_priority_schemes": Operation("GET", "/rest/api/3/priorityscheme", query=("startAt", "maxResults", "priorityId", "schemeId", "schemeName", "onlyDefault", "orderBy", "expand"), multi=("priorityId", "schemeId")),
    "get_projects_by_priority_scheme": Operation("GET", "/rest/api/3/priorityscheme/{schemeId}/projects", query=("startAt", "maxResults", "projectId", "query"), multi=("projectId",)),
    "suggested_priorities_for_mappings": Operation("POST", "/rest/api/3/priorityscheme/mappings", body=True),
    "update_priority_scheme": Operation("PUT", "/rest/api/3/priorityscheme/{schemeId}", body=True),
}

PROJECT_AVATARS: Final[OperationTable] = {
    "create_project_avatar": Operation("POST", "/rest/api/3/project/{projectIdOrKey}/avatar2", query=("x", "y", "size"), body=True),
    "delete_project_avatar": Operation("DELETE", "/rest/api/3/project/{projectIdOrKey}/avatar/{id}", returns=False),
    "get_all_project_avatars": Operation("GET", "/rest/api/3/project/{projectIdOrKey}/avatars"),
    "update_project_avatar": Operation("PUT", "/rest/api/3/project/{projectIdOrKey}/avatar", body=True, returns=False),
}

PROJECT_CATEGORIES: Final[OperationTable] = {
    "create_project_category": Operation("POST", "/rest/api/3/projectCategory", body=True),
    "get_all_project_categories": Operation("GET", "/rest/api/3/projectCategory"),
    "get_project_category_by_id": Operation("GET", "/rest/api/3/projectCategory/{id}"),
    "remove_project_category": Operation("DELETE", "/rest/api/3/projectCategory/{id}", returns=False),
    "update_project_category": Operation("PUT", "/rest/api/3/projectCategory/{id}", body=True),
}

PROJECT_CLASSIFICATION_LEVELS: Final[OperationTable] = {
    "get_default_project_classification": Operation("GET", "/rest/api/3/project/{projectIdOrKey}/classification-level/default"),
    "remove_default_project_classification": Operation("DELETE", "/rest/api/3/project/{projectIdOrKey}/classification-level/default", returns=False),
    "update_default_project_classification": Operation("PUT", "/rest/api/3/project/{projectIdOrKey}/classification-level/default", body=True, returns=False),
}

PROJECT_COMPONENTS: Final[OperationTable] = {
    "create_component": Operation("POST", "/rest/api/3/component", body=True),
    "delete_component": Operation("DELETE", "/rest/api/3/component/{id}", query=("moveIssuesTo",), returns=False),
    "find_components_for_projects": Operation("GET", "/rest/api/3/component", query=("projectIdsOrKeys", "startAt", "maxResults", "orderBy", "query"), multi=("projectIdsOrKeys",)),
    "get_component": Operation("GET", "/rest/api/3/component/{id}"),
    "get_component_related_issues": Operation("GET", "/rest/api/3/component/{id}/relatedIssueCounts"),
    "get_project_components": Operation("GET", "/rest/api/3/project/{projectIdOrKey}/components", query=("componentSource",)),
    "get_project_components_paginated": Operation("GET", "/rest/api/3/project/{projectIdOrKey}/component", query=("startAt", "maxResults", "orderBy", "componentSource", "query")),
    "update_component": Operation("PUT", "/rest/api/3/component/{id}", body=True),
}

PROJECT_EMAIL: Final[OperationTable] = {
    "get_project_email": Operation("GET", "/rest/api/3/project/{projectId}/email"),
    "update_project_email": Operation("PUT", "/rest/api/3/project/{projectId}/email", body=True, returns=False),
}

PROJECT_FEATURES: Final[OperationTable] = {
    "get_features_for_project": Operation("GET", "/rest/api/3/project/{projectIdOrKey}/features"),
    "toggle_feature_for_project": Operation("PUT", "/rest/api/3/project/{projectIdOrKey}/features/{featureKey}", body=True),
}

PROJECT_KEY_AND_NAME_VALIDATION: Final[OperationTable] = {
    "get_valid_project_key": Operation("GET", "/rest/api/3/projectvalidate/validProjectKey", query=("key",)),
    "get_valid_project_name": Operation("GET", "/rest/api/3/projectvalidate/validProjectName", query=("name",)),
    "validate_project_key": Operation("GET", "/rest/api/3/projectvalidate/key", query=("key",)),
}

PROJECT_PERMISSION_SCHEMES: Final[OperationTable] = {
    "assign_permission_scheme": Operation("PUT", "/rest/api/3/project/{projectKeyOrId}/permissionscheme", query=("expand",), body=True),
    "get_assigned_permission_scheme": Operation("GET", "/rest/api/3/project/{projectKeyOrId}/permissionscheme", query=("expand",)),
    "get_project_issue_security_scheme": Operation("GET", "/rest/api/3/project/{projectKeyOrId}/issuesecuritylevelscheme"),
    "get_security_levels_for_project": Operation("GET", "/rest/api/3/project/{projectKeyOrId}/securitylevel"),
}

PROJECT_PROPERTIES: Final[OperationTable] = {
    "delete_project_property": Operation("DELETE", "/rest/api/3/project/{projectIdOrKey}/properties/{propertyKey}", returns=False),
    "get_project_property": Operation("GET", "/rest/api/3/project/{projectIdOrKey}/properties/{propertyKey}"),
    "get_project_property_keys": Operation("GET", "/rest/api/3/project/{projectIdOrKey}/properties"),
    "set_project_property": Operation("PUT", "/rest/api/3/project/{projectIdOrKey}/properties/{propertyKey}", body=True),
}

PROJECT_ROLE_ACTORS: Final[OperationTable] = {
    "add_actor_users": Operation("POST", "/rest/api/3/project/{projectIdOrKey}/role/{id}", body=True),
    "add_project_role_actors_to_role": Operation("POST", "/rest/api/3/role/{id}/actors", body=True),
    "delete_actor": Operation("DELETE", "/rest/api/3/project/{projectIdOrKey}/role/{id}", query=("user", "group", "groupId"), returns=False),
    "delete_project_role_actors_from_role": Operation("DELETE", "/rest/api/3/role/{id}/actors", query=("user", "groupId", "group")),
    "get_project_role_actors_for_role": Operation("GET", "/rest/api/3/role/{id}/actors"),
    "set_actors": Operation("PUT", "/rest/api/3/project/{projectIdOrKey}/role/{id}", body=True),
}

PROJECT_ROLES: Final[OperationTable] = {
    "create_project_role": Operation("POST", "/rest/api/3/role", body=True),
    "delete_project_role": Operation("DELETE", "/rest/api/3/role/{id}", query=("swap",), returns=False),
    "fully_update_project_role": Operation("PUT", "/rest/api/3/role/{id}", body=True),
    "get_all_project_roles": Operation("GET", "/rest/api/3/role"),
    "get_project_role": Operation("GET", "/rest/api/3/project/{projectIdOrKey}/role/{id}", query=("excludeInactiveUsers",)),
    "get_project_role_by_id": Operation("GET", "/rest/api/3/role/{id}"),
    "get_project_role_details": Operation("GET", "/rest/api/3/project/{projectIdOrKey}/roledetails", query=("currentMember", "excludeConnectAddons")),
    "get_project_roles": Operation("GET", "/rest/api/3/project/{projectIdOrKey}/role"),
    "partial_update_project_role": Operation("POST", "/rest/api/3/role/{id}", body=True),
}

PROJECT_TEMPLATES: Final[OperationTable] = {
    "create_project_with_custom_template": Operation("POST", "/rest/api/3/project-template", body=True, returns=False),
    "edit_template": Operation("PUT", "/rest/api/3/project-template/edit-template", body=True),
    "live_template": Operation("GET", "/rest/api/3/project-template/live-template", query=("projectId", "templateKey")),
    "remove_template": Operation("DELETE", "/rest/api/3/project-template/remove-template", query=("templateKey",)),
    "save_template": Operation("POST", "/rest/api/3/project-template/save-template", body=True),
}

PROJECT_TYPES: Final[OperationTable] = {
    "get_accessible_project_type_by_key": Operation("GET", "/rest/api/3/project/type/{projectTypeKey}/accessible"),
    "get_all_accessible_project_types": Operation("GET", "/rest/api/3/project/type/accessible"),
    "get_all_project_types": Operation("GET", "/rest/api/3/project/type"),
    "get_project_type_by_key": Operation("GET", "/rest/api/3/project/type/{projectTypeKey}"),
}

PROJECT_VERSIONS: Final[OperationTable] = {
    "create_related_work": Operation("POST", "/rest/api/3/version/{id}/relatedwork", body=True),
    "create_version": Operation("POST", "/rest/api/3/version", body=True),
    "delete_and_replace_version": Operation("POST", "/rest/api/3/version/{id}/removeAndSwap", body=True, returns=False),
    "delete_related_work": Operation("DELETE", "/rest/api/3/version/{versionId}/relatedwork/{relatedWorkId}", returns=False),
    "delete_version": Operation("DELETE", "/rest/api/3/version/{id}", query=("moveFixIssuesTo", "moveAffectedIssuesTo"), returns=False),
    "get_project_versions": Operation("GET", "/rest/api/3/project/{projectIdOrKey}/versions", query=("expand",)),
    "get_project_versions_paginated": Operation("GET", "/rest/api/3/project/{projectIdOrKey}/version", query=("startAt", "maxResults", "orderBy", "query", "status", "expand")),
    "get_related_work": Operation("GET", "/rest/api/3/version/{id}/relatedwork"),
    "get_version": Operation("GET", "/rest/api/3/version/{id}", query=("expand",)),
    "get_version_related_issues": Operation("GET", "/rest/api/3/version/{id}/relatedIssueCounts"),
    "get_version_unresolved_issues": Operation("GET", "/rest/api/3/version/{id}/unresolvedIssueCount"),
    "merge_versions": Operation("PUT", "/rest/api/3/version/{id}/mergeto/{moveIssuesTo}", returns=False),
    "move_version": Operation("POST", "/rest/api/3/version/{id}/move", body=True),
    "update_related_work": Operation("PUT", "/rest/api/3/version/{id}/relatedwork", body=True),
    "update_version": Operation("PUT", "/rest/api/3/version/{id}", body=True),
}

PROJECTS: Final[OperationTable] = {
    "archive_project": Operation("POST", "/rest/api/3/project/{projectIdOrKey}/archive", returns=False),
    "create_project": Operation("POST", "/rest/api/3/project", body=True),
    "delete_project": Operation("DELETE", "/rest/api/3/project/{projectIdOrKey}", query=("enableUndo",), returns=False),
    "delete_project_asynchronously": Operation("DELETE", "/rest/api/3/project/{projectIdOrKey}", returns=False),
    "get_all_projects": Operation("GET", "/rest/api/3/project", query=("expand", "recent", "properties"), multi=("properties",)),
    "get_all_statuses": Operation("GET", "/rest/api/3/project/{projectIdOrKey}/statuses"),
    "get_hierarchy": Operation("GET", "/rest/api/3/project/{projectId}/hierarchy"),
    "get_notification_scheme_for_project": Operation("GET", "/rest/api/3/project/{projectKeyOrId}/notificationscheme", query=("expand",)),
    "get_project": Operation("GET", "/rest/api/3/project/{projectIdOrKey}", query=("expand", "properties"), multi=("properties",)),
    "get_recent": Operation("GET", "/rest/api/3/project/recent", query=("expand", "properties"), multi=("properties",)),
    "restore": Operation("POST", "/rest/api/3/project/{projectIdOrKey}/restore"),
    "search_projects": Operation("GET", "/rest/api/3/project/search", query=("startAt", "maxResults", "orderBy", "id", "keys", "query", "typeKey", "categoryId", "action", "expand", "status", "properties", "propertyQuery"), multi=("id", "keys", "status", "properties")),
    "update_project": Operation("PUT", "/rest/api/3/project/{projectIdOrKey}", query=("expand",), body=True),
}

SCREEN_SCHEMES: Final[OperationTable] = {
    "create_screen_scheme": Operation("POST", "/rest/api/3/screenscheme", body=True),
    "delete_screen_scheme": Operation("DELETE", "/rest/api/3/screenscheme/{screenSchemeId}", returns=False),
    "get_screen_schemes": Operation("GET", "/rest/api/3/screenscheme", query=("startAt", "maxResults", "id", "expand", "queryString", "orderBy"), multi=("id",)),
    "update_screen_scheme": Operation("PUT", "/rest/api/3/screenscheme/{screenSchemeId}", body=True, returns=False),
}

SCREEN_TAB_FIELDS: Final[OperationTable] = {
    "add_screen_tab_field": Operation("POST", "/rest/api/3/screens/{screenId}/tabs/{tabId}/fields", body=True),
    "get_all_screen_tab_fields": Operation("GET", "/rest/api/3/screens/{screenId}/tabs/{tabId}/fields", query=("projectKey",)),
    "move_screen_tab_field": Operation("POST", "/rest/api/3/screens/{screenId}/tabs/{tabId}/fields/{id}/move", body=True, returns=False),
    "remove_screen_tab_field": Operation("DELETE", "/rest/api/3/screens/{screenId}/tabs/{tabId}/fields/{id}", returns=False),
}

SCREEN_TABS: Final[OperationTable] = {
    "add_screen_tab": Operation("POST", "/rest/api/3/screens/{screenId}/tabs", body=True),
    "delete_screen_tab": Operation("DELETE", "/rest/api/3/screens/{screenId}/tabs/{tabId}", returns=False),
    "get_all_screen_tabs": Operation("GET", "/rest/api/3/screens/{screenId}/tabs", query=("projectKey",)),
    "get_bulk_screen_tabs": Operation("GET", "/rest/api/3/screens/tabs", query=("screenId", "tabId", "startAt", "maxResult"), multi=("screenId", "tabId")),
    "move_screen_tab": Operation("POST", "/rest/api/3/screens/{screenId}/tabs/{tabId}/move/{pos}", returns=False),
    "rename_screen_tab": Operation("PUT", "/rest/api/3/screens/{screenId}/tabs/{tabId}", body=True),
}

SCREENS: Final[OperationTable] = {
    "add_field_to_default_screen": Operation("POST", "/rest/api/3/screens/addToDefault/{fieldId}"),
    "create_screen": Operation("POST", "/rest/api/3/screens", body=True),
    "delete_screen": Operation("DELETE", "/rest/api/3/screens/{screenId}", returns=False),
    "get_available_screen_fields": Operation("GET", "/rest/api/3/screens/{screenId}/availableFields"),
    "get_screens": Operation("GET", "/rest/api/3/screens", query=("startAt", "maxResults", "id", "queryString", "scope", "orderBy"), multi=("id", "scope")),
    "get_screens_for_field": Operation("GET", "/rest/api/3/field/{fieldId}/screens", query=("startAt", "maxResults", "expand")),
    "update_screen": Operation("PUT", "/rest/api/3/screens/{screenId}", body=True),
}

SERVER_INFO: Final[OperationTable] = {
    "get_server_info": Operation("GET", "/rest/api/3/serverInfo"),
}

SERVICE_REGISTRY: Final[OperationTable] = {
    "service_registry_resource_services_get": Operation("GET", "/rest/atlassian-connect/1/service-registry", query=("serviceIds",), multi=("serviceIds",)),
}

STATUS: Final[OperationTable] = {
    "create_statuses": Operation("POST", "/rest/api/3/statuses", body=True),
    "delete_statuses_by_id": Operation("DELETE", "/rest/api/3/statuses", query=("id",), multi=("id",), returns=False),
    "get_project_issue_type_usages_for_status": Operation("GET", "/rest/api/3/status/{statusId}/project/{projectId}/issuetypes", query=("nextPageToken", "maxResults")),
    "get_project_usages_for_status": Operation("GET", "/rest/api/3/status/{statusId}/projects", query=("nextPageToken", "maxResults")),
    "get_status": Operation("GET", "/rest/api/3/status/{idOrName}"),
    "get_statuses_by_id": Operation("GET", "/rest/api/3/statuses", query=("expand", "id"), multi=("id",)),
    "get_workflow_usages_for_status": Operation("GET", "/rest/api/3/status/{statusId}/workflows", query=("nextPageToken", "maxResults")),
    "search": Operation("GET", "/rest/api/3/statuses/search", query=("expand", "projectId", "startAt", "maxResults", "searchString", "statusCategory")),
    "update_statuses": Operation("PUT", "/rest/api/3/statuses", body=True, returns=False),
}

TASKS: Final[OperationTable] = {
    "cancel_task": Operation("POST", "/rest/api/3/task/{taskId}/cancel"),
    "get_task": Operation("GET", "/rest/api/3/task/{taskId}"),
}

TEAMS_IN_PLAN: Final[OperationTable] = {
    "add_atlassian_team": Operation("POST", "/rest/api/3/plans/plan/{planId}/team/atlassian", body=True, returns=False),
    "create_plan_only_team": Operation("POST", "/rest/api/3/plans/plan/{planId}/team/planonly", body=True),
    "delete_plan_only_team": Operation("DELETE", "/rest/api/3/plans/plan/{planId}/team/planonly/{planOnlyTeamId}", returns=False),
    "get_atlassian_team": Operation("GET", "/rest/api/3/plans/plan/{planId}/team/atlassian/{atlassianTeamId}"),
    "get_plan_only_team": Operation("GET", "/rest/api/3/plans/plan/{planId}/team/planonly/{planOnlyTeamId}"),
    "get_teams": Operation("GET", "/rest/api/3/plans/plan/{planId}/team", query=("cursor", "maxResults")),
    "remove_atlassian_team": Operation("DELETE", "/rest/api/3/plans/plan/{planId}/team/atlassian/{atlassianTeamId}", returns=False),
    "update_atlassian_team": Operation("PUT", "/rest/api/3/plans/plan/{planId}/team/atlassian/{atlassianTeamId}", body=True, returns=False),
    "update_plan_only_team": Operation("PUT", "/rest/api/3/plans/plan/{planId}/team/planonly/{planOnlyTeamId}", body=True, returns=False),
}

TIME_TRACKING: Final[OperationTable] = {
    "get_available_time_tracking_implementations": Operation("GET", "/rest/api/3/configuration/timetracking/list"),
    "get_selected_time_tracking_implementation": Operation("GET", "/rest/api/3/configuration/timetracking"),
    "get_shared_time_tracking_configuration": Operation("GET", "/rest/api/3/configuration/timetracking/options"),
    "select_time_tracking_implementation": Operation("PUT", "/rest/api/3/configuration/timetracking", body=True, returns=False),
    "set_shared_time_tracking_configuration": Operation("PUT", "/rest/api/3/configuration/timetracking/options", body=True),
}

UI_MODIFICATIONS_APPS: Final[OperationTable] = {
    "create_ui_modification": Operation("POST", "/rest/api/3/uiModifications", body=True),
    "delete_ui_modification": Operation("DELETE", "/rest/api/3/uiModifications/{uiModificationId}", returns=False),
    "get_ui_modifications": Operation("GET", "/rest/api/3/uiModifications", query=("startAt", "maxResults", "expand")),
    "update_ui_modification": Operation("PUT", "/rest/api/3/uiModifications/{uiModificationId}", body=True, returns=False),
}

USER_PROPERTIES: Final[OperationTable] = {
    "delete_user_property": Operation("DELETE", "/rest/api/3/user/properties/{propertyKey}", query=("accountId", "userKey", "username"), returns=False),
    "get_user_property": Operation("GET", "/rest/api/3/user/properties/{propertyKey}", query=("accountId", "userKey", "username")),
    "get_user_property_keys": Operation("GET", "/rest/api/3/user/properties", query=("accountId", "userKey", "username")),
    "set_user_property": Operation("PUT", "/rest/api/3/user/properties/{propertyKey}", query=("accountId", "userKey", "username"), body=True),
}

USER_SEARCH: Final[OperationTable] = {
    "find_assignable_users": Operation("GET", "/rest/api/3/user/assignable/search", query=("query", "sessionId", "username", "accountId", "project", "issueKey", "issueId", "startAt", "maxResults", "actionDescriptorId", "recommend")),
    "find_bulk_assignable_users": Operation("GET", "/rest/api/3/user/assignable/multiProjectSearch", query=("query", "username", "accountId", "projectKeys", "startAt", "maxResults")),
    "find_user_keys_by_query": Operation("GET", "/rest/api/3/user/search/query/key", query=("query", "startAt", "maxResult")),
    "find_users": Operation("GET", "/rest/api/3/user/search", query=("query", "username", "accountId", "startAt", "maxResults", "property")),
    "find_users_by_query": Operation("GET", "/rest/api/3/user/search/query", query=("query", "startAt", "maxResults")),
    "find_users_for_picker": Operation("GET", "/rest/api/3/user/picker", query=("query", "maxResults", "showAvatar", "exclude", "excludeAccountIds", "avatarSize", "excludeConnectUsers"), multi=("exclude", "excludeAccountIds")),
    "find_users_with_all_permissions": Operation("GET", "/rest/api/3/user/permission/search", query=("query", "username", "accountId", "permissions", "issueKey", "projectKey", "startAt", "maxResults")),
    "find_users_with_browse_permission": Operation("GET", "/rest/api/3/user/viewissue/search", query=("query", "username", "accountId", "issueKey", "projectKey", "startAt", "maxResults")),
}

USERNAVPROPERTIES: Final[OperationTable] = {
    "get_user_nav_property": Operation("GET", "/rest/api/3/user/nav4-opt-property/{propertyKey}", query=("accountId",)),
    "set_user_nav_property": Operation("PUT", "/rest/api/3/user/nav4-opt-property/{propertyKey}", query=("accountId",), body=True),
}

USERS: Final[OperationTable] = {
    "bulk_get_users": Operation("GET", "/rest/api/3/user/bulk", query=("startAt", "maxResults", "username", "key", "accountId"), multi=("username", "key", "accountId")),
    "bulk_get_users_migration": Operation("GET", "/rest/api/3/user/bulk/migration", query=("startAt", "maxResults", "username", "key"), multi=("username", "key")),
    "create_user": Operation("POST", "/rest/api/3/user", body=True),
    "get_all_users": Operation("GET", "/rest/api/3/users", query=("startAt", "maxResults")),
    "get_all_users_default": Operation("GET", "/rest/api/3/users/search", query=("startAt", "maxResults")),
    "get_user": Operation("GET", "/rest/api/3/user", query=("accountId", "username", "key", "expand")),
    "get_user_default_columns": Operation("GET", "/rest/api/3/user/columns", query=("accountId", "username")),
    "get_user_email": Operation("GET", "/rest/api/3/user/email", query=("accountId",)),
    "get_user_email_bulk": Operation("GET", "/rest/api/3/user/email/bulk", query=("accountId",), multi=("accountId",)),
    "get_user_groups": Operation("GET", "/rest/api/3/user/groups", query=("accountId", "username", "key")),
    "remove_user": Operation("DELETE", "/rest/api/3/user", query=("accountId", "username", "key"), returns=False),
    "reset_user_columns": Operation("DELETE", "/rest/api/3/user/columns", query=("accountId", "username"), returns=False),
    "set_user_columns": Operation("PUT", "/rest/api/3/user/columns", query=("accountId",), body=True),
}

WEBHOOKS: Final[OperationTable] = {
    "delete_webhook_by_id": Operation("DELETE", "/rest/api/3/webhook", body=True, returns=False),
    "get_dynamic_webhooks_for_app": Operation("GET", "/rest/api/3/webhook", query=("startAt", "maxResults")),
    "get_failed_webhooks": Operation("GET", "/rest/api/3/webhook/failed", query=("maxResults", "after")),
    "refresh_webhooks": Operation("PUT", "/rest/api/3/webhook/refresh", body=True),
    "register_dynamic_webhooks": Operation("POST", "/rest/api/3/webhook", body=True),
}

WORKFLOW_SCHEME_DRAFTS: Final[OperationTable] = {
    "create_workflow_scheme_draft_from_parent": Operation("POST", "/rest/api/3/workflowscheme/{id}/createdraft"),
    "delete_draft_default_workflow": Operation("DELETE", "/rest/api/3/workflowscheme/{id}/draft/default"),
    "delete_draft_workflow_mapping": Operation("DELETE", "/rest/api/3/workflowscheme/{id}/draft/workflow", query=("workflowName",), returns=False),
    "delete_workflow_scheme_draft": Operation("DELETE", "/rest/api/3/workflowscheme/{id}/draft", returns=False),
    "delete_workflow_scheme_draft_issue_type": Operation("DELETE", "/rest/api/3/workflowscheme/{id}/draft/issuetype/{issueType}"),
    "get_draft_default_workflow": Operation("GET", "/rest/api/3/workflowscheme/{id}/draft/default"),
    "get_draft_workflow": Operation("GET", "/rest/api/3/workflowscheme/{id}/draft/workflow", query=("workflowName",)),
    "get_workflow_scheme_draft": Operation("GET", "/rest/api/3/workflowscheme/{id}/draft"),
    "get_workflow_scheme_draft_issue_type": Operation("GET", "/rest/api/3/workflowscheme/{id}/draft/issuetype/{issueType}"),
    "publish_draft_workflow_scheme": Operation("POST", "/rest/api/3/workflowscheme/{id}/draft/publish", query=("validateOnly",), body=True, returns=False),
    "set_workflow_scheme_draft_issue_type": Operation("PUT", "/rest/api/3/workflowscheme/{id}/draft/issuetype/{issueType}", body=True),
    "update_draft_default_workflow": Operation("PUT", "/rest/api/3/workflowscheme/{id}/draft/default", body=True),
    "update_draft_workflow_mapping": Operation("PUT", "/rest/api/3/workflowscheme/{id}/draft/workflow", query=("workflowName",), body=True),
    "update_workflow_scheme_draft": Operation("PUT", "/rest/api/3/workflowscheme/{id}/draft", body=True),
}

WORKFLOW_SCHEME_PROJECT_ASSOCIATIONS: Final[OperationTable] = {
    "assign_scheme_to_project": Operation("PUT", "/rest/api/3/workflowscheme/project", body=True, returns=False),
    "get_workflow_scheme_project_associations": Operation("GET", "/rest/api/3/workflowscheme/project", query=("projectId",), multi=("projectId",)),
}

WORKFLOW_SCHEMES: Final[OperationTable] = {
    "create_workflow_scheme": Operation("POST", "/rest/api/3/workflowscheme", body=True),
    "delete_default_workflow": Operation("DELETE", "/rest/api/3/workflowscheme/{id}/default", query=("updateDraftIfNeeded",)),
    "delete_workflow_mapping": Operation("DELETE", "/rest/api/3/workflowscheme/{id}/workflow", query=("workflowName", "updateDraftIfNeeded"), returns=False),
    "delete_workflow_scheme": Operation("DELETE", "/rest/api/3/workflowscheme/{id}", returns=False),
    "delete_workflow_scheme_issue_type": Operation("DELETE", "/rest/api/3/workflowscheme/{id}/issuetype/{issueType}", query=("updateDraftIfNeeded",)),
    "get_all_workflow_schemes": Operation("GET", "/rest/api/3/workflowscheme", query=("startAt", "maxResults")),
    "get_default_workflow": Operation("GET", "/rest/api/3/workflowscheme/{id}/default", query=("returnDraftIfExists",)),
    "get_project_usages_for_workflow_scheme": Operation("GET", "/rest/api/3/workflowscheme/{workflowSchemeId}/projectUsages", query=("nextPageToken", "maxResults")),
    "get_workflow": Operation("GET", "/rest/api/3/workflowscheme/{id}/workflow", query=("workflowName", "returnDraftIfExists")),
    "get_workflow_scheme": Operation("GET", "/rest/api/3/workflowscheme/{id}", query=("returnDraftIfExists",)),
    "get_workflow_scheme_issue_type": Operation("GET", "/rest/api/3/workflowscheme/{id}/issuetype/{issueType}", query=("returnDraftIfExists",)),
    "read_workflow_schemes": Operation("POST", "/rest/api/3/workflowscheme/read", query=("expand",), body=True),
    "set_workflow_scheme_issue_type": Operation("PUT", "/rest/api/3/workflowscheme/{id}/issuetype/{issueType}", body=True),
    "update_default_workflow": Operation("PUT", "/rest/api/3/workflowscheme/{id}/default", body=True),
    "update_schemes": Operation("POST", "/rest/api/3/workflowscheme/update", body=True),
    "update_workflow_mapping": Operation("PUT", "/rest/api/3/workflowscheme/{id}/workflow", query=("workflowName",), body=True),
    "update_workflow_scheme": Operation("PUT", "/rest/api/3/workflowscheme/{id}", body=True),
    "update_workflow_scheme_mappings": Operation("POST", "/rest/api/3/workflowscheme/update/mappings", body=True),
}

WORKFLOW_STATUS_CATEGORIES: Final[OperationTable] = {
    "get_status_categories": Operation("GET", "/rest/api/3/statuscategory"),
    "get_status_category": Operation("GET", "/rest/api/3/statuscategory/{idOrKey}"),
}

WORKFLOW_STATUSES: Final[OperationTable] = {
    "get_status": Operation("GET", "/rest/api/3/status/{idOrName}"),
    "get_statuses": Operation("GET", "/rest/api/3/status"),
}

WORKFLOW_TRANSITION_PROPERTIES: Final[OperationTable] = {
    "create_workflow_transition_property": Operation("POST", "/rest/api/3/workflow/transitions/{transitionId}/properties", query=("key", "workflowName", "workflowMode"), body=True),
    "delete_workflow_transition_property": Operation("DELETE", "/rest/api/3/workflow/transitions/{transitionId}/properties", query=("key", "workflowName", "workflowMode"), returns=False),
    "get_workflow_transition_properties": Operation("GET", "/rest/api/3/workflow/transitions/{transitionId}/properties", query=("includeReservedKeys", "key", "workflowName", "workflowMode")),
    "update_workflow_transition_property": Operation("PUT", "/rest/api/3/workflow/transitions/{transitionId}/properties", query=("key", "workflowName", "workflowMode"), body=True),
}

WORKFLOW_TRANSITION_RULES: Final[OperationTable] = {
    "delete_workflow_transition_rule_configurations": Operation("PUT", "/rest/api/3/workflow/rule/config/delete", body=True),
    "get_workflow_transition_rule_configurations": Operation("GET", "/rest/api/3/workflow/rule/config", query=("startAt", "maxResults", "types", "keys", "workflowNames", "withTags", "draft", "expand"), multi=("types", "keys", "workflowNames", "withTags")),
    "update_workflow_transition_rule_configurations": Operation("PUT", "/rest/api/3/workflow/rule/config", body=True),
}

WORKFLOWS: Final[OperationTable] = {
    "create_workflow": Operation("POST", "/rest/api/3/workflow", body=True),
    "create_workflows": Operation("POST", "/rest/api/3/workflows/create", body=True),
    "delete_inactive_workflow": Operation("DELETE", "/rest/api/3/workflow/{entityId}"),
    "get_all_workflows": Operation("GET", "/rest/api/3/workflow", query=("workflowName",)),
    "get_default_editor": Operation("GET", "/rest/api/3/workflows/defaultEditor"),
    "get_project_usages_for_workflow": Operation("GET", "/rest/api/3/workflow/{workflowId}/projectUsages", query=("nextPageToken", "maxResults")),
    "get_workflow_project_issue_type_usages": Operation("GET", "/rest/api/3/workflow/{workflowId}/project/{projectId}/issueTypeUsages", query=("nextPageToken", "maxResults")),
    "get_workflow_scheme_usages_for_workflow": Operation("GET", "/rest/api/3/workflow/{workflowId}/workflowSchemes", query=("nextPageToken", "maxResults")),
    "get_workflows_paginated": Operation("GET", "/rest/api/3/workflow/search", query=("startAt", "maxResults", "workflowName", "expand", "queryString", "orderBy", "isActive"), multi=("workflowName",)),
    "read_workflows": Operation("POST", "/rest/api/3/workflows", query=("expand", "useApprovalConfiguration"), body=True),
    "search_workflows": Operation("GET", "/rest/api/3/workflows/search", query=("startAt", "maxResults", "expand", "queryString", "orderBy", "scope", "isActive")),
    "update_workflows": Operation("POST", "/rest/api/3/workflows/update", query=("expand",), body=True),
    "validate_create_workflows": Operation("POST", "/rest/api/3/workflows/create/validation", body=True),
    "validate_update_workflows": Operation("POST", "/rest/api/3/workflows/update/validation", body=True),
    "workflow_capabilities": Operation("GET", "/rest/api/3/workflows/capabilities", query=("workflowId", "projectId", "issueTypeId")),
}

GROUPS: Final[dict[str, OperationTable]] = {
    "announcement_banner": ANNOUNCEMENT_BANNER,
    "app_data_policies": APP_DATA_POLICIES,
    "app_migration": APP_MIGRATION,
    "app_properties": APP_PROPERTIES,
    "application_roles": APPLICATION_ROLES,
    "audit_records": AUDIT_RECORDS,
    "avatars": AVATARS,
    "classification_levels": CLASSIFICATION_LEVELS,
    "dashboards": DASHBOARDS,
    "dynamic_modules": DYNAMIC_MODULES,
    "filter_sharing": FILTER_SHARING,
    "filters": FILTERS,
    "group_and_user_picker": GROUP_AND_USER_PICKER,
    "groups": USER_GROUPS,
    "issue_attachments": ISSUE_ATTACHMENTS,
    "issue_bulk_operations": ISSUE_BULK_OPERATIONS,
    "issue_comment_properties": ISSUE_COMMENT_PROPERTIES,
    "issue_comments": ISSUE_COMMENTS,
    "issue_custom_field_associations": ISSUE_CUSTOM_FIELD_ASSOCIATIONS,
    "issue_custom_field_configuration_apps": ISSUE_CUSTOM_FIELD_CONFIGURATION_APPS,
    "issue_custom_field_contexts": ISSUE_CUSTOM_FIELD_CONTEXTS,
    "issue_custom_field_options_apps": ISSUE_CUSTOM_FIELD_OPTIONS_APPS,
    "issue_custom_field_options": ISSUE_CUSTOM_FIELD_OPTIONS,
    "issue_custom_field_values_apps": ISSUE_CUSTOM_FIELD_VALUES_APPS,
    "issue_field_configurations": ISSUE_FIELD_CONFIGURATIONS,
    "issue_fields": ISSUE_FIELDS,
    "issue_link_types": ISSUE_LINK_TYPES,
    "issue_links": ISSUE_LINKS,
    "issue_navigator_settings": ISSUE_NAVIGATOR_SETTINGS,
    "issue_notification_schemes": ISSUE_NOTIFICATION_SCHEMES,
    "issue_priorities": ISSUE_PRIORITIES,
    "issue_properties": ISSUE_PROPERTIES,
    "issue_redaction": ISSUE_REDACTION,
    "issue_remote_links": ISSUE_REMOTE_LINKS,
    "issue_resolutions": ISSUE_RESOLUTIONS,
    "issue_search": ISSUE_SEARCH,
    "issue_security_level": ISSUE_SECURITY_LEVEL,
    "issue_security_schemes": ISSUE_SECURITY_SCHEMES,
    "issue_type_properties": ISSUE_TYPE_PROPERTIES,
    "issue_type_schemes": ISSUE_TYPE_SCHEMES,
    "issue_type_screen_schemes": ISSUE_TYPE_SCREEN_SCHEMES,
    "issue_types": ISSUE_TYPES,
    "issue_votes": ISSUE_VOTES,
    "issue_watchers": ISSUE_WATCHERS,
    "issue_worklog_properties": ISSUE_WORKLOG_PROPERTIES,
    "issue_worklogs": ISSUE_WORKLOGS,
    "issues": ISSUES,
    "jira_expressions": JIRA_EXPRESSIONS,
    "jira_settings": JIRA_SETTINGS,
    "jql_functions_apps": JQL_FUNCTIONS_APPS,
    "jql": JQL,
    "labels": LABELS,
    "license_metrics": LICENSE_METRICS,
    "myself": MYSELF,
    "permission_schemes": PERMISSION_SCHEMES,
    "permissions": PERMISSIONS,
    "plans": PLANS,
    "priority_schemes": PRIORITY_SCHEMES,
    "project_avatars": PROJECT_AVATARS,
    "project_categories": PROJECT_CATEGORIES,
    "project_classification_levels": PROJECT_CLASSIFICATION_LEVELS,
    "project_components": PROJECT_COMPONENTS,
    "project_email": PROJECT_EMAIL,
    "project_features": PROJECT_FEATURES,
    "project_key_and_name_validation": PROJECT_KEY_AND_NAME_VALIDATION,
    "project_permission_schemes": PROJECT_PERMISSION_SCHEMES,
    "project_properties": PROJECT_PROPERTIES,
    "project_role_actors": PROJECT_ROLE_ACTORS,
    "project_roles": PROJECT_ROLES,
    "project_templates": PROJECT_TEMPLATES,
    "project_types": PROJECT_TYPES,
    "project_versions": PROJECT_VERSIONS,
    "projects": PROJECTS,
    "screen_schemes": SCREEN_SCHEMES,
    "screen_tab_fields": SCREEN_TAB_FIELDS,
    "screen_tabs": SCREEN_TABS,
    "screens": SCREENS,
    "server_info": SERVER_INFO,
    "service_registry": SERVICE_REGISTRY,
    "status": STATUS,
    "tasks": TASKS,
    "teams_in_plan": TEAMS_IN_PLAN,
    "time_tracking": TIME_TRACKING,
    "ui_modifications_apps": UI_MODIFICATIONS_APPS,
    "user_properties": USER_PROPERTIES,
    "user_search": USER_SEARCH,
    "usernavproperties": USERNAVPROPERTIES,
    "users": USERS,
    "webhooks": WEBHOOKS,
    "workflow_scheme_drafts": WORKFLOW_SCHEME_DRAFTS,
    "workflow_scheme_project_associations": WORKFLOW_SCHEME_PROJECT_ASSOCIATIONS,
    "workflow_schemes": WORKFLOW_SCHEMES,
    "workflow_status_categories": WORKFLOW_STATUS_CATEGORIES,
    "workflow_statuses": WORKFLOW_STATUSES,
    "workflow_transition_properties": WORKFLOW_TRANSITION_PROPERTIES,
    "workflow_transition_rules": WORKFLOW_TRANSITION_RULES,
    "workflows": WORKFLOWS,
}
