"""Jira Software DevOps integration endpoints.

'why': builds, deployments, development information, and similar providers each version their own API root
"""
# ruff: noqa: E501
from __future__ import annotations

from typing import Final

from .._operations import Operation, OperationTable

BUILDS: Final[OperationTable] = {
    "delete_build_by_key": Operation("DELETE", "/rest/builds/0.1/pipelines/{pipelineId}/builds/{buildNumber}", query=("_updateSequenceNumber",), returns=False),
    "delete_builds_by_property": Operation("DELETE", "/rest/builds/0.1/bulkByProperties", query=("_updateSequenceNumber",), returns=False),
    "get_build_by_key": Operation("GET", "/rest/builds/0.1/pipelines/{pipelineId}/builds/{buildNumber}"),
    "submit_builds": Operation("POST", "/rest/builds/0.1/bulk", body=True),
}

DEPLOYMENTS: Final[OperationTable] = {
    "delete_deployment_by_key": Operation("DELETE", "/rest/deployments/0.1/pipelines/{pipelineId}/environments/{environmentId}/deployments/{deploymentSequenceNumber}", query=("_updateSequenceNumber",), returns=False),
    "delete_deployments_by_property": Operation("DELETE", "/rest/deployments/0.1/bulkByProperties", query=("_updateSequenceNumber",), returns=False),
    "get_deployment_by_key": Operation("GET", "/rest/deployments/0.1/pipelines/{pipelineId}/environments/{environmentId}/deployments/{deploymentSequenceNumber}"),
    "get_deployment_gating_status_by_key": Operation("GET", "/rest/deployments/0.1/pipelines/{pipelineId}/environments/{environmentId}/deployments/{deploymentSequenceNumber}/gating-status"),
    "submit_deployments": Operation("POST", "/rest/deployments/0.1/bulk", body=True),
}

DEV_OPS_COMPONENTS: Final[OperationTable] = {
    "delete_component_by_id": Operation("DELETE", "/rest/devopscomponents/1.0/devopscomponents/{componentId}", returns=False),
    "delete_components_by_property": Operation("DELETE", "/rest/devopscomponents/1.0/bulkByProperties", returns=False),
    "get_component_by_id": Operation("GET", "/rest/devopscomponents/1.0/devopscomponents/{componentId}"),
    "submit_components": Operation("POST", "/rest/devopscomponents/1.0/bulk", body=True),
}

DEVELOPMENT_INFORMATION: Final[OperationTable] = {
    "delete_by_properties": Operation("DELETE", "/rest/devinfo/0.10/bulkByProperties", query=("_updateSequenceId",), returns=False),
    "delete_entity": Operation("DELETE", "/rest/devinfo/0.10/repository/{repositoryId}/{entityType}/{entityId}", query=("_updateSequenceId",), returns=False),
    "delete_repository": Operation("DELETE", "/rest/devinfo/0.10/repository/{repositoryId}", query=("_updateSequenceId",), returns=False),
    "exists_by_properties": Operation("GET", "/rest/devinfo/0.10/existsByProperties", query=("_updateSequenceId",)),
    "get_repository": Operation("GET", "/rest/devinfo/0.10/repository/{repositoryId}"),
    "store_development_information": Operation("POST", "/rest/devinfo/0.10/bulk", body=True),
}

FEATURE_FLAGS: Final[OperationTable] = {
    "delete_feature_flag_by_id": Operation("DELETE", "/rest/featureflags/0.1/flag/{featureFlagId}", query=("_updateSequenceId",), returns=False),
    "delete_feature_flags_by_property": Operation("DELETE", "/rest/featureflags/0.1/bulkByProperties", query=("_updateSequenceId",), returns=False),
    "get_feature_flag_by_id": Operation("GET", "/rest/featureflags/0.1/flag/{featureFlagId}"),
    "submit_feature_flags": Operation("POST", "/rest/featureflags/0.1/bulk", body=True),
}

OPERATIONS: Final[OperationTable] = {
    "delete_entity_by_property": Operation("DELETE", "/rest/operations/1.0/bulkByProperties", returns=False),
    "delete_incident_by_id": Operation("DELETE", "/rest/operations/1.0/incidents/{incidentId}", returns=False),
    "delete_review_by_id": Operation("DELETE", "/rest/operations/1.0/post-incident-reviews/{reviewId}", returns=False),
    "delete_workspaces": Operation("DELETE", "/rest/operations/1.0/linkedWorkspaces/bulk", returns=False),
    "get_incident_by_id": Operation("GET", "/rest/operations/1.0/incidents/{incidentId}"),
    "get_review_by_id": Operation("GET", "/rest/operations/1.0/post-incident-reviews/{reviewId}"),
    "get_workspaces": Operation("GET", "/rest/operations/1.0/linkedWorkspaces"),
    "submit_entity": Operation("POST", "/rest/operations/1.0/bulk", body=True),
    "submit_operations_workspaces": Operation("POST", "/rest/operations/1.0/linkedWorkspaces/bulk", body=True),
}

REMOTE_LINKS: Final[OperationTable] = {
    "delete_remote_link_by_id": Operation("DELETE", "/rest/remotelinks/1.0/remotelink/{remoteLinkId}", query=("_updateSequenceNumber",), returns=False),
    "delete_remote_links_by_property": Operation("DELETE", "/rest/remotelinks/1.0/bulkByProperties", query=("_updateSequenceNumber",), returns=False),
    "get_remote_link_by_id": Operation("GET", "/rest/remotelinks/1.0/remotelink/{remoteLinkId}"),
    "submit_remote_links": Operation("POST", "/rest/remotelinks/1.0/bulk", body=True),
}

SECURITY_INFORMATION: Final[OperationTable] = {
    "delete_linked_workspaces": Operation("DELETE", "/rest/security/1.0/linkedWorkspaces/bulk", returns=False),
    "delete_vulnerabilities_by_property": Operation("DELETE", "/rest/security/1.0/bulkByProperties", returns=False),
    "delete_vulnerability_by_id": Operation("DELETE", "/rest/security/1.0/vulnerability/{vulnerabilityId}", returns=False),
    "get_linked_workspace_by_id": Operation("GET", "/rest/security/1.0/linkedWorkspaces/{workspaceId}"),
    "get_linked_workspaces": Operation("GET", "/rest/security/1.0/linkedWorkspaces"),
    "get_vulnerability_by_id": Operation("GET", "/rest/security/1.0/vulnerability/{vulnerabilityId}"),
    "submit_vulnerabilities": Operation("POST", "/rest/security/1.0/bulk", body=True),
    "submit_workspaces": Operation("POST", "/rest/security/1.0/linkedWorkspaces/bulk", body=True, returns=False),
}

GROUPS: Final[dict[str, OperationTable]] = {
    "builds": BUILDS,
    "deployments": DEPLOYMENTS,
    "dev_ops_components": DEV_OPS_COMPONENTS,
    "development_information": DEVELOPMENT_INFORMATION,
    "feature_flags": FEATURE_FLAGS,
    "operations": OPERATIONS,
    "remote_links": REMOTE_LINKS,
    "security_information": SECURITY_INFORMATION,
}
