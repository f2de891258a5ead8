"""Expose the Jira client, its configuration shapes, and its result types.

'why': provide a small, explicit surface over hundreds of table-driven endpoints
"""
from ._client import JiraClient
from ._config import validate_config
from ._errors import (
    ClientConfigurationError,
    JiraClientError,
    UnknownOperationError,
    UnsupportedClientTypeError,
)
from ._forge import ForgeAPI, ForgeRequester, TransportResponse
from ._models import (
    TRANSPORT_FAILURE_STATUS,
    ActAs,
    ClientType,
    DefaultAuth,
    ForgeAuth,
    JiraConfig,
    JiraFailure,
    JiraResult,
    JiraSuccess,
    LogLevel,
    RequestDescriptor,
    Route,
)
from ._operations import Operation

__all__ = [
    "ActAs",
    "ClientConfigurationError",
    "ClientType",
    "DefaultAuth",
    "ForgeAPI",
    "ForgeAuth",
    "ForgeRequester",
    "JiraClient",
    "JiraClientError",
    "JiraConfig",
    "JiraFailure",
    "JiraResult",
    "JiraSuccess",
    "LogLevel",
    "Operation",
    "RequestDescriptor",
    "Route",
    "TRANSPORT_FAILURE_STATUS",
    "TransportResponse",
    "UnknownOperationError",
    "UnsupportedClientTypeError",
    "validate_config",
]

__version__ = "0.1.0"
