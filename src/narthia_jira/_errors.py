"""Define the exception hierarchy raised by the client.

'why': keep the few raising paths typed; ordinary API and transport failures are results, not exceptions
"""
from __future__ import annotations


class JiraClientError(Exception):
    """Base class for every exception raised by narthia_jira."""


class ClientConfigurationError(JiraClientError):
    """Raised at construction when the supplied configuration is malformed."""


class UnsupportedClientTypeError(JiraClientError, RuntimeError):
    """Raised when dispatch meets a client type it cannot route.

    Validation rejects unknown types, so reaching this means a configuration
    bypassed `validate_config`.
    """


class UnknownOperationError(JiraClientError, AttributeError):
    """Raised when a client attribute names no known operation group or operation."""
