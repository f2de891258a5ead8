"""Expose the Jira REST API behind one validated configuration.

'why': validate once at construction, then route every operation group through the shared dispatcher
"""
from __future__ import annotations

import asyncio
from collections.abc import Mapping
from typing import Any

from ._config import build_settings
from ._dispatch import dispatch
from ._errors import UnknownOperationError
from ._logging import get_logger, set_log_level
from ._models import ClientType, JiraConfig, JiraResult, LogLevel, RequestDescriptor, Settings
from ._operations import OperationGroup
from .endpoints import GROUPS


_logger = get_logger()


class JiraClient:
    """Client for Jira Cloud in default (basic auth) or forge (host-proxied) mode.

    Operation groups are attributes, each operation an async callable::

        client = JiraClient({"type": "default", "auth": {"email": ..., "apiToken": ..., "baseUrl": ...}})
        result = await client.issues.get_issue(issue_id_or_key="PROJ-123")
        if result.success:
            print(result.data["fields"]["summary"])

    Raises ClientConfigurationError when `config`, `timeout`, or `log_level` is invalid.
    """

    def __init__(
        self,
        config: JiraConfig | Mapping[str, object],
        *,
        timeout: float | None = None,
        log_level: LogLevel | str | None = None,
    ) -> None:
        self._settings: Settings = build_settings(config, timeout=timeout, log_level=log_level)
        self._groups: dict[str, OperationGroup] = {}
        if log_level is not None:
            set_log_level(self._settings.log_level)
        _logger.debug("jira client configured: mode=%s", self._settings.config.type.value)

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def client_type(self) -> ClientType:
        return self._settings.config.type

    def operation_groups(self) -> tuple[str, ...]:
        """Return the names of every operation group, sorted."""

        return tuple(sorted(GROUPS))

    async def request_async(self, request: RequestDescriptor) -> JiraResult[Any]:
        """Issue a raw request descriptor and return its normalized result."""

        return await dispatch(self._settings, request)

    def request(self, request: RequestDescriptor) -> JiraResult[Any]:
        """Blocking variant of `request_async` for code without a running event loop."""

        return asyncio.run(self.request_async(request))

    def __getattr__(self, name: str) -> OperationGroup:
        if name.startswith("_"):
            raise AttributeError(name)
        group = self._groups.get(name)
        if group is not None:
            return group
        table = GROUPS.get(name)
        if table is None:
            raise UnknownOperationError(f"unknown operation group: {name}")
        group = OperationGroup(name, table, self.request_async)
        self._groups[name] = group
        return group

    def __dir__(self) -> list[str]:
        return sorted(set(super().__dir__()) | set(GROUPS))
