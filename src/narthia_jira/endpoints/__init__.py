"""Register every endpoint table under its operation-group name.

'why': give the client one lookup from attribute name to table, whatever API family a group belongs to
"""
from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Final

from .._operations import OperationTable
from . import agile, devops, platform, service_management

GROUPS: Final[Mapping[str, OperationTable]] = MappingProxyType(
    {
        **platform.GROUPS,
        **agile.GROUPS,
        **devops.GROUPS,
        **service_management.GROUPS,
    }
)

__all__ = ["GROUPS"]
