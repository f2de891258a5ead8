"""Turn declarative endpoint table entries into callable operations.

'why': hundreds of endpoints differ only in method, path, and parameter names, so they live as data
"""
from __future__ import annotations

import json
import keyword
import re
from collections.abc import Awaitable, Callable, Iterator, Mapping
from dataclasses import dataclass
from functools import cached_property
from typing import Any, Final, cast

from ._errors import UnknownOperationError
from ._models import ActAs, Body, HttpMethod, JiraResult, QueryValue, RequestDescriptor
from ._params import placeholders

_WORD_BOUNDARY: Final[re.Pattern[str]] = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")

Sender = Callable[[RequestDescriptor], Awaitable[JiraResult[Any]]]


@dataclass(frozen=True)
class Operation:
    """One Jira REST endpoint.

    `query` lists the wire names of accepted query parameters, `multi` the subset
    sent as repeated keys, `body` whether a request body is accepted, and
    `returns` whether a JSON response body is expected.
    """

    method: HttpMethod
    path: str
    query: tuple[str, ...] = ()
    multi: tuple[str, ...] = ()
    body: bool = False
    returns: bool = True
    experimental: bool = False

    @cached_property
    def path_arguments(self) -> dict[str, str]:
        return {python_name(name): name for name in placeholders(self.path)}

    @cached_property
    def query_arguments(self) -> dict[str, str]:
        return {python_name(name): name for name in self.query}


OperationTable = Mapping[str, Operation]


def python_name(wire_name: str) -> str:
    """Map a wire parameter name to its keyword-argument name (`issueIdOrKey` -> `issue_id_or_key`)."""

    name = _WORD_BOUNDARY.sub("_", wire_name.lstrip("_")).lower()
    return f"{name}_" if keyword.iskeyword(name) else name


def serialize_body(body: object) -> Body | None:
    """Pass str/bytes through; encode anything else as compact JSON."""

    if body is None or isinstance(body, (str, bytes)):
        return body
    return json.dumps(body, ensure_ascii=False, separators=(",", ":"))


def build_request(
    name: str,
    operation: Operation,
    arguments: Mapping[str, object],
    *,
    body: object = None,
    headers: Mapping[str, str] | None = None,
    act_as: ActAs | None = None,
) -> RequestDescriptor:
    """Build the request descriptor for one call of `operation`.

    Raises TypeError for keyword arguments the endpoint does not define, or a
    body on an endpoint that takes none.
    """

    path_arguments = operation.path_arguments
    query_arguments = operation.query_arguments
    unknown = [key for key in arguments if key not in path_arguments and key not in query_arguments]
    if unknown:
        raise TypeError(f"{name}() got unexpected keyword arguments: {', '.join(sorted(unknown))}")
    if body is not None and not operation.body:
        raise TypeError(f"{name}() does not accept a request body")

    path_params = {wire: arguments[key] for key, wire in path_arguments.items() if key in arguments}
    query_params: dict[str, QueryValue] = {
        wire: cast(QueryValue, arguments[key]) for key, wire in query_arguments.items() if key in arguments
    }
    return RequestDescriptor(
        method=operation.method,
        path=operation.path,
        path_params=path_params,
        query_params=query_params,
        multi_valued=frozenset(operation.multi),
        body=serialize_body(body),
        expects_body=operation.returns,
        experimental=operation.experimental,
        headers=headers,
        act_as=act_as,
    )


class BoundOperation:
    """Async callable for one endpoint, bound to a client's sender."""

    def __init__(self, qualified_name: str, operation: Operation, send: Sender) -> None:
        self._qualified_name = qualified_name
        self._operation = operation
        self._send = send
        self.__doc__ = f"{operation.method} {operation.path}"

    @property
    def operation(self) -> Operation:
        return self._operation

    async def __call__(
        self,
        *,
        body: object = None,
        headers: Mapping[str, str] | None = None,
        act_as: ActAs | None = None,
        **arguments: object,
    ) -> JiraResult[Any]:
        request = build_request(
            self._qualified_name,
            self._operation,
            arguments,
            body=body,
            headers=headers,
            act_as=act_as,
        )
        return await self._send(request)

    def __repr__(self) -> str:
        return f"<operation {self._qualified_name}: {self._operation.method} {self._operation.path}>"


class OperationGroup:
    """Namespace exposing one table's operations as attributes."""

    def __init__(self, name: str, table: OperationTable, send: Sender) -> None:
        self._name = name
        self._table = table
        self._send = send

    def __getattr__(self, name: str) -> BoundOperation:
        if name.startswith("_"):
            raise AttributeError(name)
        operation = self._table.get(name)
        if operation is None:
            raise UnknownOperationError(f"operation group '{self._name}' has no operation '{name}'")
        return BoundOperation(f"{self._name}.{name}", operation, self._send)

    def __iter__(self) -> Iterator[str]:
        return iter(self._table)

    def __dir__(self) -> list[str]:
        return sorted(set(super().__dir__()) | set(self._table))

    def __repr__(self) -> str:
        return f"<operation group {self._name}: {len(self._table)} operations>"
