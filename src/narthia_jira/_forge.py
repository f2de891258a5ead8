"""Describe the host capability handle used in forge mode.

'why': the Forge runtime owns the proxied transport; model it as an injected interface instead of importing a host SDK
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import Protocol, runtime_checkable

from ._models import Body, Route


class TransportResponse(Protocol):
    """Response surface the normalizer reads; `httpx.Response` satisfies it."""

    @property
    def status_code(self) -> int: ...

    @property
    def reason_phrase(self) -> str: ...

    @property
    def is_success(self) -> bool: ...

    def json(self) -> object: ...


class ForgeRequester(Protocol):
    """Issue one JSON-over-HTTP call against Jira as a fixed identity."""

    async def request_jira(
        self,
        route: Route,
        *,
        method: str,
        headers: Mapping[str, str],
        content: Body | None,
    ) -> TransportResponse: ...


@runtime_checkable
class ForgeAPI(Protocol):
    """Entry points to act as the installed app or as the invoking user."""

    def as_app(self) -> ForgeRequester: ...

    def as_user(self) -> ForgeRequester: ...
