"""HTTP transports for direct and forge-proxied calls."""
from __future__ import annotations

from collections.abc import Mapping

import httpx

from ._forge import ForgeAPI, TransportResponse
from ._models import ActAs, Body, HttpMethod, Route


async def send_direct(
    *,
    url: str,
    method: HttpMethod,
    headers: Mapping[str, str],
    content: Body | None,
    timeout: float | None,
) -> httpx.Response:
    """Issue one request straight to the Jira site and return the raw response."""

    async with httpx.AsyncClient(timeout=httpx.Timeout(timeout), follow_redirects=True) as client:
        return await client.request(method, url, headers=headers, content=content)


async def send_proxied(
    *,
    api: ForgeAPI,
    act_as: ActAs,
    route: Route,
    method: HttpMethod,
    headers: Mapping[str, str],
    content: Body | None,
) -> TransportResponse:
    """Issue one request through the host handle as the selected identity."""

    requester = api.as_app() if act_as is ActAs.APP else api.as_user()
    return await requester.request_jira(route, method=method, headers=headers, content=content)
