"""Route a request descriptor to the transport of the active client type.

'why': one chokepoint for every endpoint keeps mode selection, headers, and result shape uniform
"""
from __future__ import annotations

from collections.abc import Awaitable
from typing import Any, Final, cast

from ._errors import UnsupportedClientTypeError
from ._forge import TransportResponse
from ._headers import compose_headers
from ._http import send_direct, send_proxied
from ._logging import get_logger
from ._models import (
    TRANSPORT_FAILURE_STATUS,
    ActAs,
    ClientType,
    DefaultAuth,
    ForgeAuth,
    JiraResult,
    RequestDescriptor,
    Route,
    Settings,
)
from ._params import build_url
from ._results import normalize_response


_logger = get_logger()

DEFAULT_ACT_AS: Final[ActAs] = ActAs.APP


async def dispatch(settings: Settings, request: RequestDescriptor) -> JiraResult[Any]:
    """Issue `request` under `settings` and return its normalized result.

    Raises UnsupportedClientTypeError when the configuration names an unknown client type.
    """

    config = settings.config
    target = build_url(request.path, request.path_params, request.query_params, request.multi_valued)
    content = request.body or None

    call: Awaitable[TransportResponse]
    if config.type is ClientType.DEFAULT:
        auth = cast(DefaultAuth, config.auth)
        headers = compose_headers(
            ClientType.DEFAULT,
            auth=auth,
            experimental=request.experimental,
            overrides=request.headers,
        )
        call = send_direct(
            url=f"{auth.base_url}{target}",
            method=request.method,
            headers=headers,
            content=content,
            timeout=settings.timeout,
        )
    elif config.type is ClientType.FORGE:
        forge = cast(ForgeAuth, config.auth)
        headers = compose_headers(
            ClientType.FORGE,
            experimental=request.experimental,
            overrides=request.headers,
        )
        call = send_proxied(
            api=forge.api,
            act_as=request.act_as or DEFAULT_ACT_AS,
            route=Route(target),
            method=request.method,
            headers=headers,
            content=content,
        )
    else:
        raise UnsupportedClientTypeError(f"unsupported client type: {config.type!r}")

    _logger.debug("jira request: mode=%s method=%s target=%s", config.type.value, request.method, target)
    result = await normalize_response(call, expects_body=request.expects_body)
    if result.status == TRANSPORT_FAILURE_STATUS:
        _logger.warning("jira transport failure: method=%s target=%s err=%s", request.method, target, result.error)
    else:
        _logger.debug("jira response: method=%s target=%s status=%s", request.method, target, result.status)
    return result
