"""Render path templates and query strings for Jira requests.

'why': every endpoint shares one pure routine for turning a descriptor into a request target
"""
from __future__ import annotations

import re
from collections.abc import Collection, Mapping
from enum import Enum
from typing import Final

import httpx

from ._logging import get_logger
from ._models import QueryValue


_logger = get_logger()

_PLACEHOLDER: Final[re.Pattern[str]] = re.compile(r"\{([^}]+)\}")


def placeholders(template: str) -> tuple[str, ...]:
    """Return placeholder names in the order they appear in `template`."""

    return tuple(_PLACEHOLDER.findall(template))


def render_path(template: str, path_params: Mapping[str, object] | None = None) -> str:
    """Substitute `{name}` placeholders; unknown names stay verbatim in the output."""

    params = path_params or {}
    unresolved: list[str] = []

    def substitute(match: re.Match[str]) -> str:
        name = match.group(1)
        if name not in params:
            unresolved.append(name)
            return match.group(0)
        return _text(params[name])

    rendered = _PLACEHOLDER.sub(substitute, template)
    if unresolved:
        _logger.warning("path template %s left unresolved placeholders: %s", template, ", ".join(unresolved))
    return rendered


def build_query(
    query_params: Mapping[str, QueryValue] | None,
    multi_valued: Collection[str] = (),
) -> str:
    """Encode query parameters, skipping None and repeating multi-valued keys."""

    pairs: list[tuple[str, str]] = []
    for key, value in (query_params or {}).items():
        if value is None:
            continue
        if isinstance(value, (list, tuple, set, frozenset)):
            items = [_text(item) for item in value]
            if key in multi_valued:
                pairs.extend((key, item) for item in items)
            else:
                pairs.append((key, ",".join(items)))
            continue
        pairs.append((key, _text(value)))
    return str(httpx.QueryParams(pairs))


def build_url(
    template: str,
    path_params: Mapping[str, object] | None = None,
    query_params: Mapping[str, QueryValue] | None = None,
    multi_valued: Collection[str] = (),
) -> str:
    """Return the rendered path, with `?query` appended only when a pair was rendered."""

    path = render_path(template, path_params)
    query = build_query(query_params, multi_valued)
    return f"{path}?{query}" if query else path


def _text(value: object) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return _text(value.value)
    return str(value)
