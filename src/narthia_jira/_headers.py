"""Compose outgoing request headers.

'why': layer JSON defaults, credentials, opt-ins, and caller overrides in one predictable order
"""
from __future__ import annotations

import base64
from collections.abc import Mapping
from typing import Final

from ._models import ClientType, DefaultAuth

EXPERIMENTAL_HEADER: Final[str] = "X-ExperimentalApi"


def basic_authorization(email: str, api_token: str) -> str:
    """Return an HTTP Basic `Authorization` value for `email:api_token`."""

    token = base64.b64encode(f"{email}:{api_token}".encode("utf-8")).decode("ascii")
    return f"Basic {token}"


def compose_headers(
    client_type: ClientType,
    *,
    auth: DefaultAuth | None = None,
    experimental: bool = False,
    overrides: Mapping[str, str] | None = None,
) -> dict[str, str]:
    """Build headers; `overrides` win over every default, matched case-insensitively."""

    headers: dict[str, str] = {
        "Content-Type": "application/json",
        "Accept": "application/json",
    }
    if client_type is ClientType.DEFAULT and auth is not None:
        headers["Authorization"] = basic_authorization(auth.email, auth.api_token)
    if experimental:
        headers[EXPERIMENTAL_HEADER] = "opt-in"
    for name, value in (overrides or {}).items():
        _drop_header(headers, name)
        headers[name] = value
    return headers


def _drop_header(headers: dict[str, str], name: str) -> None:
    lowered = name.lower()
    for existing in [key for key in headers if key.lower() == lowered]:
        del headers[existing]
