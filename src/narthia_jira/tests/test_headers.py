"""Test outgoing header composition.

'why': authentication and opt-in headers must layer predictably under caller overrides
"""
from __future__ import annotations

import base64

from narthia_jira import ClientType, DefaultAuth
from narthia_jira._headers import EXPERIMENTAL_HEADER, basic_authorization, compose_headers


_AUTH = DefaultAuth(email="dev@example.com", api_token="secret-token", base_url="https://example.atlassian.net")


def test_basic_authorization_encodes_email_and_token() -> None:
    value = basic_authorization("dev@example.com", "secret-token")

    assert value.startswith("Basic ")
    assert base64.b64decode(value.removeprefix("Basic ")).decode("utf-8") == "dev@example.com:secret-token"


def test_default_mode_headers() -> None:
    headers = compose_headers(ClientType.DEFAULT, auth=_AUTH)

    assert headers == {
        "Content-Type": "application/json",
        "Accept": "application/json",
        "Authorization": basic_authorization("dev@example.com", "secret-token"),
    }


def test_forge_mode_carries_no_credentials() -> None:
    """The host transport authorizes forge calls itself."""

    headers = compose_headers(ClientType.FORGE, auth=_AUTH)

    assert "Authorization" not in headers
    assert headers["Accept"] == "application/json"


def test_experimental_opt_in() -> None:
    assert compose_headers(ClientType.FORGE, experimental=True)[EXPERIMENTAL_HEADER] == "opt-in"
    assert EXPERIMENTAL_HEADER not in compose_headers(ClientType.FORGE)


def test_overrides_win_case_insensitively() -> None:
    """A caller override replaces the default regardless of header-name case."""

    headers = compose_headers(
        ClientType.DEFAULT,
        auth=_AUTH,
        overrides={"content-type": "multipart/form-data", "X-Atlassian-Token": "no-check"},
    )

    assert headers["content-type"] == "multipart/form-data"
    assert "Content-Type" not in headers
    assert headers["X-Atlassian-Token"] == "no-check"
    assert headers["Authorization"].startswith("Basic ")


def test_overrides_can_replace_authorization() -> None:
    headers = compose_headers(ClientType.DEFAULT, auth=_AUTH, overrides={"Authorization": "Bearer abc"})

    assert headers["Authorization"] == "Bearer abc"
