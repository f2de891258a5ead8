"""Provide shared pytest fixtures.

'why': centralize deterministic configurations for both dispatch modes across scenarios
"""
from __future__ import annotations

import pytest

from narthia_jira import JiraClient, JiraConfig

from ._utils import FakeForgeAPI


BASE_URL = "https://example.atlassian.net"


@pytest.fixture
def default_config() -> dict[str, object]:
    """Return a direct-mode configuration in the external construction shape."""

    return {
        "type": "default",
        "auth": {"email": "dev@example.com", "apiToken": "secret-token", "baseUrl": BASE_URL},
    }


@pytest.fixture
def client(default_config: dict[str, object]) -> JiraClient:
    """Return a direct-mode client with deterministic credentials.

    'why': provide a ready-to-use setup for dispatch and endpoint scenarios
    """

    return JiraClient(default_config, timeout=5)


@pytest.fixture
def forge_api() -> FakeForgeAPI:
    return FakeForgeAPI()


@pytest.fixture
def forge_client(forge_api: FakeForgeAPI) -> JiraClient:
    """Return a forge-mode client wired to a recording host fake."""

    return JiraClient(JiraConfig.forge(forge_api))
