"""Minimal live smoke check against a real Jira Cloud site.

Run with: uv run live_check  (reads JIRA_EMAIL, JIRA_API_TOKEN, JIRA_BASE_URL from .env)
"""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path
from typing import Final

from dotenv import dotenv_values

from .. import JiraClient, JiraConfig

ENV_PATH: Final[Path] = Path.cwd() / ".env"
ENV = dotenv_values(ENV_PATH)


def _env_value(key: str, default: str | None = None) -> str | None:
    value = ENV.get(key)
    if value is None or not value.strip():
        return default
    return value.strip()


async def _run(client: JiraClient) -> int:
    failures = 0

    myself = await client.myself.get_current_user()
    if myself.success:
        print(f"✓ myself: {myself.data.get('displayName') if isinstance(myself.data, dict) else myself.data}")
    else:
        failures += 1
        print(f"✗ myself: status={myself.status} error={myself.error}")

    server = await client.server_info.get_server_info()
    if server.success:
        print(f"✓ serverInfo: {server.data.get('version') if isinstance(server.data, dict) else server.data}")
    else:
        failures += 1
        print(f"✗ serverInfo: status={server.status} error={server.error}")

    projects = await client.projects.search_projects(max_results=5)
    if projects.success:
        values = projects.data.get("values", []) if isinstance(projects.data, dict) else []
        print(f"✓ projects: {[project.get('key') for project in values]}")
    else:
        failures += 1
        print(f"✗ projects: status={projects.status} error={projects.error}")

    return failures


def main() -> int:
    config = JiraConfig.default(
        email=_env_value("JIRA_EMAIL") or "",
        api_token=_env_value("JIRA_API_TOKEN") or "",
        base_url=_env_value("JIRA_BASE_URL") or "",
    )
    client = JiraClient(config, timeout=float(_env_value("JIRA_TIMEOUT", "30") or 30), log_level="DEBUG")
    failures = asyncio.run(_run(client))
    print(f"{failures} failure(s)")
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
