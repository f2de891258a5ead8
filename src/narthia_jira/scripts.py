"""Coordinate project command entry points.

'why': give `uv run check` and `uv run live_check` one place to run tests, lint, and the live smoke call
"""
from __future__ import annotations

import logging
import subprocess
import sys
from collections.abc import Sequence
from typing import Final

_LOGGER = logging.getLogger("narthia_jira.scripts")
_LINTERS: Final[tuple[tuple[str, ...], ...]] = (
    ("ruff", "check", "src"),
    ("basedpyright", "src"),
)
_LIVE_MODULE: Final[str] = "narthia_jira.live_test.smoke"


def check() -> None:
    """Run pytest, then each linter, stopping at the first non-zero exit.

    Extra command-line arguments go to pytest, e.g. `uv run check -k forge`.
    """

    _configure_script_logging()
    pipeline = (("pytest", *sys.argv[1:]), *_LINTERS)
    for command in pipeline:
        _exit_on_failure(_run_command(command))


def live_check() -> None:
    """Run the live smoke module against the site configured in `.env`."""

    _configure_script_logging()
    raise SystemExit(_run_command((sys.executable, "-m", _LIVE_MODULE)))


def _configure_script_logging() -> None:
    if not logging.getLogger().handlers:
        logging.basicConfig(level=logging.INFO, format="%(message)s")


def _exit_on_failure(exit_code: int) -> None:
    if exit_code != 0:
        raise SystemExit(exit_code)


def _run_command(command: Sequence[str]) -> int:
    _LOGGER.info("→ %s", " ".join(command))
    return subprocess.run(command, check=False).returncode
