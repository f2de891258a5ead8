"""Normalize transport outcomes into discriminated results.

'why': callers branch on `result.success` instead of wrapping every call in exception handling
"""
from __future__ import annotations

from collections.abc import Awaitable
from typing import Any, Final

from ._forge import TransportResponse
from ._models import TRANSPORT_FAILURE_STATUS, JiraFailure, JiraResult, JiraSuccess

UNEXPECTED_ERROR_MESSAGE: Final[str] = "An unexpected error occurred"


async def normalize_response(
    call: Awaitable[TransportResponse],
    *,
    expects_body: bool,
) -> JiraResult[Any]:
    """Await `call` and fold every outcome into JiraSuccess or JiraFailure."""

    try:
        response = await call
        if not response.is_success:
            return JiraFailure(status=response.status_code, error=_error_payload(response))
        data = response.json() if expects_body else None
        return JiraSuccess(status=response.status_code, data=data)
    except Exception as exc:
        return JiraFailure(status=TRANSPORT_FAILURE_STATUS, error=str(exc) or UNEXPECTED_ERROR_MESSAGE)


def _error_payload(response: TransportResponse) -> object:
    try:
        return response.json()
    except ValueError:
        return {"message": response.reason_phrase}
