"""Validate client configuration before any network activity.

'why': surface configuration mistakes at construction rather than on the first failed API call
"""
from __future__ import annotations

from collections.abc import Mapping

import httpx

from ._errors import ClientConfigurationError
from ._forge import ForgeAPI
from ._models import ClientType, DefaultAuth, ForgeAuth, JiraConfig, LogLevel, Settings


def validate_config(candidate: object) -> JiraConfig:
    """Return a typed configuration for `candidate` or raise ClientConfigurationError.

    Accepts a `JiraConfig` or a mapping in the external construction shape,
    e.g. ``{"type": "default", "auth": {"email": ..., "apiToken": ..., "baseUrl": ...}}``.
    """

    if candidate is None:
        raise ClientConfigurationError("config is required")

    raw_type = _field(candidate, "type")
    if not raw_type:
        raise ClientConfigurationError("config must have a 'type' property")

    auth = _field(candidate, "auth")
    if auth is None:
        raise ClientConfigurationError("config must have an 'auth' property")

    client_type = _client_type(raw_type)
    if client_type is ClientType.DEFAULT:
        return JiraConfig(type=ClientType.DEFAULT, auth=_validated_default_auth(auth))
    if client_type is ClientType.FORGE:
        return JiraConfig(type=ClientType.FORGE, auth=_validated_forge_auth(auth))
    raise ClientConfigurationError(f"invalid config type: {raw_type!r}; must be 'default' or 'forge'")


def build_settings(
    config: object,
    *,
    timeout: float | None = None,
    log_level: LogLevel | str | None = None,
) -> Settings:
    """Validate every construction input and freeze them into Settings."""

    return Settings(
        config=validate_config(config),
        timeout=_validated_timeout(timeout),
        log_level=_normalized_level(log_level),
    )


def _client_type(raw: object) -> ClientType | None:
    if isinstance(raw, ClientType):
        return raw
    try:
        return ClientType(raw)
    except ValueError:
        return None


def _validated_default_auth(auth: object) -> DefaultAuth:
    email = _required_text(auth, "email")
    api_token = _required_text(auth, "api_token", "apiToken")
    base_url = _validated_base_url(_required_text(auth, "base_url", "baseUrl"))
    return DefaultAuth(email=email, api_token=api_token, base_url=base_url)


def _validated_forge_auth(auth: object) -> ForgeAuth:
    api = _field(auth, "api")
    if api is None:
        raise ClientConfigurationError("forge config auth must have an 'api' property")
    if not isinstance(api, ForgeAPI):
        raise ClientConfigurationError("forge config auth 'api' must expose as_app() and as_user()")
    return ForgeAuth(api=api)


def _required_text(auth: object, name: str, alias: str | None = None) -> str:
    value = _field(auth, name)
    if value is None and alias is not None:
        value = _field(auth, alias)
    candidate = value.strip() if isinstance(value, str) else ""
    if not candidate:
        raise ClientConfigurationError(f"default config auth must have a non-empty '{name}' property")
    return candidate


def _validated_base_url(value: str) -> str:
    try:
        url = httpx.URL(value)
    except httpx.InvalidURL as exc:
        raise ClientConfigurationError(f"base_url is not a valid URL: {value}") from exc
    if url.scheme not in {"http", "https"} or not url.host:
        raise ClientConfigurationError(f"base_url must be an absolute http(s) URL: {value}")
    return value.rstrip("/")


def _validated_timeout(timeout: float | None) -> float | None:
    if timeout is None:
        return None
    if timeout <= 0:
        raise ClientConfigurationError("timeout must be positive when provided")
    return float(timeout)


def _normalized_level(level: LogLevel | str | None) -> LogLevel:
    if not level:
        return LogLevel.INFO
    if isinstance(level, LogLevel):
        return level
    try:
        return LogLevel(level.upper())
    except ValueError as exc:
        raise ClientConfigurationError(f"unsupported log_level: {level}") from exc


def _field(source: object, name: str) -> object:
    if isinstance(source, Mapping):
        return source.get(name)
    return getattr(source, name, None)
