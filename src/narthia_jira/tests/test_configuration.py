"""Validate configuration guardrails.

'why': ensure the client rejects malformed configurations at construction, before any network call
"""
from __future__ import annotations

import logging

import pytest

from narthia_jira import (
    ActAs,
    ClientConfigurationError,
    ClientType,
    DefaultAuth,
    ForgeAuth,
    JiraClient,
    JiraConfig,
    LogLevel,
    validate_config,
)
from narthia_jira._logging import get_logger

from ._utils import FakeForgeAPI, install_mock_transport, json_success


def test_missing_api_token_names_the_field(default_config: dict[str, object]) -> None:
    """A direct-mode config without a token fails with a message naming it."""

    auth = dict(default_config["auth"])  # type: ignore[arg-type]
    del auth["apiToken"]

    with pytest.raises(ClientConfigurationError) as exc:
        _ = JiraClient({"type": "default", "auth": auth})

    assert "api_token" in str(exc.value)


@pytest.mark.parametrize("missing", ["email", "apiToken", "baseUrl"])
def test_blank_default_fields_are_rejected(default_config: dict[str, object], missing: str) -> None:
    """Empty or whitespace-only credentials count as absent."""

    auth = dict(default_config["auth"])  # type: ignore[arg-type]
    auth[missing] = "   "

    with pytest.raises(ClientConfigurationError) as exc:
        _ = validate_config({"type": "default", "auth": auth})

    assert "non-empty" in str(exc.value)


@pytest.mark.parametrize(
    ("candidate", "message"),
    [
        (None, "config is required"),
        ({"auth": {}}, "'type' property"),
        ({"type": "", "auth": {}}, "'type' property"),
        ({"type": "default"}, "'auth' property"),
        ({"type": "forge", "auth": {}}, "'api' property"),
        ({"type": "basic", "auth": {"email": "x"}}, "invalid config type"),
    ],
)
def test_malformed_configs_fail_fast(candidate: object, message: str) -> None:
    """Every malformed shape raises a descriptive configuration error."""

    with pytest.raises(ClientConfigurationError) as exc:
        _ = validate_config(candidate)

    assert message in str(exc.value)


def test_forge_api_must_expose_both_identities() -> None:
    """A handle lacking as_user() is not accepted as a forge capability."""

    class AppOnly:
        def as_app(self) -> object:
            return object()

    with pytest.raises(ClientConfigurationError) as exc:
        _ = validate_config({"type": "forge", "auth": {"api": AppOnly()}})

    assert "as_app() and as_user()" in str(exc.value)


@pytest.mark.parametrize("base_url", ["example.atlassian.net", "ftp://example.atlassian.net", "https://"])
def test_base_url_must_be_absolute_http(default_config: dict[str, object], base_url: str) -> None:
    """Relative or non-http base URLs are rejected."""

    auth = dict(default_config["auth"])  # type: ignore[arg-type]
    auth["baseUrl"] = base_url

    with pytest.raises(ClientConfigurationError) as exc:
        _ = validate_config({"type": "default", "auth": auth})

    assert "base_url" in str(exc.value)


def test_valid_default_config_is_normalized(default_config: dict[str, object]) -> None:
    """Camel-case keys map to typed fields and a trailing slash is dropped."""

    auth = dict(default_config["auth"])  # type: ignore[arg-type]
    auth["baseUrl"] = "https://example.atlassian.net/"

    config = validate_config({"type": "default", "auth": auth})

    assert config == JiraConfig(
        type=ClientType.DEFAULT,
        auth=DefaultAuth(email="dev@example.com", api_token="secret-token", base_url="https://example.atlassian.net"),
    )


def test_snake_case_keys_are_accepted() -> None:
    config = validate_config(
        {
            "type": "default",
            "auth": {"email": "dev@example.com", "api_token": "t", "base_url": "https://example.atlassian.net"},
        }
    )

    assert isinstance(config.auth, DefaultAuth)
    assert config.auth.api_token == "t"


def test_valid_forge_config_keeps_the_handle() -> None:
    api = FakeForgeAPI()

    config = validate_config({"type": "forge", "auth": {"api": api}})

    assert config.type is ClientType.FORGE
    assert config == JiraConfig(type=ClientType.FORGE, auth=ForgeAuth(api=api))


def test_typed_configs_pass_through_validation() -> None:
    """Configs built with the classmethods validate to equal values."""

    config = JiraConfig.default(email="dev@example.com", api_token="t", base_url="https://example.atlassian.net")

    assert validate_config(config) == config


def test_api_token_is_hidden_from_repr() -> None:
    auth = DefaultAuth(email="dev@example.com", api_token="super-secret", base_url="https://example.atlassian.net")

    assert "super-secret" not in repr(auth)


def test_construction_never_touches_the_network(
    default_config: dict[str, object],
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """Validation happens without any outbound request."""

    capture = json_success({})
    install_mock_transport(monkeypatch, capture)

    _ = JiraClient(default_config)
    with pytest.raises(ClientConfigurationError):
        _ = JiraClient({"type": "default", "auth": {"email": "dev@example.com"}})

    assert capture.requests == []


def test_rejects_non_positive_timeout(default_config: dict[str, object]) -> None:
    """Non-positive timeouts trigger configuration errors."""

    with pytest.raises(ClientConfigurationError) as exc:
        _ = JiraClient(default_config, timeout=0.0)

    assert "timeout must be positive" in str(exc.value)


def test_rejects_unsupported_log_level(default_config: dict[str, object]) -> None:
    """Unsupported log levels are rejected immediately."""

    with pytest.raises(ClientConfigurationError) as exc:
        _ = JiraClient(default_config, log_level="VERBOSE")

    assert "unsupported log_level" in str(exc.value)


def test_settings_capture_runtime_options(default_config: dict[str, object]) -> None:
    client = JiraClient(default_config, timeout=12, log_level="debug")

    assert client.settings.timeout == 12.0
    assert client.settings.log_level is LogLevel.DEBUG
    assert client.client_type is ClientType.DEFAULT


def test_settings_defaults(default_config: dict[str, object]) -> None:
    """No timeout and INFO logging unless told otherwise."""

    client = JiraClient(default_config)

    assert client.settings.timeout is None
    assert client.settings.log_level is LogLevel.INFO


def test_act_as_values_match_the_wire_vocabulary() -> None:
    assert ActAs("app") is ActAs.APP
    assert ActAs("user") is ActAs.USER


def test_client_without_log_level_keeps_logger_level(default_config: dict[str, object]) -> None:
    """Constructing a client only touches the shared logger when asked to.

    'why': an application's chosen level must survive later client construction
    """

    logger = get_logger()
    previous = logger.level
    try:
        # Given: the application has set the package logger to WARNING
        logger.setLevel(logging.WARNING)

        # When: a client is built without a log level
        _ = JiraClient(default_config)

        # Then: the level is unchanged until a client passes one explicitly
        assert logger.level == logging.WARNING
        _ = JiraClient(default_config, log_level="DEBUG")
        assert logger.level == logging.DEBUG
    finally:
        logger.setLevel(previous)
