"""Define dataclasses and types for the client.

'why': capture configuration, request descriptors, and results in typed, testable shapes
"""
from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Final, Generic, Literal, TypeVar, Union

if TYPE_CHECKING:
    from ._forge import ForgeAPI


T = TypeVar("T")

HttpMethod = Literal["GET", "POST", "PUT", "DELETE"]
Scalar = Union[str, int, float, bool]
QueryValue = Union[Scalar, Sequence[Scalar], None]
Body = Union[str, bytes]

TRANSPORT_FAILURE_STATUS: Final[int] = 0


class ClientType(str, Enum):
    """Discriminate how the client reaches Jira."""

    DEFAULT = "default"
    FORGE = "forge"


class ActAs(str, Enum):
    """Select the identity a forge-mode call is authorized as."""

    APP = "app"
    USER = "user"


class LogLevel(str, Enum):
    CRITICAL = "CRITICAL"
    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"
    DEBUG = "DEBUG"


@dataclass(frozen=True)
class DefaultAuth:
    """Basic-auth credentials for direct calls against a Jira site."""

    email: str
    api_token: str = field(repr=False)
    base_url: str


@dataclass(frozen=True)
class ForgeAuth:
    """Host capability handle used to proxy calls through the Forge runtime."""

    api: ForgeAPI


@dataclass(frozen=True)
class JiraConfig:
    """Tagged configuration: `type` decides which `auth` shape is in force."""

    type: ClientType
    auth: DefaultAuth | ForgeAuth

    @classmethod
    def default(cls, *, email: str, api_token: str, base_url: str) -> JiraConfig:
        return cls(
            type=ClientType.DEFAULT,
            auth=DefaultAuth(email=email, api_token=api_token, base_url=base_url),
        )

    @classmethod
    def forge(cls, api: ForgeAPI) -> JiraConfig:
        return cls(type=ClientType.FORGE, auth=ForgeAuth(api=api))


@dataclass(frozen=True)
class Settings:
    """Capture the validated configuration plus client-level runtime settings."""

    config: JiraConfig
    timeout: float | None
    log_level: LogLevel


@dataclass(frozen=True)
class Route:
    """Opaque route value handed to the host requester in forge mode."""

    path: str

    def __str__(self) -> str:
        return self.path


@dataclass(frozen=True)
class RequestDescriptor:
    """Describe one API call completely; built fresh per call."""

    method: HttpMethod
    path: str
    path_params: Mapping[str, object] = field(default_factory=dict)
    query_params: Mapping[str, QueryValue] = field(default_factory=dict)
    multi_valued: frozenset[str] = frozenset()
    body: Body | None = None
    expects_body: bool = True
    experimental: bool = False
    headers: Mapping[str, str] | None = None
    act_as: ActAs | None = None


@dataclass(frozen=True)
class JiraSuccess(Generic[T]):
    """Successful call: `data` holds the parsed JSON body when one was expected."""

    status: int
    data: T | None = None
    success: Literal[True] = field(default=True, init=False)
    error: None = field(default=None, init=False)


@dataclass(frozen=True)
class JiraFailure:
    """Failed call: `error` is the parsed error body, a synthesized message, or a string.

    `status` is the HTTP status, or `TRANSPORT_FAILURE_STATUS` when no response existed.
    """

    status: int
    error: object
    success: Literal[False] = field(default=False, init=False)
    data: None = field(default=None, init=False)


JiraResult = Union[JiraSuccess[T], JiraFailure]
