# ============================================================================
# URI CHECK OPTIONS
# ============================================================================
# STATUS: Infrastructure - URI health check configuration model
# PURPOSE: Declarative endpoint specifications with check-wide defaults
# CREATED: 18 OCT 2026
# DEPENDENCIES: pydantic, httpx
# ============================================================================
"""
URI Check Options

Configuration model for URI health checks:
- EndpointCheck: one monitored URI and its optional overrides
- CheckSetDefaults: check-wide fallbacks for any unset override
- UriCheckSet: the frozen, ordered set consumed by UriHealthCheck

Builders accumulate values fluently and build() freezes them:

    options = (
        UriHealthCheckOptions()
        .use_timeout(5)
        .add_uri("https://api.example.com/health")
        .add_uri("https://auth.example.com/ping", lambda u: u.use_post().expect_http_code(204))
    )
    check_set = options.build()

Resolution rule, applied field by field at evaluation time: the target's
explicit value if set, else the check-wide default. None means "unset".
"""

from dataclasses import dataclass
from datetime import timedelta
from typing import Any, Callable, Iterable, Iterator, List, Optional, Tuple, Union

import httpx
from pydantic import BaseModel, ConfigDict, Field, field_validator

from core.config import UriCheckDefaults, get_defaults
from health.content import (
    ContentCheckFunc,
    ContentValidator,
    LiteralContentValidator,
    PredicateContentValidator,
)

UriLike = Union[str, httpx.URL]
TimeoutLike = Union[float, int, timedelta]


def _timeout_seconds(value: Any) -> Any:
    if isinstance(value, timedelta):
        return value.total_seconds()
    return value


def _normalize_method(value: Any) -> Any:
    if isinstance(value, str):
        return value.upper()
    return value


class StatusCodeRange(BaseModel):
    """Inclusive range of accepted HTTP status codes."""
    model_config = ConfigDict(frozen=True)

    min_code: int
    max_code: int

    @classmethod
    def single(cls, code: int) -> "StatusCodeRange":
        return cls(min_code=code, max_code=code)

    @classmethod
    def between(cls, min_code: int, max_code: int) -> "StatusCodeRange":
        return cls(min_code=min_code, max_code=max_code)

    def contains(self, code: int) -> bool:
        return self.min_code <= code <= self.max_code

    def __str__(self) -> str:
        return f"{self.min_code}...{self.max_code}"


class CheckSetDefaults(BaseModel):
    """Check-wide values used by targets that do not override them."""
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    method: str = "GET"
    timeout: float = 10.0
    expected_status: StatusCodeRange = Field(
        default_factory=lambda: StatusCodeRange(min_code=200, max_code=299)
    )
    expected_content: Optional[str] = None
    content_check: Optional[Callable[..., Any]] = None

    @field_validator("method", mode="before")
    @classmethod
    def upper_method(cls, v):
        return _normalize_method(v)

    @field_validator("timeout", mode="before")
    @classmethod
    def coerce_timeout(cls, v):
        return _timeout_seconds(v)


class EndpointCheck(BaseModel):
    """
    Specification of one monitored URI.

    Every field except uri and headers is an optional override of the
    matching CheckSetDefaults field.
    """
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    uri: str
    method: Optional[str] = None
    timeout: Optional[float] = None
    expected_status: Optional[StatusCodeRange] = None
    expected_content: Optional[str] = None
    content_check: Optional[Callable[..., Any]] = None
    headers: Tuple[Tuple[str, str], ...] = ()

    @field_validator("uri", mode="before")
    @classmethod
    def coerce_uri(cls, v):
        """Accept httpx.URL as well as plain strings."""
        if isinstance(v, httpx.URL):
            return str(v)
        return v

    @field_validator("method", mode="before")
    @classmethod
    def upper_method(cls, v):
        return _normalize_method(v)

    @field_validator("timeout", mode="before")
    @classmethod
    def coerce_timeout(cls, v):
        return _timeout_seconds(v)

    def resolve(self, defaults: CheckSetDefaults) -> "ResolvedEndpoint":
        """Apply the check-wide defaults to every unset field."""
        expected_content = (
            self.expected_content
            if self.expected_content is not None
            else defaults.expected_content
        )
        content_check = (
            self.content_check
            if self.content_check is not None
            else defaults.content_check
        )

        validators: List[ContentValidator] = []
        if expected_content is not None:
            validators.append(LiteralContentValidator(expected_content))
        if content_check is not None:
            validators.append(PredicateContentValidator(content_check))

        return ResolvedEndpoint(
            uri=self.uri,
            method=self.method if self.method is not None else defaults.method,
            timeout=self.timeout if self.timeout is not None else defaults.timeout,
            expected_status=(
                self.expected_status
                if self.expected_status is not None
                else defaults.expected_status
            ),
            validators=tuple(validators),
            headers=self.headers,
        )


@dataclass(frozen=True)
class ResolvedEndpoint:
    """Effective settings for one target after default resolution."""
    uri: str
    method: str
    timeout: float
    expected_status: StatusCodeRange
    validators: Tuple[ContentValidator, ...]
    headers: Tuple[Tuple[str, str], ...]


class UriCheckSet(BaseModel):
    """Frozen, ordered set of endpoint checks plus check-wide defaults."""
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    defaults: CheckSetDefaults = Field(default_factory=CheckSetDefaults)
    endpoints: Tuple[EndpointCheck, ...] = ()

    def resolved(self) -> Iterator[ResolvedEndpoint]:
        """Yield effective settings for each endpoint in declaration order."""
        for endpoint in self.endpoints:
            yield endpoint.resolve(self.defaults)

    def __len__(self) -> int:
        return len(self.endpoints)


# ============================================================================
# BUILDERS
# ============================================================================

class UriOptions:
    """Fluent per-target builder handed to add_uri() setup callbacks."""

    def __init__(self, uri: UriLike):
        if uri is None:
            raise ValueError("uri is required")
        self.uri = uri
        self.http_method: Optional[str] = None
        self.timeout: Optional[TimeoutLike] = None
        self.expected_status: Optional[StatusCodeRange] = None
        self.expected_content: Optional[str] = None
        self.content_check: Optional[ContentCheckFunc] = None
        self._headers: List[Tuple[str, str]] = []

    def use_get(self) -> "UriOptions":
        return self.use_http_method("GET")

    def use_post(self) -> "UriOptions":
        return self.use_http_method("POST")

    def use_http_method(self, method: str) -> "UriOptions":
        self.http_method = method
        return self

    def use_timeout(self, timeout: TimeoutLike) -> "UriOptions":
        self.timeout = timeout
        return self

    def expect_http_code(self, code: int) -> "UriOptions":
        self.expected_status = StatusCodeRange.single(code)
        return self

    def expect_http_codes(self, min_code: int, max_code: int) -> "UriOptions":
        self.expected_status = StatusCodeRange.between(min_code, max_code)
        return self

    def expect_content(self, content: str) -> "UriOptions":
        self.expected_content = content
        return self

    def expect_content_check(self, func: ContentCheckFunc) -> "UriOptions":
        self.content_check = func
        return self

    def add_custom_header(self, name: str, value: str) -> "UriOptions":
        self._headers.append((name, value))
        return self

    @property
    def headers(self) -> Tuple[Tuple[str, str], ...]:
        return tuple(self._headers)

    def build(self) -> EndpointCheck:
        return EndpointCheck(
            uri=self.uri,
            method=self.http_method,
            timeout=self.timeout,
            expected_status=self.expected_status,
            expected_content=self.expected_content,
            content_check=self.content_check,
            headers=self.headers,
        )


class UriHealthCheckOptions:
    """
    Fluent builder for a whole check set.

    Check-wide setters define the fallback for every target; add_uri()
    appends targets in the order they will be checked.
    """

    def __init__(self, defaults: Optional[UriCheckDefaults] = None):
        defaults = defaults or get_defaults().uri_checks
        self.http_method: str = defaults.http_method
        self.timeout: TimeoutLike = defaults.timeout_seconds
        self.expected_status = StatusCodeRange.between(*defaults.expected_status)
        self.expected_content: Optional[str] = None
        self.content_check: Optional[ContentCheckFunc] = None
        self._uris: List[UriOptions] = []

    @classmethod
    def from_uris(
        cls,
        uris: Iterable[UriLike],
        defaults: Optional[UriCheckDefaults] = None,
    ) -> "UriHealthCheckOptions":
        """One default-configured target per URI, in input order."""
        options = cls(defaults)
        for uri in uris:
            options.add_uri(uri)
        return options

    @property
    def uris(self) -> Tuple[UriOptions, ...]:
        return tuple(self._uris)

    def add_uri(
        self,
        uri: UriLike,
        setup: Optional[Callable[[UriOptions], Any]] = None,
    ) -> "UriHealthCheckOptions":
        uri_options = UriOptions(uri)
        if setup is not None:
            setup(uri_options)
        self._uris.append(uri_options)
        return self

    def use_get(self) -> "UriHealthCheckOptions":
        return self.use_http_method("GET")

    def use_post(self) -> "UriHealthCheckOptions":
        return self.use_http_method("POST")

    def use_http_method(self, method: str) -> "UriHealthCheckOptions":
        self.http_method = method
        return self

    def use_timeout(self, timeout: TimeoutLike) -> "UriHealthCheckOptions":
        self.timeout = timeout
        return self

    def expect_http_code(self, code: int) -> "UriHealthCheckOptions":
        self.expected_status = StatusCodeRange.single(code)
        return self

    def expect_http_codes(self, min_code: int, max_code: int) -> "UriHealthCheckOptions":
        self.expected_status = StatusCodeRange.between(min_code, max_code)
        return self

    def expect_content(self, content: str) -> "UriHealthCheckOptions":
        self.expected_content = content
        return self

    def expect_content_check(self, func: ContentCheckFunc) -> "UriHealthCheckOptions":
        self.content_check = func
        return self

    def build(self) -> UriCheckSet:
        """Freeze the accumulated values into a read-only check set."""
        return UriCheckSet(
            defaults=CheckSetDefaults(
                method=self.http_method,
                timeout=self.timeout,
                expected_status=self.expected_status,
                expected_content=self.expected_content,
                content_check=self.content_check,
            ),
            endpoints=tuple(uri.build() for uri in self._uris),
        )


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "StatusCodeRange",
    "CheckSetDefaults",
    "EndpointCheck",
    "ResolvedEndpoint",
    "UriCheckSet",
    "UriOptions",
    "UriHealthCheckOptions",
]
