# ============================================================================
# URI HEALTH CHECK REGISTRATION
# ============================================================================
# STATUS: Infrastructure - Registration surface for URI checks
# PURPOSE: Translate caller parameters into a registered UriHealthCheck
# CREATED: 18 OCT 2026
# ============================================================================
"""
URI Health Check Registration

add_url_group() maps caller parameters onto UriHealthCheckOptions and
registers the resulting check under a name:

    registry = get_registry()

    # Single URI
    add_url_group(registry, "https://api.example.com/health")

    # Single URI, POST, expected body, per-URI setup
    add_url_group(
        registry,
        "https://api.example.com/ping",
        method="POST",
        expected_content="pong",
        uri_setup=lambda u: u.add_custom_header("X-Probe", "1"),
        name="ping",
    )

    # Several URIs
    add_url_group(registry, ["https://a.example.com", "https://b.example.com"])

    # Free-form configuration
    add_url_group(
        registry,
        lambda options: options.use_timeout(3).add_uri("https://c.example.com"),
        name="custom",
        tags=["ready"],
    )
"""

from typing import Any, Callable, Iterable, List, Optional, Union

from core.config import get_defaults
from health.checks.uris import UriHealthCheck
from health.content import ContentCheckFunc
from health.core import HealthCheckRegistration, HealthStatus
from health.http_client import ClientFactory, get_client_factory
from health.registry import HealthCheckRegistry
from health.uri_options import UriHealthCheckOptions, UriLike, UriOptions

OptionsSetup = Callable[[UriHealthCheckOptions], Any]
UrlGroupTarget = Union[UriLike, Iterable[UriLike], OptionsSetup]


def _options_from_target(target: UrlGroupTarget, uri_setup) -> UriHealthCheckOptions:
    if callable(target):
        options = UriHealthCheckOptions()
        target(options)
        return options

    if isinstance(target, str) or not isinstance(target, Iterable):
        return UriHealthCheckOptions().add_uri(target, uri_setup)

    if uri_setup is not None:
        raise ValueError("uri_setup applies to a single URI only")
    return UriHealthCheckOptions.from_uris(target)


def add_url_group(
    registry: HealthCheckRegistry,
    target: UrlGroupTarget,
    *,
    method: Optional[str] = None,
    expected_content: Optional[str] = None,
    content_check: Optional[ContentCheckFunc] = None,
    uri_setup: Optional[Callable[[UriOptions], Any]] = None,
    name: Optional[str] = None,
    failure_status: Optional[HealthStatus] = None,
    tags: Optional[List[str]] = None,
    timeout: Optional[float] = None,
    client_factory: Optional[ClientFactory] = None,
) -> HealthCheckRegistry:
    """
    Register a URI group health check.

    Args:
        registry: Registry to add the check to
        target: A URI, an iterable of URIs, or a callable configuring
            a fresh UriHealthCheckOptions
        method: Check-wide HTTP method
        expected_content: Check-wide literal body expectation
        content_check: Check-wide content predicate
        uri_setup: Per-target setup for a single URI
        name: Registration name (defaults to "uri-group")
        failure_status: Status reported on failure (defaults to unhealthy)
        tags: Labels used to filter registrations
        timeout: Registration-level timeout in seconds
        client_factory: Zero-argument httpx.AsyncClient factory (defaults
            to the global factory bound to the registration name)

    Returns:
        The registry, for chaining
    """
    registration_name = name or get_defaults().uri_checks.registration_name
    options = _options_from_target(target, uri_setup)

    if method is not None:
        options.use_http_method(method)
    if expected_content is not None:
        options.expect_content(expected_content)
    if content_check is not None:
        options.expect_content_check(content_check)

    # Frozen once; every execution shares the same read-only check set
    check_set = options.build()
    factory = client_factory or get_client_factory().for_name(registration_name)

    return registry.register(HealthCheckRegistration(
        name=registration_name,
        factory=lambda: UriHealthCheck(check_set, factory, name=registration_name),
        failure_status=failure_status or HealthStatus.UNHEALTHY,
        tags=list(tags or []),
        timeout=timeout,
    ))


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "add_url_group",
]
