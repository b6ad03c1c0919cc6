# ============================================================================
# HEALTH CHECK MODULE
# ============================================================================
# STATUS: Infrastructure - URI health check system
# PURPOSE: Liveness/readiness verdicts for HTTP(S) dependencies
# CREATED: 18 OCT 2026
# ============================================================================
"""
Health Check Module

Evaluates one or more HTTP(S) endpoints and reports a single verdict.

Architecture:
- UriHealthCheckOptions / UriCheckSet: endpoint specifications with defaults
- UriHealthCheck: ordered, cancellable request/validate loop
- ContentValidator: literal and programmable body checks
- HealthCheckRegistry + add_url_group: named registrations
- HealthCheckExecutor: runs a registration with its timeout

Usage:
    from health import add_url_group, get_registry, HealthCheckExecutor

    registry = get_registry()
    add_url_group(registry, "https://api.example.com/health", timeout=15)

    result = await HealthCheckExecutor(registry).execute_single("uri-group")
"""

from health.core import (
    HealthStatus,
    HealthCheckError,
    HealthCheckResult,
    HealthCheckPlugin,
    HealthCheckRegistration,
    HealthCheckContext,
)
from health.cancellation import (
    CancellationScope,
    OperationCancelledError,
    OperationTimeoutError,
    cancelled_message,
)
from health.content import (
    ContentCheckResult,
    ContentValidator,
    LiteralContentValidator,
    PredicateContentValidator,
)
from health.uri_options import (
    StatusCodeRange,
    CheckSetDefaults,
    EndpointCheck,
    UriCheckSet,
    UriOptions,
    UriHealthCheckOptions,
)
from health.http_client import HttpClientFactory, get_client_factory
from health.checks.uris import UriHealthCheck
from health.registry import HealthCheckRegistry, get_registry
from health.executor import HealthCheckExecutor
from health.builders import add_url_group

__all__ = [
    # Core types
    "HealthStatus",
    "HealthCheckError",
    "HealthCheckResult",
    "HealthCheckPlugin",
    "HealthCheckRegistration",
    "HealthCheckContext",
    # Cancellation
    "CancellationScope",
    "OperationCancelledError",
    "OperationTimeoutError",
    "cancelled_message",
    # Content
    "ContentCheckResult",
    "ContentValidator",
    "LiteralContentValidator",
    "PredicateContentValidator",
    # Options
    "StatusCodeRange",
    "CheckSetDefaults",
    "EndpointCheck",
    "UriCheckSet",
    "UriOptions",
    "UriHealthCheckOptions",
    # HTTP
    "HttpClientFactory",
    "get_client_factory",
    # Checks
    "UriHealthCheck",
    # Registry / executor
    "HealthCheckRegistry",
    "get_registry",
    "HealthCheckExecutor",
    "add_url_group",
]
