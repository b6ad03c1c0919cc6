# ============================================================================
# HEALTH CHECK CORE TYPES
# ============================================================================
# STATUS: Infrastructure - Base classes for health checks
# PURPOSE: Health check plugin interfaces, registrations and result types
# CREATED: 18 OCT 2026
# ============================================================================
"""
Health Check Core Types

Defines the plugin interface, the registration record the host keeps for
each check, the context handed to a running check, and the result type.

Statuses:
- healthy: All systems operational
- degraded: Operational with warnings (non-blocking issues)
- unhealthy: Critical failure
"""

import asyncio
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Callable, Dict, List, Optional
from dataclasses import dataclass, field
from datetime import datetime


class HealthStatus(str, Enum):
    """Health check status values."""
    HEALTHY = "healthy"
    DEGRADED = "degraded"
    UNHEALTHY = "unhealthy"


class HealthCheckError(Exception):
    """Base exception for health check errors."""
    pass


@dataclass
class HealthCheckResult:
    """
    Verdict from a single health check run.

    A healthy result carries no payload. Any other status carries a
    human-readable message and, for transport failures, the exception.
    """
    status: HealthStatus
    message: Optional[str] = None
    exception: Optional[BaseException] = None
    details: Dict[str, Any] = field(default_factory=dict)
    duration_ms: float = 0.0
    checked_at: datetime = field(default_factory=datetime.utcnow)

    @property
    def is_healthy(self) -> bool:
        return self.status == HealthStatus.HEALTHY

    @classmethod
    def healthy(cls, message: str = None, **details) -> "HealthCheckResult":
        """Create healthy result."""
        return cls(status=HealthStatus.HEALTHY, message=message, details=details)

    @classmethod
    def failure(
        cls,
        status: HealthStatus,
        message: str,
        exception: Optional[BaseException] = None,
        **details,
    ) -> "HealthCheckResult":
        """Create a failed result reported with the registration's status."""
        if exception is not None:
            details.setdefault("exception_type", type(exception).__name__)
        return cls(
            status=status,
            message=message,
            exception=exception,
            details=details,
        )

    @classmethod
    def from_exception(
        cls,
        e: BaseException,
        status: HealthStatus = HealthStatus.UNHEALTHY,
    ) -> "HealthCheckResult":
        """Create failed result from exception."""
        return cls.failure(status, str(e) or type(e).__name__, exception=e)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON output."""
        result = {
            "status": self.status.value,
            "duration_ms": round(self.duration_ms, 2),
            "checked_at": self.checked_at.isoformat() + "Z",
        }
        if self.message:
            result["message"] = self.message
        if self.exception is not None:
            result["exception"] = repr(self.exception)
        if self.details:
            result["details"] = self.details
        return result


class HealthCheckPlugin(ABC):
    """
    Base class for health check plugins.

    Subclass and implement check() to create custom health checks.
    Plugins are created per execution by a HealthCheckRegistration factory.

    Example:
        class PingCheck(HealthCheckPlugin):
            name = "ping"

            async def check(self, context: HealthCheckContext) -> HealthCheckResult:
                return HealthCheckResult.healthy()
    """

    name: str = "unnamed"

    @abstractmethod
    async def check(self, context: "HealthCheckContext") -> HealthCheckResult:
        """
        Execute health check.

        Args:
            context: Registration and cancellation signal for this run

        Returns:
            HealthCheckResult with status and optional details
        """
        pass


@dataclass
class HealthCheckRegistration:
    """
    Host-side record for one named health check.

    Attributes:
        name: Unique identifier for the check
        factory: Zero-argument callable creating the plugin for a run
        failure_status: Status reported when the check fails
        tags: Free-form labels used to filter registrations
        timeout: Registration-level timeout in seconds (None = no limit)
    """
    name: str
    factory: Callable[[], HealthCheckPlugin]
    failure_status: HealthStatus = HealthStatus.UNHEALTHY
    tags: List[str] = field(default_factory=list)
    timeout: Optional[float] = None


@dataclass
class HealthCheckContext:
    """
    Context handed to a running health check.

    The cancellation event is the caller's own deadline or abort request.
    """
    registration: HealthCheckRegistration
    cancellation: asyncio.Event = field(default_factory=asyncio.Event)

    @property
    def failure_status(self) -> HealthStatus:
        return self.registration.failure_status

    @classmethod
    def for_plugin(
        cls,
        plugin: HealthCheckPlugin,
        failure_status: HealthStatus = HealthStatus.UNHEALTHY,
        cancellation: Optional[asyncio.Event] = None,
    ) -> "HealthCheckContext":
        """Build a context for running a plugin outside a registry."""
        registration = HealthCheckRegistration(
            name=plugin.name,
            factory=lambda: plugin,
            failure_status=failure_status,
        )
        return cls(
            registration=registration,
            cancellation=cancellation if cancellation is not None else asyncio.Event(),
        )


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "HealthStatus",
    "HealthCheckError",
    "HealthCheckResult",
    "HealthCheckPlugin",
    "HealthCheckRegistration",
    "HealthCheckContext",
]
