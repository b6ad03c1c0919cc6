# ============================================================================
# HEALTH CHECK EXECUTOR
# ============================================================================
# STATUS: Infrastructure - Health check execution
# PURPOSE: Run a registered health check with timeout and failure mapping
# CREATED: 18 OCT 2026
# ============================================================================
"""
Health Check Executor

Runs one registered health check the way a probe host does:
- Creates the plugin from the registration factory
- Links the caller's cancellation with the registration timeout
- Maps overruns and exceptions to the registration's failure status
- Records duration
"""

import asyncio
import time
from typing import Optional

from core.logging import ComponentType, get_logger
from health.cancellation import (
    CancellationScope,
    OperationCancelledError,
    cancelled_message,
)
from health.core import (
    HealthCheckContext,
    HealthCheckRegistration,
    HealthCheckResult,
)
from health.registry import HealthCheckRegistry, get_registry

logger = get_logger(__name__, ComponentType.EXECUTOR)


class HealthCheckExecutor:
    """Executes registered health checks."""

    def __init__(self, registry: Optional[HealthCheckRegistry] = None):
        """
        Initialize executor.

        Args:
            registry: Health check registry (uses global if None)
        """
        self.registry = registry or get_registry()

    async def execute_single(
        self,
        name: str,
        cancellation: Optional[asyncio.Event] = None,
    ) -> Optional[HealthCheckResult]:
        """
        Execute a single check by name.

        Args:
            name: Registration name
            cancellation: Caller's abort signal (optional)

        Returns:
            The check result, or None if no such registration exists
        """
        registration = self.registry.get(name)
        if registration is None:
            return None

        return await self.execute_registration(registration, cancellation)

    async def execute_registration(
        self,
        registration: HealthCheckRegistration,
        cancellation: Optional[asyncio.Event] = None,
    ) -> HealthCheckResult:
        """Execute a registration with its timeout."""
        start_time = time.monotonic()

        try:
            async with CancellationScope(cancellation, timeout=registration.timeout) as scope:
                context = HealthCheckContext(
                    registration=registration,
                    cancellation=scope.event,
                )
                plugin = registration.factory()
                result = await scope.run(plugin.check(context))

        except OperationCancelledError as e:
            if scope.timed_out:
                message = f"Timeout after {registration.timeout}s"
            else:
                message = cancelled_message(registration.name)
            logger.warning(f"Health check {registration.name}: {message}")
            result = HealthCheckResult.failure(
                registration.failure_status, message, exception=e
            )

        except Exception as e:
            logger.error(f"Health check {registration.name} failed: {e}")
            result = HealthCheckResult.from_exception(e, registration.failure_status)

        result.duration_ms = (time.monotonic() - start_time) * 1000

        if result.is_healthy:
            logger.debug(
                f"Health check {registration.name}: {result.status.value} "
                f"({result.duration_ms:.1f}ms)"
            )
        else:
            logger.warning(
                f"Health check {registration.name}: {result.status.value} "
                f"({result.duration_ms:.1f}ms) - {result.message}"
            )

        return result


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "HealthCheckExecutor",
]
