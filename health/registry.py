# ============================================================================
# HEALTH CHECK REGISTRY
# ============================================================================
# STATUS: Infrastructure - Health check registration
# PURPOSE: Register and look up named health check registrations
# CREATED: 18 OCT 2026
# ============================================================================
"""
Health Check Registry

Keeps one HealthCheckRegistration per name. The registration's factory
creates a fresh plugin for every execution.

Usage:
    registry = get_registry()
    add_url_group(registry, "https://api.example.com/health", tags=["ready"])

    registration = registry.get("uri-group")
    ready_checks = registry.get_by_tag("ready")
"""

from typing import Dict, List, Optional

from core.logging import ComponentType, get_logger
from health.core import HealthCheckRegistration

logger = get_logger(__name__, ComponentType.REGISTRY)


class HealthCheckRegistry:
    """Registry of named health check registrations."""

    def __init__(self):
        self._registrations: Dict[str, HealthCheckRegistration] = {}

    def register(self, registration: HealthCheckRegistration) -> "HealthCheckRegistry":
        """
        Add a registration, replacing any with the same name.

        Returns:
            The registry, for chaining
        """
        if registration.name in self._registrations:
            logger.warning(f"Overwriting health check: {registration.name}")

        self._registrations[registration.name] = registration
        logger.debug(
            f"Registered health check: {registration.name} "
            f"(failure_status={registration.failure_status.value}, "
            f"tags={registration.tags}, timeout={registration.timeout})"
        )
        return self

    def unregister(self, name: str) -> bool:
        """
        Remove a registration by name.

        Returns:
            True if a registration was removed
        """
        if name in self._registrations:
            del self._registrations[name]
            return True
        return False

    def get(self, name: str) -> Optional[HealthCheckRegistration]:
        return self._registrations.get(name)

    def get_all(self) -> List[HealthCheckRegistration]:
        """Get all registrations in registration order."""
        return list(self._registrations.values())

    def get_by_tag(self, tag: str) -> List[HealthCheckRegistration]:
        return [r for r in self._registrations.values() if tag in r.tags]

    def clear(self) -> None:
        self._registrations.clear()

    def __len__(self) -> int:
        return len(self._registrations)

    def __contains__(self, name: str) -> bool:
        return name in self._registrations


# ============================================================================
# GLOBAL REGISTRY
# ============================================================================

_registry: Optional[HealthCheckRegistry] = None


def get_registry() -> HealthCheckRegistry:
    """Get the global health check registry."""
    global _registry
    if _registry is None:
        _registry = HealthCheckRegistry()
    return _registry


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "HealthCheckRegistry",
    "get_registry",
]
