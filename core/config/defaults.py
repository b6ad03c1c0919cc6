# ============================================================================
# CONFIGURATION DEFAULTS
# ============================================================================
# STATUS: Core - Default configuration values
# PURPOSE: Centralized defaults for URI checks, HTTP clients and logging
# CREATED: 18 OCT 2026
# ============================================================================
"""
Configuration Defaults

Provides the check-wide fallbacks every URI health check starts from.
These can be overridden via environment variables or per check set.

Design:
- Immutable dataclasses for defaults
- Environment variable overrides
- Type-safe access
"""

import os
from dataclasses import dataclass, field
from typing import Optional, Tuple


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class UriCheckDefaults:
    """
    Check-wide defaults for URI health checks.

    Applied to every target that does not override the value itself.
    """
    http_method: str = "GET"
    timeout_seconds: float = 10.0

    # Inclusive range - HTTP successful status codes
    expected_status_min: int = 200
    expected_status_max: int = 299

    # Registration name used when none is given
    registration_name: str = "uri-group"

    @property
    def expected_status(self) -> Tuple[int, int]:
        return (self.expected_status_min, self.expected_status_max)

    @classmethod
    def from_env(cls) -> "UriCheckDefaults":
        """Create from environment variables."""
        return cls(
            http_method=os.getenv("URI_HEALTH_HTTP_METHOD", "GET").upper(),
            timeout_seconds=float(os.getenv("URI_HEALTH_TIMEOUT_SECONDS", 10.0)),
            expected_status_min=int(os.getenv("URI_HEALTH_EXPECTED_STATUS_MIN", 200)),
            expected_status_max=int(os.getenv("URI_HEALTH_EXPECTED_STATUS_MAX", 299)),
            registration_name=os.getenv("URI_HEALTH_REGISTRATION_NAME", "uri-group"),
        )


@dataclass(frozen=True)
class HttpClientDefaults:
    """
    Defaults for HTTP clients handed to health checks.

    The engine enforces its own per-request deadline, so the httpx
    timeout is left off unless configured.
    """
    follow_redirects: bool = True
    verify_tls: bool = True
    client_timeout_seconds: Optional[float] = None

    @classmethod
    def from_env(cls) -> "HttpClientDefaults":
        """Create from environment variables."""
        timeout = os.getenv("URI_HEALTH_CLIENT_TIMEOUT_SECONDS")
        return cls(
            follow_redirects=_env_bool("URI_HEALTH_FOLLOW_REDIRECTS", True),
            verify_tls=_env_bool("URI_HEALTH_VERIFY_TLS", True),
            client_timeout_seconds=float(timeout) if timeout else None,
        )


@dataclass(frozen=True)
class LoggingDefaults:
    """Defaults for log output."""
    level: str = "INFO"
    json_output: bool = False

    @classmethod
    def from_env(cls) -> "LoggingDefaults":
        """Create from environment variables."""
        return cls(
            level=os.getenv("LOG_LEVEL", "INFO"),
            json_output=os.getenv("LOG_FORMAT", "").lower() == "json",
        )


# ============================================================================
# GLOBAL DEFAULTS INSTANCE
# ============================================================================

@dataclass
class Defaults:
    """Container for all default configurations."""
    uri_checks: UriCheckDefaults = field(default_factory=UriCheckDefaults)
    http_client: HttpClientDefaults = field(default_factory=HttpClientDefaults)
    logging: LoggingDefaults = field(default_factory=LoggingDefaults)

    @classmethod
    def from_env(cls) -> "Defaults":
        """Create all defaults from environment variables."""
        return cls(
            uri_checks=UriCheckDefaults.from_env(),
            http_client=HttpClientDefaults.from_env(),
            logging=LoggingDefaults.from_env(),
        )


_defaults: Optional[Defaults] = None


def get_defaults() -> Defaults:
    """Get global defaults instance."""
    global _defaults
    if _defaults is None:
        _defaults = Defaults.from_env()
    return _defaults


def reset_defaults() -> None:
    """Reset defaults (for testing)."""
    global _defaults
    _defaults = None


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "UriCheckDefaults",
    "HttpClientDefaults",
    "LoggingDefaults",
    "Defaults",
    "get_defaults",
    "reset_defaults",
]
