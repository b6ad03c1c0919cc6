# ============================================================================
# HEALTH CHECK HTTP CLIENT FACTORY
# ============================================================================
# STATUS: Infrastructure - httpx client creation for health checks
# PURPOSE: Named, per-evaluation AsyncClient instances
# CREATED: 18 OCT 2026
# DEPENDENCIES: httpx
# ============================================================================
"""
Health Check HTTP Client Factory

Creates a fresh httpx.AsyncClient per evaluation. Clients are configured
by registration name, so a check named "payments" can get its own TLS
settings, proxy or transport:

    factory = get_client_factory()
    factory.configure("payments", verify="/etc/ssl/internal-ca.pem")
    client_factory = factory.for_name("payments")

TLS, proxies and connection pooling live here, never in the check itself.
"""

from typing import Any, Callable, Dict, Optional

import httpx

from core.config import HttpClientDefaults, get_defaults
from core.logging import ComponentType, get_logger
from __version__ import USER_AGENT

logger = get_logger(__name__, ComponentType.HTTP_CLIENT)

ClientFactory = Callable[[], httpx.AsyncClient]


class HttpClientFactory:
    """Creates httpx.AsyncClient instances from per-name options."""

    def __init__(self, defaults: Optional[HttpClientDefaults] = None):
        defaults = defaults or get_defaults().http_client
        self._base_options: Dict[str, Any] = {
            "follow_redirects": defaults.follow_redirects,
            "verify": defaults.verify_tls,
            "timeout": defaults.client_timeout_seconds,
            "headers": {"User-Agent": USER_AGENT},
        }
        self._named_options: Dict[str, Dict[str, Any]] = {}

    def configure(self, name: str, **client_options: Any) -> "HttpClientFactory":
        """
        Set httpx.AsyncClient options for a name.

        Options merge over the base options and over earlier calls.
        """
        self._named_options.setdefault(name, {}).update(client_options)
        logger.debug(f"Configured HTTP client '{name}': {sorted(client_options)}")
        return self

    def options_for(self, name: Optional[str] = None) -> Dict[str, Any]:
        options = dict(self._base_options)
        if name is not None:
            options.update(self._named_options.get(name, {}))
        return options

    def create_client(self, name: Optional[str] = None) -> httpx.AsyncClient:
        """Create a new client; the caller owns and closes it."""
        return httpx.AsyncClient(**self.options_for(name))

    def for_name(self, name: Optional[str] = None) -> ClientFactory:
        """Zero-argument factory bound to a name."""
        return lambda: self.create_client(name)


# ============================================================================
# GLOBAL FACTORY
# ============================================================================

_client_factory: Optional[HttpClientFactory] = None


def get_client_factory() -> HttpClientFactory:
    """Get the global HTTP client factory."""
    global _client_factory
    if _client_factory is None:
        _client_factory = HttpClientFactory()
    return _client_factory


def reset_client_factory() -> None:
    """Reset the global factory (for testing)."""
    global _client_factory
    _client_factory = None


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "ClientFactory",
    "HttpClientFactory",
    "get_client_factory",
    "reset_client_factory",
]
