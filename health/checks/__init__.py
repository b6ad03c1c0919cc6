# ============================================================================
# HEALTH CHECK PLUGINS
# ============================================================================
# STATUS: Infrastructure - Health check implementations
# PURPOSE: Concrete health checks
# CREATED: 18 OCT 2026
# ============================================================================
"""
Health Check Plugins

- uris: HTTP(S) endpoint group check (status range, content, predicate)
"""

from health.checks.uris import UriHealthCheck

__all__ = [
    "UriHealthCheck",
]
