# ============================================================================
# VERSION - URI HEALTH CHECKS
# ============================================================================
"""
Version information for URI health checks.

This is the single source of truth for the package version.
Updated manually for each release.
"""
__version__ = "0.3.0"
__version_info__ = tuple(int(x) for x in __version__.split("."))

# Build metadata
BUILD_DATE = "2026-10-18"

# Sent by the default HTTP client factory
USER_AGENT = f"uri-health/{__version__}"
