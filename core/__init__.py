# ============================================================================
# CORE MODULE
# ============================================================================
# STATUS: Core module initialization
# PURPOSE: Export configuration and structured logging utilities
# CREATED: 18 OCT 2026
# ============================================================================

from core.config import UriCheckDefaults, get_defaults
from core.logging import configure_logging, get_logger, log_context

__all__ = [
    # Config
    "UriCheckDefaults",
    "get_defaults",
    # Logging
    "configure_logging",
    "get_logger",
    "log_context",
]
