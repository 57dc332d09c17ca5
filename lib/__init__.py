# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# This package contains reusable utilities:
# - logging_config.py: Root and per-logger level setup
#
# These modules are self-contained and can be tested in isolation.
# =============================================================================

from lib.logging_config import LOG_FORMAT, configure_logging

__all__ = [
    "LOG_FORMAT",
    "configure_logging",
]
