# =============================================================================
# lib/logging_config.py - Logging Setup
# =============================================================================
# Configures the standard library logging tree once at startup:
# - root level from LOG_LEVEL (DEBUG when DEBUG=true)
# - per-logger overrides from LOG_LEVELS, e.g. "core.services=DEBUG"
#
# Modules never configure logging themselves; they only do
#   logger = logging.getLogger(__name__)
# =============================================================================

import logging

from app.config import Settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(settings: Settings) -> dict[str, int]:
    """
    Apply logging configuration from settings.

    basicConfig only installs a handler when the root logger has none, so the
    root level is set explicitly to take effect either way.

    Args:
        settings: Application settings

    Returns:
        The per-logger overrides that were applied
    """
    root_level = settings.root_log_level
    logging.basicConfig(level=root_level, format=LOG_FORMAT)
    logging.getLogger().setLevel(root_level)

    overrides = settings.log_levels_map
    for name, level in overrides.items():
        logging.getLogger(name).setLevel(level)

    logging.getLogger(__name__).debug(
        f"Logging configured: root={logging.getLevelName(root_level)}, overrides={overrides}"
    )
    return overrides
