# =============================================================================
# core/services/some_service.py - Lifecycle Demo Service
# =============================================================================
# A singleton service whose hooks are driven by the application lifespan:
# - init(): runs right after the instance is created and the app starts
# - die(): runs right before the app shuts down
#
# Output goes through the module logger rather than print().
# =============================================================================

import logging

logger = logging.getLogger(__name__)


class SomeService:
    """
    Service with post-construct and pre-destroy hooks.

    Both hooks are idempotent: calling one twice only logs at DEBUG.
    """

    def __init__(self) -> None:
        self.started = False
        self.stopped = False

    def do_something(self) -> None:
        logger.info("Doing something")

    def init(self) -> None:
        """Post-construct hook."""
        if self.started:
            logger.debug("SomeService already initialized")
            return
        self.started = True
        logger.info("setup")

    def die(self) -> None:
        """Pre-destroy hook."""
        if self.stopped:
            logger.debug("SomeService already torn down")
            return
        self.stopped = True
        logger.info("teardown")
