# =============================================================================
# core/runners.py - Startup Runners
# =============================================================================
# Small jobs executed once, after the application has started and every
# singleton has been initialized. Called from the lifespan in app/main.py.
#
# Each runner receives its collaborators as arguments; run_startup_runners()
# resolves them from the bean catalog.
# =============================================================================

import logging
from dataclasses import dataclass, field

from core.beans import BeanCatalog
from core.models.user import DEMO_USER
from core.validation import BeanValidator, ConstraintViolation

logger = logging.getLogger(__name__)


@dataclass
class RunnerReport:
    """What the startup runners produced."""
    qualified_value: str
    violations: list[ConstraintViolation] = field(default_factory=list)


def print_qualified_bean(value: str) -> str:
    """Emit the value injected by the "StringBean" qualifier."""
    logger.info(value)
    return value


def report_demo_user_violations(validator: BeanValidator) -> list[ConstraintViolation]:
    """
    Validate the hardcoded DEMO_USER and emit each violation.

    The violations are returned for inspection but nothing acts on them.
    """
    violations = validator.validate(DEMO_USER)
    for violation in violations:
        logger.info(str(violation))
    return violations


def run_startup_runners(catalog: BeanCatalog) -> RunnerReport:
    """
    Run every startup runner in order.

    A plain str lookup would be ambiguous (two string beans), so the value is
    resolved by its "StringBean" name.
    """
    value = print_qualified_bean(catalog.get("StringBean"))
    violations = report_demo_user_violations(catalog.get_unique(BeanValidator))
    return RunnerReport(qualified_value=value, violations=violations)
