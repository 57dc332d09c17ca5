# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# These are injected into route handlers using Depends().
#
# Aliases point at providers registered in core.beans, so a handler receives
# the same singleton the rest of the app sees.
# =============================================================================

from typing import Annotated

from fastapi import Depends

from core.beans import bean_validator
from core.validation import BeanValidator


# Type alias for dependency injection
ValidatorDep = Annotated[BeanValidator, Depends(bean_validator)]
