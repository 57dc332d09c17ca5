# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .some_service import SomeService
from .user_service import UserService

__all__ = [
    "SomeService",
    "UserService",
]
