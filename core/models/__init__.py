# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - user.py: User record, its field constraints, and request/response schemas
#
# These models define the "contract" between API and clients.
# =============================================================================

from .user import (
    AdultAge,
    DEMO_USER,
    INSTRUCTOR_NAME,
    InstructorName,
    MIN_AGE,
    User,
    UserCreate,
    UserResponse,
    is_instructor,
    min_age,
    not_blank,
)

__all__ = [
    "AdultAge",
    "DEMO_USER",
    "INSTRUCTOR_NAME",
    "InstructorName",
    "MIN_AGE",
    "User",
    "UserCreate",
    "UserResponse",
    "is_instructor",
    "min_age",
    "not_blank",
]
