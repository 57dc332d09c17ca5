# =============================================================================
# core/models/user.py - User Schemas
# =============================================================================
# These models define the user record and its declared constraints:
# - User: Immutable record validated by annotated field rules
# - UserCreate: Registration payload (types only, rules checked separately)
# - UserResponse: Output after a successful registration
# - DEMO_USER: Hardcoded instance built without validation
#
# Constraints are attached to the field types with Annotated[...] so the same
# rule can be reused on any model:
#   name: InstructorName   -> not blank, must be the instructor
#   age:  AdultAge         -> at least MIN_AGE
# =============================================================================

from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, Field
from pydantic_core import PydanticCustomError

INSTRUCTOR_NAME = "Nelson"
MIN_AGE = 18


# =============================================================================
# Field Constraints
# =============================================================================

def not_blank(value: str) -> str:
    """Reject empty or whitespace-only text."""
    if not value or not value.strip():
        raise PydanticCustomError("not_blank", "must not be blank")
    return value


def is_instructor(value: str) -> str:
    """Only the instructor's name passes."""
    if value != INSTRUCTOR_NAME:
        raise PydanticCustomError(
            "instructor",
            "You are not {instructor}",
            {"instructor": INSTRUCTOR_NAME},
        )
    return value


def min_age(value: int) -> int:
    if value < MIN_AGE:
        raise PydanticCustomError(
            "min",
            "User must be above age",
            {"min": MIN_AGE},
        )
    return value


# The constructor stops at the first failing rule of a field; BeanValidator
# runs every rule and reports each failure
InstructorName = Annotated[str, AfterValidator(not_blank), AfterValidator(is_instructor)]
AdultAge = Annotated[int, AfterValidator(min_age)]


# =============================================================================
# Models
# =============================================================================

class User(BaseModel):
    """
    A user record.

    Immutable once built. Constructing it through the normal constructor runs
    every rule; `User.model_construct(...)` skips them so a record can be
    created first and inspected later by a BeanValidator.

    Example:
        User(name="Nelson", age=30)          # valid
        User.model_construct(name="David", age=17)  # built, not validated
    """

    model_config = ConfigDict(frozen=True)

    name: InstructorName = Field(
        ...,
        description="Display name; only the instructor is accepted"
    )

    age: AdultAge = Field(
        ...,
        description=f"Age in years; must be at least {MIN_AGE}"
    )


class UserCreate(BaseModel):
    """
    Schema for registering a user.

    Only checks types so that business rules can be reported together as
    constraint violations instead of a framework-level 422.

    Example:
        {
            "name": "Nelson",
            "age": 30
        }
    """

    name: str = Field(..., description="Display name")
    age: int = Field(..., description="Age in years")

    model_config = {
        "json_schema_extra": {
            "example": {"name": "Nelson", "age": 30}
        }
    }


class UserResponse(BaseModel):
    """Response when a user passes validation."""
    name: str
    age: int
    message: str = Field(default="User registered successfully")


# The one hardcoded record: constructed without running its rules
DEMO_USER = User.model_construct(name="David", age=17)
