# =============================================================================
# core/services/user_service.py - User Business Logic
# =============================================================================
# Keeps validation out of the route handlers: routes hand the payload over,
# the service asks the validator and builds the response.
# Nothing is persisted.
# =============================================================================

import logging

from core.models.user import User, UserCreate, UserResponse
from core.validation import BeanValidator

logger = logging.getLogger(__name__)


class UserService:
    """
    Service for user registration.

    Provides a clean interface between API routes and the validator.
    """

    @staticmethod
    def register(payload: UserCreate, validator: BeanValidator) -> UserResponse:
        """
        Register a user.

        Args:
            payload: Type-checked request body
            validator: Validator used to check the User constraints

        Returns:
            UserResponse echoing the accepted values

        Raises:
            ConstraintViolationError: If the payload breaks any User constraint
        """
        user = validator.validate_or_raise(payload.model_dump(), User)
        logger.info(f"Registered user: {user.name} ({user.age})")
        return UserResponse(name=user.name, age=user.age)
