# =============================================================================
# app/routers/users.py - User Endpoints
# =============================================================================
# GET  /api/v1/user  - always fails; the app-level handler turns the error
#                      into a generic 500 without the exception message
# POST /api/v1/user  - validates a user and echoes it back (nothing stored)
# =============================================================================

import logging

from fastapi import APIRouter, status

from app.dependencies import ValidatorDep
from core.models.user import UserCreate, UserResponse
from core.services.user_service import UserService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "",
    responses={500: {"description": "Always returned; the request is never served"}},
)
async def get_user():
    """
    Unimplemented user endpoint.

    Raises unconditionally. The error is not caught here; the generic
    exception handler in app/main.py answers with a 500 and hides the message.
    """
    raise RuntimeError("Bad Request")


@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"description": "One or more User constraints failed"}},
)
async def register_user(payload: UserCreate, validator: ValidatorDep):
    """
    Register a user.

    The payload is checked against the User constraints (non-blank instructor
    name, minimum age). All violations are reported together with
    code CONSTRAINT_VIOLATION.
    """
    return UserService.register(payload, validator)
