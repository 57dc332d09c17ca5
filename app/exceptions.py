# =============================================================================
# app/exceptions.py - Custom Exceptions and Handlers
# =============================================================================
# Centralized exception handling for the API.
#
# Anything deriving from MasterclassException is rendered with its own status
# code and a structured body. Every other exception falls through to the
# generic handler, which logs it and answers with a 500 that never echoes the
# exception message back to the client.
# =============================================================================

import logging
from typing import Any

from fastapi import Request
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

GENERIC_ERROR_BODY = {
    "detail": "An unexpected error occurred",
    "code": "INTERNAL_ERROR",
}


class MasterclassException(Exception):
    """
    Base exception for the Masterclass API.

    All custom exceptions inherit from this class.
    Provides structured error responses with actionable suggestions.
    """

    def __init__(
        self,
        message: str,
        code: str = "MASTERCLASS_ERROR",
        status_code: int = 500,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.suggestion = suggestion
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        result = {
            "detail": self.message,
            "code": self.code,
        }
        if self.suggestion:
            result["suggestion"] = self.suggestion
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# Validation Exceptions
# =============================================================================

class ConstraintViolationError(MasterclassException):
    """Raised when a model fails one or more declared constraints."""

    def __init__(self, model: str, violations: list[Any]):
        self.violations = list(violations)
        super().__init__(
            message=f"{model} failed validation with {len(self.violations)} violation(s)",
            code="CONSTRAINT_VIOLATION",
            status_code=400,
            suggestion="Fix the listed fields and send the request again",
            details={
                "model": model,
                "violations": [
                    {
                        "field": v.field,
                        "message": v.message,
                        "constraint": v.constraint,
                    }
                    for v in self.violations
                ],
            },
        )


# =============================================================================
# Bean Catalog Exceptions
# =============================================================================
# These are wiring mistakes, so they keep the default 500 status.

class BeanNotFoundError(MasterclassException):
    """Raised when no bean is registered under a name."""

    def __init__(self, name: str, available: list[str]):
        super().__init__(
            message=f"No bean named '{name}'",
            code="BEAN_NOT_FOUND",
            suggestion=f"Use one of: {', '.join(available) or '(none registered)'}",
            details={"name": name},
        )


class DuplicateBeanError(MasterclassException):
    """Raised when two providers are registered under the same name."""

    def __init__(self, name: str):
        super().__init__(
            message=f"A bean named '{name}' is already registered",
            code="DUPLICATE_BEAN",
            suggestion="Pass an explicit, unique name to @bean(...)",
            details={"name": name},
        )


class AmbiguousBeanError(MasterclassException):
    """Raised when a type lookup matches more than one bean."""

    def __init__(self, type_name: str, candidates: list[str]):
        super().__init__(
            message=f"Expected a single bean of type {type_name}, found {len(candidates)}",
            code="AMBIGUOUS_BEAN",
            suggestion=f"Resolve by name instead: {', '.join(candidates)}",
            details={"type": type_name, "candidates": candidates},
        )


# =============================================================================
# Exception Handlers
# =============================================================================

async def masterclass_exception_handler(
    request: Request,
    exc: MasterclassException
) -> JSONResponse:
    """
    Convert MasterclassException to JSON response.

    Returns structured error with:
    - detail: Human-readable message
    - code: Machine-readable error code
    - suggestion: How to fix (if available)
    - details: Additional context
    """
    if exc.status_code >= 500:
        logger.error(f"{exc.code} on {request.method} {request.url.path}: {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


async def unhandled_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """
    Last-resort handler for anything not caught by a route.

    The exception message is logged but never sent to the client, since it may
    carry internal details.
    """
    logger.exception(f"Unexpected error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=500,
        content=dict(GENERIC_ERROR_BODY),
    )
