# =============================================================================
# core/validation.py - Bean Validator
# =============================================================================
# Runs a model's declared field constraints on demand and reports every
# violation instead of stopping at an exception.
#
# Constraints live on the models themselves (see core/models/user.py), so
# services and routes never re-implement checks like "age >= 18".
#
# Usage:
#   validator = BeanValidator()
#   for violation in validator.validate(DEMO_USER):
#       logger.info(violation)
# =============================================================================

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any, TypeVar

from pydantic import AfterValidator, BaseModel, TypeAdapter, ValidationError
from pydantic.fields import FieldInfo
from pydantic_core import PydanticCustomError

from app.exceptions import ConstraintViolationError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class ConstraintViolation(BaseModel):
    """
    One failed constraint on one field.

    Attributes:
        field: Dotted path to the offending field ("age", "address.zip")
        message: Human-readable message declared by the constraint
        constraint: Machine-readable constraint type ("min", "instructor", ...)
        invalid_value: The value that was rejected
    """

    field: str
    message: str
    constraint: str
    invalid_value: Any = None

    def __str__(self) -> str:
        return f"{self.field}: {self.message} (invalid value: {self.invalid_value!r})"


class BeanValidator:
    """
    Validates pydantic models against their declared constraints.

    Accepts either a model instance (including ones built with
    `model_construct`, which skips validation) or a raw mapping together with
    the model class to check it against.
    """

    def validate(
        self,
        obj: BaseModel | Mapping[str, Any],
        model: type[BaseModel] | None = None,
    ) -> list[ConstraintViolation]:
        """
        Return every constraint violation for `obj`.

        Every rule declared on a field is checked, so one field can report
        several violations (a blank name is both blank and not the
        instructor).

        Args:
            obj: Model instance or mapping of field values
            model: Model class to validate against (required for mappings)

        Returns:
            List of violations, empty when `obj` is valid

        Raises:
            TypeError: If a mapping is passed without a model class
        """
        model, data = self._resolve(obj, model)
        _, violations = self._check(model, data)
        return violations

    def validate_or_raise(
        self,
        obj: BaseModel | Mapping[str, Any],
        model: type[ModelT] | None = None,
    ) -> ModelT:
        """
        Validate `obj` and return a fully validated model instance.

        Raises:
            ConstraintViolationError: If any constraint fails
        """
        model, data = self._resolve(obj, model)
        instance, violations = self._check(model, data)
        if violations:
            raise ConstraintViolationError(model.__name__, violations)
        return instance

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _check(
        self,
        model: type[ModelT],
        data: dict[str, Any],
    ) -> tuple[ModelT | None, list[ConstraintViolation]]:
        try:
            return model.model_validate(data), []
        except ValidationError as e:
            violations: list[ConstraintViolation] = []
            for error in e.errors():
                violations.extend(self._expand(model, error))
            logger.debug(f"{model.__name__}: {len(violations)} violation(s)")
            return None, violations

    def _expand(
        self,
        model: type[BaseModel],
        error: Mapping[str, Any],
    ) -> list[ConstraintViolation]:
        """
        Turn one pydantic error into every violation of that field.

        pydantic stops at the first failing AfterValidator of a field. When the
        error came from one of those rules, all of the field's rules are run
        against the type-checked value and each failure is reported.
        """
        reported = self._to_violation(error)
        loc = error.get("loc", ())
        field_info = model.model_fields.get(loc[0]) if len(loc) == 1 else None
        rules = field_rules(field_info) if field_info is not None else []
        if not rules:
            return [reported]

        try:
            value = TypeAdapter(field_info.annotation).validate_python(error.get("input"))
        except ValidationError:
            return [reported]

        violations = []
        for rule in rules:
            try:
                value = rule(value)
            except PydanticCustomError as rule_error:
                violations.append(
                    ConstraintViolation(
                        field=reported.field,
                        message=rule_error.message(),
                        constraint=rule_error.type,
                        invalid_value=reported.invalid_value,
                    )
                )

        if not violations or violations[0].constraint != reported.constraint:
            return [reported]
        return violations

    @staticmethod
    def _resolve(
        obj: BaseModel | Mapping[str, Any],
        model: type[BaseModel] | None,
    ) -> tuple[type[BaseModel], dict[str, Any]]:
        if isinstance(obj, BaseModel):
            # dict(model) keeps raw field values without serializing them
            return model or type(obj), dict(obj)
        if model is None:
            raise TypeError("A model class is required when validating a mapping")
        return model, dict(obj)

    @staticmethod
    def _to_violation(error: Mapping[str, Any]) -> ConstraintViolation:
        return ConstraintViolation(
            field=".".join(str(part) for part in error.get("loc", ())),
            message=error["msg"],
            constraint=error["type"],
            invalid_value=error.get("input"),
        )


def field_rules(field_info: FieldInfo) -> list[Callable[[Any], Any]]:
    """The AfterValidator functions declared on a field, in declaration order."""
    return [m.func for m in field_info.metadata if isinstance(m, AfterValidator)]
