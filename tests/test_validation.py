# =============================================================================
# tests/test_validation.py - BeanValidator Tests
# =============================================================================
# Tests that the validator reports every violation instead of raising, and
# that validate_or_raise() converts them into a ConstraintViolationError.
# =============================================================================

import pytest

from app.exceptions import ConstraintViolationError
from core.models import DEMO_USER, User
from core.validation import ConstraintViolation


class TestValidate:
    """Tests for BeanValidator.validate()."""

    def test_demo_user_has_two_violations(self, validator):
        """The hardcoded user breaks the name and the age rule."""
        violations = validator.validate(DEMO_USER)

        assert len(violations) == 2
        by_field = {v.field: v for v in violations}
        assert by_field["name"].message == "You are not Nelson"
        assert by_field["name"].invalid_value == "David"
        assert by_field["age"].message == "User must be above age"
        assert by_field["age"].invalid_value == 17

    def test_demo_user_is_stable_across_calls(self, validator):
        first = validator.validate(DEMO_USER)
        second = validator.validate(DEMO_USER)
        assert first == second

    def test_valid_instance_has_no_violations(self, validator, valid_user_dict):
        assert validator.validate(User(**valid_user_dict)) == []

    def test_mapping_with_model(self, validator):
        """Raw data can be checked against a model class."""
        violations = validator.validate({"name": "Nelson", "age": 17}, User)

        assert len(violations) == 1
        assert violations[0].field == "age"
        assert violations[0].constraint == "min"

    def test_missing_field_is_a_violation(self, validator):
        violations = validator.validate({"name": "Nelson"}, User)

        assert [(v.field, v.constraint) for v in violations] == [("age", "missing")]

    def test_mapping_without_model_raises(self, validator):
        with pytest.raises(TypeError):
            validator.validate({"name": "Nelson", "age": 30})

    def test_constructed_instance_checked_against_model(self, validator):
        """An unvalidated instance is re-checked from its raw field values."""
        user = User.model_construct(name=" ", age=18)

        violations = validator.validate(user)
        assert [v.constraint for v in violations] == ["not_blank", "instructor"]

    def test_type_error_not_expanded(self, validator):
        """A value of the wrong type is reported once, before any rule runs."""
        violations = validator.validate({"name": "Nelson", "age": "old"}, User)

        assert [(v.field, v.constraint) for v in violations] == [("age", "int_parsing")]


class TestValidateOrRaise:
    """Tests for BeanValidator.validate_or_raise()."""

    def test_returns_validated_model(self, validator, valid_user_dict):
        user = validator.validate_or_raise(valid_user_dict, User)

        assert isinstance(user, User)
        assert user.name == "Nelson"

    def test_raises_with_all_violations(self, validator):
        with pytest.raises(ConstraintViolationError) as exc_info:
            validator.validate_or_raise(DEMO_USER)

        error = exc_info.value
        assert error.status_code == 400
        assert error.code == "CONSTRAINT_VIOLATION"
        assert len(error.violations) == 2
        assert error.details["model"] == "User"
        assert {v["field"] for v in error.details["violations"]} == {"name", "age"}


class TestConstraintViolation:
    """Tests for the violation record."""

    def test_str(self):
        violation = ConstraintViolation(
            field="age",
            message="User must be above age",
            constraint="min",
            invalid_value=17,
        )
        assert str(violation) == "age: User must be above age (invalid value: 17)"
