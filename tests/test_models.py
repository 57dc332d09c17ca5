# =============================================================================
# tests/test_models.py - Pydantic Model Tests
# =============================================================================
# Unit tests for the user models to ensure:
# - Valid data is accepted and parsed correctly
# - Each declared constraint rejects bad values with its own message
# - The hardcoded demo user is built without running the constraints
#
# Run with: poetry run pytest tests/test_models.py -v
# =============================================================================

import pytest
from pydantic import ValidationError

from core.models import (
    DEMO_USER,
    INSTRUCTOR_NAME,
    MIN_AGE,
    User,
    UserCreate,
    UserResponse,
)


# =============================================================================
# User Model Tests
# =============================================================================

class TestUser:
    """Tests for the User record."""

    def test_valid_user(self, valid_user_dict):
        """Test creating a valid User."""
        user = User(**valid_user_dict)

        assert user.name == "Nelson"
        assert user.age == 30

    def test_minimum_age_is_accepted(self):
        """Exactly MIN_AGE passes."""
        user = User(name=INSTRUCTOR_NAME, age=MIN_AGE)
        assert user.age == 18

    def test_user_is_immutable(self, valid_user_dict):
        """Frozen models reject assignment."""
        user = User(**valid_user_dict)

        with pytest.raises(ValidationError):
            user.age = 40

    def test_underage_user_rejected(self):
        """Age below the minimum uses the custom message."""
        with pytest.raises(ValidationError) as exc_info:
            User(name="Nelson", age=17)

        errors = exc_info.value.errors()
        assert len(errors) == 1
        assert errors[0]["loc"] == ("age",)
        assert errors[0]["type"] == "min"
        assert errors[0]["msg"] == "User must be above age"

    def test_wrong_name_rejected(self):
        """Only the instructor's name is accepted."""
        with pytest.raises(ValidationError) as exc_info:
            User(name="David", age=30)

        errors = exc_info.value.errors()
        assert len(errors) == 1
        assert errors[0]["type"] == "instructor"
        assert errors[0]["msg"] == "You are not Nelson"

    def test_blank_name_breaks_both_name_rules(self, validator):
        """A blank name is blank and also not the instructor."""
        violations = validator.validate({"name": "   ", "age": 30}, User)

        assert [(v.field, v.constraint) for v in violations] == [
            ("name", "not_blank"),
            ("name", "instructor"),
        ]
        assert [v.message for v in violations] == ["must not be blank", "You are not Nelson"]

    def test_constructor_rejects_blank_name(self):
        with pytest.raises(ValidationError) as exc_info:
            User(name="", age=30)

        assert exc_info.value.errors()[0]["type"] == "not_blank"

    def test_all_fields_reported_together(self):
        """Failures on different fields are collected in one error."""
        with pytest.raises(ValidationError) as exc_info:
            User(name="David", age=17)

        locs = [e["loc"] for e in exc_info.value.errors()]
        assert locs == [("name",), ("age",)]


class TestDemoUser:
    """Tests for the hardcoded demo instance."""

    def test_demo_user_values(self):
        assert DEMO_USER.name == "David"
        assert DEMO_USER.age == 17

    def test_demo_user_is_a_user(self):
        """Built without validation, but still a User."""
        assert isinstance(DEMO_USER, User)


# =============================================================================
# Request/Response Model Tests
# =============================================================================

class TestUserCreate:
    """Tests for the registration payload."""

    def test_accepts_values_that_break_user_rules(self):
        """Business rules are left to the validator."""
        payload = UserCreate(name="David", age=17)
        assert payload.model_dump() == {"name": "David", "age": 17}

    def test_age_is_coerced(self):
        payload = UserCreate(name="Nelson", age="30")
        assert payload.age == 30

    def test_age_must_be_integer(self):
        with pytest.raises(ValidationError):
            UserCreate(name="Nelson", age="thirty")


class TestUserResponse:
    """Tests for the registration response."""

    def test_default_message(self):
        response = UserResponse(name="Nelson", age=30)
        assert response.message == "User registered successfully"
