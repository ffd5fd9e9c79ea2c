"""Tests for the application exception hierarchy."""

import pytest

from core.exceptions import (
    AuthenticationError,
    BaseApplicationError,
    NotFoundError,
    ValidationError,
)


class TestBaseApplicationError:
    def test_defaults(self):
        error = BaseApplicationError("boom")

        assert error.message == "boom"
        assert error.status_code == 500
        assert error.error_code == "APPLICATION_ERROR"
        assert error.details == {}
        assert error.is_operational is True

    def test_overrides(self):
        error = BaseApplicationError(
            "boom", error_code="CUSTOM", details={"field": "x"}, status_code=418
        )

        assert error.status_code == 418
        assert error.to_dict() == {
            "error": "boom",
            "error_code": "CUSTOM",
            "details": {"field": "x"},
        }

    def test_to_dict_omits_empty_details(self):
        assert NotFoundError("account not found").to_dict() == {
            "error": "account not found",
            "error_code": "NOT_FOUND",
        }

    def test_str_includes_error_code(self):
        assert str(ValidationError("bad")) == "[VALIDATION_ERROR] bad"


class TestSubclasses:
    @pytest.mark.parametrize(
        ("cls", "status_code", "error_code"),
        [
            (ValidationError, 400, "VALIDATION_ERROR"),
            (AuthenticationError, 401, "UNAUTHORIZED"),
            (NotFoundError, 404, "NOT_FOUND"),
        ],
    )
    def test_status_and_code(self, cls, status_code, error_code):
        error = cls("message")

        assert isinstance(error, BaseApplicationError)
        assert error.status_code == status_code
        assert error.error_code == error_code
