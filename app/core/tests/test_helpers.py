"""Tests for core helper functions."""

import uuid

import pytest

from core.helpers import generate_numeric_code, validate_uuid


class TestGenerateNumericCode:
    @pytest.mark.parametrize("length", [1, 4, 6, 12])
    def test_code_has_requested_number_of_digits(self, length):
        code = generate_numeric_code(length)

        assert len(code) == length
        assert code.isdigit()

    def test_code_never_starts_with_zero(self):
        assert all(generate_numeric_code(4)[0] != "0" for _ in range(200))

    def test_zero_length_raises(self):
        with pytest.raises(ValueError):
            generate_numeric_code(0)


class TestValidateUuid:
    def test_accepts_uuid_and_string(self):
        value = uuid.uuid4()

        assert validate_uuid(value)
        assert validate_uuid(str(value))

    @pytest.mark.parametrize("value", ["", "not-a-uuid", None, 42])
    def test_rejects_invalid_values(self, value):
        assert validate_uuid(value) is False
