"""Unit tests for option validation utilities."""

import pytest
from pydantic import BaseModel, Field

from pagelinks.models.errors import ConfigurationError
from pagelinks.utils.validators import sanitize_validation_errors, validate_options


class SampleOptions(BaseModel):
    limit: int = Field(..., ge=0)
    label: str = "x"


class TestSanitizeValidationErrors:
    def test_rewrites_common_messages(self) -> None:
        errors = [
            {"loc": ("limit",), "msg": "Input should be a valid integer", "input": "a"},
            {"loc": ("label",), "msg": "Input should be a valid string", "url": "u"},
            {"loc": ("flag",), "msg": "Input should be a valid boolean"},
        ]

        assert sanitize_validation_errors(errors) == [
            {"field": "limit", "message": "Must be an integer"},
            {"field": "label", "message": "Must be a string"},
            {"field": "flag", "message": "Must be a boolean"},
        ]

    def test_strips_value_error_prefix(self) -> None:
        errors = [{"loc": ("pages",), "msg": "Value error, bad pages"}]

        assert sanitize_validation_errors(errors) == [
            {"field": "pages", "message": "bad pages"},
        ]

    def test_missing_location_falls_back(self) -> None:
        errors = [{"msg": "Broken"}]

        assert sanitize_validation_errors(errors)[0]["field"] == "options"


class TestValidateOptions:
    def test_returns_model(self) -> None:
        options = validate_options(SampleOptions, {"limit": 3})

        assert options.limit == 3
        assert options.label == "x"

    def test_raises_configuration_error(self) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            validate_options(SampleOptions, {"limit": -1})

        assert exc_info.value.message == "Invalid pagination options"
        assert exc_info.value.details["errors"][0]["field"] == "limit"
