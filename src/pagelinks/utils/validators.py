"""Option validation utilities."""

from typing import Any, TypeVar

from aws_lambda_powertools import Logger
from pydantic import BaseModel, ValidationError

from pagelinks.models.errors import ConfigurationError

ModelT = TypeVar("ModelT", bound=BaseModel)

logger = Logger(utc=True)


def sanitize_validation_errors(errors: list[dict[str, Any]]) -> list[dict[str, str]]:
    """Sanitize Pydantic validation errors for error details.

    Removes internal fields like:
    - url
    - ctx
    - input
    """
    sanitized: list[dict[str, str]] = []

    for err in errors:
        field = ".".join(str(x) for x in err.get("loc", [])) or "options"
        raw_msg = err.get("msg", "Invalid value")

        # Remove noisy prefixes
        msg = raw_msg.replace("Value error,", "").strip()

        msg_lower = msg.lower()
        if "valid integer" in msg_lower:
            msg = "Must be an integer"
        elif "valid string" in msg_lower:
            msg = "Must be a string"
        elif "valid boolean" in msg_lower:
            msg = "Must be a boolean"

        sanitized.append(
            {
                "field": field,
                "message": msg,
            }
        )

    return sanitized


def validate_options(model: type[ModelT], data: dict[str, Any]) -> ModelT:
    """Validate option data against a Pydantic model.

    Args:
        model: Pydantic model class
        data: Merged option values

    Returns:
        The validated model instance

    Raises:
        ConfigurationError: If any option fails validation
    """
    try:
        return model.model_validate(data)

    except ValidationError as exc:
        raise configuration_error(exc, model_name=model.__name__) from exc


def configuration_error(exc: ValidationError, *, model_name: str) -> ConfigurationError:
    """Log a Pydantic validation failure and convert it to a ConfigurationError."""
    sanitized_errors = sanitize_validation_errors(exc.errors())
    logger.error(
        "Invalid pagination options",
        extra={"model": model_name, "errors": sanitized_errors},
    )
    return ConfigurationError(
        message="Invalid pagination options",
        details={"errors": sanitized_errors},
    )
