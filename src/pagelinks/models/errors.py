"""Custom exception classes for pagination rendering."""

from typing import Any

from pagelinks.utils.constants import (
    ERROR_CODE_INVALID_CONFIGURATION,
    ERROR_CODE_ITEM_RENDER_FAILED,
)


class PaginationError(Exception):
    """
    Base exception for all pagination errors.

    All custom errors must inherit from this class.
    Callers must explicitly provide a message and error code.
    Optional contextual information can be supplied via `details`.
    """

    message: str
    error_code: str
    details: dict[str, Any]

    def __init__(
        self,
        *,
        message: str,
        error_code: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.error_code = error_code
        self.details = details or {}

        super().__init__(self.message)


class ConfigurationError(PaginationError):
    """Raised when pagination options or resolver input are invalid."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_INVALID_CONFIGURATION,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class ItemRenderError(PaginationError):
    """Raised in strict mode when a single pagination item fails to render."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_ITEM_RENDER_FAILED,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )
