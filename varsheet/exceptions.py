"""
Custom exception hierarchy for varsheet.

Provides structured exception types for the two failure families of an
export: per-declaration formatting problems (recoverable, the declaration is
skipped) and data-acquisition problems (terminal for the export).
"""

from typing import Any, Optional


class VarsheetError(Exception):
    """Base exception for all varsheet errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


# =============================================================================
# Formatting Exceptions
# =============================================================================


class FormatError(VarsheetError):
    """Base exception for values that cannot be rendered as a declaration."""
    pass


class InvalidColorError(FormatError):
    """Raised when a color value has missing or non-numeric channels."""

    def __init__(self, reason: str, value: Any = None, variable: Optional[str] = None):
        details = {"reason": reason}
        if variable:
            details["variable"] = variable
        if value is not None:
            details["value"] = repr(value)
        super().__init__(f"Invalid color value: {reason}", details=details)
        self.reason = reason
        self.variable = variable


class InvalidStringError(FormatError):
    """Raised when a STRING variable carries no usable value."""

    def __init__(self, variable: str):
        super().__init__(
            f"Invalid string value for variable: {variable}",
            details={"variable": variable},
        )
        self.variable = variable


# =============================================================================
# Acquisition Exceptions
# =============================================================================


class EmptyInputError(VarsheetError):
    """Raised when the provider reports no variable collections."""

    def __init__(self, message: str = "No local variables found."):
        super().__init__(message)


class ProviderError(VarsheetError):
    """Raised when the variable provider fails; aborts the whole export."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        details = {}
        if cause is not None:
            details["cause"] = f"{type(cause).__name__}: {cause}"
        super().__init__(message, details=details)
        self.cause = cause


class FigmaAPIError(ProviderError):
    """Raised when a Figma REST API request fails."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        cause: Optional[BaseException] = None,
    ):
        super().__init__(message, cause=cause)
        if status_code is not None:
            self.details["status_code"] = status_code
        self.status_code = status_code
