"""Error codes and error handling utilities for ThemeVars."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum, auto
from pathlib import Path
from typing import Any


class ErrorCode(Enum):
    """Standardized error codes for ThemeVars operations."""

    # Theme form errors
    THEME_NAME_REQUIRED = auto()
    THEME_EXISTS = auto()
    THEME_NO_VARIABLES = auto()
    THEME_NOT_FOUND = auto()

    # Import errors
    IMPORT_INVALID_FORMAT = auto()
    IMPORT_NO_VARIABLES = auto()

    # Export errors
    MAPPING_REQUIRED = auto()
    MAPPING_INVALID_JSON = auto()
    MAPPING_INVALID_FORMAT = auto()
    MAPPING_NAME_REQUIRED = auto()
    EXPORT_NO_THEMES = auto()
    EXPORT_FILE_NAME_REQUIRED = auto()

    # File system errors
    FILE_ACCESS_DENIED = auto()
    PATH_INVALID = auto()

    OPERATION_FAILED = auto()


ERROR_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.THEME_NAME_REQUIRED: "Enter a name for the theme.",
    ErrorCode.THEME_EXISTS: "A theme with this name already exists.",
    ErrorCode.THEME_NO_VARIABLES: "Add at least one variable with a name and a value.",
    ErrorCode.THEME_NOT_FOUND: "The theme was not found. It may have been deleted.",

    ErrorCode.IMPORT_INVALID_FORMAT: "Invalid JSON. Expected an object with \"name\" and \"variables\".",
    ErrorCode.IMPORT_NO_VARIABLES: "No valid variables found.",

    ErrorCode.MAPPING_REQUIRED: "Add the variable mapping.",
    ErrorCode.MAPPING_INVALID_JSON: "Invalid JSON.",
    ErrorCode.MAPPING_INVALID_FORMAT: "Invalid mapping format. Use a JSON object of names to names.",
    ErrorCode.MAPPING_NAME_REQUIRED: "Enter a name for the mapping.",
    ErrorCode.EXPORT_NO_THEMES: "Select at least one theme to export.",
    ErrorCode.EXPORT_FILE_NAME_REQUIRED: "Enter a name for the file.",

    ErrorCode.FILE_ACCESS_DENIED: "Access denied. Check folder permissions.",
    ErrorCode.PATH_INVALID: "The specified path is invalid or inaccessible.",

    ErrorCode.OPERATION_FAILED: "Operation failed. See details for more information.",
}


@dataclass(eq=False)
class ThemeVarsError(Exception):
    """Base exception for ThemeVars with error code and context."""

    code: ErrorCode
    message: str = ""
    path: Path | None = None
    details: dict[str, Any] = field(default_factory=dict)
    suggestion: str = ""

    def __post_init__(self) -> None:
        if not self.message:
            self.message = ERROR_MESSAGES.get(self.code, "An unexpected error occurred.")
        if not self.suggestion and self.code in ERROR_MESSAGES:
            self.suggestion = ERROR_MESSAGES[self.code]

    def __str__(self) -> str:
        parts = [self.message]
        if self.path:
            parts.append(f"\nFile: {self.path}")
        if self.details:
            details_str = " | ".join(f"{k}={v}" for k, v in self.details.items())
            parts.append(f"\nDetails: {details_str}")
        return "".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging or UI display."""
        return {
            "code": self.code.name,
            "message": self.message,
            "path": str(self.path) if self.path else None,
            "details": self.details,
            "suggestion": self.suggestion,
        }


def classify_exception(exc: Exception, path: Path | None = None) -> ThemeVarsError:
    """Classify a generic exception into a ThemeVarsError with appropriate code."""
    if isinstance(exc, ThemeVarsError):
        return exc
    exc_name = type(exc).__name__
    exc_str = str(exc).lower()

    if isinstance(exc, json.JSONDecodeError):
        return ThemeVarsError(ErrorCode.MAPPING_INVALID_JSON, details={"original": exc_str})
    if isinstance(exc, PermissionError) or "permission denied" in exc_str:
        return ThemeVarsError(ErrorCode.FILE_ACCESS_DENIED, path=path, details={"original": exc_str})
    if isinstance(exc, (FileNotFoundError, NotADirectoryError, IsADirectoryError)):
        return ThemeVarsError(ErrorCode.PATH_INVALID, path=path, details={"original": exc_str})

    return ThemeVarsError(
        ErrorCode.OPERATION_FAILED,
        message=f"{exc_name}: {exc}",
        path=path,
        details={"original": exc_str},
    )


def format_error_for_user(error: ThemeVarsError | Exception) -> str:
    """Format an error for display to the user with actionable suggestions."""
    if isinstance(error, ThemeVarsError):
        parts = [error.message]
        if error.suggestion and error.suggestion != error.message:
            parts.append(f"\n\n{error.suggestion}")
        if error.path:
            parts.append(f"\n\nFile: {error.path.name}")
        return "".join(parts)

    classified = classify_exception(error)
    return format_error_for_user(classified)
