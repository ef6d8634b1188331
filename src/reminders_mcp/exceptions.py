"""Exceptions for MCP Server for macOS reminders."""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Fixed taxonomy of failures surfaced to clients."""

    REMINDERS_APP_NOT_FOUND = "REMINDERS_APP_NOT_FOUND"
    PERMISSION_DENIED = "PERMISSION_DENIED"
    LIST_NOT_FOUND = "LIST_NOT_FOUND"
    REMINDER_NOT_FOUND = "REMINDER_NOT_FOUND"
    INVALID_DATE_FORMAT = "INVALID_DATE_FORMAT"
    APPLESCRIPT_ERROR = "APPLESCRIPT_ERROR"
    INVALID_PARAMETER = "INVALID_PARAMETER"


class RemindersError(Exception):
    """Base exception for Reminders MCP operations.

    Attributes:
        code: Classified error kind
        message: Human-readable error description
    """

    code: ErrorCode = ErrorCode.APPLESCRIPT_ERROR
    default_message = "AppleScript execution failed"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> dict[str, Any]:
        """Render as the error descriptor used in tool payloads."""
        return {"code": self.code.value, "message": self.message}

    @classmethod
    def from_code(cls, code: ErrorCode, message: str | None = None) -> "RemindersError":
        """Create the exception subclass matching an error code."""
        for subclass in _ERROR_CLASSES:
            if subclass.code is code:
                return subclass(message)
        return AppleScriptError(message)


class AppNotFoundError(RemindersError):
    """Reminders app (or the osascript interpreter) is unavailable."""

    code = ErrorCode.REMINDERS_APP_NOT_FOUND
    default_message = "Reminders application is not available."


class AccessDeniedError(RemindersError):
    """User hasn't granted automation access to Reminders.

    To fix: Open System Settings > Privacy & Security > Automation
    and allow the calling application to control Reminders.
    """

    code = ErrorCode.PERMISSION_DENIED
    default_message = (
        "Reminders access denied. Please grant access in "
        "System Settings > Privacy & Security > Automation."
    )


class ListNotFoundError(RemindersError):
    """Reminder list not found."""

    code = ErrorCode.LIST_NOT_FOUND
    default_message = "List not found"


class ReminderNotFoundError(RemindersError):
    """Reminder not found."""

    code = ErrorCode.REMINDER_NOT_FOUND
    default_message = "Reminder not found"


class InvalidDateFormatError(RemindersError):
    """Date string is not strict ISO 8601."""

    code = ErrorCode.INVALID_DATE_FORMAT
    default_message = "Invalid date format. Use ISO 8601 format."


class AppleScriptError(RemindersError):
    """General AppleScript execution error."""

    code = ErrorCode.APPLESCRIPT_ERROR


class InvalidParameterError(RemindersError):
    """A parameter failed validation before any script was built."""

    code = ErrorCode.INVALID_PARAMETER
    default_message = "Invalid parameter"


_ERROR_CLASSES: tuple[type[RemindersError], ...] = (
    AppNotFoundError,
    AccessDeniedError,
    ListNotFoundError,
    ReminderNotFoundError,
    InvalidDateFormatError,
    AppleScriptError,
    InvalidParameterError,
)
