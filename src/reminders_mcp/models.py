"""Pydantic models for Reminders MCP server."""

from enum import Enum

from pydantic import BaseModel, Field

from .exceptions import ErrorCode, RemindersError


class Priority(str, Enum):
    """Reminder priority levels.

    AppleScript exposes priority as an integer matching the Reminders app UI:
    - NONE (0): No priority flag
    - HIGH (1): !!! in UI
    - MEDIUM (5): !! in UI
    - LOW (9): ! in UI
    """

    NONE = "none"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @property
    def applescript_value(self) -> int:
        """Integer used by the Reminders scripting dictionary."""
        return _PRIORITY_TO_APPLESCRIPT[self]

    @classmethod
    def from_applescript(cls, value: int) -> "Priority":
        """Map an AppleScript priority integer; unknown values become NONE."""
        return _APPLESCRIPT_TO_PRIORITY.get(value, cls.NONE)


_PRIORITY_TO_APPLESCRIPT = {
    Priority.NONE: 0,
    Priority.HIGH: 1,
    Priority.MEDIUM: 5,
    Priority.LOW: 9,
}
_APPLESCRIPT_TO_PRIORITY = {
    value: priority for priority, value in _PRIORITY_TO_APPLESCRIPT.items() if value
}


class ReminderList(BaseModel):
    """A Reminders list.

    The id is positional (``list-<index>``) because AppleScript does not
    expose list identifiers cheaply. It is not stable across calls.
    """

    name: str = Field(description="Display name of the list")
    id: str = Field(description="Synthetic identifier, not stable across calls")


class Reminder(BaseModel):
    """A reminder item, rebuilt from script output on every read."""

    name: str = Field(description="Title/name of the reminder")
    id: str = Field(
        description="Synthetic identifier regenerated on every read; never reuse it"
    )
    completed: bool = Field(default=False, description="Whether the reminder is done")
    notes: str | None = Field(default=None, description="Additional notes/description")
    due_date: str | None = Field(default=None, description="Due date (ISO 8601)")
    alert_date: str | None = Field(default=None, description="Alert date (ISO 8601)")
    creation_date: str = Field(description="When the reminder was created (ISO 8601)")
    priority: Priority = Field(default=Priority.NONE, description="Priority level")
    list_name: str = Field(description="Name of the list the reminder was read from")


class ReminderListSummary(BaseModel):
    """A list with reminder counts, used by the lists resource."""

    name: str
    id: str
    reminder_count: int = 0
    completed_count: int = 0


class OperationError(BaseModel):
    """Error descriptor carried by a failed write operation."""

    code: ErrorCode = Field(description="Classified error kind")
    message: str = Field(description="Human-readable error description")

    @classmethod
    def from_exception(cls, error: Exception) -> "OperationError":
        """Build from any exception, defaulting to APPLESCRIPT_ERROR."""
        if isinstance(error, RemindersError):
            return cls(code=error.code, message=error.message)
        return cls(code=ErrorCode.APPLESCRIPT_ERROR, message=str(error) or "Unknown error")


class OperationResult(BaseModel):
    """Result of a write operation. Failures are reported, not raised."""

    success: bool = Field(description="Whether the operation succeeded")
    error: OperationError | None = Field(
        default=None, description="Error details when success is false"
    )

    @classmethod
    def failed(cls, error: Exception) -> "OperationResult":
        return cls(success=False, error=OperationError.from_exception(error))


class CreateReminderResult(OperationResult):
    """Result of creating a reminder."""

    reminder_id: str | None = Field(
        default=None, description="Identifier returned by the Reminders app"
    )
    warning: str | None = Field(
        default=None, description="Non-fatal note about how the reminder was created"
    )
