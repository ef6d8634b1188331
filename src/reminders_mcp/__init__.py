"""MCP Server for macOS Reminders."""

from .exceptions import (
    AccessDeniedError,
    AppleScriptError,
    AppNotFoundError,
    ErrorCode,
    InvalidDateFormatError,
    InvalidParameterError,
    ListNotFoundError,
    ReminderNotFoundError,
    RemindersError,
)
from .executor import OsaScriptExecutor, ScriptExecutor
from .models import (
    CreateReminderResult,
    OperationError,
    OperationResult,
    Priority,
    Reminder,
    ReminderList,
)
from .server import main, mcp
from .service import ReminderService

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "main",
    "mcp",
    # Service
    "ReminderService",
    # Executor
    "ScriptExecutor",
    "OsaScriptExecutor",
    # Models
    "Priority",
    "ReminderList",
    "Reminder",
    "OperationError",
    "OperationResult",
    "CreateReminderResult",
    # Exceptions
    "ErrorCode",
    "RemindersError",
    "AppNotFoundError",
    "AccessDeniedError",
    "ListNotFoundError",
    "ReminderNotFoundError",
    "InvalidDateFormatError",
    "AppleScriptError",
    "InvalidParameterError",
]
