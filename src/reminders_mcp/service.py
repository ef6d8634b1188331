"""Reminder operations on top of AppleScript.

This module provides ReminderService, which validates parameters, builds
AppleScript, runs it through a ScriptExecutor and parses the output.

Error handling differs by operation type:
- Parameter validation always raises.
- Reads (list_lists, list_reminders, scoped search) raise on failure.
- Writes (create, complete, delete) return a failed result instead.
- Unscoped search skips lists that fail and keeps going.
"""

import logging
import threading
from collections.abc import Sequence
from datetime import datetime, timezone

from . import scripts
from .constants import DEFAULT_SEARCH_LISTS
from .converters import (
    datetime_to_iso,
    is_valid_iso_date,
    new_reminder_id,
    parse_iso_date,
    parse_list_output,
    parse_name_output,
    parse_reminder_output,
    seconds_until,
)
from .exceptions import InvalidDateFormatError, InvalidParameterError
from .executor import OsaScriptExecutor, ScriptExecutor
from .models import (
    CreateReminderResult,
    OperationResult,
    Priority,
    Reminder,
    ReminderList,
)

logger = logging.getLogger(__name__)

EARLY_ALERT_WARNING = (
    "Early alerts (an alert before the due date) are not reliably supported "
    "through AppleScript; the alert may fire at the due time instead. "
    "Set early alerts directly in the Reminders app."
)


def _require_text(value: str | None, message: str) -> None:
    if not value or not value.strip():
        raise InvalidParameterError(message)


def _validate_date(value: str | None, field: str) -> None:
    if value and not is_valid_iso_date(value):
        raise InvalidDateFormatError(
            f"Invalid {field} format. Use ISO 8601 format "
            "(e.g., 2025-07-27T15:00:00Z)."
        )


def _validate_priority(value: Priority | str | None) -> Priority | None:
    if value is None:
        return None
    try:
        return Priority(value)
    except ValueError:
        raise InvalidParameterError(
            "Invalid priority. Must be one of: none, low, medium, high"
        ) from None


class ReminderService:
    """Six Reminders operations over an injected ScriptExecutor.

    Reminder and list ids in results are synthetic and regenerated on each
    read. Callers must address reminders by list name and reminder name.

    Usage:
        service = ReminderService(OsaScriptExecutor(), search_lists=["Work"])
        lists = await service.list_lists()
    """

    _instance: "ReminderService | None" = None
    _lock = threading.Lock()

    def __init__(
        self,
        executor: ScriptExecutor,
        search_lists: Sequence[str] = DEFAULT_SEARCH_LISTS,
    ) -> None:
        self.executor = executor
        self.search_lists = tuple(search_lists)

    @classmethod
    def get_instance(cls) -> "ReminderService":
        """Get or create the process-wide instance backed by osascript."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls(OsaScriptExecutor())
        return cls._instance

    @classmethod
    def set_instance(cls, instance: "ReminderService | None") -> None:
        """Replace the process-wide instance (None resets to the default)."""
        with cls._lock:
            cls._instance = instance

    # Read Operations

    async def list_lists(self) -> list[ReminderList]:
        """Get all reminder lists.

        Returns:
            Lists in the order Reminders reports them, with positional ids
        """
        output = await self.executor.execute(scripts.list_lists_script)
        return parse_list_output(output)

    async def list_reminders(
        self, list_name: str, completed: bool | None = None
    ) -> list[Reminder]:
        """Get reminders from a list.

        Args:
            list_name: Name of the list
            completed: Only completed (True), only incomplete (False), or all

        Raises:
            InvalidParameterError: If list_name is empty
            RemindersError: If the script fails
        """
        _require_text(list_name, "List name cannot be empty")

        script = scripts.list_reminders_script(list_name, completed)
        output = await self.executor.execute(script)
        return parse_reminder_output(output, list_name, completed)

    # Write Operations

    async def create_reminder(
        self,
        list_name: str,
        name: str,
        notes: str | None = None,
        due_date: str | None = None,
        alert_date: str | None = None,
        priority: Priority | str | None = None,
    ) -> CreateReminderResult:
        """Create a new reminder.

        Args:
            list_name: Target list
            name: Reminder title
            notes: Optional notes
            due_date: Optional ISO 8601 due date
            alert_date: Optional ISO 8601 alert date
            priority: Optional priority (none, low, medium, high)

        Returns:
            Result with the new reminder's id, or the error if the script failed

        Raises:
            InvalidParameterError: If names are empty or priority is unknown
            InvalidDateFormatError: If a date isn't strict ISO 8601
        """
        _require_text(list_name, "List name cannot be empty")
        _require_text(name, "Reminder name cannot be empty")
        _validate_date(due_date, "due_date")
        _validate_date(alert_date, "alert_date")
        level = _validate_priority(priority)

        try:
            now = datetime.now(timezone.utc)
            script = scripts.create_reminder_script(
                list_name,
                name,
                notes=notes,
                due_seconds=seconds_until(due_date, now) if due_date else None,
                alert_seconds=seconds_until(alert_date, now) if alert_date else None,
                priority=level,
            )
            reminder_id = await self.executor.execute(script)
        except Exception as e:
            logger.warning(f"Failed to create reminder {name!r} in {list_name!r}: {e}")
            return CreateReminderResult.failed(e)

        warning = None
        if due_date and alert_date:
            if parse_iso_date(alert_date) < parse_iso_date(due_date):
                warning = EARLY_ALERT_WARNING

        return CreateReminderResult(
            success=True,
            reminder_id=reminder_id.strip(),
            warning=warning,
        )

    async def complete_reminder(
        self, list_name: str, reminder_name: str
    ) -> OperationResult:
        """Mark the first reminder named reminder_name as completed."""
        _require_text(list_name, "List name cannot be empty")
        _require_text(reminder_name, "Reminder name cannot be empty")

        script = scripts.complete_reminder_script(list_name, reminder_name)
        return await self._run_write(script)

    async def delete_reminder(
        self, list_name: str, reminder_name: str
    ) -> OperationResult:
        """Delete the first reminder named reminder_name."""
        _require_text(list_name, "List name cannot be empty")
        _require_text(reminder_name, "Reminder name cannot be empty")

        script = scripts.delete_reminder_script(list_name, reminder_name)
        return await self._run_write(script)

    # Search

    async def search_reminders(
        self,
        query: str,
        list_name: str | None = None,
        completed: bool | None = None,
    ) -> list[Reminder]:
        """Search reminders whose name contains query (case-sensitive).

        With list_name, only that list is searched and failures raise.
        Without it, the configured search lists are scanned one at a time;
        a list that fails is logged and skipped.

        Only names are fetched, so results carry no notes or dates,
        completed is always False and creation_date is the search time.
        The completed argument is accepted but cannot be applied.
        """
        _require_text(query, "Search query cannot be empty")

        if list_name is not None:
            _require_text(list_name, "List name cannot be empty")
            return await self._search_in_list(query, list_name)

        matches: list[Reminder] = []
        for name in self.search_lists:
            try:
                matches.extend(await self._search_in_list(query, name))
            except Exception as e:
                logger.warning(f"Skipping list {name!r} during search: {e}")
        return matches

    # Private Helpers

    async def _run_write(self, script: str) -> OperationResult:
        try:
            await self.executor.execute(script)
        except Exception as e:
            logger.warning(f"Reminder update failed: {e}")
            return OperationResult.failed(e)
        return OperationResult(success=True)

    async def _search_in_list(self, query: str, list_name: str) -> list[Reminder]:
        output = await self.executor.execute(scripts.reminder_names_script(list_name))
        searched_at = datetime_to_iso(datetime.now(timezone.utc))

        return [
            Reminder(
                name=name.strip(),
                id=new_reminder_id(),
                completed=False,
                creation_date=searched_at,
                list_name=list_name,
            )
            for name in parse_name_output(output)
            if query in name
        ]
