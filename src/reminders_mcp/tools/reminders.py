"""MCP tools for reading and changing reminders."""

from typing import Any

from ..exceptions import RemindersError
from ..models import OperationResult
from ..service import ReminderService


def _error(e: RemindersError) -> dict[str, Any]:
    return OperationResult.failed(e).model_dump(mode="json", exclude_none=True)


async def get_reminders(
    list_name: str,
    completed: bool | None = None,
) -> dict[str, Any]:
    """Get reminders from a specific list.

    Args:
        list_name: Name of the reminder list.
        completed: Filter by completion status (True: completed,
            False: incomplete, omitted: all).

    Returns:
        Reminders with due date, alert date, priority and creation date.
        Ids are regenerated on every call; refer to reminders by name.
    """
    service = ReminderService.get_instance()
    try:
        reminders = await service.list_reminders(list_name, completed)
    except RemindersError as e:
        return _error(e)
    return {"reminders": [r.model_dump(mode="json") for r in reminders]}


async def create_reminder(
    list_name: str,
    name: str,
    notes: str | None = None,
    due_date: str | None = None,
    alert_date: str | None = None,
    priority: str | None = None,
) -> dict[str, Any]:
    """Create a new reminder in the specified list.

    Args:
        list_name: Name of the reminder list.
        name: Name/title of the reminder.
        notes: Optional notes for the reminder.
        due_date: Optional due date in ISO 8601 format
            (e.g., 2025-07-27T15:00:00Z).
        alert_date: Optional alert date in ISO 8601 format.
        priority: Priority level (none, low, medium, high).

    Returns:
        success and reminder_id, plus a warning when an alert before the
        due date was requested. On failure, success is false and error
        holds the code and message.
    """
    service = ReminderService.get_instance()
    try:
        result = await service.create_reminder(
            list_name,
            name,
            notes=notes,
            due_date=due_date,
            alert_date=alert_date,
            priority=priority,
        )
    except RemindersError as e:
        return _error(e)
    return result.model_dump(mode="json", exclude_none=True)


async def complete_reminder(list_name: str, reminder_name: str) -> dict[str, Any]:
    """Mark a reminder as completed.

    Args:
        list_name: Name of the reminder list.
        reminder_name: Exact name of the reminder to complete. The first
            reminder with this name is used.
    """
    service = ReminderService.get_instance()
    try:
        result = await service.complete_reminder(list_name, reminder_name)
    except RemindersError as e:
        return _error(e)
    return result.model_dump(mode="json", exclude_none=True)


async def delete_reminder(list_name: str, reminder_name: str) -> dict[str, Any]:
    """Delete a reminder from the specified list.

    Args:
        list_name: Name of the reminder list.
        reminder_name: Exact name of the reminder to delete. The first
            reminder with this name is used.
    """
    service = ReminderService.get_instance()
    try:
        result = await service.delete_reminder(list_name, reminder_name)
    except RemindersError as e:
        return _error(e)
    return result.model_dump(mode="json", exclude_none=True)


__all__ = [
    "get_reminders",
    "create_reminder",
    "complete_reminder",
    "delete_reminder",
]
