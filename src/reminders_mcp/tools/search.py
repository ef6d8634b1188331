"""MCP tools for searching reminders."""

from typing import Any

from ..exceptions import RemindersError
from ..models import OperationResult
from ..service import ReminderService


async def search_reminders(
    query: str,
    list_name: str | None = None,
    completed: bool | None = None,
) -> dict[str, Any]:
    """Search reminders by name.

    Finds reminders whose name contains the query string (case-sensitive).

    Args:
        query: The text to search for in reminder names.
        list_name: Limit search to a specific list (optional). Without it,
            the server's configured search lists are scanned one by one and
            lists that fail are skipped.
        completed: Accepted for compatibility; completion state is not
            available in search results.

    Returns:
        Matching reminders. Only name and list_name are meaningful; ids are
        regenerated on every call.
    """
    service = ReminderService.get_instance()
    try:
        reminders = await service.search_reminders(query, list_name, completed)
    except RemindersError as e:
        return OperationResult.failed(e).model_dump(mode="json", exclude_none=True)
    return {"reminders": [r.model_dump(mode="json") for r in reminders]}


__all__ = ["search_reminders"]
