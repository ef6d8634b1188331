"""MCP resources for macOS Reminders.

Both resources are views built from the read operations of ReminderService.
"""

import logging
from typing import Any
from urllib.parse import unquote

from .exceptions import RemindersError
from .models import ReminderListSummary
from .service import ReminderService

logger = logging.getLogger(__name__)

LISTS_URI = "reminders://lists"
LIST_DETAIL_URI = "reminders://list/{list_name}"


async def reminder_lists_resource() -> dict[str, Any]:
    """All reminder lists with total and completed reminder counts."""
    service = ReminderService.get_instance()
    try:
        lists = await service.list_lists()
    except RemindersError as e:
        return {"error": e.to_dict()}

    summaries = []
    for lst in lists:
        summary = ReminderListSummary(name=lst.name, id=lst.id)
        try:
            summary.reminder_count = len(await service.list_reminders(lst.name))
            summary.completed_count = len(
                await service.list_reminders(lst.name, completed=True)
            )
        except RemindersError as e:
            # Counts are best-effort; report the list with zero counts
            logger.warning(f"Could not count reminders in {lst.name!r}: {e}")
            summary.reminder_count = 0
            summary.completed_count = 0
        summaries.append(summary.model_dump(mode="json"))

    return {"lists": summaries}


async def reminder_list_detail_resource(list_name: str) -> dict[str, Any]:
    """All reminders of one list, addressed as reminders://list/{list_name}."""
    name = unquote(list_name)
    service = ReminderService.get_instance()
    try:
        reminders = await service.list_reminders(name)
    except RemindersError as e:
        return {"error": e.to_dict()}

    return {
        "list": {
            "name": name,
            "id": f"list-{name}",
            "reminders": [r.model_dump(mode="json") for r in reminders],
        }
    }


__all__ = [
    "LISTS_URI",
    "LIST_DETAIL_URI",
    "reminder_lists_resource",
    "reminder_list_detail_resource",
]
