"""MCP tools for reminder lists."""

from typing import Any

from ..exceptions import RemindersError
from ..models import OperationResult
from ..service import ReminderService


async def get_reminder_lists() -> dict[str, Any]:
    """Get all reminder lists.

    Returns every list in the user's Reminders app, in the order the app
    reports them. List ids are positional and may change between calls;
    refer to lists by name.
    """
    service = ReminderService.get_instance()
    try:
        lists = await service.list_lists()
    except RemindersError as e:
        return OperationResult.failed(e).model_dump(mode="json", exclude_none=True)
    # Wrap in dict to ensure FastMCP always returns a TextContent
    # (empty lists cause "No result received" in Claude Desktop)
    return {"lists": [lst.model_dump(mode="json") for lst in lists]}


__all__ = ["get_reminder_lists"]
