"""MCP tools for macOS Reminders."""

from .lists import get_reminder_lists
from .reminders import (
    complete_reminder,
    create_reminder,
    delete_reminder,
    get_reminders,
)
from .search import search_reminders

__all__ = [
    # Lists
    "get_reminder_lists",
    # Reminders
    "get_reminders",
    "create_reminder",
    "complete_reminder",
    "delete_reminder",
    # Search
    "search_reminders",
]
