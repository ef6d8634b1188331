"""FastMCP server for macOS Reminders via AppleScript."""

import argparse
import logging
import os
import shutil
import signal
import sys
from typing import Any

from fastmcp import FastMCP

from .constants import DEFAULT_SEARCH_LISTS, OSASCRIPT_PATH
from .executor import OsaScriptExecutor
from .resources import (
    LIST_DETAIL_URI,
    LISTS_URI,
    reminder_list_detail_resource,
    reminder_lists_resource,
)
from .service import ReminderService
from .tools.lists import get_reminder_lists
from .tools.reminders import (
    complete_reminder,
    create_reminder,
    delete_reminder,
    get_reminders,
)
from .tools.search import search_reminders

# Configure logging
logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "INFO"),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# Create FastMCP server instance
mcp = FastMCP(
    name="reminders-mcp",
    instructions="""
An MCP server for macOS Reminders via AppleScript (osascript).

Reads and changes reminders in the macOS Reminders app. Lists and reminders
are addressed by name; ids in results are regenerated on every call.

## Available Tools

| Tool | Purpose |
|------|---------|
| get_reminder_lists | Get all reminder lists |
| get_reminders | Get reminders from a list, optionally by completion status |
| create_reminder | Create with name, notes, due date, alert date, priority |
| complete_reminder | Mark a reminder (by exact name) as completed |
| delete_reminder | Delete a reminder (by exact name) |
| search_reminders | Search reminder names in one list or the configured lists |

## Resources

| URI | Purpose |
|-----|---------|
| reminders://lists | All lists with reminder and completed counts |
| reminders://list/{list_name} | All reminders of one list |

## Errors
Failures are returned as {"success": false, "error": {"code", "message"}}
with code one of REMINDERS_APP_NOT_FOUND, PERMISSION_DENIED, LIST_NOT_FOUND,
REMINDER_NOT_FOUND, INVALID_DATE_FORMAT, APPLESCRIPT_ERROR, INVALID_PARAMETER.

## Limitations
- Dates must be ISO 8601 with a time zone (e.g., 2025-07-27T15:00:00Z)
- Alerts earlier than the due date may not be applied; set them in the app
- Search matches names only and cannot report completion state
""",
)

# Register all MCP tools
mcp.tool(get_reminder_lists)
mcp.tool(get_reminders)
mcp.tool(create_reminder)
mcp.tool(complete_reminder)
mcp.tool(delete_reminder)
mcp.tool(search_reminders)

# Register resources
mcp.resource(LISTS_URI, mime_type="application/json")(reminder_lists_resource)
mcp.resource(LIST_DETAIL_URI, mime_type="application/json")(
    reminder_list_detail_resource
)


# Signal handling for graceful shutdown
def signal_handler(signum: int, frame: Any) -> None:
    """Handle shutdown signals."""
    logger.info(f"Received signal {signum}, shutting down...")
    sys.exit(0)


def main() -> None:
    parser = argparse.ArgumentParser(description="An MCP Server for macOS Reminders")
    parser.add_argument(
        "--search-list",
        action="append",
        dest="search_lists",
        metavar="LIST",
        help=(
            "List scanned by search_reminders when no list is given "
            "(repeatable, defaults to REMINDERS_SEARCH_LISTS)"
        ),
    )
    args = parser.parse_args()

    # Fail fast instead of on the first tool call
    if shutil.which(OSASCRIPT_PATH) is None:
        logger.error(f"{OSASCRIPT_PATH} not found. This server requires macOS.")
        sys.exit(1)

    search_lists = args.search_lists or list(DEFAULT_SEARCH_LISTS)
    logger.info(f"Searching lists: {', '.join(search_lists)}")
    ReminderService.set_instance(
        ReminderService(OsaScriptExecutor(), search_lists=search_lists)
    )

    signal.signal(signal.SIGINT, signal_handler)
    signal.signal(signal.SIGTERM, signal_handler)

    mcp.run()


if __name__ == "__main__":
    main()
