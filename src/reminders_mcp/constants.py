"""Constants for MCP Server for macOS reminders."""

import os

# Timeouts
REQUEST_TIMEOUT: float = float(os.environ.get("REQUEST_TIMEOUT", "60.0"))

# AppleScript interpreter
OSASCRIPT_PATH: str = os.environ.get("OSASCRIPT_PATH", "osascript")
SCRIPT_SUFFIX: str = ".applescript"

# Lists scanned, in order, when search_reminders is called without a list
DEFAULT_SEARCH_LISTS: tuple[str, ...] = tuple(
    name.strip()
    for name in os.environ.get("REMINDERS_SEARCH_LISTS", "Reminders").split(",")
    if name.strip()
)

# Delimiter between fields of one reminder line in script output
FIELD_SEPARATOR: str = "|||"
# Delimiter AppleScript uses when coercing a list of names to text
LIST_SEPARATOR: str = ", "
MISSING_VALUE: str = "missing value"
