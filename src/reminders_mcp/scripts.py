"""AppleScript sources for Apple Reminders.

Scripts are delivered to osascript through a temporary file, so values only
need escaping for AppleScript string literals, not for a shell.
"""

from .constants import FIELD_SEPARATOR
from .models import Priority

#: Get the names of every reminder list, as "a, b, c".
list_lists_script = 'tell application "Reminders" to get name of every list'

_REMINDER_DETAIL_LINES = [
    "set reminderName to name of reminderItem",
    "set dueDate to due date of reminderItem",
    "set alertDate to remind me date of reminderItem",
    "set reminderPriority to priority of reminderItem",
    "set creationDate to creation date of reminderItem",
    'if dueDate is missing value then set dueDate to ""',
    'if alertDate is missing value then set alertDate to ""',
    "if reminderPriority is missing value then set reminderPriority to 0",
    f'set outputText to outputText & reminderName & "{FIELD_SEPARATOR}" & dueDate'
    f' & "{FIELD_SEPARATOR}" & alertDate & "{FIELD_SEPARATOR}" & reminderPriority'
    f' & "{FIELD_SEPARATOR}" & creationDate & "\\n"',
]


def escape_applescript_string(value: str) -> str:
    """Escape a value for interpolation inside an AppleScript string literal."""
    return value.replace("\\", "\\\\").replace('"', '\\"')


def _indent(lines: list[str], level: int) -> list[str]:
    return ["  " * level + line for line in lines]


def list_reminders_script(list_name: str, completed: bool | None = None) -> str:
    """Emit one ``name|||due|||alert|||priority|||creation`` line per reminder.

    Args:
        list_name: List to read
        completed: Only emit reminders with this completion state (all if None)
    """
    lines = [
        'tell application "Reminders"',
        f'  set reminderList to list "{escape_applescript_string(list_name)}"',
        '  set outputText to ""',
        "  repeat with reminderItem in every reminder of reminderList",
    ]
    if completed is None:
        lines += _indent(_REMINDER_DETAIL_LINES, 2)
    else:
        lines.append(
            f"    if completed of reminderItem is {'true' if completed else 'false'} then"
        )
        lines += _indent(_REMINDER_DETAIL_LINES, 3)
        lines.append("    end if")
    lines += [
        "  end repeat",
        "  return outputText",
        "end tell",
    ]
    return "\n".join(lines)


def create_reminder_script(
    list_name: str,
    name: str,
    notes: str | None = None,
    due_seconds: int | None = None,
    alert_seconds: int | None = None,
    priority: Priority | None = None,
) -> str:
    """Create a reminder and return its id.

    Dates are passed as offsets in seconds from ``current date`` on the host
    rather than as date literals, which AppleScript parses per locale.
    """
    lines = [
        'tell application "Reminders"',
        f'  set reminderList to list "{escape_applescript_string(list_name)}"',
        "  set newReminder to make new reminder at end of reminderList",
        f'  set name of newReminder to "{escape_applescript_string(name)}"',
    ]
    if notes:
        lines.append(f'  set body of newReminder to "{escape_applescript_string(notes)}"')
    if due_seconds is not None:
        lines += [
            f"  set dueDateTime to (current date) + {due_seconds}",
            "  set due date of newReminder to dueDateTime",
        ]
    if alert_seconds is not None:
        lines += [
            f"  set alertDateTime to (current date) + {alert_seconds}",
            "  set remind me date of newReminder to alertDateTime",
        ]
    if priority is not None and priority is not Priority.NONE:
        lines.append(f"  set priority of newReminder to {priority.applescript_value}")
    lines += [
        "  return id of newReminder",
        "end tell",
    ]
    return "\n".join(lines)


def _first_reminder_lines(list_name: str, reminder_name: str) -> list[str]:
    return [
        'tell application "Reminders"',
        f'  set reminderList to list "{escape_applescript_string(list_name)}"',
        "  set targetReminder to first reminder in reminderList whose name is "
        f'"{escape_applescript_string(reminder_name)}"',
    ]


def complete_reminder_script(list_name: str, reminder_name: str) -> str:
    """Mark the first reminder with exactly this name as completed."""
    lines = _first_reminder_lines(list_name, reminder_name)
    lines += [
        "  set completed of targetReminder to true",
        "end tell",
    ]
    return "\n".join(lines)


def delete_reminder_script(list_name: str, reminder_name: str) -> str:
    """Delete the first reminder with exactly this name."""
    lines = _first_reminder_lines(list_name, reminder_name)
    lines += [
        "  delete targetReminder",
        "end tell",
    ]
    return "\n".join(lines)


def reminder_names_script(list_name: str) -> str:
    """Get the names of every reminder in a list, as "a, b, c"."""
    return "\n".join(
        [
            'tell application "Reminders"',
            f'  set targetList to list "{escape_applescript_string(list_name)}"',
            "  set reminderNames to name of every reminder in targetList",
            "  return reminderNames",
            "end tell",
        ]
    )
