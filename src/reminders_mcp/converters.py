"""Converter functions for AppleScript text <-> Python types."""

import math
import re
import uuid
from datetime import datetime, timezone

from .constants import FIELD_SEPARATOR, LIST_SEPARATOR, MISSING_VALUE
from .models import Priority, Reminder, ReminderList

ISO_8601_PATTERN = re.compile(
    r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(\.\d{3})?(Z|[+-]\d{2}:\d{2})$"
)

# Formats produced when AppleScript coerces a date to text (en_US and en_GB)
APPLESCRIPT_DATE_FORMATS = (
    "%A, %B %d, %Y at %I:%M:%S %p",
    "%A, %d %B %Y at %H:%M:%S",
    "%B %d, %Y at %I:%M:%S %p",
    "%A, %B %d, %Y %I:%M:%S %p",
)


# Date/Time Conversions


def is_valid_iso_date(value: str) -> bool:
    """Check for strict ISO 8601 with a time and zone designator."""
    if not ISO_8601_PATTERN.match(value):
        return False
    try:
        parse_iso_date(value)
    except ValueError:
        return False
    return True


def parse_iso_date(value: str) -> datetime:
    """Parse an ISO 8601 string into an aware datetime."""
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    return datetime.fromisoformat(value)


def datetime_to_iso(dt: datetime) -> str:
    """Format as UTC ISO 8601 with milliseconds, e.g. 2025-07-27T15:00:00.000Z.

    Naive datetimes are interpreted in the host's local time zone, which is
    what AppleScript date text is expressed in.
    """
    dt = dt.astimezone(timezone.utc)
    return dt.strftime("%Y-%m-%dT%H:%M:%S.") + f"{dt.microsecond // 1000:03d}Z"


def seconds_until(target: str, now: datetime | None = None) -> int:
    """Whole seconds from now until an ISO 8601 instant (negative if past)."""
    if now is None:
        now = datetime.now(timezone.utc)
    return math.floor((parse_iso_date(target) - now).total_seconds())


def applescript_date_to_iso(value: str) -> str:
    """Normalize an AppleScript date string to ISO 8601.

    Returns an empty string for empty or ``missing value`` input, and the
    original text when no known date format matches.
    """
    value = value.strip()
    if not value or value == MISSING_VALUE:
        return ""

    if ISO_8601_PATTERN.match(value):
        try:
            return datetime_to_iso(parse_iso_date(value))
        except ValueError:
            return value

    # Narrow no-break spaces appear before AM/PM on recent macOS releases
    normalized = value.replace("\u202f", " ").replace("\xa0", " ")
    for fmt in APPLESCRIPT_DATE_FORMATS:
        try:
            return datetime_to_iso(datetime.strptime(normalized, fmt))
        except ValueError:
            continue
    return value


def _optional_date(value: str) -> str | None:
    return applescript_date_to_iso(value) or None


# Priority Conversions


def parse_priority(value: str) -> Priority:
    """Map AppleScript priority text (e.g. "5") to a Priority."""
    try:
        return Priority.from_applescript(int(value.strip()))
    except ValueError:
        return Priority.NONE


# Output -> model conversion


def new_reminder_id() -> str:
    """Generate a synthetic reminder id. Never stable across reads."""
    return f"reminder-{uuid.uuid4().hex}"


def parse_list_output(output: str) -> list[ReminderList]:
    """Parse ``name of every list`` output into ReminderList models.

    Ids are positional (``list-0``, ``list-1``...), so parsing the same
    output twice yields equal results.
    """
    if not output.strip():
        return []

    names = [name.strip() for name in output.split(LIST_SEPARATOR)]
    return [
        ReminderList(name=name, id=f"list-{index}")
        for index, name in enumerate(name for name in names if name)
    ]


def parse_reminder_output(
    output: str,
    list_name: str,
    completed: bool | None = None,
) -> list[Reminder]:
    """Parse ``name|||due|||alert|||priority|||creation`` lines.

    Args:
        output: Raw script output, one reminder per line
        list_name: List the reminders were read from
        completed: Completion filter the script applied, if any. The script
            does not emit the flag, so the filter value is trusted.

    Returns:
        List of Reminder models
    """
    if not output.strip():
        return []

    reminders = []
    for line in output.splitlines():
        if not line.strip():
            continue
        fields = line.split(FIELD_SEPARATOR)
        fields += [""] * (5 - len(fields))
        name, due_date, alert_date, priority, creation_date = fields[:5]

        reminders.append(
            Reminder(
                name=name,
                id=new_reminder_id(),
                completed=completed if completed is not None else False,
                notes=None,
                due_date=_optional_date(due_date),
                alert_date=_optional_date(alert_date),
                creation_date=applescript_date_to_iso(creation_date),
                priority=parse_priority(priority),
                list_name=list_name,
            )
        )
    return reminders


def parse_name_output(output: str) -> list[str]:
    """Split ``name of every reminder`` output, dropping blank names."""
    return [name for name in output.split(LIST_SEPARATOR) if name.strip()]
