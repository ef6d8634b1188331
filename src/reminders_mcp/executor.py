"""osascript wrapper for Reminders access.

This module provides the ScriptExecutor capability used by ReminderService
and its production implementation, which runs AppleScript through osascript
with serialized, non-blocking access.
"""

import logging
import os
import tempfile
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Protocol

import anyio

from .constants import OSASCRIPT_PATH, REQUEST_TIMEOUT, SCRIPT_SUFFIX
from .exceptions import (
    AppleScriptError,
    AppNotFoundError,
    ErrorCode,
    InvalidParameterError,
    RemindersError,
)

logger = logging.getLogger(__name__)

PERMISSION_PHRASES = ("permission denied", "not authorized", "not allowed")
APP_NOT_RUNNING_PHRASES = (
    'application "reminders" is not running',
    "application isn't running",
)


class ScriptExecutor(Protocol):
    """Anything that can run AppleScript source and return its output."""

    async def execute(self, script: str) -> str: ...


def classify_error(stderr: str) -> ErrorCode:
    """Map osascript diagnostic text to an error code.

    Checks are case-insensitive and applied in priority order: permission,
    app not running, missing list, missing reminder, then the catch-all.
    """
    text = stderr.lower()

    if any(phrase in text for phrase in PERMISSION_PHRASES):
        return ErrorCode.PERMISSION_DENIED

    if any(phrase in text for phrase in APP_NOT_RUNNING_PHRASES):
        return ErrorCode.REMINDERS_APP_NOT_FOUND

    if "list" in text and "doesn't exist" in text:
        return ErrorCode.LIST_NOT_FOUND

    if "reminder" in text and "doesn't exist" in text:
        return ErrorCode.REMINDER_NOT_FOUND

    return ErrorCode.APPLESCRIPT_ERROR


@contextmanager
def script_file(script: str) -> Iterator[str]:
    """Write a script to a temporary UTF-8 file and remove it on exit."""
    fd, path = tempfile.mkstemp(prefix="reminders-", suffix=SCRIPT_SUFFIX)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(script)
        yield path
    finally:
        try:
            os.unlink(path)
        except FileNotFoundError:
            pass


class OsaScriptExecutor:
    """Runs AppleScript through osascript, one process at a time.

    Each call writes the script to its own temporary file so non-ASCII text
    reaches osascript intact and no shell quoting is involved. Calls are
    serialized with a CapacityLimiter(1); there are no retries.

    Usage:
        executor = OsaScriptExecutor()
        output = await executor.execute('tell application "Reminders" to ...')
    """

    def __init__(
        self,
        osascript_path: str = OSASCRIPT_PATH,
        timeout: float | None = REQUEST_TIMEOUT,
    ) -> None:
        self.osascript_path = osascript_path
        self.timeout = timeout
        self._limiter: anyio.CapacityLimiter | None = None

    def _get_limiter(self) -> anyio.CapacityLimiter:
        """Get the capacity limiter, creating if needed."""
        if self._limiter is None:
            self._limiter = anyio.CapacityLimiter(1)
        return self._limiter

    async def execute(self, script: str) -> str:
        """Execute AppleScript source.

        Args:
            script: AppleScript to execute

        Returns:
            Trimmed standard output

        Raises:
            InvalidParameterError: If the script is empty
            AppNotFoundError: If osascript is missing or Reminders isn't running
            RemindersError: Classified failure reported by osascript
        """
        if not script or not script.strip():
            raise InvalidParameterError("Script cannot be empty")

        async with self._get_limiter():
            try:
                with script_file(script) as path:
                    return await self._run(path)
            except RemindersError:
                # Already classified
                raise
            except TimeoutError as e:
                raise AppleScriptError(
                    f"AppleScript timed out after {self.timeout} seconds"
                ) from e
            except OSError as e:
                raise AppleScriptError(f"Failed to execute AppleScript: {e}") from e

    async def _run(self, path: str) -> str:
        try:
            with anyio.fail_after(self.timeout):
                result = await anyio.run_process(
                    [self.osascript_path, path],
                    check=False,
                )
        except FileNotFoundError as e:
            raise AppNotFoundError(
                "osascript command not found. This requires macOS."
            ) from e

        stdout = result.stdout.decode("utf-8", errors="replace")
        stderr = result.stderr.decode("utf-8", errors="replace").strip()

        if result.returncode != 0 or stderr:
            code = classify_error(stderr)
            logger.debug(
                "osascript failed (rc=%s, code=%s): %s",
                result.returncode,
                code.value,
                stderr,
            )
            raise RemindersError.from_code(
                code, f"AppleScript error: {stderr or 'exit status ' + str(result.returncode)}"
            )

        return stdout.strip()
