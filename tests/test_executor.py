"""Unit tests for the osascript executor."""

import os
import subprocess
import tempfile
from pathlib import Path

import anyio
import pytest

from reminders_mcp.exceptions import (
    AccessDeniedError,
    AppleScriptError,
    AppNotFoundError,
    ErrorCode,
    InvalidParameterError,
    ListNotFoundError,
    ReminderNotFoundError,
)
from reminders_mcp.executor import OsaScriptExecutor, classify_error, script_file


class FakeProcessRunner:
    """Stands in for anyio.run_process and captures the script file."""

    def __init__(
        self,
        stdout: str = "",
        stderr: str = "",
        returncode: int = 0,
        error: BaseException | None = None,
        delay: float = 0,
    ) -> None:
        self.stdout = stdout
        self.stderr = stderr
        self.returncode = returncode
        self.error = error
        self.delay = delay
        self.commands: list[list[str]] = []
        self.script_paths: list[str] = []
        self.script_texts: list[str] = []

    async def __call__(self, command, check=True, **kwargs):
        self.commands.append(list(command))
        path = command[-1]
        self.script_paths.append(path)
        self.script_texts.append(Path(path).read_text(encoding="utf-8"))
        if self.delay:
            await anyio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return subprocess.CompletedProcess(
            command,
            self.returncode,
            stdout=self.stdout.encode("utf-8"),
            stderr=self.stderr.encode("utf-8"),
        )


@pytest.fixture
def runner(monkeypatch) -> FakeProcessRunner:
    fake = FakeProcessRunner()
    monkeypatch.setattr(anyio, "run_process", fake)
    return fake


@pytest.fixture
def osa() -> OsaScriptExecutor:
    return OsaScriptExecutor(osascript_path="osascript", timeout=5)


# Input validation


@pytest.mark.parametrize("script", ["", "   \n\t  "])
async def test_rejects_empty_script(osa, runner, script):
    with pytest.raises(InvalidParameterError, match="Script cannot be empty") as exc_info:
        await osa.execute(script)

    assert exc_info.value.code is ErrorCode.INVALID_PARAMETER
    assert runner.commands == []


# Successful execution


async def test_returns_trimmed_stdout(osa, runner):
    runner.stdout = "  仕事, Family\n"

    output = await osa.execute('tell application "Reminders" to get name of every list')

    assert output == "仕事, Family"


async def test_script_delivered_through_utf8_file(osa, runner):
    script = 'tell application "Reminders"\n  set x to "買うもの \'quoted\'"\nend tell'

    await osa.execute(script)

    assert runner.commands[0][0] == "osascript"
    assert runner.commands[0][1].endswith(".applescript")
    assert runner.script_texts == [script]


async def test_each_call_uses_unique_file(osa, runner):
    await osa.execute("return 1")
    await osa.execute("return 2")

    assert runner.script_paths[0] != runner.script_paths[1]


# Temporary file cleanup


async def test_script_file_removed_after_success(osa, runner):
    await osa.execute("return 1")

    assert not os.path.exists(runner.script_paths[0])


async def test_script_file_removed_after_script_error(osa, runner):
    runner.returncode = 1
    runner.stderr = "execution error: something broke (-2700)"

    with pytest.raises(AppleScriptError):
        await osa.execute("return 1")

    assert not os.path.exists(runner.script_paths[0])


async def test_script_file_removed_after_crash(osa, runner):
    runner.error = RuntimeError("interpreter crashed")

    with pytest.raises(RuntimeError):
        await osa.execute("return 1")

    assert not os.path.exists(runner.script_paths[0])


def test_script_file_context_manager_cleans_up():
    with pytest.raises(ValueError):
        with script_file("return 1") as path:
            assert Path(path).read_text(encoding="utf-8") == "return 1"
            raise ValueError("boom")

    assert not os.path.exists(path)


# Failure classification


@pytest.mark.parametrize(
    "stderr, expected",
    [
        ("execution error: Not authorized to send Apple events to Reminders. (-1743)",
         AccessDeniedError),
        ("Permission denied", AccessDeniedError),
        ('execution error: Application "Reminders" is not running. (-600)',
         AppNotFoundError),
        ("execution error: The list doesn't exist. (-1728)", ListNotFoundError),
        ("execution error: The reminder doesn't exist. (-1728)", ReminderNotFoundError),
        ("syntax error: Expected end of line. (-2741)", AppleScriptError),
    ],
)
async def test_failures_are_classified(osa, runner, stderr, expected):
    runner.returncode = 1
    runner.stderr = stderr

    with pytest.raises(expected) as exc_info:
        await osa.execute("return 1")

    assert stderr in exc_info.value.message


async def test_stderr_with_zero_exit_is_an_error(osa, runner):
    runner.stderr = "execution error: The reminder doesn't exist."

    with pytest.raises(ReminderNotFoundError):
        await osa.execute("return 1")


async def test_nonzero_exit_without_stderr(osa, runner):
    runner.returncode = 2

    with pytest.raises(AppleScriptError, match="exit status 2"):
        await osa.execute("return 1")


async def test_missing_interpreter(osa, runner):
    runner.error = FileNotFoundError("osascript")

    with pytest.raises(AppNotFoundError, match="requires macOS") as exc_info:
        await osa.execute("return 1")

    assert exc_info.value.code is ErrorCode.REMINDERS_APP_NOT_FOUND


async def test_missing_interpreter_binary_on_host():
    osa = OsaScriptExecutor(osascript_path="/nonexistent/bin/osascript", timeout=5)

    with pytest.raises(AppNotFoundError):
        await osa.execute("return 1")


async def test_missing_temp_dir_is_not_reported_as_missing_interpreter(
    osa, runner, monkeypatch
):
    def fail_mkstemp(*args, **kwargs):
        raise FileNotFoundError(2, "No usable temporary directory found")

    monkeypatch.setattr(tempfile, "mkstemp", fail_mkstemp)

    with pytest.raises(AppleScriptError, match="Failed to execute AppleScript"):
        await osa.execute("return 1")

    assert runner.commands == []


async def test_classified_error_is_reraised_unchanged(osa, runner):
    error = ReminderNotFoundError("already classified")
    runner.error = error

    with pytest.raises(ReminderNotFoundError) as exc_info:
        await osa.execute("return 1")

    assert exc_info.value is error


async def test_other_os_errors_become_applescript_errors(osa, runner):
    runner.error = PermissionError(13, "exec format error")

    with pytest.raises(AppleScriptError, match="Failed to execute AppleScript"):
        await osa.execute("return 1")


async def test_timeout_is_applescript_error(runner):
    osa = OsaScriptExecutor(timeout=0.05)
    runner.delay = 1

    with pytest.raises(AppleScriptError, match="timed out"):
        await osa.execute("return 1")

    assert not os.path.exists(runner.script_paths[0])


@pytest.mark.parametrize(
    "stderr, code",
    [
        ("NOT AUTHORIZED", ErrorCode.PERMISSION_DENIED),
        # permission wins over later checks
        ("not allowed: the list doesn't exist", ErrorCode.PERMISSION_DENIED),
        ('APPLICATION "REMINDERS" IS NOT RUNNING', ErrorCode.REMINDERS_APP_NOT_FOUND),
        # list wins over reminder
        ("Can't get reminder of list: list doesn't exist", ErrorCode.LIST_NOT_FOUND),
        ("Reminder doesn't exist", ErrorCode.REMINDER_NOT_FOUND),
        ("", ErrorCode.APPLESCRIPT_ERROR),
        ("some other failure", ErrorCode.APPLESCRIPT_ERROR),
    ],
)
def test_classify_error(stderr, code):
    assert classify_error(stderr) is code
