"""Pytest configuration and fixtures for MCP Server for macOS reminders tests."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from reminders_mcp.service import ReminderService  # noqa: E402

SEARCH_LISTS = ("Work", "Family", "Shopping")


class FakeScriptExecutor:
    """In-memory ScriptExecutor that records scripts and replays outputs."""

    def __init__(self) -> None:
        self.scripts: list[str] = []
        self.default_response = ""
        self.responses: dict[str, str] = {}
        self.errors: dict[str, Exception] = {}
        self.error_to_raise: Exception | None = None

    @property
    def last_script(self) -> str | None:
        return self.scripts[-1] if self.scripts else None

    def respond_when(self, fragment: str, output: str) -> None:
        """Return output for scripts containing fragment."""
        self.responses[fragment] = output

    def fail_when(self, fragment: str, error: Exception) -> None:
        """Raise error for scripts containing fragment."""
        self.errors[fragment] = error

    async def execute(self, script: str) -> str:
        self.scripts.append(script)

        if self.error_to_raise is not None:
            raise self.error_to_raise
        for fragment, error in self.errors.items():
            if fragment in script:
                raise error
        for fragment, output in self.responses.items():
            if fragment in script:
                return output
        return self.default_response


@pytest.fixture
def executor() -> FakeScriptExecutor:
    """Provide a fresh recording executor."""
    return FakeScriptExecutor()


@pytest.fixture
def service(executor: FakeScriptExecutor) -> ReminderService:
    """Provide a ReminderService wired to the fake executor."""
    return ReminderService(executor, search_lists=SEARCH_LISTS)


@pytest.fixture
def installed_service(service: ReminderService):
    """Install the fake-backed service as the process-wide instance."""
    ReminderService.set_instance(service)
    yield service
    ReminderService.set_instance(None)
