"""Tests for lock content and status models."""

from pathlib import Path

import pytest
from pydantic import TypeAdapter, ValidationError

from agentctl.models import (
    AgentState,
    AgentStatus,
    LockContent,
    LockMessage,
    LockState,
    PidMarker,
    parse_lock_content,
)


@pytest.mark.unit
class TestParseLockContent:
    """Tests for parse_lock_content."""

    def test_bare_pid(self) -> None:
        """A first line of digits is a PID marker."""
        assert parse_lock_content("1234\n") == PidMarker(pid=1234)

    def test_pid_with_trailing_lines(self) -> None:
        """Only the first line decides the variant."""
        assert parse_lock_content("1234\nextra\n") == PidMarker(pid=1234)

    def test_free_text(self) -> None:
        """Anything else is a message, trailing newline stripped."""
        content = parse_lock_content("Migrating database\n")
        assert content == LockMessage(text="Migrating database")

    def test_text_starting_with_digits(self) -> None:
        """Digits followed by text are a message."""
        assert isinstance(parse_lock_content("1234 reasons\n"), LockMessage)

    def test_empty_file(self) -> None:
        """An empty lock file is an empty message."""
        content = parse_lock_content("")
        assert isinstance(content, LockMessage)
        assert content.is_empty

    def test_zero_is_not_a_pid(self) -> None:
        """PID 0 is not a process, so it is treated as text."""
        assert isinstance(parse_lock_content("0\n"), LockMessage)

    def test_pid_with_surrounding_whitespace(self) -> None:
        """Whitespace around a bare PID is ignored."""
        assert parse_lock_content("  1234 \t\n") == PidMarker(pid=1234)

    def test_oversized_pid_is_still_a_pid(self) -> None:
        """Digits beyond any real PID still mark a (stale) PID lock."""
        assert parse_lock_content("99999999999999999999\n") == PidMarker(pid=99999999999999999999)

    def test_first_line_digits_then_message(self) -> None:
        """A digit-only first line wins over text that follows."""
        assert parse_lock_content("77\nrun in progress\n") == PidMarker(pid=77)

    def test_multiline_message_kept(self) -> None:
        """Multi-line messages survive parsing."""
        content = parse_lock_content("line one\nline two\n")
        assert isinstance(content, LockMessage)
        assert content.text == "line one\nline two"


@pytest.mark.unit
class TestRender:
    """Tests for rendering lock content back to file text."""

    def test_message_render(self) -> None:
        assert LockMessage(text="down for patching").render() == "down for patching\n"

    def test_empty_message_render(self) -> None:
        assert LockMessage(text="").render() == ""

    def test_pid_render(self) -> None:
        assert PidMarker(pid=42).render() == "42\n"

    def test_pid_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            PidMarker(pid=0)


@pytest.mark.unit
class TestLockContentUnion:
    """Tests for the discriminated union."""

    def test_validates_by_kind(self) -> None:
        adapter = TypeAdapter(LockContent)
        assert adapter.validate_python({"kind": "pid", "pid": 7}) == PidMarker(pid=7)
        assert adapter.validate_python({"kind": "message", "text": "x"}) == LockMessage(text="x")


@pytest.mark.unit
class TestLockState:
    """Tests for LockState.describe."""

    def test_describe_message(self) -> None:
        lock = LockState(path=Path("/tmp/lock"), content=LockMessage(text="reason"))
        assert lock.describe() == "reason"

    def test_describe_empty(self) -> None:
        lock = LockState(path=Path("/tmp/lock"), content=LockMessage(text=""))
        assert lock.describe() == "(no message)"

    def test_describe_pid(self) -> None:
        lock = LockState(path=Path("/tmp/lock"), content=PidMarker(pid=99))
        assert lock.describe() == "locked by PID 99"


@pytest.mark.unit
class TestAgentStatus:
    """Tests for AgentStatus."""

    def test_disabled_property(self) -> None:
        status = AgentStatus(state=AgentState.DISABLED, lock_file=Path("/tmp/lock"))
        assert status.disabled is True

    def test_json_dump(self) -> None:
        status = AgentStatus(state=AgentState.ENABLED, lock_file=Path("/tmp/lock"))
        data = status.model_dump(mode="json")
        assert data["state"] == "enabled"
        assert data["lock_file"] == "/tmp/lock"
        assert data["message"] is None
