"""Status snapshot model."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field


class AgentState(str, Enum):
    """Scheduling state of the agent."""

    ENABLED = "enabled"
    DISABLED = "disabled"


class AgentStatus(BaseModel):
    """Result of the status operation.

    Attributes:
        state: Whether scheduled runs are enabled or disabled.
        lock_file: Lock file path that was checked.
        message: Lock message when disabled with free text.
        pid: PID recorded in the lock file, if any.
        pid_running: Whether the lock PID is a live process.
        owner: Session user recorded in the owner file.
        agent_pid: Live PID from the agent's own PID file.
    """

    state: AgentState
    lock_file: Path
    message: str | None = None
    pid: int | None = None
    pid_running: bool | None = None
    owner: str | None = None
    agent_pid: int | None = Field(default=None, description="Live PID from the agent PID file")

    @property
    def disabled(self) -> bool:
        return self.state is AgentState.DISABLED
