"""Lock file content model.

The lock file holds either a free-text message explaining why scheduled
runs are disabled, or a bare process ID left behind by an agent run.
The two are told apart by whether the first line is all digits.
"""

import re
from pathlib import Path
from typing import Annotated, Literal

from pydantic import BaseModel, Field

PID_LINE = re.compile(r"^\d+$")


class LockMessage(BaseModel):
    """Free-text reason written by an operator."""

    kind: Literal["message"] = "message"
    text: str = Field(default="", description="Reason the agent is disabled")

    @property
    def is_empty(self) -> bool:
        """True when the lock file carries no usable message."""
        return not self.text.strip()

    def render(self) -> str:
        return f"{self.text}\n" if self.text else ""


class PidMarker(BaseModel):
    """Process ID of the agent run that holds the lock."""

    kind: Literal["pid"] = "pid"
    pid: int = Field(gt=0, description="Process ID recorded in the lock file")

    def render(self) -> str:
        return f"{self.pid}\n"


LockContent = Annotated[LockMessage | PidMarker, Field(discriminator="kind")]


def parse_lock_content(raw: str) -> LockMessage | PidMarker:
    """Parse raw lock file text into its variant.

    Args:
        raw: Full lock file contents

    Returns:
        PidMarker if the first line is a bare PID, LockMessage otherwise
    """
    lines = raw.splitlines()
    first = lines[0].strip() if lines else ""
    if PID_LINE.match(first) and int(first) > 0:
        return PidMarker(pid=int(first))
    return LockMessage(text=raw.rstrip("\n"))


class LockState(BaseModel):
    """Snapshot of an existing lock."""

    path: Path
    content: LockContent
    owner: str | None = None

    def describe(self) -> str:
        """Human-readable one-line description of the lock content."""
        if isinstance(self.content, PidMarker):
            return f"locked by PID {self.content.pid}"
        if self.content.is_empty:
            return "(no message)"
        return self.content.text
