"""Pydantic data models for agentctl.

- Lock file content variants (LockMessage, PidMarker) and LockState
- Status snapshot (AgentStatus)
"""

from .lock import LockContent, LockMessage, LockState, PidMarker, parse_lock_content
from .status import AgentState, AgentStatus

__all__ = [
    "AgentState",
    "AgentStatus",
    "LockContent",
    "LockMessage",
    "LockState",
    "PidMarker",
    "parse_lock_content",
]
