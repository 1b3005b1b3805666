"""Core logic for agentctl.

- lock_manager: lock, owner, and PID file handling
- controller: the enable/disable/report/run/lockedrun/status dispatcher
"""

from .controller import AgentController, build_controller
from .lock_manager import (
    clear_stale_pid_file,
    is_disabled,
    is_pid_running,
    live_agent_pid,
    read_lock,
    read_owner,
    read_pid_file,
    remove_lock,
    write_lock,
)

__all__ = [
    "AgentController",
    "build_controller",
    "clear_stale_pid_file",
    "is_disabled",
    "is_pid_running",
    "live_agent_pid",
    "read_lock",
    "read_owner",
    "read_pid_file",
    "remove_lock",
    "write_lock",
]
