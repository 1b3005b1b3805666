"""External collaborators for agentctl.

- agent: query settings from and run the agent executable
- mail: deliver reports with the system mail utility
- session: session user and privilege lookups
"""

from .agent import build_run_command, query_agent_setting, run_agent
from .mail import send_mail
from .session import get_session_user, is_root

__all__ = [
    "build_run_command",
    "get_session_user",
    "is_root",
    "query_agent_setting",
    "run_agent",
    "send_mail",
]
