"""CLI command implementations for agentctl.

This package contains the implementation of each CLI command,
separated from the CLI framework setup in cli.py.
"""

from .config_template import config_template
from .lock import disable, enable, report, status
from .run import PASSTHROUGH, lockedrun, run

__all__ = [
    "PASSTHROUGH",
    "config_template",
    "disable",
    "enable",
    "lockedrun",
    "report",
    "run",
    "status",
]
