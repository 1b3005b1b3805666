"""Session and privilege lookups."""

import logging
import os
import subprocess

from ..constants import WHO_TIMEOUT

logger = logging.getLogger(__name__)


def is_root() -> bool:
    """Return True if running with effective UID 0."""
    return os.geteuid() == 0


def get_session_user() -> str | None:
    """Get the user who owns the controlling terminal session.

    Uses ``who -m`` so that a user who became root through su or sudo
    is still reported by their login name. Falls back to SUDO_USER and
    LOGNAME when there is no terminal (cron, CI).
    """
    try:
        result = subprocess.run(
            ["who", "-m"],
            capture_output=True,
            text=True,
            timeout=WHO_TIMEOUT,
        )
        fields = result.stdout.split()
        if result.returncode == 0 and fields:
            return fields[0]
    except (FileNotFoundError, subprocess.TimeoutExpired) as e:
        logger.debug(f"who -m unavailable: {e}")

    return os.environ.get("SUDO_USER") or os.environ.get("LOGNAME") or None
