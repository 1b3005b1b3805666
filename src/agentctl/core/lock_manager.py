"""Lock file management for agentctl.

The lock file's presence is the only record of whether scheduled agent
runs are disabled. Locking is advisory: nothing stops two agentctl
invocations racing on the same file, and the last writer wins.
"""

import logging
import os
from pathlib import Path

from ..errors import LockFileError
from ..models import LockMessage, LockState, PidMarker, parse_lock_content

logger = logging.getLogger(__name__)


def is_pid_running(pid: int) -> bool:
    """Check if a process with given PID is running."""
    try:
        os.kill(pid, 0)  # Signal 0 doesn't kill, just checks
    except ProcessLookupError:
        return False
    except PermissionError:
        # Exists but owned by another user
        return True
    except (OSError, OverflowError):
        # OverflowError: larger than any pid_t, so no such process
        return False
    return True


def is_disabled(lock_file: Path) -> bool:
    """Return True if scheduled runs are disabled."""
    return lock_file.exists()


def _read_text(path: Path) -> str:
    # Operators may write lock messages in any encoding
    try:
        return path.read_text(errors="replace")
    except OSError as e:
        raise LockFileError(f"Cannot read {path}: {e}") from e


def _write_text(path: Path, text: str) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text)
    except OSError as e:
        raise LockFileError(f"Cannot write {path}: {e}") from e


def _remove(path: Path) -> bool:
    """Remove a file, returning True if something was removed."""
    try:
        path.unlink()
    except FileNotFoundError:
        return False
    except OSError as e:
        raise LockFileError(f"Cannot remove {path}: {e}") from e
    logger.debug(f"Removed {path}")
    return True


def read_owner(owner_file: Path | None) -> str | None:
    """Read the session user recorded alongside the lock."""
    if owner_file is None or not owner_file.exists():
        return None
    owner = _read_text(owner_file).strip()
    return owner or None


def read_lock(lock_file: Path, owner_file: Path | None = None) -> LockState | None:
    """Read the current lock.

    Args:
        lock_file: Path to the lock file
        owner_file: Optional path to the lock-owner file

    Returns:
        LockState if the lock file exists, None otherwise
    """
    if not is_disabled(lock_file):
        return None
    content = parse_lock_content(_read_text(lock_file))
    return LockState(path=lock_file, content=content, owner=read_owner(owner_file))


def write_lock(
    lock_file: Path,
    content: LockMessage | PidMarker,
    owner_file: Path | None = None,
    owner: str | None = None,
) -> LockState:
    """Write the lock file, and the owner file when one is tracked.

    The two writes are not transactional.
    """
    _write_text(lock_file, content.render())
    logger.debug(f"Wrote lock {lock_file}")
    if owner_file is not None and owner:
        _write_text(owner_file, f"{owner}\n")
    return LockState(path=lock_file, content=content, owner=owner)


def remove_lock(lock_file: Path, owner_file: Path | None = None) -> bool:
    """Remove the lock and owner files.

    Returns:
        True if a lock file was removed
    """
    removed = _remove(lock_file)
    if owner_file is not None:
        _remove(owner_file)
    return removed


def read_pid_file(pid_file: Path | None) -> int | None:
    """Read the agent's own PID file.

    Returns:
        The PID, or None if the file is missing or does not hold a PID
    """
    if pid_file is None or not pid_file.exists():
        return None
    content = parse_lock_content(_read_text(pid_file))
    if isinstance(content, PidMarker):
        return content.pid
    logger.debug(f"Ignoring non-PID content in {pid_file}")
    return None


def live_agent_pid(pid_file: Path | None) -> int | None:
    """Return the PID from the PID file if that process is alive."""
    pid = read_pid_file(pid_file)
    if pid is not None and is_pid_running(pid):
        return pid
    return None


def clear_stale_pid_file(pid_file: Path | None) -> bool:
    """Remove the PID file if it references a dead process.

    Returns:
        True if the PID file was removed
    """
    pid = read_pid_file(pid_file)
    if pid_file is None or pid is None or is_pid_running(pid):
        return False
    return _remove(pid_file)
