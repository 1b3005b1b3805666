"""Command dispatcher for agentctl.

AgentController implements the operator commands against the lock,
owner, and PID files resolved at startup. Each operation returns an
exit code on success and raises an AgentctlError subclass on failure.
"""

import logging
import socket
import tomllib
from pathlib import Path

from pydantic import ValidationError

from ..config import AgentctlConfig, ResolvedPaths, get_config_path, load_config, resolve_paths
from ..errors import (
    AgentctlError,
    InvalidArgumentError,
    MissingArgumentError,
    PrivilegeError,
)
from ..models import (
    AgentState,
    AgentStatus,
    LockMessage,
    LockState,
    PidMarker,
    parse_lock_content,
)
from ..output import OutputContext
from ..services import get_session_user, is_root, run_agent, send_mail
from .lock_manager import (
    clear_stale_pid_file,
    is_pid_running,
    live_agent_pid,
    read_lock,
    remove_lock,
    write_lock,
)

logger = logging.getLogger(__name__)


class AgentController:
    """Enable, disable, report on, and run the scheduled agent."""

    def __init__(self, config: AgentctlConfig, paths: ResolvedPaths, ctx: OutputContext) -> None:
        self.config = config
        self.paths = paths
        self.ctx = ctx

    @property
    def agent_name(self) -> str:
        return Path(self.config.agent.exec).name

    def _read_lock(self) -> LockState | None:
        return read_lock(self.paths.lock_file, self.paths.owner_file)

    def _default_message(self, user: str | None) -> str:
        if user:
            return f"{self.config.default_message} ({user})"
        return self.config.default_message

    def _print_lock(self, lock: LockState) -> None:
        self.ctx.warning(f"Agent is disabled: {lock.describe()}")
        if lock.owner:
            self.ctx.warning(f"Disabled by: {lock.owner}")

    def enable(self) -> int:
        """Remove the lock so scheduled runs resume.

        A lock holding the PID of a live agent run is left in place.
        """
        lock = self._read_lock()
        if lock is None:
            self.ctx.result(
                {"state": AgentState.ENABLED.value, "changed": False},
                "Agent is already enabled",
            )
            return 0

        content = lock.content
        if isinstance(content, PidMarker) and is_pid_running(content.pid):
            self.ctx.warning(f"Agent is currently running (PID {content.pid}), not enabling")
            self.ctx.print_json(
                {"state": AgentState.DISABLED.value, "changed": False, "pid": content.pid}
            )
            return 0

        remove_lock(self.paths.lock_file, self.paths.owner_file)
        if clear_stale_pid_file(self.paths.pid_file):
            logger.info(f"Removed stale PID file {self.paths.pid_file}")
        logger.debug(f"Enabled agent, removed {self.paths.lock_file}")
        self.ctx.success("Agent enabled", {"state": AgentState.ENABLED.value, "changed": True})
        return 0

    def disable(self, message: str | None = None) -> int:
        """Write the lock so scheduled runs are skipped.

        An existing lock is never overwritten.

        Args:
            message: Reason for disabling; defaults to the configured
                message tagged with the session user

        Raises:
            MissingArgumentError: If the message resolves to blank text
            InvalidArgumentError: If the message starts with a bare number
        """
        existing = self._read_lock()
        if existing is not None:
            self._print_lock(existing)
            self.ctx.print_json(
                {
                    "state": AgentState.DISABLED.value,
                    "changed": False,
                    "message": existing.describe(),
                    "owner": existing.owner,
                }
            )
            return 0

        user = get_session_user()
        text = self._default_message(user) if message is None else message
        if not text.strip():
            raise MissingArgumentError("No lock message given")
        if isinstance(parse_lock_content(text), PidMarker):
            raise InvalidArgumentError(
                f"Lock message {text!r} would be read back as a PID; add some words"
            )

        write_lock(
            self.paths.lock_file,
            LockMessage(text=text),
            owner_file=self.paths.owner_file,
            owner=user,
        )
        self.ctx.success(
            f"Agent disabled: {text}",
            {"state": AgentState.DISABLED.value, "changed": True, "message": text},
        )
        return 0

    def compose_report(self, lock: LockState) -> tuple[str, str]:
        """Build the subject and body of a disabled-agent report."""
        host = socket.gethostname()
        agent = self.agent_name
        try:
            subject = self.config.mail.subject.format(agent=agent, host=host)
        except (KeyError, IndexError, ValueError) as e:
            raise AgentctlError(
                f"Invalid mail subject template {self.config.mail.subject!r}: {e!r}"
            ) from e

        content = lock.content
        if isinstance(content, PidMarker):
            if is_pid_running(content.pid):
                summary = (
                    f"{agent} on {host} is currently running (PID {content.pid}); "
                    "scheduled runs are locked out until it finishes."
                )
            else:
                summary = (
                    f"WARNING: {agent} on {host} appears stuck: the lock is held by "
                    f"PID {content.pid}, which is not running."
                )
        elif content.is_empty:
            summary = f"WARNING: {agent} on {host} is disabled and no reason was given."
        else:
            summary = f"{agent} on {host} is disabled.\n\nReason: {content.text}"

        lines = [summary, ""]
        if lock.owner:
            lines.append(f"Disabled by: {lock.owner}")
        lines.append(f"Lock file: {lock.path}")
        return subject, "\n".join(lines) + "\n"

    def report(self, recipient: str | None) -> int:
        """Mail a diagnostic about a disabled agent.

        Nothing is sent when the agent is enabled.

        Raises:
            MissingArgumentError: If no recipient is given
            MailError: If the mail collaborator fails
        """
        recipient = (recipient or "").strip()
        if not recipient:
            raise MissingArgumentError("No report recipient given (use --to)")

        lock = self._read_lock()
        if lock is None:
            self.ctx.result({"state": AgentState.ENABLED.value, "sent": False}, "Agent is enabled")
            return 0

        subject, body = self.compose_report(lock)
        send_mail(self.config.mail, recipient, subject, body)
        self.ctx.success(
            f"Report sent to {recipient}",
            {"state": AgentState.DISABLED.value, "sent": True, "recipient": recipient},
        )
        return 0

    def run(self, args: list[str]) -> int:
        """Run the agent once; the exit code is the agent's own."""
        return run_agent(self.config.agent, args)

    def lockedrun(self, args: list[str]) -> int:
        """Run the agent once and leave it disabled afterwards.

        The prior lock message and owner are restored after the run,
        whether or not it succeeds. With no prior message the default
        lock is written.
        """
        prior = self._read_lock()
        message: str | None = None
        owner: str | None = None
        if prior is not None:
            owner = prior.owner
            if isinstance(prior.content, LockMessage) and not prior.content.is_empty:
                message = prior.content.text

        remove_lock(self.paths.lock_file, self.paths.owner_file)
        try:
            return self.run(args)
        finally:
            if message is None:
                owner = owner or get_session_user()
                message = self._default_message(owner)
            text = message
            write_lock(
                self.paths.lock_file,
                LockMessage(text=text),
                owner_file=self.paths.owner_file,
                owner=owner,
            )
            logger.info(f"Restored lock: {text}")

    def get_status(self) -> AgentStatus:
        """Compute status from the files on disk."""
        lock = self._read_lock()
        agent_pid = live_agent_pid(self.paths.pid_file)
        if lock is None:
            return AgentStatus(
                state=AgentState.ENABLED, lock_file=self.paths.lock_file, agent_pid=agent_pid
            )

        status = AgentStatus(
            state=AgentState.DISABLED,
            lock_file=self.paths.lock_file,
            owner=lock.owner,
            agent_pid=agent_pid,
        )
        if isinstance(lock.content, PidMarker):
            status.pid = lock.content.pid
            status.pid_running = is_pid_running(lock.content.pid)
        else:
            status.message = lock.content.text
        return status

    def status(self) -> int:
        """Print whether the agent is enabled or disabled."""
        status = self.get_status()
        if self.ctx.json_mode:
            self.ctx.print_json(status.model_dump(mode="json"))
            return 0

        if not status.disabled:
            self.ctx.success("Agent is enabled")
        elif status.pid is not None:
            state = "running" if status.pid_running else "not running, lock is stale"
            self.ctx.warning(f"Agent is disabled: locked by PID {status.pid} ({state})")
        elif status.message:
            self.ctx.warning(f"Agent is disabled: {status.message}")
        else:
            self.ctx.warning("Agent is disabled: (no message)")

        if status.owner:
            self.ctx.warning(f"Disabled by: {status.owner}")
        if status.agent_pid is not None:
            self.ctx.print(f"Agent process running (PID {status.agent_pid})")
        return 0


def build_controller(ctx: OutputContext, config: AgentctlConfig | None = None) -> AgentController:
    """Load config, check privileges, and resolve paths.

    Raises:
        PrivilegeError: If not running as root
        AgentctlError: If the config file is invalid
    """
    if not is_root():
        raise PrivilegeError("You must be root to run this command")

    if config is None:
        try:
            config = load_config()
        except (tomllib.TOMLDecodeError, ValidationError) as e:
            raise AgentctlError(f"Invalid config {get_config_path()}: {e}") from e

    paths = resolve_paths(config)
    logger.debug(f"Lock file: {paths.lock_file}, PID file: {paths.pid_file}")
    return AgentController(config, paths, ctx)
