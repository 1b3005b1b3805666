"""Error types raised by agentctl operations."""


class AgentctlError(Exception):
    """Base exception for agentctl errors."""


class PrivilegeError(AgentctlError):
    """Raised when a command is invoked without root privileges."""


class MissingArgumentError(AgentctlError):
    """Raised when a required argument is empty or missing."""


class LockFileError(AgentctlError):
    """Raised when the lock, owner, or PID file cannot be read or written."""


class AgentError(AgentctlError):
    """Raised when the agent executable cannot be queried or started."""


class MailError(AgentctlError):
    """Raised when the mail collaborator fails to deliver a report."""


class InvalidArgumentError(AgentctlError):
    """Raised when an argument has a value the lock file cannot hold."""
