"""Agent executable integration for agentctl."""

import logging
import subprocess

from ..config import AgentConfig
from ..constants import AGENT_QUERY_TIMEOUT
from ..errors import AgentError

logger = logging.getLogger(__name__)


def query_agent_setting(agent: AgentConfig, setting: str) -> str | None:
    """Ask the agent for one of its configured settings.

    Runs ``<exec> config print <setting>``.

    Args:
        agent: Agent configuration
        setting: Setting name to print

    Returns:
        The setting value, or None if the agent is missing, fails, or
        prints nothing
    """
    cmd = [agent.exec, "config", "print", setting]
    logger.debug(f"Querying agent: {' '.join(cmd)}")
    try:
        result = subprocess.run(
            cmd,
            capture_output=True,
            text=True,
            timeout=AGENT_QUERY_TIMEOUT,
        )
    except FileNotFoundError:
        logger.debug(f"Agent executable not found: {agent.exec}")
        return None
    except subprocess.TimeoutExpired:
        logger.warning(f"Timed out querying agent setting {setting}")
        return None

    if result.returncode != 0:
        logger.debug(f"Agent config query failed: {result.stderr.strip()}")
        return None
    value = result.stdout.strip()
    return value or None


def build_run_command(agent: AgentConfig, args: list[str]) -> list[str]:
    """Build the one-shot agent command line.

    The one-shot flag is always present, but is not repeated if the
    caller already passed it.
    """
    cmd = [agent.exec, *agent.run_args]
    if agent.oneshot_flag and agent.oneshot_flag not in args:
        cmd.append(agent.oneshot_flag)
    cmd.extend(args)
    return cmd


def run_agent(agent: AgentConfig, args: list[str]) -> int:
    """Run the agent once in the foreground.

    Output is not captured; the agent writes straight to the terminal.
    No timeout is applied.

    Args:
        agent: Agent configuration
        args: Passthrough arguments

    Returns:
        The agent's exit code

    Raises:
        AgentError: If the agent executable cannot be started
    """
    cmd = build_run_command(agent, args)
    logger.info(f"Running: {' '.join(cmd)}")
    try:
        result = subprocess.run(cmd)
    except FileNotFoundError:
        raise AgentError(f"Agent executable not found: {agent.exec}") from None
    except PermissionError as e:
        raise AgentError(f"Cannot execute agent {agent.exec}: {e}") from e
    logger.debug(f"Agent exited with {result.returncode}")
    return result.returncode
