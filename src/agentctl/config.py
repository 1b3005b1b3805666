"""Configuration management for agentctl."""

import logging
import os
import tomllib
from dataclasses import dataclass
from pathlib import Path

import tomli_w
from pydantic import BaseModel, Field

from .constants import (
    DEFAULT_CONFIG_PATH,
    DEFAULT_LOCK_FILE,
    DEFAULT_MESSAGE,
    DEFAULT_PID_FILE,
    ENV_AGENT,
    ENV_CONFIG,
    ENV_LOCK_FILE,
    ENV_OWNER_FILE,
    ENV_PID_FILE,
    ENV_REPORT_TO,
    OWNER_SUFFIX,
)

logger = logging.getLogger(__name__)


class AgentConfig(BaseModel):
    """How to query and invoke the agent executable."""

    exec: str = "puppet"
    run_args: list[str] = Field(default_factory=lambda: ["agent"])
    oneshot_flag: str = "--test"
    lock_setting: str = "puppetdlock"  # Agent setting naming the lock file
    pid_setting: str = "pidfile"


class PathsConfig(BaseModel):
    """Explicit state file paths. Unset paths are asked from the agent."""

    lock_file: Path | None = None
    owner_file: Path | None = None
    pid_file: Path | None = None
    track_owner: bool = True


class MailConfig(BaseModel):
    """Configuration for the mail collaborator used by report."""

    exec: str = "mail"
    subject: str = "{agent} disabled on {host}"


class AgentctlConfig(BaseModel):
    """Root configuration for agentctl."""

    agent: AgentConfig = Field(default_factory=AgentConfig)
    paths: PathsConfig = Field(default_factory=PathsConfig)
    mail: MailConfig = Field(default_factory=MailConfig)
    report_to: str | None = None
    default_message: str = DEFAULT_MESSAGE


@dataclass(frozen=True)
class ResolvedPaths:
    """State file paths resolved once at startup."""

    lock_file: Path
    owner_file: Path | None
    pid_file: Path | None


def get_config_path() -> Path:
    """Get config file path from AGENTCTL_CONFIG or the system default."""
    return Path(os.environ.get(ENV_CONFIG, DEFAULT_CONFIG_PATH)).expanduser()


def _apply_env_overrides(config: AgentctlConfig) -> AgentctlConfig:
    """Overlay AGENTCTL_* environment variables onto loaded config."""
    env = os.environ
    if env.get(ENV_AGENT):
        config.agent.exec = env[ENV_AGENT]
    if env.get(ENV_LOCK_FILE):
        config.paths.lock_file = Path(env[ENV_LOCK_FILE])
    if env.get(ENV_OWNER_FILE):
        config.paths.owner_file = Path(env[ENV_OWNER_FILE])
    if env.get(ENV_PID_FILE):
        config.paths.pid_file = Path(env[ENV_PID_FILE])
    if env.get(ENV_REPORT_TO):
        config.report_to = env[ENV_REPORT_TO]
    return config


def load_config(config_path: Path | None = None) -> AgentctlConfig:
    """Load config from TOML and apply environment overrides.

    Args:
        config_path: Path to config.toml (defaults to get_config_path())

    Returns:
        Loaded configuration, or defaults if the file doesn't exist

    Raises:
        tomllib.TOMLDecodeError: If the file is not valid TOML
        pydantic.ValidationError: If the file has invalid values
    """
    config_path = config_path or get_config_path()
    if config_path.exists():
        logger.debug(f"Loading config from {config_path}")
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
        config = AgentctlConfig.model_validate(data)
    else:
        config = AgentctlConfig()
    return _apply_env_overrides(config)


def resolve_paths(config: AgentctlConfig) -> ResolvedPaths:
    """Resolve lock, owner, and PID file paths.

    Explicit config wins; otherwise the agent is asked for its setting;
    if that fails the built-in default is used.
    """
    from .services.agent import query_agent_setting

    def _resolve(explicit: Path | None, setting: str, default: str) -> Path:
        if explicit is not None:
            return explicit
        value = query_agent_setting(config.agent, setting)
        if value:
            return Path(value)
        logger.debug(f"Agent did not report {setting}, using {default}")
        return Path(default)

    lock_file = _resolve(config.paths.lock_file, config.agent.lock_setting, DEFAULT_LOCK_FILE)
    pid_file = _resolve(config.paths.pid_file, config.agent.pid_setting, DEFAULT_PID_FILE)

    owner_file: Path | None = None
    if config.paths.track_owner:
        owner_file = config.paths.owner_file or lock_file.with_name(lock_file.name + OWNER_SUFFIX)

    return ResolvedPaths(lock_file=lock_file, owner_file=owner_file, pid_file=pid_file)


def write_config_template(config_path: Path) -> Path:
    """Write default config.toml template.

    Args:
        config_path: Destination file

    Returns:
        Path to the written config file
    """
    config_path.parent.mkdir(parents=True, exist_ok=True)
    template = {
        "report_to": "root@localhost",
        "default_message": DEFAULT_MESSAGE,
        "agent": {
            "exec": "puppet",
            "run_args": ["agent"],
            "oneshot_flag": "--test",
            "lock_setting": "puppetdlock",
            "pid_setting": "pidfile",
        },
        # Leave paths unset to ask the agent via `<exec> config print <setting>`
        "paths": {"track_owner": True},
        "mail": {"exec": "mail", "subject": "{agent} disabled on {host}"},
    }
    with open(config_path, "wb") as f:
        tomli_w.dump(template, f)
    return config_path
