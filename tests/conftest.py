"""Shared test fixtures for agentctl tests."""

import io
from collections.abc import Generator
from pathlib import Path
from unittest.mock import patch

import pytest
from rich.console import Console
from typer.testing import CliRunner

from agentctl.config import AgentctlConfig, ResolvedPaths
from agentctl.core import AgentController
from agentctl.output import OutputContext

ENV_VARS = (
    "AGENTCTL_CONFIG",
    "AGENTCTL_AGENT",
    "AGENTCTL_LOCK_FILE",
    "AGENTCTL_OWNER_FILE",
    "AGENTCTL_PID_FILE",
    "AGENTCTL_REPORT_TO",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the caller's AGENTCTL_* variables out of tests."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def runner() -> CliRunner:
    """Create CLI test runner."""
    return CliRunner()


@pytest.fixture
def state_dir(tmp_path: Path) -> Path:
    """Directory standing in for the agent's state directory."""
    d = tmp_path / "state"
    d.mkdir()
    return d


@pytest.fixture
def paths(state_dir: Path) -> ResolvedPaths:
    """Resolved lock, owner, and PID paths inside state_dir."""
    return ResolvedPaths(
        lock_file=state_dir / "agentlock",
        owner_file=state_dir / "agentlock.owner",
        pid_file=state_dir / "agent.pid",
    )


@pytest.fixture
def output() -> io.StringIO:
    """Buffer capturing controller output."""
    return io.StringIO()


@pytest.fixture
def controller(paths: ResolvedPaths, output: io.StringIO) -> Generator[AgentController, None, None]:
    """Controller wired to temp paths, with session user 'alice'."""
    ctx = OutputContext(console=Console(file=output, force_terminal=False, width=200))
    config = AgentctlConfig()
    with patch("agentctl.core.controller.get_session_user", return_value="alice"):
        yield AgentController(config, paths, ctx)


@pytest.fixture
def cli_env(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path, paths: ResolvedPaths
) -> Generator[ResolvedPaths, None, None]:
    """Environment for CLI tests: temp paths, root privileges, user 'alice'."""
    monkeypatch.setenv("AGENTCTL_CONFIG", str(tmp_path / "missing.toml"))
    monkeypatch.setenv("AGENTCTL_LOCK_FILE", str(paths.lock_file))
    monkeypatch.setenv("AGENTCTL_OWNER_FILE", str(paths.owner_file))
    monkeypatch.setenv("AGENTCTL_PID_FILE", str(paths.pid_file))
    with (
        patch("agentctl.core.controller.is_root", return_value=True),
        patch("agentctl.core.controller.get_session_user", return_value="alice"),
    ):
        yield paths
