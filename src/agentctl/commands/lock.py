"""Enable, disable, report, and status commands."""

import typer

from .common import dispatch


def enable() -> None:
    """Enable scheduled agent runs."""
    dispatch(lambda controller: controller.enable())


def disable(
    message: str | None = typer.Option(
        None,
        "--message",
        "-m",
        help="Reason for disabling (default: generic message with your username)",
    ),
) -> None:
    """Disable scheduled agent runs. An existing lock is left untouched."""
    dispatch(lambda controller: controller.disable(message))


def report(
    to: str | None = typer.Option(
        None,
        "--to",
        "-t",
        help="Address to mail the report to (default: report_to from config)",
    ),
) -> None:
    """Mail a report if the agent is disabled."""
    dispatch(lambda controller: controller.report(to or controller.config.report_to))


def status() -> None:
    """Show whether scheduled agent runs are enabled."""
    dispatch(lambda controller: controller.status())
