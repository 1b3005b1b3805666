"""Shared plumbing for agentctl commands."""

from collections.abc import Callable

import typer

from ..core import AgentController, build_controller
from ..errors import AgentctlError
from ..output import get_output_context


def dispatch(operation: Callable[[AgentController], int]) -> None:
    """Build the controller, run one operation, and exit with its code.

    Any AgentctlError is printed as a single error line and exits 1.
    """
    ctx = get_output_context()
    try:
        controller = build_controller(ctx)
        code = operation(controller)
    except AgentctlError as e:
        ctx.error(str(e))
        raise typer.Exit(1) from None
    raise typer.Exit(code)
