"""agentctl CLI: operator control for a cron-scheduled agent."""

import typer
from rich.console import Console

from agentctl import __version__

from .commands import (
    PASSTHROUGH,
    config_template,
    disable,
    enable,
    lockedrun,
    report,
    run,
    status,
)
from .logging import configure_logging
from .output import OutputContext, set_output_context


def _version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"agentctl {__version__}")
        raise typer.Exit()


app = typer.Typer(
    name="agentctl",
    help="Enable, disable, report on, and run a cron-scheduled configuration agent",
    no_args_is_help=True,
)


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
    verbose: int = typer.Option(
        0,
        "--verbose",
        "-v",
        count=True,
        help="Increase verbosity (-v, -vv)",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Suppress non-error log output",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Output in JSON format for automation",
    ),
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help="Disable colored output",
    ),
) -> None:
    """agentctl - control scheduled runs of the configuration agent."""
    configure_logging(verbosity=verbose, quiet=quiet, no_color=no_color)
    console = Console(no_color=no_color, highlight=False)
    set_output_context(OutputContext(console=console, json_mode=json_output))


app.command()(enable)
app.command()(disable)
app.command()(report)
app.command()(status)
app.command(context_settings=PASSTHROUGH)(run)
app.command(context_settings=PASSTHROUGH)(lockedrun)
app.command("config-template")(config_template)


if __name__ == "__main__":
    app()
