"""Config template command."""

from pathlib import Path

import typer

from ..config import get_config_path, write_config_template
from ..output import get_output_context


def config_template(
    path: Path | None = typer.Argument(
        None,
        help="Where to write the template (default: $AGENTCTL_CONFIG or /etc/agentctl/config.toml)",
    ),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing file"),
) -> None:
    """Write a default config.toml template."""
    ctx = get_output_context()
    path = path or get_config_path()

    if path.exists() and not force:
        ctx.error(f"Config already exists: {path} (use --force to overwrite)")
        raise typer.Exit(1)

    try:
        written = write_config_template(path)
    except OSError as e:
        ctx.error(f"Cannot write {path}: {e}")
        raise typer.Exit(1) from None
    ctx.success(f"Created config template: {written}", {"path": str(written)})
