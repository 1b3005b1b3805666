"""One-off agent run commands."""

import typer

from .common import dispatch

# Unknown options are forwarded to the agent untouched
PASSTHROUGH = {"allow_extra_args": True, "ignore_unknown_options": True}


def run(ctx: typer.Context) -> None:
    """Run the agent once, passing any extra options through."""
    args = list(ctx.args)
    dispatch(lambda controller: controller.run(args))


def lockedrun(ctx: typer.Context) -> None:
    """Run the agent once and leave it disabled afterwards.

    Any existing lock message is restored after the run, even if the
    run fails.
    """
    args = list(ctx.args)
    dispatch(lambda controller: controller.lockedrun(args))
