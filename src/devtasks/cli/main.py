# src/devtasks/cli/main.py

"""
CLI entrypoint.

    devtasks doc
    devtasks run
    devtasks shot.png
    devtasks -n doc run screenshot.png

Initializes logging, resolves every goal, then runs them in order. The exit
status is the first failing step's status (0 when everything succeeded).
"""

from __future__ import annotations

import logging

import click

from ..config import get_settings
from ..core.errors import DevTaskError
from ..logging_setup import setup_logging
from .bootstrap import create_dispatcher

logger = logging.getLogger(__name__)

EXIT_INTERRUPTED = 130


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("goals", nargs=-1)
@click.option("--list", "-l", "list_tasks", is_flag=True, help="List available tasks and exit.")
@click.option("--dry-run", "-n", is_flag=True, help="Print the commands instead of running them.")
@click.option("--always", "-B", is_flag=True, help="Treat every target as out of date.")
@click.option("--log-level", default=None, help="Console log level (default: settings).")
@click.pass_context
def cli(
    ctx: click.Context,
    goals: tuple[str, ...],
    list_tasks: bool,
    dry_run: bool,
    always: bool,
    log_level: str | None,
) -> None:
    """Run project developer tasks: doc, run, or <path>.png for a window screenshot."""
    settings = (ctx.obj or {}).get("settings") or get_settings()

    level_name = str(log_level or getattr(settings, "log_level", "INFO")).upper()
    console_level = getattr(logging, level_name, logging.INFO)
    setup_logging(log_dir=getattr(settings, "data_dir", None), console_level=console_level)

    dispatcher = create_dispatcher(settings=settings, dry_run=dry_run, always=always)

    if list_tasks or not goals:
        click.echo(dispatcher.registry.build_help())
        return

    try:
        status = dispatcher.run_goals(goals)
    except DevTaskError as e:
        logger.error("%s", e)
        ctx.exit(e.exit_code)
    except KeyboardInterrupt:
        logger.warning("Interrupted.")
        ctx.exit(EXIT_INTERRUPTED)

    ctx.exit(status)


def main() -> None:
    cli(prog_name="devtasks")


if __name__ == "__main__":
    main()
