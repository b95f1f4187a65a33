#
#   project      : EventMeta
#   file         : main.py
#   file_relpath : src/eventmeta/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 EventMeta contributors
#

"""EventMeta command-line interface.

Group-level options (verbosity, color) are resolved once and placed into
``ctx.obj``; subcommands read the shared console and settings from there.
"""

from __future__ import annotations

import click

from eventmeta.cli.commands.dump_config import dump_config_command
from eventmeta.cli.commands.scan import scan_command
from eventmeta.cli.commands.version import version_command
from eventmeta.cli.console import ClickConsole
from eventmeta.cli.options import (
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from eventmeta.config.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Initialize shared state (logging, verbosity & color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; ``obj`` and ``color`` are set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (str | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    level = resolve_verbosity(verbose, quiet)
    ctx.obj["verbosity"] = verbose - quiet
    # The environment wins so tracing can be enabled without touching scripts
    setup_logging(level=resolve_env_log_level() or level)

    mode = ColorMode.NEVER if no_color else ColorMode(color_mode or ColorMode.AUTO.value)
    ctx.obj["color_mode"] = mode
    enable_color = resolve_color_mode(cli_mode=mode, output_format=None)
    ctx.color = enable_color
    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


@click.group(
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="Extract and validate @Event() metadata from component classes.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Entry point for the EventMeta CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )
    if ctx.invoked_subcommand is None:
        console = ctx.obj["console"]
        console.print("Hint: use 'eventmeta scan [PATHS...]' to extract event metadata.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(scan_command)
cli.add_command(dump_config_command)
cli.add_command(version_command)

if __name__ == "__main__":
    cli()
