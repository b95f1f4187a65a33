#
#   project      : EventMeta
#   file         : dump_config.py
#   file_relpath : src/eventmeta/cli/commands/dump_config.py
#   license      : MIT
#   copyright    : (c) 2025 EventMeta contributors
#

"""EventMeta `dump-config` command.

Prints the effective configuration (defaults merged with project files,
``--config`` files and CLI flags) as TOML.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from eventmeta.cli.config_resolver import resolve_config_from_click

if TYPE_CHECKING:
    from eventmeta.cli.console import ConsoleLike


@click.command(
    name="dump-config",
    help="Print the effective configuration as TOML.",
)
@click.option(
    "--config",
    "config_files",
    multiple=True,
    type=click.Path(path_type=Path),
    help="Extra configuration file (TOML). Repeatable; applied after project files.",
)
@click.option(
    "--no-config",
    is_flag=True,
    default=False,
    help="Ignore pyproject.toml and eventmeta.toml in the current directory.",
)
@click.pass_context
def dump_config_command(
    ctx: click.Context,
    *,
    config_files: tuple[Path, ...],
    no_config: bool,
) -> None:
    """Print the effective configuration."""
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    config = resolve_config_from_click(config_files=config_files, no_config=no_config)
    for diagnostic in config.diagnostics:
        console.warn(f"{diagnostic.level.value}: {diagnostic.message}")
    console.print(config.to_toml(), nl=False)
