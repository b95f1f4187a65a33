#
#   project      : EventMeta
#   file         : version.py
#   file_relpath : src/eventmeta/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 EventMeta contributors
#

"""EventMeta `version` command.

Prints the EventMeta version as installed in the active Python environment.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from eventmeta.cli.options import OutputFormat, output_format_option
from eventmeta.constants import EVENTMETA_VERSION

if TYPE_CHECKING:
    from eventmeta.cli.console import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of EventMeta.",
)
@output_format_option(OutputFormat.TEXT, OutputFormat.JSON)
@click.pass_context
def version_command(ctx: click.Context, *, output_format: str) -> None:
    """Show the current version of EventMeta."""
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    if OutputFormat(output_format) is OutputFormat.JSON:
        console.print(json.dumps({"version": EVENTMETA_VERSION}))
    else:
        console.print(console.styled(EVENTMETA_VERSION, bold=True))
