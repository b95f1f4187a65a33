#
#   project      : EventMeta
#   file         : scan.py
#   file_relpath : src/eventmeta/cli/commands/scan.py
#   license      : MIT
#   copyright    : (c) 2025 EventMeta contributors
#

"""EventMeta `scan` command.

Extracts ``@Event()`` metadata from TypeScript component classes and reports
naming and type-reference warnings. Warnings never stop the scan; with
``--strict`` they turn the exit status into `ExitCode.WARNINGS`.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from eventmeta.api import scan_file
from eventmeta.cli.config_resolver import resolve_config_from_click
from eventmeta.cli.emitters import (
    emit_json,
    emit_literal,
    emit_ndjson,
    emit_summary,
    emit_text,
    format_diagnostic,
)
from eventmeta.cli.errors import (
    EventMetaEncodingError,
    EventMetaFileNotFoundError,
    EventMetaIOError,
    EventMetaUsageError,
)
from eventmeta.cli.exit_codes import ExitCode
from eventmeta.cli.options import OutputFormat, output_format_option
from eventmeta.config.logging import get_logger
from eventmeta.file_resolver import resolve_file_list

if TYPE_CHECKING:
    from eventmeta.api import ModuleScanResult
    from eventmeta.cli.console import ConsoleLike
    from eventmeta.config.logging import EventMetaLogger
    from eventmeta.diagnostic.model import Diagnostic

logger: EventMetaLogger = get_logger(__name__)


@click.command(
    name="scan",
    help="Extract event metadata from TypeScript files and directories.",
)
@click.argument("paths", nargs=-1, type=click.Path(path_type=Path))
@output_format_option()
@click.option(
    "--strict",
    is_flag=True,
    default=False,
    help="Exit with status 1 when any warning is reported.",
)
@click.option(
    "--all-classes",
    is_flag=True,
    default=False,
    help="Scan every class, not only classes decorated as components.",
)
@click.option(
    "--exclude",
    "exclude_patterns",
    multiple=True,
    help="Gitignore-style pattern of paths to skip. Repeatable.",
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
def scan_command(
    ctx: click.Context,
    *,
    paths: tuple[Path, ...],
    output_format: str,
    strict: bool,
    all_classes: bool,
    exclude_patterns: tuple[str, ...],
    config_files: tuple[Path, ...],
    no_config: bool,
) -> None:
    """Scan ``paths`` and print the extracted event metadata."""
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]
    verbose: bool = ctx.obj.get("verbosity", 0) > 0
    fmt = OutputFormat(output_format)

    config = resolve_config_from_click(
        config_files=config_files,
        no_config=no_config,
        strict=strict or None,
        all_classes=all_classes or None,
        exclude_patterns=exclude_patterns,
    )

    if not paths:
        raise EventMetaUsageError("No input paths given.")
    missing = [p for p in paths if not p.exists()]
    if missing:
        raise EventMetaFileNotFoundError(f"No such file or directory: {missing[0]}")

    files = resolve_file_list(paths, config.exclude)
    logger.info("Scanning %d file(s)", len(files))

    results: list[ModuleScanResult] = []
    for path in files:
        try:
            results.append(scan_file(path, config=config))
        except UnicodeDecodeError as exc:
            raise EventMetaEncodingError(f"{path}: not valid UTF-8 ({exc.reason})") from exc
        except OSError as exc:
            raise EventMetaIOError(f"{path}: {exc.strerror or exc}") from exc

    diagnostics: list[Diagnostic] = list(config.diagnostics)
    for result in results:
        diagnostics.extend(result.all_diagnostics())

    if fmt is OutputFormat.JSON:
        emit_json(
            console,
            results,
            {"config_diagnostics": [d.to_dict() for d in config.diagnostics]},
        )
    elif fmt is OutputFormat.NDJSON:
        emit_ndjson(console, results)
    elif fmt is OutputFormat.LITERAL:
        emit_literal(console, results)
    else:
        emit_text(console, results, verbose=verbose)

    if fmt is OutputFormat.TEXT:
        for diagnostic in diagnostics:
            console.print(format_diagnostic(diagnostic, color=bool(ctx.color)))
        emit_summary(console, results, diagnostics)
    elif fmt is not OutputFormat.JSON:
        for diagnostic in diagnostics:
            console.warn(format_diagnostic(diagnostic))

    if config.strict and diagnostics:
        ctx.exit(ExitCode.WARNINGS)
