#
#   project      : EventMeta
#   file         : errors.py
#   file_relpath : src/eventmeta/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 EventMeta contributors
#

"""Exceptions for the EventMeta CLI.

Raise these in commands to stop with a standardized message and exit code.
Extraction itself never raises for source-level problems; these cover the
tool boundary only (arguments, configuration, file access).
"""

from __future__ import annotations

from typing import IO, Any

import click

from eventmeta.cli.exit_codes import ExitCode


class EventMetaError(click.ClickException):
    """Base class for all EventMeta CLI errors."""

    exit_code = ExitCode.USAGE_ERROR

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        console = ctx.obj.get("console") if ctx is not None and isinstance(ctx.obj, dict) else None
        if console is not None:
            console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))
            return
        super().show(file)


class EventMetaUsageError(EventMetaError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class EventMetaConfigError(EventMetaError):
    """Error for malformed or unreadable configuration files."""

    exit_code = ExitCode.CONFIG_ERROR


class EventMetaFileNotFoundError(EventMetaError):
    """Error when an input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class EventMetaIOError(EventMetaError):
    """Error for I/O errors reading files."""

    exit_code = ExitCode.IO_ERROR


class EventMetaEncodingError(EventMetaError):
    """Error for source files that are not valid UTF-8."""

    exit_code = ExitCode.ENCODING_ERROR
