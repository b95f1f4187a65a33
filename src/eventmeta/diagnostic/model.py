#
#   project      : EventMeta
#   file         : model.py
#   file_relpath : src/eventmeta/diagnostic/model.py
#   license      : MIT
#   copyright    : (c) 2025 EventMeta contributors
#

"""Core diagnostic types and helpers for EventMeta.

Diagnostics are advisory messages tied to a source location. The extraction
core only ever appends to a `DiagnosticLog` owned by its caller; deciding
whether warnings fail a build is left to the caller (see the CLI ``--strict``
flag).

Sections:
    * DiagnosticLevel: severity levels with associated terminal colors.
    * Diagnostic: immutable structured diagnostic payload.
    * DiagnosticStats: aggregated per-level counts.
    * DiagnosticLog: append-only collection shared through an extraction run.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, cast

from yachalk import chalk

from eventmeta.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Iterator

    from eventmeta.config.logging import EventMetaLogger
    from eventmeta.syntax.nodes import SourceLocation


logger: EventMetaLogger = get_logger(__name__)


class DiagnosticLevel(Enum):
    """Severity levels for diagnostics collected during extraction.

    Levels map to terminal colors and are ordered by importance: ERROR > WARNING > INFO.
    """

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"

    @property
    def color(self) -> Callable[[str], str]:
        """Return the `yachalk` color function associated with this severity level.

        Intended for human-readable output only; machine formats should not use colors.
        """
        return cast(
            "Callable[[str], str]",
            {
                DiagnosticLevel.INFO: chalk.blue,
                DiagnosticLevel.WARNING: chalk.yellow,
                DiagnosticLevel.ERROR: chalk.red_bright,
            }[self],
        )


@dataclass(frozen=True)
class Diagnostic:
    """Structured diagnostic with a severity level, message and location context."""

    level: DiagnosticLevel
    message: str
    location: SourceLocation | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly representation of this diagnostic."""
        data: dict[str, Any] = {"level": self.level.value, "message": self.message}
        if self.location is not None:
            data["file"] = self.location.path
            data["line"] = self.location.line
            data["column"] = self.location.column
        return data


@dataclass(frozen=True)
class DiagnosticStats:
    """Aggregated counts for diagnostics by severity level."""

    n_info: int
    n_warning: int
    n_error: int

    @property
    def total(self) -> int:
        """Return the total count of diagnostics."""
        return self.n_info + self.n_warning + self.n_error


@dataclass
class DiagnosticLog:
    """Append-only collection of diagnostics.

    The log is passed by reference through every extraction call. Entries
    written by earlier passes are never removed or replaced.
    """

    items: list[Diagnostic] = field(default_factory=lambda: [])

    def _add(self, diagnostic: Diagnostic) -> Diagnostic:
        self.items.append(diagnostic)
        logger.trace("Adding [%s]: %r", diagnostic.level.value, diagnostic.message)
        return diagnostic

    def add_info(self, message: str, location: SourceLocation | None = None) -> Diagnostic:
        """Append an ``info`` diagnostic.

        Args:
            message: The diagnostic message.
            location: Optional source location the message refers to.

        Returns:
            The appended diagnostic.
        """
        return self._add(Diagnostic(DiagnosticLevel.INFO, message, location))

    def add_warning(self, message: str, location: SourceLocation | None = None) -> Diagnostic:
        """Append a ``warning`` diagnostic.

        Args:
            message: The diagnostic message.
            location: Optional source location the message refers to.

        Returns:
            The appended diagnostic.
        """
        return self._add(Diagnostic(DiagnosticLevel.WARNING, message, location))

    def add_error(self, message: str, location: SourceLocation | None = None) -> Diagnostic:
        """Append an ``error`` diagnostic.

        Args:
            message: The diagnostic message.
            location: Optional source location the message refers to.

        Returns:
            The appended diagnostic.
        """
        return self._add(Diagnostic(DiagnosticLevel.ERROR, message, location))

    def extend(self, diagnostics: Iterable[Diagnostic]) -> None:
        """Append diagnostics produced elsewhere, preserving their order."""
        for diagnostic in diagnostics:
            self._add(diagnostic)

    def stats(self) -> DiagnosticStats:
        """Return per-level counts for diagnostics in this log."""
        return compute_diagnostic_stats(self.items)

    def has_warning(self) -> bool:
        """Return True if the log contains warning diagnostics."""
        return any(d.level == DiagnosticLevel.WARNING for d in self.items)

    def has_error(self) -> bool:
        """Return True if the log contains error diagnostics."""
        return any(d.level == DiagnosticLevel.ERROR for d in self.items)

    def to_dict(self) -> dict[str, int]:
        """Return a JSON-friendly mapping of counts by severity."""
        return diagnostics_counts_to_dict(self.items)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)


def compute_diagnostic_stats(diagnostics: Iterable[Diagnostic]) -> DiagnosticStats:
    """Return per-level counts for a sequence of diagnostics.

    Args:
        diagnostics: The diagnostics to count.

    Returns:
        Per-level counts.
    """
    items = list(diagnostics)
    n_info: int = sum(1 for d in items if d.level == DiagnosticLevel.INFO)
    n_warn: int = sum(1 for d in items if d.level == DiagnosticLevel.WARNING)
    n_err: int = sum(1 for d in items if d.level == DiagnosticLevel.ERROR)
    return DiagnosticStats(n_info=n_info, n_warning=n_warn, n_error=n_err)


def diagnostics_counts_to_dict(diagnostics: Iterable[Diagnostic]) -> dict[str, int]:
    """Return a JSON-friendly mapping of counts by severity for any iterable."""
    stats: DiagnosticStats = compute_diagnostic_stats(diagnostics)
    return {
        "info": stats.n_info,
        "warning": stats.n_warning,
        "error": stats.n_error,
    }
