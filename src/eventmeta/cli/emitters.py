#
#   project      : EventMeta
#   file         : emitters.py
#   file_relpath : src/eventmeta/cli/emitters.py
#   license      : MIT
#   copyright    : (c) 2025 EventMeta contributors
#

"""Human and machine renderers for scan results.

Emitters only format; the ``scan`` command decides what to print where and
which exit code to use.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from eventmeta.api import ModuleScanResult
    from eventmeta.cli.console import ConsoleLike
    from eventmeta.diagnostic.model import Diagnostic
    from eventmeta.events.models import EventDescriptor


def format_diagnostic(diagnostic: Diagnostic, *, color: bool = False) -> str:
    """Render ``diagnostic`` as ``file:line:col: level: message``."""
    level = diagnostic.level.value
    if color:
        level = diagnostic.level.color(level)
    if diagnostic.location is None:
        return f"{level}: {diagnostic.message}"
    return f"{diagnostic.location}: {level}: {diagnostic.message}"


def _event_flags(event: EventDescriptor) -> str:
    off = [
        name
        for name, value in (
            ("bubbles", event.bubbles),
            ("cancelable", event.cancelable),
            ("composed", event.composed),
        )
        if not value
    ]
    return f" [no {', no '.join(off)}]" if off else ""


def emit_text(console: ConsoleLike, results: Sequence[ModuleScanResult], *, verbose: bool) -> None:
    """Print a readable listing of classes and their events."""
    for result in results:
        if not result.classes and not verbose:
            continue
        console.print(console.styled(result.path or "<source>", bold=True))
        if not result.classes:
            console.print("  (no component classes)")
        for cls in result.classes:
            console.print(f"  {cls.name}: {len(cls.events)} event(s)")
            for event in cls.events:
                method = "" if event.method == event.name else f" ({event.method})"
                console.print(
                    f"    {console.styled(event.name, fg='cyan')}{method}: "
                    f"{event.complex_type.resolved}{_event_flags(event)}"
                )
                if verbose and event.docs.text:
                    console.print(f"      {event.docs.text.splitlines()[0]}")


def emit_summary(
    console: ConsoleLike,
    results: Sequence[ModuleScanResult],
    diagnostics: Iterable[Diagnostic],
) -> None:
    """Print the one-line run summary."""
    n_events = sum(result.event_count for result in results)
    n_classes = sum(len(result.classes) for result in results)
    n_warnings = sum(1 for _ in diagnostics)
    console.print(
        f"Scanned {len(results)} file(s): {n_classes} class(es), "
        f"{n_events} event(s), {n_warnings} diagnostic(s)"
    )


def emit_json(console: ConsoleLike, results: Sequence[ModuleScanResult], extra: dict[str, Any]) -> None:
    """Print all results as a single JSON document."""
    payload = {
        **extra,
        "files": [result.to_dict() for result in results],
        "summary": {
            "files": len(results),
            "events": sum(result.event_count for result in results),
            "diagnostics": sum(len(result.all_diagnostics()) for result in results),
        },
    }
    console.print(json.dumps(payload, indent=2))


def emit_ndjson(console: ConsoleLike, results: Sequence[ModuleScanResult]) -> None:
    """Print one JSON record per scanned file."""
    for result in results:
        console.print(json.dumps(result.to_dict()))


def emit_literal(console: ConsoleLike, results: Sequence[ModuleScanResult]) -> None:
    """Print the synthesized static members as TypeScript source."""
    for result in results:
        for cls in result.classes:
            for member in cls.members:
                console.print(f"// {result.path or '<source>'} {cls.name}")
                console.print(member.render())
                console.print()
