#
#   project      : EventMeta
#   file         : api.py
#   file_relpath : src/eventmeta/api.py
#   license      : MIT
#   copyright    : (c) 2025 EventMeta contributors
#

"""Public API for EventMeta.

`scan_source` and `scan_file` parse TypeScript, run event extraction over
every component class and return the synthesized ``events`` members together
with the warnings collected along the way. Nothing is printed and no files
are written.

Examples:
    ```python
    from eventmeta.api import scan_source

    result = scan_source(source_text, "src/my-toggle.tsx")
    for cls in result.classes:
        print(cls.name, [event.name for event in cls.events])
    ```
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from eventmeta.config.logging import get_logger
from eventmeta.config.model import Config
from eventmeta.diagnostic.model import DiagnosticLog
from eventmeta.events.extractor import event_decorators_to_static
from eventmeta.syntax.nodes import find_decorator
from eventmeta.syntax.typescript import parse_source
from eventmeta.types.checker import SourceTypeChecker

if TYPE_CHECKING:
    from pathlib import Path

    from eventmeta.config.logging import EventMetaLogger
    from eventmeta.emit.static import StaticGetter
    from eventmeta.events.models import EventDescriptor
    from eventmeta.syntax.nodes import ClassDeclaration, SourceLocation, SourceModule

logger: EventMetaLogger = get_logger(__name__)


@dataclass
class ClassScanResult:
    """Extraction result for one class."""

    name: str
    location: SourceLocation | None
    events: tuple[EventDescriptor, ...] = ()
    members: list[StaticGetter] = field(default_factory=lambda: [])
    diagnostics: DiagnosticLog = field(default_factory=DiagnosticLog)

    def to_dict(self) -> dict[str, Any]:
        return {
            "class": self.name,
            "line": self.location.line if self.location is not None else None,
            "events": [event.to_dict() for event in self.events],
            "diagnostics": [d.to_dict() for d in self.diagnostics],
        }


@dataclass
class ModuleScanResult:
    """Extraction result for one source file."""

    path: str | None
    classes: list[ClassScanResult] = field(default_factory=lambda: [])
    diagnostics: DiagnosticLog = field(default_factory=DiagnosticLog)

    def all_diagnostics(self) -> DiagnosticLog:
        """Return module and class diagnostics combined, in reporting order."""
        log = DiagnosticLog()
        log.extend(self.diagnostics)
        for cls in self.classes:
            log.extend(cls.diagnostics)
        return log

    @property
    def event_count(self) -> int:
        return sum(len(cls.events) for cls in self.classes)

    def to_dict(self) -> dict[str, Any]:
        return {
            "file": self.path,
            "classes": [cls.to_dict() for cls in self.classes],
            "diagnostics": [d.to_dict() for d in self.diagnostics],
        }


def _is_candidate(declaration: ClassDeclaration, config: Config) -> bool:
    if config.all_classes:
        return True
    return find_decorator(declaration.decorators, config.component_decorator) is not None


def scan_module(module: SourceModule, *, config: Config | None = None) -> ModuleScanResult:
    """Run event extraction over the classes of an already parsed module."""
    config = config or Config.from_defaults()
    result = ModuleScanResult(path=module.path)
    if module.parse_errors:
        first = module.parse_errors[0]
        result.diagnostics.add_warning(
            f"Source contains {len(module.parse_errors)} syntax error(s); "
            "extracted metadata may be incomplete.",
            first,
        )

    checker = SourceTypeChecker(module)
    for declaration in module.classes:
        if not _is_candidate(declaration, config):
            logger.trace("Skipping class %s (no @%s)", declaration.name, config.component_decorator)
            continue
        cls = ClassScanResult(name=declaration.name, location=declaration.location)
        cls.events = event_decorators_to_static(
            cls.diagnostics,
            declaration.members,
            checker,
            cls.members,
            config.settings,
        )
        logger.debug("%s: %d event(s)", declaration.name, len(cls.events))
        result.classes.append(cls)
    return result


def scan_source(
    source: str,
    path: str | None = None,
    *,
    config: Config | None = None,
) -> ModuleScanResult:
    """Parse TypeScript ``source`` and extract event metadata.

    Args:
        source: TypeScript or TSX source text.
        path: Path used in locations and local type reference ids.
        config: Effective configuration; defaults are used when omitted.

    Returns:
        The per-class extraction results.
    """
    return scan_module(parse_source(source, path), config=config)


def scan_file(path: Path, *, config: Config | None = None) -> ModuleScanResult:
    """Read ``path`` and extract event metadata from it.

    Raises:
        OSError: If the file cannot be read.
        UnicodeDecodeError: If the file is not valid UTF-8.
    """
    source = path.read_text(encoding="utf-8")
    return scan_source(source, path.as_posix(), config=config)
