#
#   project      : EventMeta
#   file         : file_resolver.py
#   file_relpath : src/eventmeta/file_resolver.py
#   license      : MIT
#   copyright    : (c) 2025 EventMeta contributors
#

"""Resolve input files for EventMeta.

Directories are walked for TypeScript sources (``.ts``/``.tsx``, declaration
files excluded). Exclude patterns use gitignore semantics and are evaluated
relative to the current working directory. The result is deterministic and
sorted, with duplicates removed.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING, Final

from pathspec import PathSpec
from pathspec.patterns.gitwildmatch import GitWildMatchPattern

from eventmeta.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from eventmeta.config.logging import EventMetaLogger

logger: EventMetaLogger = get_logger(__name__)

SOURCE_SUFFIXES: Final[tuple[str, ...]] = (".ts", ".tsx")


def is_source_file(path: Path) -> bool:
    """Return True for TypeScript sources that may declare components."""
    name = path.name
    return name.endswith(SOURCE_SUFFIXES) and not name.endswith(".d.ts")


def _match_path(path: Path, base: Path) -> str:
    """Return a POSIX-style relative path (or absolute as fallback) for PathSpec matching."""
    try:
        return path.resolve().relative_to(base.resolve()).as_posix()
    except ValueError:
        return path.resolve().as_posix()


def _walk_sources(directory: Path, spec: PathSpec | None, root: Path) -> list[Path]:
    """Return the source files below ``directory``, skipping excluded directories."""
    sources: list[Path] = []
    for dirpath, dirnames, filenames in os.walk(directory):
        current = Path(dirpath)
        if spec is not None:
            # Excluded directories are pruned in place so they are never entered
            dirnames[:] = [
                name
                for name in dirnames
                if not spec.match_file(_match_path(current / name, root) + "/")
            ]
        sources.extend(current / name for name in filenames if is_source_file(current / name))
    return sources


def resolve_file_list(
    paths: Iterable[Path],
    exclude_patterns: Sequence[str] = (),
    *,
    base: Path | None = None,
) -> list[Path]:
    """Expand ``paths`` into the sorted list of source files to scan.

    Explicit files are kept even without a TypeScript suffix; files found by
    walking directories must be TypeScript sources. Both are subject to the
    exclude patterns.

    Args:
        paths: Files and directories given by the user.
        exclude_patterns: Gitignore-style exclude patterns.
        base: Directory patterns are relative to. Defaults to the CWD.

    Returns:
        Sorted, de-duplicated files.
    """
    root = base or Path.cwd()
    spec: PathSpec | None = (
        PathSpec.from_lines(GitWildMatchPattern, list(exclude_patterns))
        if exclude_patterns
        else None
    )

    found: set[Path] = set()
    for path in paths:
        if path.is_dir():
            candidates = _walk_sources(path, spec, root)
        else:
            candidates = [path]
        for candidate in candidates:
            if spec is not None and spec.match_file(_match_path(candidate, root)):
                logger.debug("Excluded by pattern: %s", candidate)
                continue
            found.add(candidate)

    return sorted(found)
