#
#   project      : EventMeta
#   file         : docs.py
#   file_relpath : src/eventmeta/types/docs.py
#   license      : MIT
#   copyright    : (c) 2025 EventMeta contributors
#

"""Documentation snapshots from JSDoc comments."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Final

from eventmeta.events.models import DocsSnapshot, DocsTag

if TYPE_CHECKING:
    from eventmeta.types.protocol import Symbol, TypeChecker

_TAG_LINE: Final[re.Pattern[str]] = re.compile(r"^@(\w+)\s*(.*)$")


def _comment_lines(comment: str) -> list[str]:
    body = comment.strip()
    body = body[3:] if body.startswith("/**") else body
    body = body[:-2] if body.endswith("*/") else body
    lines: list[str] = []
    for raw in body.splitlines():
        line = raw.strip()
        if line.startswith("*"):
            line = line[1:]
            if line.startswith(" "):
                line = line[1:]
        lines.append(line.rstrip())
    return lines


def parse_jsdoc(comment: str | None) -> DocsSnapshot:
    """Split a ``/** ... */`` comment into description text and block tags.

    Anything that is not a JSDoc block yields the empty snapshot. Lines that
    follow a tag line continue that tag's text.
    """
    if not comment or not comment.lstrip().startswith("/**"):
        return DocsSnapshot()

    text_lines: list[str] = []
    tags: list[tuple[str, list[str]]] = []
    for line in _comment_lines(comment):
        match = _TAG_LINE.match(line.strip())
        if match:
            tags.append((match.group(1), [match.group(2)] if match.group(2) else []))
        elif tags:
            tags[-1][1].append(line)
        else:
            text_lines.append(line)

    return DocsSnapshot(
        text="\n".join(text_lines).strip(),
        tags=tuple(
            DocsTag(name=name, text="\n".join(parts).strip() or None) for name, parts in tags
        ),
    )


def serialize_symbol(checker: TypeChecker, symbol: Symbol | None) -> DocsSnapshot:
    """Build the documentation snapshot of ``symbol``."""
    if symbol is None:
        return DocsSnapshot()
    return parse_jsdoc(symbol.doc_comment)
