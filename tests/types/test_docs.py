#
#   project      : EventMeta
#   file         : test_docs.py
#   file_relpath : tests/types/test_docs.py
#   license      : MIT
#   copyright    : (c) 2025 EventMeta contributors
#

"""JSDoc snapshots."""

from __future__ import annotations

from eventmeta.events.models import DocsSnapshot, DocsTag
from eventmeta.syntax.nodes import SourceModule
from eventmeta.types.checker import SourceTypeChecker
from eventmeta.types.docs import parse_jsdoc, serialize_symbol
from eventmeta.types.protocol import Symbol


def test_plain_comments_are_not_docs() -> None:
    """It should ignore line comments and non-JSDoc blocks."""
    assert parse_jsdoc(None) == DocsSnapshot()
    assert parse_jsdoc("// note") == DocsSnapshot()
    assert parse_jsdoc("/* note */") == DocsSnapshot()


def test_single_line() -> None:
    """It should read one-line JSDoc blocks."""
    assert parse_jsdoc("/** Fired on close. */") == DocsSnapshot(text="Fired on close.")


def test_text_and_tags() -> None:
    """It should split description and block tags, with continuation lines."""
    docs = parse_jsdoc(
        "/**\n"
        "   * Fired when the value changes.\n"
        "   *\n"
        "   * Second paragraph.\n"
        "   * @deprecated use valueChange\n"
        "   *   instead.\n"
        "   * @internal\n"
        "   */"
    )

    assert docs.text == "Fired when the value changes.\n\nSecond paragraph."
    assert docs.tags == (
        DocsTag("deprecated", "use valueChange\n  instead."),
        DocsTag("internal"),
    )
    assert docs.to_dict()["tags"] == [
        {"name": "deprecated", "text": "use valueChange\n  instead."},
        {"name": "internal"},
    ]


def test_serialize_symbol() -> None:
    """It should snapshot a symbol's comment and tolerate unresolved symbols."""
    checker = SourceTypeChecker(SourceModule(path=None))

    assert serialize_symbol(checker, None) == DocsSnapshot()
    assert serialize_symbol(checker, Symbol("x", "/** X. */")).text == "X."
