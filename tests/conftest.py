#
#   project      : EventMeta
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 EventMeta contributors
#

"""Pytest configuration for the EventMeta test suite.

Sets up TRACE logging for the whole run and provides small builders for the
adapter-neutral syntax records so extraction tests do not need a parser.

Notes:
    Tests that need real TypeScript go through `eventmeta.syntax.typescript`
    (see `parse_ts`); everything else builds `ClassMember` records directly.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest

from eventmeta.config.logging import ENV_LOG_LEVEL, TRACE_LEVEL, setup_logging
from eventmeta.syntax.nodes import (
    ClassMember,
    Decorator,
    MemberKind,
    SourceLocation,
    SourceModule,
    TypeNode,
    TypeNodeKind,
)
from eventmeta.syntax.typescript import parse_source

if TYPE_CHECKING:
    from collections.abc import Sequence


@pytest.fixture(autouse=True)
def silence_eventmeta_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure EventMeta's runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv(ENV_LOG_LEVEL, raising=False)


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Log at TRACE for every test so failures come with a full account."""
    setup_logging(level=TRACE_LEVEL)


def loc(line: int = 1, column: int = 1, path: str | None = "cmp.tsx") -> SourceLocation:
    """Return a `SourceLocation` for hand-built nodes."""
    return SourceLocation(path, line, column)


def ref(name: str, *args: TypeNode) -> TypeNode:
    """Return a reference type node such as ``EventEmitter<T>``."""
    text = f"{name}<{', '.join(a.text for a in args)}>" if args else name
    return TypeNode(TypeNodeKind.REFERENCE, text, name=name, type_arguments=args, location=loc())


def keyword(name: str) -> TypeNode:
    """Return a predefined type node (``string``, ``number``, ...)."""
    return TypeNode(TypeNodeKind.KEYWORD, name, location=loc())


def event_decorator(*arguments: Any, name: str = "Event") -> Decorator:
    """Return an ``@Event(...)`` decorator with evaluated arguments."""
    return Decorator(name=name, arguments=arguments, location=loc())


def prop(
    name: str,
    type_node: TypeNode | None = None,
    decorators: Sequence[Decorator] = (),
    *,
    doc_comment: str | None = None,
    line: int = 1,
) -> ClassMember:
    """Return a property member."""
    return ClassMember(
        kind=MemberKind.PROPERTY,
        name=name,
        decorators=tuple(decorators),
        type_node=type_node,
        location=loc(line),
        doc_comment=doc_comment,
    )


def method(name: str, decorators: Sequence[Decorator] = ()) -> ClassMember:
    """Return a method member."""
    return ClassMember(kind=MemberKind.METHOD, name=name, decorators=tuple(decorators), location=loc())


def parse_ts(source: str, path: str = "src/cmp.tsx") -> SourceModule:
    """Parse TypeScript ``source`` with the tree-sitter adapter."""
    return parse_source(source, path)
