#
#   project      : EventMeta
#   file         : test_typescript.py
#   file_relpath : tests/syntax/test_typescript.py
#   license      : MIT
#   copyright    : (c) 2025 EventMeta contributors
#

"""Tree-sitter adapter: classes, members, decorators, types and imports."""

from __future__ import annotations

from eventmeta.syntax.nodes import (
    Expression,
    MemberKind,
    TypeDeclarationKind,
    TypeNodeKind,
    find_decorator,
    get_declaration_parameters,
)
from eventmeta.syntax.typescript import parse_source
from tests.conftest import parse_ts

COMPONENT = """\
import { Component, Event, EventEmitter, h } from '@stencil/core';
import type { Detail as Payload } from './types';
import * as api from './api';

/** A toggle. */
@Component({ tag: 'my-toggle', shadow: true })
export class MyToggle {
  /**
   * Fired when toggled.
   */
  @Event({ eventName: 'toggled', bubbles: false, composed: true }) myToggle: EventEmitter<boolean>;

  @Event() detailChange!: EventEmitter<Payload>;

  value = 1;

  static tagName = 'my-toggle';

  @Method()
  async reset() {}

  get checked() {
    return true;
  }

  render() {
    return <div />;
  }
}
"""


def test_class_and_decorator() -> None:
    """It should read exported classes with their decorators and arguments."""
    module = parse_ts(COMPONENT)

    assert [cls.name for cls in module.classes] == ["MyToggle"]
    cls = module.classes[0]
    component = find_decorator(cls.decorators, "Component")
    assert component is not None
    assert get_declaration_parameters(component) == [{"tag": "my-toggle", "shadow": True}]
    assert cls.doc_comment == "/** A toggle. */"
    assert cls.location is not None and cls.location.path == "src/cmp.tsx"
    assert module.parse_errors == ()


def test_members_in_source_order() -> None:
    """It should translate members with their kinds, keeping source order."""
    members = parse_ts(COMPONENT).classes[0].members

    assert [(m.name, m.kind) for m in members] == [
        ("myToggle", MemberKind.PROPERTY),
        ("detailChange", MemberKind.PROPERTY),
        ("value", MemberKind.PROPERTY),
        ("tagName", MemberKind.PROPERTY),
        ("reset", MemberKind.METHOD),
        ("checked", MemberKind.GETTER),
        ("render", MemberKind.METHOD),
    ]
    assert [m.is_static for m in members][:4] == [False, False, False, True]


def test_event_member_details() -> None:
    """It should keep decorator arguments, type and doc comment of an event member."""
    member = parse_ts(COMPONENT).classes[0].members[0]

    event = find_decorator(member.decorators, "Event")
    assert event is not None
    assert event.arguments == ({"eventName": "toggled", "bubbles": False, "composed": True},)
    assert member.doc_comment is not None and "Fired when toggled." in member.doc_comment
    assert member.type_node is not None
    assert member.type_node.kind is TypeNodeKind.REFERENCE
    assert member.type_node.name == "EventEmitter"
    assert [arg.text for arg in member.type_node.type_arguments] == ["boolean"]
    assert member.location is not None and member.location.line == 11


def test_line_comments_keep_jsdoc_attached() -> None:
    """It should skip line and block comments between a JSDoc and its declaration."""
    module = parse_ts(
        """\
/** A toggle. */
// eslint-disable-next-line
@Component({ tag: 'my-toggle' })
export class MyToggle {
  /** Fired on change. */
  // eslint-disable-next-line @stencil/strict-mutable
  /* legacy */
  @Event() myChange: EventEmitter<string>;

  // plain note
  value = 1;
}
"""
    )

    cls = module.classes[0]
    event, value = cls.members
    assert cls.doc_comment == "/** A toggle. */"
    assert event.doc_comment == "/** Fired on change. */"
    assert value.doc_comment is None


def test_method_decorators_are_attached() -> None:
    """It should attach decorators written before a method."""
    reset = parse_ts(COMPONENT).classes[0].members[4]

    assert [d.name for d in reset.decorators] == ["Method"]
    assert reset.decorators[0].arguments == ()


def test_imports() -> None:
    """It should record named, aliased and namespace imports."""
    module = parse_ts(COMPONENT)

    event_emitter = module.find_import("EventEmitter")
    assert event_emitter is not None and event_emitter.module == "@stencil/core"
    payload = module.find_import("Payload")
    assert payload is not None
    assert (payload.imported_name, payload.module) == ("Detail", "./types")
    namespace = module.find_import("api")
    assert namespace is not None and namespace.imported_name == "*"


def test_type_declarations() -> None:
    """It should record module-level type names and alias values."""
    module = parse_source(
        "export type Mode = 'on' | 'off';\n"
        "interface Point { x: number }\n"
        "enum Color { Red }\n",
        "types.ts",
    )

    mode = module.find_type_declaration("Mode")
    assert mode is not None
    assert mode.kind is TypeDeclarationKind.TYPE_ALIAS
    assert mode.exported is True
    assert mode.value is not None and mode.value.kind is TypeNodeKind.UNION
    assert len(mode.value.children) == 2

    point = module.find_type_declaration("Point")
    assert point is not None and point.kind is TypeDeclarationKind.INTERFACE
    assert point.exported is False
    color = module.find_type_declaration("Color")
    assert color is not None and color.kind is TypeDeclarationKind.ENUM


def test_union_is_flattened() -> None:
    """It should flatten chained unions into one node."""
    member = parse_source(
        "class A { @Event() x: EventEmitter<string | number | null>; }", "a.ts"
    ).classes[0].members[0]

    assert member.type_node is not None
    union = member.type_node.type_arguments[0]
    assert union.kind is TypeNodeKind.UNION
    assert [child.text for child in union.children] == ["string", "number", "null"]


def test_literal_arguments() -> None:
    """It should evaluate literal arguments and keep other expressions opaque."""
    member = parse_source(
        "class A {\n"
        "  @Deco(`tpl`, 0x10, 1.5, [null, undefined], -1, OPTIONS, { 'quoted-key': 'v\\n' })\n"
        "  x;\n"
        "}\n",
        "a.ts",
    ).classes[0].members[0]

    args = member.decorators[0].arguments
    assert args[:4] == ("tpl", 16, 1.5, [None, None])
    assert isinstance(args[4], Expression)
    assert args[5] == Expression("OPTIONS")
    assert args[6] == {"quoted-key": "v\n"}


def test_string_member_names_are_unquoted() -> None:
    """It should strip quotes from string-literal member names."""
    member = parse_source("class A { @Event() 'my-event': EventEmitter; }", "a.ts").classes[0].members[0]

    assert member.name == "my-event"


def test_syntax_errors_are_recorded() -> None:
    """It should recover from malformed source and record the error positions."""
    module = parse_source("class A {\n  @Event() x: EventEmitter<string>;\n  ??? \n}\n", "a.ts")

    assert module.parse_errors
    assert all(err.path == "a.ts" for err in module.parse_errors)


def test_plain_ts_grammar_is_used_for_ts_files() -> None:
    """It should parse angle-bracket casts in ``.ts`` files."""
    module = parse_source("const x = <any>y;\nclass A {}\n", "a.ts")

    assert module.parse_errors == ()
    assert [cls.name for cls in module.classes] == ["A"]
