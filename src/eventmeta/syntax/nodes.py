#
#   project      : EventMeta
#   file         : nodes.py
#   file_relpath : src/eventmeta/syntax/nodes.py
#   license      : MIT
#   copyright    : (c) 2025 EventMeta contributors
#

"""Adapter-neutral syntax-tree view.

The extraction core never touches a concrete parser's node types. Parser
adapters (see `eventmeta.syntax.typescript`) translate their trees into the
immutable records defined here, which the core only reads.

Sections:
    * SourceLocation: where a node lives, used as diagnostic context.
    * TypeNode: a declared type annotation, with generic arguments.
    * Decorator: an annotation tag and its positional arguments.
    * ClassMember / ClassDeclaration: the class surface the core walks.
    * ImportBinding / TypeDeclaration / SourceModule: module-level context
      used by the type-resolution service.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


@dataclass(frozen=True)
class SourceLocation:
    """1-based position of a node, with the node's source text for context."""

    path: str | None
    line: int
    column: int
    text: str = ""

    def __str__(self) -> str:
        return f"{self.path or '<source>'}:{self.line}:{self.column}"


class TypeNodeKind(Enum):
    """Shape of a declared type node."""

    REFERENCE = "reference"
    KEYWORD = "keyword"
    LITERAL = "literal"
    UNION = "union"
    INTERSECTION = "intersection"
    ARRAY = "array"
    TUPLE = "tuple"
    OBJECT = "object"
    FUNCTION = "function"
    PARENTHESIZED = "parenthesized"
    OTHER = "other"


@dataclass(frozen=True)
class TypeNode:
    """A declared type as written in source.

    Attributes:
        kind: The node shape.
        text: Source rendering of the whole node.
        name: Referenced type name for `TypeNodeKind.REFERENCE` nodes. Qualified
            names keep their dots (``Foo.Bar``).
        type_arguments: Generic arguments of a reference, in source order.
        children: Constituent type nodes for composite shapes (union members,
            array element, tuple elements, object member types, ...).
        location: Source position, if known.
    """

    kind: TypeNodeKind
    text: str
    name: str | None = None
    type_arguments: tuple[TypeNode, ...] = ()
    children: tuple[TypeNode, ...] = ()
    location: SourceLocation | None = None

    def walk(self) -> Iterable[TypeNode]:
        """Yield this node and every nested type node, depth first."""
        yield self
        for arg in self.type_arguments:
            yield from arg.walk()
        for child in self.children:
            yield from child.walk()


@dataclass(frozen=True)
class Expression:
    """Opaque decorator argument that is not a plain literal."""

    text: str


@dataclass(frozen=True)
class Decorator:
    """An annotation attached to a declaration.

    ``arguments`` holds the positional call arguments with object literals
    evaluated to ``dict``, primitive literals to Python values, and anything
    else wrapped in `Expression`. A bare ``@Name`` has no arguments.
    """

    name: str
    arguments: tuple[Any, ...] = ()
    location: SourceLocation | None = None


class MemberKind(Enum):
    """Kind of class member."""

    PROPERTY = "property"
    METHOD = "method"
    GETTER = "getter"
    SETTER = "setter"
    CONSTRUCTOR = "constructor"
    OTHER = "other"


@dataclass(frozen=True)
class ClassMember:
    """A single member of a class body."""

    kind: MemberKind
    name: str
    decorators: tuple[Decorator, ...] = ()
    type_node: TypeNode | None = None
    location: SourceLocation | None = None
    doc_comment: str | None = None
    is_static: bool = False

    @property
    def is_property(self) -> bool:
        """Return True for property-like declarations."""
        return self.kind is MemberKind.PROPERTY


@dataclass(frozen=True)
class ClassDeclaration:
    """A class and its members in source order."""

    name: str
    members: tuple[ClassMember, ...] = ()
    decorators: tuple[Decorator, ...] = ()
    location: SourceLocation | None = None
    doc_comment: str | None = None


@dataclass(frozen=True)
class ImportBinding:
    """A name brought into module scope by an import statement."""

    local_name: str
    imported_name: str
    module: str


class TypeDeclarationKind(Enum):
    """Kind of module-level declaration that introduces a type name."""

    INTERFACE = "interface"
    TYPE_ALIAS = "type"
    ENUM = "enum"
    CLASS = "class"


@dataclass(frozen=True)
class TypeDeclaration:
    """A module-level declaration that introduces a type name.

    ``value`` is the aliased type for `TypeDeclarationKind.TYPE_ALIAS` entries.
    """

    name: str
    kind: TypeDeclarationKind
    exported: bool = False
    value: TypeNode | None = None
    location: SourceLocation | None = None


@dataclass(frozen=True)
class SourceModule:
    """A parsed source file."""

    path: str | None
    classes: tuple[ClassDeclaration, ...] = ()
    imports: tuple[ImportBinding, ...] = ()
    type_declarations: tuple[TypeDeclaration, ...] = ()
    parse_errors: tuple[SourceLocation, ...] = field(default=(), compare=False)

    def find_import(self, local_name: str) -> ImportBinding | None:
        """Return the import binding for ``local_name``, if any."""
        return next((imp for imp in self.imports if imp.local_name == local_name), None)

    def find_type_declaration(self, name: str) -> TypeDeclaration | None:
        """Return the module-level type declaration named ``name``, if any."""
        return next((decl for decl in self.type_declarations if decl.name == name), None)


def find_decorator(decorators: Sequence[Decorator], name: str) -> Decorator | None:
    """Return the first decorator whose name equals ``name``."""
    return next((dec for dec in decorators if dec.name == name), None)


def get_declaration_parameters(decorator: Decorator) -> list[Any]:
    """Return the positional arguments supplied to ``decorator``."""
    return list(decorator.arguments)
