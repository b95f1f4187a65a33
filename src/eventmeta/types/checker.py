#
#   project      : EventMeta
#   file         : checker.py
#   file_relpath : src/eventmeta/types/checker.py
#   license      : MIT
#   copyright    : (c) 2025 EventMeta contributors
#

"""Type resolution over a single parsed source module."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Final

from eventmeta.config.logging import get_logger
from eventmeta.events.models import TypeReference
from eventmeta.syntax.nodes import TypeDeclarationKind, TypeNodeKind
from eventmeta.types.protocol import Symbol

if TYPE_CHECKING:
    from eventmeta.config.logging import EventMetaLogger
    from eventmeta.syntax.nodes import ClassMember, SourceModule, TypeNode

logger: EventMetaLogger = get_logger(__name__)

# Composite shapes that need parentheses when used as an array element.
_NEEDS_PARENS_IN_ARRAY: Final[frozenset[TypeNodeKind]] = frozenset(
    {TypeNodeKind.UNION, TypeNodeKind.INTERSECTION, TypeNodeKind.FUNCTION}
)


def _collapse(text: str) -> str:
    return " ".join(text.split())


class SourceTypeChecker:
    """`TypeChecker` backed by the declarations of one `SourceModule`.

    Local ``type`` aliases are expanded when rendering; interfaces, enums and
    classes render by name. Names that are neither imported nor declared in
    the module are treated as globals.
    """

    def __init__(self, module: SourceModule) -> None:
        self.module = module

    def get_member_type(self, member: ClassMember) -> TypeNode | None:
        return member.type_node

    def resolve_symbol(self, member: ClassMember) -> Symbol | None:
        if not member.name:
            return None
        return Symbol(name=member.name, doc_comment=member.doc_comment, location=member.location)

    def render_type(self, type_node: TypeNode) -> str:
        return self._render(type_node, frozenset())

    def _render(self, node: TypeNode, expanding: frozenset[str]) -> str:
        kind = node.kind
        if kind is TypeNodeKind.REFERENCE and node.name:
            if node.type_arguments:
                args = ", ".join(self._render(arg, expanding) for arg in node.type_arguments)
                return f"{node.name}<{args}>"
            decl = self.module.find_type_declaration(node.name)
            if (
                decl is not None
                and decl.kind is TypeDeclarationKind.TYPE_ALIAS
                and decl.value is not None
                and node.name not in expanding
            ):
                logger.trace("Expanding type alias %s", node.name)
                return self._render(decl.value, expanding | {node.name})
            return node.name
        if kind is TypeNodeKind.UNION and node.children:
            return " | ".join(self._render(child, expanding) for child in node.children)
        if kind is TypeNodeKind.INTERSECTION and node.children:
            return " & ".join(self._render(child, expanding) for child in node.children)
        if kind is TypeNodeKind.ARRAY and node.children:
            element = node.children[0]
            inner = self._render(element, expanding)
            if element.kind in _NEEDS_PARENS_IN_ARRAY or (
                element.kind is TypeNodeKind.PARENTHESIZED and (" | " in inner or " & " in inner)
            ):
                return f"({inner})[]"
            return f"{inner}[]"
        if kind is TypeNodeKind.TUPLE:
            return "[" + ", ".join(self._render(child, expanding) for child in node.children) + "]"
        if kind is TypeNodeKind.PARENTHESIZED and node.children:
            return self._render(node.children[0], expanding)
        if kind is TypeNodeKind.LITERAL:
            text = node.text.strip()
            if len(text) >= 2 and text[0] == text[-1] == "'":
                # String literal types render double-quoted
                return json.dumps(text[1:-1])
            return text
        return _collapse(node.text)

    def get_type_references(self, type_node: TypeNode) -> dict[str, TypeReference]:
        references: dict[str, TypeReference] = {}
        for node in type_node.walk():
            if node.kind is not TypeNodeKind.REFERENCE or not node.name:
                continue
            # Qualified names (`Ns.Type`) resolve through their leftmost identifier
            name = node.name.split(".", 1)[0]
            if name not in references:
                references[name] = self._locate(name)
        return references

    def _locate(self, name: str) -> TypeReference:
        imported = self.module.find_import(name)
        if imported is not None:
            return TypeReference(
                location="import",
                path=imported.module,
                id=f"{imported.module}::{imported.imported_name}",
            )
        if self.module.find_type_declaration(name) is not None:
            path = self.module.path or ""
            return TypeReference(location="local", path=path, id=f"{path}::{name}")
        return TypeReference(location="global", id=f"global::{name}")
