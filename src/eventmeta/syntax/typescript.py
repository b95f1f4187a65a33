#
#   project      : EventMeta
#   file         : typescript.py
#   file_relpath : src/eventmeta/syntax/typescript.py
#   license      : MIT
#   copyright    : (c) 2025 EventMeta contributors
#

"""Tree-sitter powered TypeScript adapter.

Parses ``.ts``/``.tsx`` source and translates the concrete syntax tree into
the neutral records of `eventmeta.syntax.nodes`. Only the parts the event
extractor and the type-resolution service need are translated: classes and
their members, decorators with literal arguments, declared types, JSDoc
comments, imports and module-level type declarations.

Malformed source never raises: tree-sitter recovers with ``ERROR`` nodes,
which are recorded on the module and otherwise skipped.
"""

from __future__ import annotations

import re
from functools import lru_cache
from typing import TYPE_CHECKING, Any, Final

import tree_sitter_typescript
from tree_sitter import Language, Parser

from eventmeta.config.logging import get_logger
from eventmeta.syntax.nodes import (
    ClassDeclaration,
    ClassMember,
    Decorator,
    Expression,
    ImportBinding,
    MemberKind,
    SourceLocation,
    SourceModule,
    TypeDeclaration,
    TypeDeclarationKind,
    TypeNode,
    TypeNodeKind,
)

if TYPE_CHECKING:
    from tree_sitter import Node

    from eventmeta.config.logging import EventMetaLogger

logger: EventMetaLogger = get_logger(__name__)

_SIMPLE_TYPE_KINDS: Final[dict[str, TypeNodeKind]] = {
    "type_identifier": TypeNodeKind.REFERENCE,
    "nested_type_identifier": TypeNodeKind.REFERENCE,
    "predefined_type": TypeNodeKind.KEYWORD,
    "literal_type": TypeNodeKind.LITERAL,
    "object_type": TypeNodeKind.OBJECT,
    "function_type": TypeNodeKind.FUNCTION,
    "constructor_type": TypeNodeKind.FUNCTION,
    "tuple_type": TypeNodeKind.TUPLE,
    "array_type": TypeNodeKind.ARRAY,
    "parenthesized_type": TypeNodeKind.PARENTHESIZED,
}

# Type shapes translated as OTHER, keeping their nested types for reference lookup.
_OTHER_TYPE_NODES: Final[frozenset[str]] = frozenset(
    {
        "conditional_type",
        "index_type_query",
        "infer_type",
        "lookup_type",
        "optional_type",
        "readonly_type",
        "rest_type",
        "template_literal_type",
        "this_type",
        "type_predicate",
        "type_query",
        "existential_type",
    }
)

_TYPE_NODES: Final[frozenset[str]] = frozenset(
    {"generic_type", "union_type", "intersection_type", *_SIMPLE_TYPE_KINDS, *_OTHER_TYPE_NODES}
)

_TYPE_DECLARATIONS: Final[dict[str, TypeDeclarationKind]] = {
    "interface_declaration": TypeDeclarationKind.INTERFACE,
    "type_alias_declaration": TypeDeclarationKind.TYPE_ALIAS,
    "enum_declaration": TypeDeclarationKind.ENUM,
    "class_declaration": TypeDeclarationKind.CLASS,
    "abstract_class_declaration": TypeDeclarationKind.CLASS,
}

_CLASS_NODES: Final[frozenset[str]] = frozenset({"class_declaration", "abstract_class_declaration"})

_ESCAPES: Final[dict[str, str]] = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "b": "\b",
    "f": "\f",
    "v": "\v",
    "0": "\0",
}
_ESCAPE_RE: Final[re.Pattern[str]] = re.compile(r"\\(u\{[0-9a-fA-F]+\}|u[0-9a-fA-F]{4}|x[0-9a-fA-F]{2}|.)")


@lru_cache(maxsize=2)
def _get_parser(tsx: bool) -> Parser:
    language = Language(
        tree_sitter_typescript.language_tsx() if tsx else tree_sitter_typescript.language_typescript()
    )
    return Parser(language)


def _unescape(body: str) -> str:
    def _replace(match: re.Match[str]) -> str:
        esc = match.group(1)
        if esc.startswith("u{"):
            return chr(int(esc[2:-1], 16))
        if esc[0] in "ux" and len(esc) > 1:
            return chr(int(esc[1:], 16))
        return _ESCAPES.get(esc, esc)

    return _ESCAPE_RE.sub(_replace, body)


def parse_source(source: str, path: str | None = None, *, tsx: bool | None = None) -> SourceModule:
    """Parse TypeScript source into a `SourceModule`.

    Args:
        source: The source text.
        path: Path reported in locations and local type reference ids.
        tsx: Force the TSX grammar on or off. By default TSX is used unless
            ``path`` names a ``.ts`` file.

    Returns:
        The translated module.
    """
    if tsx is None:
        tsx = not (path is not None and path.endswith(".ts"))
    data = source.encode("utf-8")
    tree = _get_parser(tsx).parse(data)
    return _ModuleBuilder(data, path).build(tree.root_node)


class _ModuleBuilder:
    """Translates one parsed tree. Not reusable across trees."""

    def __init__(self, data: bytes, path: str | None) -> None:
        self.data = data
        self.path = path
        self.classes: list[ClassDeclaration] = []
        self.imports: list[ImportBinding] = []
        self.type_declarations: list[TypeDeclaration] = []
        self.parse_errors: list[SourceLocation] = []

    def text(self, node: Node) -> str:
        return self.data[node.start_byte : node.end_byte].decode("utf-8", errors="replace")

    def location(self, node: Node) -> SourceLocation:
        row, column = node.start_point[0], node.start_point[1]
        return SourceLocation(self.path, row + 1, column + 1, self.text(node))

    def is_doc_comment(self, node: Node) -> bool:
        return self.data[node.start_byte : node.start_byte + 3] == b"/**"

    # --- module level ---

    def build(self, root: Node) -> SourceModule:
        self._collect_errors(root)
        pending_comment: Node | None = None
        for child in root.named_children:
            if child.type == "comment":
                # Line and block comments keep the preceding JSDoc attached
                if self.is_doc_comment(child):
                    pending_comment = child
                continue
            if child.type == "import_statement":
                self._add_import(child)
            elif child.type == "export_statement":
                self._add_export(child, pending_comment)
            else:
                self._add_declaration(child, (), exported=False, comment=pending_comment)
            pending_comment = None

        return SourceModule(
            path=self.path,
            classes=tuple(self.classes),
            imports=tuple(self.imports),
            type_declarations=tuple(self.type_declarations),
            parse_errors=tuple(self.parse_errors),
        )

    def _collect_errors(self, root: Node) -> None:
        if not root.has_error:
            return
        stack = [root]
        while stack:
            node = stack.pop()
            if node.type == "ERROR" or node.is_missing:
                loc = self.location(node)
                logger.debug("Parse error at %s", loc)
                self.parse_errors.append(loc)
            elif node.has_error:
                stack.extend(node.children)

    def _add_import(self, node: Node) -> None:
        source = node.child_by_field_name("source")
        if source is None:
            return
        module = self._string_value(source)
        clause = next((c for c in node.named_children if c.type == "import_clause"), None)
        if clause is None:
            return
        for part in clause.named_children:
            if part.type == "identifier":
                name = self.text(part)
                self.imports.append(ImportBinding(name, "default", module))
            elif part.type == "namespace_import":
                ident = next((c for c in part.named_children if c.type == "identifier"), None)
                if ident is not None:
                    name = self.text(ident)
                    self.imports.append(ImportBinding(name, "*", module))
            elif part.type == "named_imports":
                for spec in part.named_children:
                    if spec.type != "import_specifier":
                        continue
                    name_node = spec.child_by_field_name("name")
                    alias_node = spec.child_by_field_name("alias")
                    if name_node is None:
                        continue
                    imported = self.text(name_node)
                    local = self.text(alias_node) if alias_node is not None else imported
                    self.imports.append(ImportBinding(local, imported, module))

    def _add_export(self, node: Node, comment: Node | None) -> None:
        decorators = tuple(
            self._decorator(c) for c in node.children_by_field_name("decorator")
        )
        declaration = node.child_by_field_name("declaration")
        if declaration is not None:
            self._add_declaration(declaration, decorators, exported=True, comment=comment)

    def _add_declaration(
        self,
        node: Node,
        outer_decorators: tuple[Decorator, ...],
        *,
        exported: bool,
        comment: Node | None,
    ) -> None:
        kind = _TYPE_DECLARATIONS.get(node.type)
        if kind is None:
            return
        name_node = node.child_by_field_name("name")
        if name_node is None:
            return
        name = self.text(name_node)
        value: TypeNode | None = None
        if kind is TypeDeclarationKind.TYPE_ALIAS:
            value_node = node.child_by_field_name("value")
            value = self.type_node(value_node) if value_node is not None else None
        self.type_declarations.append(
            TypeDeclaration(name, kind, exported=exported, value=value, location=self.location(node))
        )
        if node.type in _CLASS_NODES:
            self._add_class(node, name, outer_decorators, comment)

    # --- classes ---

    def _add_class(
        self,
        node: Node,
        name: str,
        outer_decorators: tuple[Decorator, ...],
        comment: Node | None,
    ) -> None:
        decorators = outer_decorators + tuple(
            self._decorator(c) for c in node.children_by_field_name("decorator")
        )
        body = node.child_by_field_name("body")
        members = self._members(body) if body is not None else ()
        logger.trace("Class %s: %d member(s)", name, len(members))
        self.classes.append(
            ClassDeclaration(
                name=name,
                members=members,
                decorators=decorators,
                location=self.location(node),
                doc_comment=self.text(comment) if comment is not None else None,
            )
        )

    def _members(self, body: Node) -> tuple[ClassMember, ...]:
        members: list[ClassMember] = []
        pending_decorators: list[Decorator] = []
        pending_comment: Node | None = None
        for child in body.named_children:
            if child.type == "comment":
                if self.is_doc_comment(child):
                    pending_comment = child
                continue
            if child.type == "decorator":
                pending_decorators.append(self._decorator(child))
                continue
            member = self._member(child, tuple(pending_decorators), pending_comment)
            if member is not None:
                members.append(member)
            pending_decorators = []
            pending_comment = None
        return tuple(members)

    def _member(
        self,
        node: Node,
        leading_decorators: tuple[Decorator, ...],
        comment: Node | None,
    ) -> ClassMember | None:
        if node.type == "public_field_definition":
            kind = MemberKind.PROPERTY
        elif node.type in ("method_definition", "method_signature", "abstract_method_signature"):
            kind = MemberKind.METHOD
        else:
            return None

        own_decorators: list[Decorator] = []
        for child in node.children:
            if child.type == "decorator":
                own_decorators.append(self._decorator(child))
            elif child.type == "comment" and comment is None and self.is_doc_comment(child):
                comment = child
            elif kind is MemberKind.METHOD and child.type == "get":
                kind = MemberKind.GETTER
            elif kind is MemberKind.METHOD and child.type == "set":
                kind = MemberKind.SETTER

        name_node = node.child_by_field_name("name")
        name = self._property_name(name_node) if name_node is not None else ""
        if kind is MemberKind.METHOD and name == "constructor":
            kind = MemberKind.CONSTRUCTOR

        type_node: TypeNode | None = None
        if kind is MemberKind.PROPERTY:
            annotation = node.child_by_field_name("type")
            if annotation is not None:
                type_node = self._annotation_type(annotation)

        return ClassMember(
            kind=kind,
            name=name,
            decorators=leading_decorators + tuple(own_decorators),
            type_node=type_node,
            location=self.location(node),
            doc_comment=self.text(comment) if comment is not None else None,
            is_static=any(c.type == "static" for c in node.children),
        )

    def _property_name(self, node: Node) -> str:
        if node.type == "string":
            return self._string_value(node)
        return self.text(node)

    # --- decorators ---

    def _decorator(self, node: Node) -> Decorator:
        expr = next((c for c in node.named_children if c.type != "comment"), None)
        if expr is None:
            return Decorator(name="", location=self.location(node))
        if expr.type == "call_expression":
            function = expr.child_by_field_name("function")
            arguments = expr.child_by_field_name("arguments")
            args: tuple[Any, ...] = ()
            if arguments is not None:
                args = tuple(
                    self.literal_value(arg)
                    for arg in arguments.named_children
                    if arg.type != "comment"
                )
            name = self.text(function) if function is not None else ""
            return Decorator(name=name, arguments=args, location=self.location(node))
        return Decorator(name=self.text(expr), location=self.location(node))

    def literal_value(self, node: Node) -> Any:
        """Evaluate a literal expression; anything else becomes an `Expression`."""
        kind = node.type
        if kind == "string":
            return self._string_value(node)
        if kind == "template_string":
            if any(c.type == "template_substitution" for c in node.named_children):
                return Expression(self.text(node))
            return _unescape(self.text(node)[1:-1])
        if kind == "true":
            return True
        if kind == "false":
            return False
        if kind in ("null", "undefined"):
            return None
        if kind == "number":
            return self._number_value(node)
        if kind == "array":
            return [self.literal_value(c) for c in node.named_children if c.type != "comment"]
        if kind == "object":
            return self._object_value(node)
        if kind in ("parenthesized_expression", "as_expression", "satisfies_expression"):
            inner = node.named_children[0] if node.named_children else None
            if inner is not None:
                return self.literal_value(inner)
        return Expression(self.text(node))

    def _object_value(self, node: Node) -> dict[str, Any]:
        result: dict[str, Any] = {}
        for pair in node.named_children:
            if pair.type != "pair":
                continue
            key_node = pair.child_by_field_name("key")
            value_node = pair.child_by_field_name("value")
            if key_node is None or value_node is None:
                continue
            if key_node.type == "string":
                key = self._string_value(key_node)
            elif key_node.type == "computed_property_name":
                continue
            else:
                key = self.text(key_node)
            result[key] = self.literal_value(value_node)
        return result

    def _string_value(self, node: Node) -> str:
        return _unescape(self.text(node)[1:-1])

    def _number_value(self, node: Node) -> Any:
        raw = self.text(node).replace("_", "")
        try:
            return int(raw, 0)
        except ValueError:
            pass
        try:
            return float(raw)
        except ValueError:
            return Expression(self.text(node))

    # --- types ---

    def _annotation_type(self, annotation: Node) -> TypeNode | None:
        inner = next((c for c in annotation.named_children if c.type in _TYPE_NODES), None)
        return self.type_node(inner) if inner is not None else None

    def type_node(self, node: Node) -> TypeNode:
        """Translate a tree-sitter type node."""
        kind = node.type
        loc = self.location(node)
        text = self.text(node)
        if kind == "generic_type":
            name_node = node.child_by_field_name("name")
            args_node = node.child_by_field_name("type_arguments")
            args = tuple(
                self.type_node(c)
                for c in (args_node.named_children if args_node is not None else ())
                if c.type in _TYPE_NODES
            )
            return TypeNode(
                TypeNodeKind.REFERENCE,
                text,
                name=self.text(name_node) if name_node is not None else None,
                type_arguments=args,
                location=loc,
            )
        if kind in ("union_type", "intersection_type"):
            return TypeNode(
                TypeNodeKind.UNION if kind == "union_type" else TypeNodeKind.INTERSECTION,
                text,
                children=tuple(self._flatten(node, kind)),
                location=loc,
            )
        if kind in ("type_identifier", "nested_type_identifier"):
            return TypeNode(TypeNodeKind.REFERENCE, text, name=text, location=loc)
        return TypeNode(
            _SIMPLE_TYPE_KINDS.get(kind, TypeNodeKind.OTHER),
            text,
            children=tuple(self._nested_types(node)),
            location=loc,
        )

    def _flatten(self, node: Node, kind: str) -> list[TypeNode]:
        # `A | B | C` parses left-associative as ((A | B) | C)
        members: list[TypeNode] = []
        for child in node.named_children:
            if child.type == kind:
                members.extend(self._flatten(child, kind))
            elif child.type in _TYPE_NODES:
                members.append(self.type_node(child))
        return members

    def _nested_types(self, node: Node) -> list[TypeNode]:
        found: list[TypeNode] = []
        for child in node.named_children:
            if child.type in _TYPE_NODES:
                found.append(self.type_node(child))
            else:
                found.extend(self._nested_types(child))
        return found
