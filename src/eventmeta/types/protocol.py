#
#   project      : EventMeta
#   file         : protocol.py
#   file_relpath : src/eventmeta/types/protocol.py
#   license      : MIT
#   copyright    : (c) 2025 EventMeta contributors
#

"""Capability interface of the type-resolution service.

The extraction core depends on this protocol only; `SourceTypeChecker` is the
implementation over a parsed `SourceModule`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from eventmeta.events.models import TypeReference
    from eventmeta.syntax.nodes import ClassMember, SourceLocation, TypeNode


@dataclass(frozen=True)
class Symbol:
    """A resolved declaration symbol."""

    name: str
    doc_comment: str | None = None
    location: SourceLocation | None = None


class TypeChecker(Protocol):
    """Stateless query interface over a parsed source."""

    def get_member_type(self, member: ClassMember) -> TypeNode | None:
        """Return the declared type node of ``member``, if any."""
        ...

    def resolve_symbol(self, member: ClassMember) -> Symbol | None:
        """Return the symbol declared by ``member``, if it can be resolved."""
        ...

    def render_type(self, type_node: TypeNode) -> str:
        """Return the canonical rendering of ``type_node``."""
        ...

    def get_type_references(self, type_node: TypeNode) -> dict[str, TypeReference]:
        """Map every type name referenced from ``type_node`` to its declaration site."""
        ...
