#
#   project      : EventMeta
#   file         : static.py
#   file_relpath : src/eventmeta/emit/static.py
#   license      : MIT
#   copyright    : (c) 2025 EventMeta contributors
#

"""Synthesized static class members."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from eventmeta.emit.literal import convert_value_to_literal


@dataclass(frozen=True)
class StaticGetter:
    """A ``static get <name>()`` member returning a literal value.

    Attributes:
        name: Member name.
        value: The Python value, kept for machine-readable output.
        literal: The encoded literal returned by the getter.
    """

    name: str
    value: tuple[Any, ...]
    literal: str

    def render(self) -> str:
        """Return the member as TypeScript class-body source."""
        body = self.literal.replace("\n", "\n  ")
        return f"static get {self.name}() {{\n  return {body};\n}}"

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "value": [_plain(item) for item in self.value]}


def _plain(item: Any) -> Any:
    to_dict = getattr(item, "to_dict", None)
    return to_dict() if callable(to_dict) else item


def create_static_getter(name: str, value: tuple[Any, ...]) -> StaticGetter:
    """Synthesize a static getter named ``name`` that returns ``value``."""
    return StaticGetter(name=name, value=value, literal=convert_value_to_literal(value))
