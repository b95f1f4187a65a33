#
#   project      : EventMeta
#   file         : models.py
#   file_relpath : src/eventmeta/events/models.py
#   license      : MIT
#   copyright    : (c) 2025 EventMeta contributors
#

"""Event metadata records.

All records are frozen; ``to_dict()`` produces the camelCase, JSON-compatible
shape embedded into the compiled class as the static ``events`` member.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Final

ANY_TYPE: Final[str] = "any"


@dataclass(frozen=True)
class EventSettings:
    """Names the extractor recognizes.

    Attributes:
        decorator: Name of the member decorator that declares an event.
        emitter_type: Name of the generic emitter type whose first type
            argument is the event payload.
        static_member: Name of the synthesized static class member.
        runtime_module: Module the decorators are imported from.
    """

    decorator: str = "Event"
    emitter_type: str = "EventEmitter"
    static_member: str = "events"
    runtime_module: str = "@stencil/core"


DEFAULT_SETTINGS: Final[EventSettings] = EventSettings()


@dataclass(frozen=True)
class EventOptions:
    """Options passed to the event decorator.

    Every field is optional. Non-boolean flag values are kept as ``None`` so
    each flag falls back to its default independently.
    """

    event_name: str | None = None
    bubbles: bool | None = None
    cancelable: bool | None = None
    composed: bool | None = None

    @classmethod
    def from_argument(cls, argument: object) -> EventOptions:
        """Read options from a decorator argument.

        Anything other than a mapping yields empty options; fields with the
        wrong value type are ignored.
        """
        if not isinstance(argument, Mapping):
            return cls()

        def _flag(key: str) -> bool | None:
            value = argument.get(key)
            return value if isinstance(value, bool) else None

        name = argument.get("eventName")
        return cls(
            event_name=name if isinstance(name, str) else None,
            bubbles=_flag("bubbles"),
            cancelable=_flag("cancelable"),
            composed=_flag("composed"),
        )


@dataclass(frozen=True)
class TypeReference:
    """Where a type name referenced by an event payload is declared.

    ``location`` is one of ``"import"``, ``"local"`` or ``"global"``.
    """

    location: str
    id: str
    path: str | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"location": self.location}
        if self.path is not None:
            data["path"] = self.path
        data["id"] = self.id
        return data


@dataclass(frozen=True)
class ComplexType:
    """Type description of an event payload.

    ``original`` and ``resolved`` are both ``"any"`` exactly when no payload
    type argument could be determined.
    """

    original: str = ANY_TYPE
    resolved: str = ANY_TYPE
    references: Mapping[str, TypeReference] = field(default_factory=lambda: {})

    def to_dict(self) -> dict[str, Any]:
        return {
            "original": self.original,
            "resolved": self.resolved,
            "references": {name: ref.to_dict() for name, ref in self.references.items()},
        }


@dataclass(frozen=True)
class DocsTag:
    """A JSDoc block tag such as ``@since 2.0``."""

    name: str
    text: str | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"name": self.name}
        if self.text is not None:
            data["text"] = self.text
        return data


@dataclass(frozen=True)
class DocsSnapshot:
    """Documentation captured from a member's doc comment."""

    text: str = ""
    tags: tuple[DocsTag, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {"tags": [tag.to_dict() for tag in self.tags], "text": self.text}


@dataclass(frozen=True)
class EventDescriptor:
    """Metadata for one event a component instance can emit.

    Attributes:
        method: Class member that holds the emitter.
        name: Public event name dispatched at runtime.
        bubbles: Whether the event bubbles up through the DOM.
        cancelable: Whether the event is cancelable.
        composed: Whether the event crosses shadow DOM boundaries.
        docs: Documentation snapshot of the member.
        complex_type: Payload type description.
    """

    method: str
    name: str
    bubbles: bool = True
    cancelable: bool = True
    composed: bool = True
    docs: DocsSnapshot = field(default_factory=DocsSnapshot)
    complex_type: ComplexType = field(default_factory=ComplexType)

    def to_dict(self) -> dict[str, Any]:
        return {
            "method": self.method,
            "name": self.name,
            "bubbles": self.bubbles,
            "cancelable": self.cancelable,
            "composed": self.composed,
            "docs": self.docs.to_dict(),
            "complexType": self.complex_type.to_dict(),
        }
