#
#   project      : EventMeta
#   file         : test_complex_type.py
#   file_relpath : tests/events/test_complex_type.py
#   license      : MIT
#   copyright    : (c) 2025 EventMeta contributors
#

"""Payload type descriptions for ``EventEmitter<T>`` members."""

from __future__ import annotations

from eventmeta.diagnostic.model import DiagnosticLog
from eventmeta.events.complex_type import get_complex_type, get_event_type
from eventmeta.events.models import ANY_TYPE, ComplexType, EventSettings, TypeReference
from eventmeta.syntax.nodes import ImportBinding, SourceModule
from eventmeta.types.checker import SourceTypeChecker
from tests.conftest import keyword, prop, ref


def _checker(module: SourceModule | None = None) -> SourceTypeChecker:
    return SourceTypeChecker(module or SourceModule(path="cmp.tsx"))


def test_get_event_type_returns_first_argument() -> None:
    """It should return the payload of a qualifying emitter type."""
    payload = keyword("string")

    assert get_event_type(ref("EventEmitter", payload)) is payload


def test_get_event_type_rejects_other_shapes() -> None:
    """It should reject bare emitters, other generics and keywords."""
    assert get_event_type(ref("EventEmitter")) is None
    assert get_event_type(ref("Promise", keyword("string"))) is None
    assert get_event_type(keyword("any")) is None


def test_get_event_type_honors_custom_emitter_name() -> None:
    """It should recognize a configured emitter type name."""
    payload = keyword("number")

    assert get_event_type(ref("Emitter", payload), "Emitter") is payload
    assert get_event_type(ref("EventEmitter", payload), "Emitter") is None


def test_string_payload() -> None:
    """It should render a ``string`` payload in both renderings."""
    log = DiagnosticLog()
    member = prop("changed", ref("EventEmitter", keyword("string")))

    complex_type = get_complex_type(log, _checker(), member)

    assert complex_type.original == "string"
    assert complex_type.resolved == "string"
    assert complex_type.references == {}
    assert len(log) == 0


def test_missing_type_is_any() -> None:
    """It should describe untyped members as ``any`` with no references."""
    complex_type = get_complex_type(DiagnosticLog(), _checker(), prop("changed"))

    assert complex_type == ComplexType()
    assert complex_type.original == ANY_TYPE
    assert complex_type.resolved == ANY_TYPE
    assert complex_type.references == {}


def test_non_emitter_type_is_any() -> None:
    """It should describe non-emitter annotations as ``any``."""
    member = prop("changed", ref("Promise", keyword("string")))

    assert get_complex_type(DiagnosticLog(), _checker(), member) == ComplexType()


def test_references_are_collected() -> None:
    """It should locate imported and global names referenced by the payload."""
    module = SourceModule(
        path="cmp.tsx",
        imports=(ImportBinding("Detail", "Detail", "./types"),),
    )
    member = prop("changed", ref("EventEmitter", ref("Map", keyword("string"), ref("Detail"))))

    complex_type = get_complex_type(DiagnosticLog(), _checker(module), member)

    assert complex_type.original == "Map<string, Detail>"
    assert complex_type.references == {
        "Map": TypeReference(location="global", id="global::Map"),
        "Detail": TypeReference(location="import", path="./types", id="./types::Detail"),
    }


def test_decorator_used_as_type_warns() -> None:
    """It should warn when a runtime decorator is used as the payload type."""
    module = SourceModule(
        path="cmp.tsx",
        imports=(ImportBinding("Prop", "Prop", "@stencil/core"),),
    )
    log = DiagnosticLog()

    get_complex_type(log, _checker(module), prop("changed", ref("EventEmitter", ref("Prop"))))

    assert len(log) == 1
    assert "@Prop decorator" in next(iter(log)).message


def test_custom_settings_are_used() -> None:
    """It should use the configured emitter type."""
    settings = EventSettings(emitter_type="Emitter")
    member = prop("changed", ref("Emitter", keyword("boolean")))

    complex_type = get_complex_type(DiagnosticLog(), _checker(), member, settings)

    assert complex_type.original == "boolean"
