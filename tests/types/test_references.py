#
#   project      : EventMeta
#   file         : test_references.py
#   file_relpath : tests/types/test_references.py
#   license      : MIT
#   copyright    : (c) 2025 EventMeta contributors
#

"""Validation of payload type references."""

from __future__ import annotations

from eventmeta.diagnostic.model import DiagnosticLog
from eventmeta.events.models import TypeReference
from eventmeta.types.references import RUNTIME_DECORATORS, validate_references
from tests.conftest import loc, ref


def test_plain_references_pass() -> None:
    """It should accept imported types, local types and globals."""
    log = DiagnosticLog()
    refs = {
        "Detail": TypeReference("import", "./types::Detail", "./types"),
        "Point": TypeReference("local", "a.ts::Point", "a.ts"),
        "Map": TypeReference("global", "global::Map"),
    }

    validate_references(log, refs, ref("Detail"))

    assert len(log) == 0


def test_runtime_decorator_as_type_warns() -> None:
    """It should warn about each runtime decorator used as a type."""
    log = DiagnosticLog()
    refs = {
        "Event": TypeReference("import", "@stencil/core::Event", "@stencil/core"),
        "State": TypeReference("import", "@stencil/core::State", "@stencil/core"),
    }

    validate_references(log, refs, ref("Event"))

    messages = [d.message for d in log]
    assert len(messages) == 2
    assert messages[0] == (
        'The @Event decorator imported from "@stencil/core" is not a type '
        "and cannot describe an event payload."
    )
    assert next(iter(log)).location == loc()


def test_same_name_from_other_module_passes() -> None:
    """It should only flag names imported from the runtime module."""
    log = DiagnosticLog()
    refs = {"Event": TypeReference("import", "./dom::Event", "./dom")}

    validate_references(log, refs, None)

    assert len(log) == 0


def test_custom_runtime_module() -> None:
    """It should honor a configured runtime module."""
    log = DiagnosticLog()
    refs = {"Prop": TypeReference("import", "my-runtime::Prop", "my-runtime")}

    validate_references(log, refs, None, runtime_module="my-runtime")

    assert len(log) == 1
    assert "Prop" in RUNTIME_DECORATORS
