#
#   project      : EventMeta
#   file         : test_naming.py
#   file_relpath : tests/events/test_naming.py
#   license      : MIT
#   copyright    : (c) 2025 EventMeta contributors
#

"""Event name validation: rule order, messages and suggestions."""

from __future__ import annotations

import pytest

from eventmeta.diagnostic.model import DiagnosticLevel, DiagnosticLog
from eventmeta.events.dom_events import DOM_EVENT_NAMES
from eventmeta.events.naming import suggest_event_name, validate_event_name
from tests.conftest import loc


@pytest.mark.parametrize("name", ["myToggle", "toggle-change", "ionChange", "on", "onclick2x"])
def test_valid_names_add_nothing(name: str) -> None:
    """It should accept names that break no rule."""
    log = DiagnosticLog()

    assert validate_event_name(log, loc(), name) is None
    assert len(log) == 0


def test_capitalized_name_warns() -> None:
    """It should warn once about a leading capital letter."""
    log = DiagnosticLog()

    diag = validate_event_name(log, loc(3, 5), "Spotify")

    assert diag is not None
    assert list(log) == [diag]
    assert diag.level is DiagnosticLevel.WARNING
    assert diag.message.startswith(
        "In order to be compatible with all event listeners on elements, "
        "the event name cannot start with a capital letter."
    )
    assert diag.location == loc(3, 5)


def test_handler_like_name_suggests_dom_name() -> None:
    """It should suggest the name without its ``on`` prefix."""
    log = DiagnosticLog()

    diag = validate_event_name(log, loc(), "onAbout")

    assert diag is not None
    assert 'In other words "onAbout" would be better named as "about".' in diag.message
    assert diag.message.startswith(
        "Events decorated with @Event() should describe the actual DOM event name, not the handler."
    )


def test_dom_name_conflict() -> None:
    """It should report names colliding with native DOM events."""
    log = DiagnosticLog()

    diag = validate_event_name(log, loc(), "click")

    assert diag is not None
    assert diag.message == 'The event name conflicts with the "click" native DOM event name.'


def test_dom_name_conflict_ignores_case() -> None:
    """It should match DOM names case-insensitively."""
    log = DiagnosticLog()

    diag = validate_event_name(log, loc(), "dblClick")

    assert diag is not None
    assert '"dblClick" native DOM event name' in diag.message


def test_first_matching_rule_wins() -> None:
    """It should report only the capital-letter rule for a name matching several rules."""
    log = DiagnosticLog()

    validate_event_name(log, loc(), "Click")

    assert len(log) == 1
    assert "capital letter" in next(iter(log)).message


def test_handler_like_name_reports_once() -> None:
    """It should report a handler-like name once, with the handler message."""
    log = DiagnosticLog()

    validate_event_name(log, loc(), "onLoad")

    assert len(log) == 1
    assert '"load"' in next(iter(log)).message


def test_existing_entries_are_preserved() -> None:
    """It should only append to the log."""
    log = DiagnosticLog()
    earlier = log.add_info("earlier pass")

    validate_event_name(log, loc(), "focus")

    assert log.items[0] is earlier
    assert len(log) == 2


def test_suggest_event_name() -> None:
    """It should lowercase the character following ``on``."""
    assert suggest_event_name("onBlur") == "blur"
    assert suggest_event_name("onMyThingChanged") == "myThingChanged"


def test_dom_event_names_are_lowercase() -> None:
    """It should keep the reserved names lowercased for lookup."""
    assert "click" in DOM_EVENT_NAMES
    assert "dblclick" in DOM_EVENT_NAMES
    assert all(name == name.lower() for name in DOM_EVENT_NAMES)
