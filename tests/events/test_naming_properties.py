#
#   project      : EventMeta
#   file         : test_naming_properties.py
#   file_relpath : tests/events/test_naming_properties.py
#   license      : MIT
#   copyright    : (c) 2025 EventMeta contributors
#

"""Property tests for event name validation and extraction.

Generated names and options check that:
1) validation appends at most one warning, and only to the end of the log;
2) extraction is deterministic over the same input.
"""

from __future__ import annotations

from hypothesis import given, settings
from hypothesis import strategies as st

from eventmeta.diagnostic.model import DiagnosticLog
from eventmeta.events.dom_events import DOM_EVENT_NAMES
from eventmeta.events.extractor import parse_event_decorator
from eventmeta.events.naming import validate_event_name
from eventmeta.syntax.nodes import SourceModule
from eventmeta.types.checker import SourceTypeChecker
from tests.conftest import event_decorator, loc, prop

s_identifier = st.from_regex(r"[A-Za-z_$][A-Za-z0-9_$]{0,20}", fullmatch=True)
s_event_name = st.one_of(
    s_identifier,
    st.sampled_from(sorted(DOM_EVENT_NAMES)),
    s_identifier.map(lambda s: "on" + s[:1].upper() + s[1:]),
)
s_flag = st.one_of(st.booleans(), st.none(), st.integers(), st.text(max_size=3))

# Code points removed by String.prototype.trim
ECMASCRIPT_TRIMMED = frozenset(
    "\t\n\v\f\r \xa0\u1680\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000\ufeff"
)
# Python strips these, JavaScript keeps them
SEPARATORS = "\x1c\x1d\x1e\x1f\x85"
s_option_text = st.text(
    alphabet=st.one_of(
        st.characters(), st.sampled_from(sorted(ECMASCRIPT_TRIMMED) + list(SEPARATORS))
    ),
    max_size=12,
)


def js_trim(text: str) -> str:
    start, end = 0, len(text)
    while start < end and text[start] in ECMASCRIPT_TRIMMED:
        start += 1
    while end > start and text[end - 1] in ECMASCRIPT_TRIMMED:
        end -= 1
    return text[start:end]


@settings(max_examples=200)
@given(name=s_event_name)
def test_at_most_one_warning(name: str) -> None:
    """Validation adds zero or one warning and never touches earlier entries."""
    log = DiagnosticLog()
    earlier = log.add_info("earlier")

    result = validate_event_name(log, loc(), name)

    assert log.items[0] is earlier
    assert len(log) == (1 if result is None else 2)


@settings(max_examples=100)
@given(
    member_name=s_identifier,
    event_name=st.one_of(st.none(), s_option_text),
    bubbles=s_flag,
    composed=s_flag,
)
def test_extraction_is_deterministic(
    member_name: str,
    event_name: str | None,
    bubbles: object,
    composed: object,
) -> None:
    """Parsing the same member twice yields equal descriptors and equal warnings."""
    options: dict[str, object] = {"bubbles": bubbles, "composed": composed}
    if event_name is not None:
        options["eventName"] = event_name
    member = prop(member_name, decorators=[event_decorator(options)])
    checker = SourceTypeChecker(SourceModule(path="cmp.tsx"))
    first_log, second_log = DiagnosticLog(), DiagnosticLog()

    first = parse_event_decorator(first_log, checker, member)
    second = parse_event_decorator(second_log, checker, member)

    assert first is not None
    assert first == second
    assert list(first_log) == list(second_log)
    assert first.bubbles is (bubbles if isinstance(bubbles, bool) else True)
    assert first.composed is (composed if isinstance(composed, bool) else True)
    assert first.cancelable is True
    trimmed = js_trim(event_name) if event_name is not None else ""
    assert first.name == (trimmed or member_name)
