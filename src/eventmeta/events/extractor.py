#
#   project      : EventMeta
#   file         : extractor.py
#   file_relpath : src/eventmeta/events/extractor.py
#   license      : MIT
#   copyright    : (c) 2025 EventMeta contributors
#

"""Event metadata extraction from decorated class members.

`event_decorators_to_static` walks the members of one class, turns every
property decorated with ``@Event()`` into an `EventDescriptor` and installs
the collected descriptors as a single static ``events`` member.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from eventmeta.config.logging import get_logger
from eventmeta.emit.static import create_static_getter
from eventmeta.events.complex_type import get_complex_type
from eventmeta.events.models import DEFAULT_SETTINGS, EventDescriptor, EventOptions
from eventmeta.events.naming import validate_event_name
from eventmeta.syntax.nodes import find_decorator, get_declaration_parameters
from eventmeta.types.docs import serialize_symbol

if TYPE_CHECKING:
    from collections.abc import Iterable

    from eventmeta.config.logging import EventMetaLogger
    from eventmeta.diagnostic.model import DiagnosticLog
    from eventmeta.emit.static import StaticGetter
    from eventmeta.events.models import EventSettings
    from eventmeta.syntax.nodes import ClassMember
    from eventmeta.types.protocol import TypeChecker

logger: EventMetaLogger = get_logger(__name__)

# ECMAScript WhiteSpace and LineTerminator code points, the set String.prototype.trim removes
JS_WHITESPACE: Final[str] = (
    "\t\n\v\f\r \xa0\u1680"
    + "".join(chr(c) for c in range(0x2000, 0x200B))
    + "\u2028\u2029\u202f\u205f\u3000\ufeff"
)


def event_decorators_to_static(
    diagnostics: DiagnosticLog,
    members: Iterable[ClassMember],
    checker: TypeChecker,
    new_members: list[StaticGetter],
    settings: EventSettings = DEFAULT_SETTINGS,
) -> tuple[EventDescriptor, ...]:
    """Install event metadata for the decorated members of a class.

    Property declarations are parsed in source order. If at least one event
    is found, a static getter named after ``settings.static_member`` holding
    every descriptor is appended to ``new_members``.

    Args:
        diagnostics: Log receiving naming and reference warnings.
        members: Candidate class members.
        checker: Type-resolution service for the members' source.
        new_members: Output list of synthesized members.
        settings: Recognized names.

    Returns:
        The collected descriptors (empty when the class declares no events).
    """
    events = tuple(
        event
        for event in (
            parse_event_decorator(diagnostics, checker, member, settings)
            for member in members
            if member.is_property
        )
        if event is not None
    )

    if events:
        logger.debug("Installing %d event(s) as static %r", len(events), settings.static_member)
        new_members.append(create_static_getter(settings.static_member, events))
    return events


def parse_event_decorator(
    diagnostics: DiagnosticLog,
    checker: TypeChecker,
    member: ClassMember,
    settings: EventSettings = DEFAULT_SETTINGS,
) -> EventDescriptor | None:
    """Parse a single ``@Event()`` decorated member.

    Once the decorator is found and the member has a name, a descriptor is
    always produced; naming problems and unresolved types only degrade it
    and add warnings.

    Args:
        diagnostics: Log receiving naming and reference warnings.
        checker: Type-resolution service.
        member: The class member to inspect.
        settings: Recognized names.

    Returns:
        The event metadata, or None if the member is not an event declaration.
    """
    decorator = find_decorator(member.decorators, settings.decorator)
    if decorator is None:
        return None

    member_name = member.name
    if not member_name:
        return None

    params = get_declaration_parameters(decorator)
    options = EventOptions.from_argument(params[0] if params else None)
    event_name = get_event_name(options, member_name)
    logger.trace("Member %s declares event %r", member_name, event_name)

    validate_event_name(diagnostics, member.location, event_name)

    return EventDescriptor(
        method=member_name,
        name=event_name,
        bubbles=options.bubbles if options.bubbles is not None else True,
        cancelable=options.cancelable if options.cancelable is not None else True,
        composed=options.composed if options.composed is not None else True,
        docs=serialize_symbol(checker, checker.resolve_symbol(member)),
        complex_type=get_complex_type(diagnostics, checker, member, settings),
    )


def get_event_name(options: EventOptions, member_name: str) -> str:
    """Return the public event name.

    A non-blank ``eventName`` option wins, trimmed of JavaScript whitespace;
    otherwise the member name is used as-is.
    """
    if options.event_name is not None:
        trimmed = options.event_name.strip(JS_WHITESPACE)
        if trimmed:
            return trimmed
    return member_name
