#
#   project      : EventMeta
#   file         : naming.py
#   file_relpath : src/eventmeta/events/naming.py
#   license      : MIT
#   copyright    : (c) 2025 EventMeta contributors
#

"""Event name validation.

Three rules are checked in priority order and only the first match reports a
warning:

1. the name starts with a capital letter;
2. the name looks like a handler (``on`` followed by a capital letter);
3. the name collides with a native DOM event name.

Validation never blocks extraction.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Final

from eventmeta.config.logging import get_logger
from eventmeta.events.dom_events import DOM_EVENT_NAMES

if TYPE_CHECKING:
    from eventmeta.config.logging import EventMetaLogger
    from eventmeta.diagnostic.model import Diagnostic, DiagnosticLog
    from eventmeta.syntax.nodes import SourceLocation

logger: EventMetaLogger = get_logger(__name__)

# e.g. 'AskJeeves', 'Zoo', 'Spotify'
_CAPITALIZED: Final[re.Pattern[str]] = re.compile(r"^[A-Z]")
# e.g. 'onAbout', 'onZing', 'onBlur'
_HANDLER_LIKE: Final[re.Pattern[str]] = re.compile(r"^on[A-Z]")


def suggest_event_name(handler_name: str) -> str:
    """Return ``handler_name`` without its ``on`` prefix (``onBlur`` -> ``blur``)."""
    return handler_name[2].lower() + handler_name[3:]


def validate_event_name(
    diagnostics: DiagnosticLog,
    location: SourceLocation | None,
    event_name: str,
) -> Diagnostic | None:
    """Check ``event_name`` against the naming rules.

    The event name must already be computed from the decorator options.

    Args:
        diagnostics: Log receiving at most one warning.
        location: Location of the decorated member, attached to the warning.
        event_name: The public event name.

    Returns:
        The appended warning, or None when the name passes every rule.
    """
    if _CAPITALIZED.match(event_name):
        return diagnostics.add_warning(
            "In order to be compatible with all event listeners on elements, the event name "
            "cannot start with a capital letter. "
            "Please lowercase the first character for the event to best work with all listeners.",
            location,
        )

    if _HANDLER_LIKE.match(event_name):
        suggested = suggest_event_name(event_name)
        return diagnostics.add_warning(
            "Events decorated with @Event() should describe the actual DOM event name, "
            f'not the handler. In other words "{event_name}" would be better named as '
            f'"{suggested}".',
            location,
        )

    if event_name.lower() in DOM_EVENT_NAMES:
        return diagnostics.add_warning(
            f'The event name conflicts with the "{event_name}" native DOM event name.',
            location,
        )

    logger.trace("Event name %r passes naming rules", event_name)
    return None
