#
#   project      : EventMeta
#   file         : references.py
#   file_relpath : src/eventmeta/types/references.py
#   license      : MIT
#   copyright    : (c) 2025 EventMeta contributors
#

"""Validation of type references collected from event payloads."""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from eventmeta.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Mapping

    from eventmeta.config.logging import EventMetaLogger
    from eventmeta.diagnostic.model import DiagnosticLog
    from eventmeta.events.models import TypeReference
    from eventmeta.syntax.nodes import TypeNode

logger: EventMetaLogger = get_logger(__name__)

# Decorators exported by the component runtime; none of them is a type.
RUNTIME_DECORATORS: Final[frozenset[str]] = frozenset(
    {
        "AttachInternals",
        "Component",
        "Element",
        "Event",
        "Listen",
        "Method",
        "Prop",
        "State",
        "Watch",
    }
)


def validate_references(
    diagnostics: DiagnosticLog,
    references: Mapping[str, TypeReference],
    type_node: TypeNode | None,
    *,
    runtime_module: str = "@stencil/core",
) -> None:
    """Report references that cannot denote a payload type.

    A warning is appended for every referenced name that is one of the
    runtime's decorators imported from ``runtime_module``.

    Args:
        diagnostics: Log receiving the warnings.
        references: Reference map of a type description.
        type_node: Type node the references were collected from.
        runtime_module: Module the component decorators are imported from.
    """
    location = type_node.location if type_node is not None else None
    for name, ref in references.items():
        if ref.location == "import" and ref.path == runtime_module and name in RUNTIME_DECORATORS:
            logger.debug("Decorator %s referenced as a type", name)
            diagnostics.add_warning(
                f'The @{name} decorator imported from "{runtime_module}" is not a type '
                "and cannot describe an event payload.",
                location,
            )
