#
#   project      : EventMeta
#   file         : complex_type.py
#   file_relpath : src/eventmeta/events/complex_type.py
#   license      : MIT
#   copyright    : (c) 2025 EventMeta contributors
#

"""Payload type descriptions for event emitters."""

from __future__ import annotations

from typing import TYPE_CHECKING

from eventmeta.config.logging import get_logger
from eventmeta.events.models import DEFAULT_SETTINGS, ComplexType
from eventmeta.syntax.nodes import TypeNodeKind
from eventmeta.types.references import validate_references

if TYPE_CHECKING:
    from eventmeta.config.logging import EventMetaLogger
    from eventmeta.diagnostic.model import DiagnosticLog
    from eventmeta.events.models import EventSettings
    from eventmeta.syntax.nodes import ClassMember, TypeNode
    from eventmeta.types.protocol import TypeChecker

logger: EventMetaLogger = get_logger(__name__)


def get_event_type(type_node: TypeNode, emitter_type: str = "EventEmitter") -> TypeNode | None:
    """Return the payload type of an ``EventEmitter<T>`` annotation.

    Only a plain (unqualified) reference to ``emitter_type`` carrying at least
    one type argument qualifies; its first argument is the payload.

    Args:
        type_node: The declared type of the member.
        emitter_type: Name of the emitter type.

    Returns:
        The payload type node, or None if the annotation does not qualify.
    """
    if (
        type_node.kind is TypeNodeKind.REFERENCE
        and type_node.name == emitter_type
        and type_node.type_arguments
    ):
        return type_node.type_arguments[0]
    return None


def get_complex_type(
    diagnostics: DiagnosticLog,
    checker: TypeChecker,
    member: ClassMember,
    settings: EventSettings = DEFAULT_SETTINGS,
) -> ComplexType:
    """Describe the payload type of an event member.

    Members without a declared type, or typed as anything other than the
    emitter, are described as ``any``. The reference map of a qualifying
    payload is always validated.

    Args:
        diagnostics: Log receiving reference-validation warnings.
        checker: Type-resolution service.
        member: The decorated class member.
        settings: Recognized names.

    Returns:
        The payload type description.
    """
    declared = checker.get_member_type(member)
    event_type = get_event_type(declared, settings.emitter_type) if declared is not None else None
    if event_type is None:
        logger.trace("Member %s has no %s payload type", member.name, settings.emitter_type)
        return ComplexType()

    complex_type = ComplexType(
        original=event_type.text,
        resolved=checker.render_type(event_type),
        references=checker.get_type_references(event_type),
    )
    validate_references(
        diagnostics,
        complex_type.references,
        declared,
        runtime_module=settings.runtime_module,
    )
    return complex_type
