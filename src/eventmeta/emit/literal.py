#
#   project      : EventMeta
#   file         : literal.py
#   file_relpath : src/eventmeta/emit/literal.py
#   license      : MIT
#   copyright    : (c) 2025 EventMeta contributors
#

"""Literal encoding of metadata values as TypeScript source."""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from typing import Any

_INDENT = "  "


def _to_plain(value: Any) -> Any:
    to_dict = getattr(value, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    return value


def convert_value_to_literal(value: Any, *, level: int = 0) -> str:
    """Render ``value`` as a TypeScript literal expression.

    Records exposing ``to_dict()`` are encoded through their dictionary form.
    Mapping keys keep their insertion order so the output is deterministic.

    Args:
        value: A JSON-compatible value, or a record with ``to_dict()``.
        level: Current nesting depth, used for indentation.

    Returns:
        The literal source text.

    Raises:
        TypeError: If ``value`` contains something that has no literal form.
    """
    value = _to_plain(value)
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return json.dumps(value)
    if isinstance(value, str):
        return json.dumps(value, ensure_ascii=False)

    pad = _INDENT * (level + 1)
    end = _INDENT * level
    if isinstance(value, Mapping):
        if not value:
            return "{}"
        entries = [
            f"{pad}{json.dumps(str(key), ensure_ascii=False)}: "
            f"{convert_value_to_literal(item, level=level + 1)}"
            for key, item in value.items()
        ]
        return "{\n" + ",\n".join(entries) + "\n" + end + "}"
    if isinstance(value, Sequence):
        if not value:
            return "[]"
        items = [f"{pad}{convert_value_to_literal(item, level=level + 1)}" for item in value]
        return "[\n" + ",\n".join(items) + "\n" + end + "]"

    raise TypeError(f"Cannot encode {type(value).__name__} as a literal")
