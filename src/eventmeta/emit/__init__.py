#
#   project      : EventMeta
#   file         : __init__.py
#   file_relpath : src/eventmeta/emit/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 EventMeta contributors
#

"""Literal encoding and static member synthesis."""

from __future__ import annotations

from eventmeta.emit.literal import convert_value_to_literal
from eventmeta.emit.static import StaticGetter, create_static_getter

__all__ = ["StaticGetter", "convert_value_to_literal", "create_static_getter"]
