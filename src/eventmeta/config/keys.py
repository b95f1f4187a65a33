#
#   project      : EventMeta
#   file         : keys.py
#   file_relpath : src/eventmeta/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 EventMeta contributors
#

"""Canonical TOML key names for EventMeta configuration.

Keys appear at the top level of ``eventmeta.toml`` and under
``[tool.eventmeta]`` in ``pyproject.toml``. Renaming or removing a key is a
breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML table and key names used by EventMeta configuration."""

    TOOL_TABLE: Final[str] = "tool.eventmeta"

    KEY_DECORATOR: Final[str] = "decorator"
    KEY_EMITTER_TYPE: Final[str] = "emitter_type"
    KEY_STATIC_MEMBER: Final[str] = "static_member"
    KEY_RUNTIME_MODULE: Final[str] = "runtime_module"
    KEY_COMPONENT_DECORATOR: Final[str] = "component_decorator"
    KEY_ALL_CLASSES: Final[str] = "all_classes"
    KEY_STRICT: Final[str] = "strict"
    KEY_EXCLUDE: Final[str] = "exclude"

    STRING_KEYS: Final[tuple[str, ...]] = (
        KEY_DECORATOR,
        KEY_EMITTER_TYPE,
        KEY_STATIC_MEMBER,
        KEY_RUNTIME_MODULE,
        KEY_COMPONENT_DECORATOR,
    )
    BOOL_KEYS: Final[tuple[str, ...]] = (KEY_ALL_CLASSES, KEY_STRICT)
    ALL_KEYS: Final[frozenset[str]] = frozenset((*STRING_KEYS, *BOOL_KEYS, KEY_EXCLUDE))
