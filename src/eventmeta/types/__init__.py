#
#   project      : EventMeta
#   file         : __init__.py
#   file_relpath : src/eventmeta/types/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 EventMeta contributors
#

"""Type-resolution service used by the event extractor.

The extractor depends on the `TypeChecker` protocol only;
`SourceTypeChecker` implements it over a parsed module.
"""

from __future__ import annotations

from eventmeta.types.checker import SourceTypeChecker
from eventmeta.types.protocol import Symbol, TypeChecker

__all__ = ["SourceTypeChecker", "Symbol", "TypeChecker"]
