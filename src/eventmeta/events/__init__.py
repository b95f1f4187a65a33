#
#   project      : EventMeta
#   file         : __init__.py
#   file_relpath : src/eventmeta/events/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 EventMeta contributors
#

"""Event metadata extraction.

Modules:
    * `eventmeta.events.extractor`: member parsing and the class-level pass.
    * `eventmeta.events.complex_type`: payload type descriptions.
    * `eventmeta.events.naming`: event name rules.
    * `eventmeta.events.models`: the frozen metadata records.
"""

from __future__ import annotations
