#
#   project      : EventMeta
#   file         : __init__.py
#   file_relpath : src/eventmeta/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 EventMeta contributors
#

"""EventMeta package.

EventMeta extracts the metadata of ``@Event()`` declarations from web
component classes written in TypeScript, validates event names against DOM
conventions and synthesizes the static ``events`` member embedded into the
compiled component. It exposes a CLI and a small typed API
(`eventmeta.api`).
"""

from __future__ import annotations
