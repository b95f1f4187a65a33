#
#   project      : EventMeta
#   file         : constants.py
#   file_relpath : src/eventmeta/constants.py
#   license      : MIT
#   copyright    : (c) 2025 EventMeta contributors
#

"""EventMeta constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

EVENTMETA_VERSION: str = get_version("eventmeta")
