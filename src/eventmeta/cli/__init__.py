#
#   project      : EventMeta
#   file         : __init__.py
#   file_relpath : src/eventmeta/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 EventMeta contributors
#

"""Click-based command-line interface for EventMeta."""
