#
#   project      : EventMeta
#   file         : __init__.py
#   file_relpath : src/eventmeta/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 EventMeta contributors
#

"""EventMeta CLI subcommands."""
