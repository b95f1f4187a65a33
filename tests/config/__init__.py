#
#   project      : EventMeta
#   file         : __init__.py
#   file_relpath : tests/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 EventMeta contributors
#

"""Tests for eventmeta config."""
