#
#   project      : EventMeta
#   file         : __init__.py
#   file_relpath : src/eventmeta/syntax/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 EventMeta contributors
#

"""Syntax-tree view consumed by the extractor, and its TypeScript adapter."""
