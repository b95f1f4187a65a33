#
#   project      : EventMeta
#   file         : __init__.py
#   file_relpath : src/eventmeta/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 EventMeta contributors
#

"""Configuration layer: logging setup, TOML loading and the config model.

Import the model from `eventmeta.config.model`; this package module stays
import-free so `eventmeta.config.logging` can be loaded first by every other
module.
"""
