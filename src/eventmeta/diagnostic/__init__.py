#
#   project      : EventMeta
#   file         : __init__.py
#   file_relpath : src/eventmeta/diagnostic/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 EventMeta contributors
#

"""Diagnostic primitives and helpers.

Diagnostics are immutable `Diagnostic` instances accumulated in an
append-only `DiagnosticLog` that callers thread through an extraction run.
"""

from __future__ import annotations

from eventmeta.diagnostic.model import (
    Diagnostic,
    DiagnosticLevel,
    DiagnosticLog,
    DiagnosticStats,
    compute_diagnostic_stats,
    diagnostics_counts_to_dict,
)

__all__ = [
    "Diagnostic",
    "DiagnosticLevel",
    "DiagnosticLog",
    "DiagnosticStats",
    "compute_diagnostic_stats",
    "diagnostics_counts_to_dict",
]
