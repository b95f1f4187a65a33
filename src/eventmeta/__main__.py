#
#   project      : EventMeta
#   file         : __main__.py
#   file_relpath : src/eventmeta/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 EventMeta contributors
#

"""Module entry point for running EventMeta via ``python -m eventmeta``.

Delegates to `eventmeta.cli.main.cli`, the same entry point as the
``eventmeta`` console script.
"""

from __future__ import annotations

from eventmeta.cli.main import cli

if __name__ == "__main__":
    cli()
