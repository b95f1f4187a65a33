#
#   project      : EventMeta
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 EventMeta contributors
#

"""CLI test helpers for running EventMeta in a controlled working directory.

`run_cli_in()` changes the process working directory to the given
``tmp_path`` before invoking the Click CLI, so project configuration
discovery and relative paths resolve against the temporary directory.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from click.testing import CliRunner, Result

from eventmeta.cli.exit_codes import ExitCode
from eventmeta.cli.main import cli

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

COMPONENT_SOURCE = """\
import { Component, Event, EventEmitter } from '@stencil/core';

@Component({ tag: 'my-toggle' })
export class MyToggle {
  /** Fired when toggled. */
  @Event({ eventName: 'toggled', bubbles: false }) myToggle: EventEmitter<boolean>;
}
"""

WARNING_SOURCE = """\
import { Component, Event, EventEmitter } from '@stencil/core';

@Component({ tag: 'my-input' })
export class MyInput {
  @Event() onChange: EventEmitter<string>;
}
"""


def run_cli_in(tmp_path: Path, argv: Sequence[str]) -> Result:
    """Invoke the CLI with ``tmp_path`` as the working directory.

    Args:
        tmp_path (Path): Directory used as the CWD for the command invocation.
        argv (Sequence[str]): CLI argument vector, e.g. ``["scan", "src"]``.

    Returns:
        Result: The `click.testing.Result` produced by `click.testing.CliRunner.invoke`.
    """
    runner = CliRunner()
    cwd: str = os.getcwd()
    try:
        os.chdir(tmp_path)
        return runner.invoke(cli, list(argv))
    finally:
        os.chdir(cwd)


def run_cli(argv: Sequence[str]) -> Result:
    """Invoke the CLI without changing the working directory."""
    return CliRunner().invoke(cli, list(argv))


def write_sources(tmp_path: Path, **files: str) -> None:
    """Write ``name=content`` pairs under ``tmp_path/src``."""
    src = tmp_path / "src"
    src.mkdir(exist_ok=True)
    for name, content in files.items():
        (src / name.replace("_", ".", 1)).write_text(content, encoding="utf-8")


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0)."""
    assert result.exit_code == ExitCode.SUCCESS, result.output
