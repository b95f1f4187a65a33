#
#   project      : EventMeta
#   file         : io.py
#   file_relpath : src/eventmeta/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 EventMeta contributors
#

"""Load and render TOML configuration sources.

Parsing is done with `tomlkit` and returned as plain `dict` structures.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from eventmeta.config.logging import get_logger

if TYPE_CHECKING:
    from pathlib import Path

    from eventmeta.config.logging import EventMetaLogger

TomlTable = dict[str, Any]

logger: EventMetaLogger = get_logger(__name__)


class ConfigFileError(ValueError):
    """Raised when a configuration file cannot be read or parsed."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


def load_toml_dict(path: Path) -> TomlTable:
    """Read ``path`` and return its TOML content as a plain dict.

    Raises:
        ConfigFileError: If the file cannot be read or is not valid TOML.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigFileError(path, str(exc)) from exc
    try:
        document = tomlkit.parse(text)
    except TomlkitParseError as exc:
        raise ConfigFileError(path, f"invalid TOML ({exc})") from exc
    logger.debug("Loaded TOML from %s", path)
    return cast("TomlTable", document.unwrap())


def get_tool_table(data: Mapping[str, Any], dotted: str) -> TomlTable | None:
    """Return the nested table at ``dotted`` (e.g. ``tool.eventmeta``), if present."""
    current: Any = data
    for part in dotted.split("."):
        if not isinstance(current, Mapping) or part not in current:
            return None
        current = current[part]
    return dict(current) if isinstance(current, Mapping) else None


def to_toml(data: Mapping[str, Any]) -> str:
    """Render ``data`` as TOML text, dropping ``None`` values."""
    cleaned = {key: value for key, value in data.items() if value is not None}
    return tomlkit.dumps(cleaned)
