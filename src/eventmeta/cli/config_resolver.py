#
#   project      : EventMeta
#   file         : config_resolver.py
#   file_relpath : src/eventmeta/cli/config_resolver.py
#   license      : MIT
#   copyright    : (c) 2025 EventMeta contributors
#

"""Build the effective configuration for a CLI invocation.

Layers, later wins: runtime defaults, project files in the current directory
(``pyproject.toml`` then ``eventmeta.toml``), ``--config`` files, CLI flags.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from eventmeta.cli.errors import EventMetaConfigError
from eventmeta.config.io import ConfigFileError
from eventmeta.config.logging import get_logger
from eventmeta.config.model import MutableConfig

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from eventmeta.config.logging import EventMetaLogger
    from eventmeta.config.model import Config

logger: EventMetaLogger = get_logger(__name__)


def resolve_config_from_click(
    *,
    config_files: Sequence[Path] = (),
    no_config: bool = False,
    strict: bool | None = None,
    all_classes: bool | None = None,
    exclude_patterns: Sequence[str] = (),
) -> Config:
    """Return the frozen configuration for the given CLI options.

    Raises:
        EventMetaConfigError: If a configuration file is missing or malformed.
    """
    try:
        draft = MutableConfig.load_merged(extra_config_files=config_files, discover=not no_config)
    except ConfigFileError as exc:
        raise EventMetaConfigError(str(exc)) from exc

    overrides = MutableConfig(
        strict=strict,
        all_classes=all_classes,
        exclude=list(exclude_patterns),
        config_files=["<cli>"],
    )
    config = draft.merge_with(overrides).freeze()
    logger.debug("Effective configuration from %s", ", ".join(config.config_files))
    return config
