#
#   project      : EventMeta
#   file         : model.py
#   file_relpath : src/eventmeta/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 EventMeta contributors
#

"""EventMeta configuration model.

Configuration is built in a `MutableConfig` draft, merged layer by layer
(defaults, ``pyproject.toml``, ``eventmeta.toml``, explicit files, CLI
overrides; later layers win) and frozen into an immutable `Config` used at
runtime.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from eventmeta.config.io import ConfigFileError, get_tool_table, load_toml_dict, to_toml
from eventmeta.config.keys import Toml
from eventmeta.config.logging import get_logger
from eventmeta.diagnostic.model import DiagnosticLog
from eventmeta.events.models import EventSettings

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from eventmeta.config.io import TomlTable
    from eventmeta.config.logging import EventMetaLogger
    from eventmeta.diagnostic.model import Diagnostic

logger: EventMetaLogger = get_logger(__name__)

PYPROJECT_TOML: str = "pyproject.toml"
EVENTMETA_TOML: str = "eventmeta.toml"


@dataclass(frozen=True)
class Config:
    """Immutable runtime configuration.

    Attributes:
        settings: Names recognized by the extractor.
        component_decorator: Class decorator marking component classes.
        all_classes: Scan every class, not only component classes.
        strict: Treat warnings as a failed run (CLI exit status only).
        exclude: Gitignore-style patterns of paths to skip.
        config_files: Sources that contributed to this configuration.
        diagnostics: Problems found while loading configuration.
    """

    settings: EventSettings = field(default_factory=EventSettings)
    component_decorator: str = "Component"
    all_classes: bool = False
    strict: bool = False
    exclude: tuple[str, ...] = ()
    config_files: tuple[str, ...] = ()
    diagnostics: tuple[Diagnostic, ...] = field(default=(), compare=False)

    @classmethod
    def from_defaults(cls) -> Config:
        """Return the runtime defaults."""
        return MutableConfig().freeze()

    def thaw(self) -> MutableConfig:
        """Return a mutable draft carrying this configuration's values."""
        draft = MutableConfig(
            decorator=self.settings.decorator,
            emitter_type=self.settings.emitter_type,
            static_member=self.settings.static_member,
            runtime_module=self.settings.runtime_module,
            component_decorator=self.component_decorator,
            all_classes=self.all_classes,
            strict=self.strict,
            exclude=list(self.exclude),
            config_files=list(self.config_files),
        )
        draft.diagnostics.extend(self.diagnostics)
        return draft

    def to_toml_dict(self) -> TomlTable:
        """Return the effective configuration as a TOML-compatible dict."""
        return {
            Toml.KEY_DECORATOR: self.settings.decorator,
            Toml.KEY_EMITTER_TYPE: self.settings.emitter_type,
            Toml.KEY_STATIC_MEMBER: self.settings.static_member,
            Toml.KEY_RUNTIME_MODULE: self.settings.runtime_module,
            Toml.KEY_COMPONENT_DECORATOR: self.component_decorator,
            Toml.KEY_ALL_CLASSES: self.all_classes,
            Toml.KEY_STRICT: self.strict,
            Toml.KEY_EXCLUDE: list(self.exclude),
        }

    def to_toml(self) -> str:
        """Render the effective configuration as TOML text."""
        return to_toml(self.to_toml_dict())


@dataclass
class MutableConfig:
    """Mutable configuration draft.

    ``None`` means "not set by this layer" so merging can tell an explicit
    ``false`` from an absent key.
    """

    decorator: str | None = None
    emitter_type: str | None = None
    static_member: str | None = None
    runtime_module: str | None = None
    component_decorator: str | None = None
    all_classes: bool | None = None
    strict: bool | None = None
    exclude: list[str] = field(default_factory=lambda: [])
    config_files: list[str] = field(default_factory=lambda: [])
    diagnostics: DiagnosticLog = field(default_factory=DiagnosticLog)

    def freeze(self) -> Config:
        """Resolve unset values against the defaults and return a `Config`."""
        defaults = EventSettings()
        settings = EventSettings(
            decorator=self.decorator or defaults.decorator,
            emitter_type=self.emitter_type or defaults.emitter_type,
            static_member=self.static_member or defaults.static_member,
            runtime_module=self.runtime_module or defaults.runtime_module,
        )
        return Config(
            settings=settings,
            component_decorator=self.component_decorator or "Component",
            all_classes=bool(self.all_classes),
            strict=bool(self.strict),
            exclude=tuple(self.exclude),
            config_files=tuple(self.config_files),
            diagnostics=tuple(self.diagnostics),
        )

    @classmethod
    def from_toml_dict(cls, data: Mapping[str, Any], *, source: str = "<dict>") -> MutableConfig:
        """Build a draft from a flat table of configuration keys.

        Unknown keys and values of the wrong type are reported as warnings and
        ignored.
        """
        draft = cls(config_files=[source])
        for key, value in data.items():
            if key not in Toml.ALL_KEYS:
                draft.diagnostics.add_warning(f"{source}: unknown configuration key {key!r}")
                continue
            if key in Toml.STRING_KEYS:
                if isinstance(value, str) and value.strip():
                    setattr(draft, key, value.strip())
                else:
                    draft.diagnostics.add_warning(
                        f"{source}: {key!r} must be a non-empty string, got {value!r}"
                    )
            elif key in Toml.BOOL_KEYS:
                if isinstance(value, bool):
                    setattr(draft, key, value)
                else:
                    draft.diagnostics.add_warning(
                        f"{source}: {key!r} must be a boolean, got {value!r}"
                    )
            elif key == Toml.KEY_EXCLUDE:
                if isinstance(value, list) and all(isinstance(v, str) for v in value):
                    draft.exclude = list(value)
                else:
                    draft.diagnostics.add_warning(
                        f"{source}: {key!r} must be a list of strings, got {value!r}"
                    )
        return draft

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig | None:
        """Load a draft from ``eventmeta.toml`` or ``pyproject.toml``.

        For ``pyproject.toml`` only the ``[tool.eventmeta]`` table is read; a
        pyproject file without it yields None.

        Raises:
            ConfigFileError: If the file cannot be read or parsed.
        """
        data = load_toml_dict(path)
        if path.name == PYPROJECT_TOML:
            table = get_tool_table(data, Toml.TOOL_TABLE)
            if table is None:
                logger.debug("No [%s] table in %s", Toml.TOOL_TABLE, path)
                return None
            data = table
        return cls.from_toml_dict(data, source=str(path))

    @classmethod
    def load_merged(
        cls,
        project_dir: Path | None = None,
        extra_config_files: Iterable[Path] | None = None,
        *,
        discover: bool = True,
    ) -> MutableConfig:
        """Merge defaults, project files and explicit files into one draft.

        Args:
            project_dir: Directory searched for ``pyproject.toml`` and
                ``eventmeta.toml`` (in that order). Defaults to the CWD.
            extra_config_files: Explicit files applied last.
            discover: Read the project files; when False only explicit files
                are loaded.

        Raises:
            ConfigFileError: If a configuration file is malformed.
        """
        root = project_dir or Path.cwd()
        draft = cls()
        for name in (PYPROJECT_TOML, EVENTMETA_TOML) if discover else ():
            candidate = root / name
            if candidate.is_file():
                layer = cls.from_toml_file(candidate)
                if layer is not None:
                    draft = draft.merge_with(layer)
        for extra in extra_config_files or ():
            if not extra.is_file():
                raise ConfigFileError(extra, "no such file")
            layer = cls.from_toml_file(extra)
            if layer is not None:
                draft = draft.merge_with(layer)
        return draft

    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new draft where values set in ``other`` override this draft."""
        merged = MutableConfig(
            decorator=other.decorator if other.decorator is not None else self.decorator,
            emitter_type=other.emitter_type
            if other.emitter_type is not None
            else self.emitter_type,
            static_member=other.static_member
            if other.static_member is not None
            else self.static_member,
            runtime_module=other.runtime_module
            if other.runtime_module is not None
            else self.runtime_module,
            component_decorator=other.component_decorator
            if other.component_decorator is not None
            else self.component_decorator,
            all_classes=other.all_classes if other.all_classes is not None else self.all_classes,
            strict=other.strict if other.strict is not None else self.strict,
            exclude=self.exclude + other.exclude,
            config_files=self.config_files + other.config_files,
        )
        merged.diagnostics.extend(self.diagnostics)
        merged.diagnostics.extend(other.diagnostics)
        return merged


__all__ = ["Config", "ConfigFileError", "MutableConfig"]
