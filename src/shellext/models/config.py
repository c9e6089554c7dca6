"""Configuration models for the extension generator.

ProjectConfig is the resolved, immutable answer set handed to the
materializer. GeneratorSettings holds operator overrides for the static
option defaults, loaded from an optional YAML settings file.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError, field_validator

from shellext.options.definitions import INSTALL_OPTIONS, OptionKind, get_option

SETTINGS_ENV_VAR = "SHELLEXT_CONFIG"


def _option_alias(field_name: str) -> str:
    return field_name.replace("_", "-")


class ProjectConfig(BaseModel):
    """Resolved project information, keyed by option name.

    Fields left as None are options that were not applicable given the
    other answers (e.g. settings_schema without use_prefs).
    """

    model_config = {
        "extra": "forbid",
        "frozen": True,
        "populate_by_name": True,
        "alias_generator": _option_alias,
    }

    target_dir: str
    project_name: str
    description: str
    uuid: str
    shell_version: list[str]
    version_name: str | None = None
    license: str | None = None
    home_page: str | None = None
    use_typescript: bool | None = None
    use_esbuild: bool | None = None
    use_types: bool | None = None
    use_eslint: bool | None = None
    use_prettier: bool | None = None
    use_translations: bool | None = None
    gettext_domain: str | None = None
    use_prefs: bool | None = None
    settings_schema: str | None = None
    use_prefs_window: bool | None = None
    use_stylesheet: bool | None = None
    use_resources: bool | None = None

    @classmethod
    def from_options(cls, options: dict[str, Any]) -> ProjectConfig:
        """Build a ProjectConfig from a mapping keyed by option name."""
        return cls.model_validate(options)

    def as_options(self) -> dict[str, Any]:
        """Return the present options keyed by option name."""
        return self.model_dump(by_alias=True, exclude_none=True)

    @property
    def needs_install(self) -> bool:
        """True if a feature needing an npm install step was enabled."""
        options = self.as_options()
        return any(options.get(name) for name in INSTALL_OPTIONS)


class SettingsError(Exception):
    """Raised when the settings file cannot be read or is invalid.

    Attributes:
        path: The settings file that failed to load.
        reason: Human-readable description of the problem.
    """

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


class GeneratorSettings(BaseModel):
    """Operator settings loaded from the YAML settings file.

    Only option defaults can be overridden. Keys are option names, values
    must match the option kind.
    """

    model_config = {"extra": "forbid"}

    defaults: dict[str, str | bool | list[str]] = Field(default_factory=dict)

    @field_validator("defaults")
    @classmethod
    def _check_defaults(
        cls, value: dict[str, str | bool | list[str]]
    ) -> dict[str, str | bool | list[str]]:
        checked: dict[str, str | bool | list[str]] = {}
        for name, default in value.items():
            spec = get_option(name)
            if spec is None:
                raise ValueError(f"unknown option '{name}'")
            if name == "target-dir":
                raise ValueError("'target-dir' has no default")
            if spec.kind is OptionKind.BOOLEAN:
                if not isinstance(default, bool):
                    raise ValueError(f"'{name}' expects true or false")
            else:
                if spec.kind is OptionKind.LIST and isinstance(default, list):
                    default = ",".join(default)
                if not isinstance(default, str):
                    raise ValueError(f"'{name}' expects a string")
                if not spec.validate(default):
                    raise ValueError(f"'{name}' has an invalid value: {default!r}")
            checked[name] = default
        return checked


def find_settings_file() -> Path:
    """Return the settings file path from $SHELLEXT_CONFIG or the user config dir."""
    env_path = os.environ.get(SETTINGS_ENV_VAR)
    if env_path:
        return Path(env_path).expanduser()
    config_home = os.environ.get("XDG_CONFIG_HOME") or str(Path.home() / ".config")
    return Path(config_home) / "shellext" / "config.yaml"


def load_settings(path: Path | None = None) -> GeneratorSettings:
    """Load GeneratorSettings from a YAML file. Returns defaults if not found.

    Args:
        path: Settings file. If None, uses find_settings_file().

    Returns:
        Validated GeneratorSettings instance.

    Raises:
        SettingsError: If the file cannot be read, is not valid YAML or fails
            validation.
    """
    if path is None:
        path = find_settings_file()
    if not path.exists():
        return GeneratorSettings()
    import yaml

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise SettingsError(path, f"cannot read file: {exc}") from exc
    try:
        raw = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise SettingsError(path, f"invalid YAML: {exc}") from exc
    if raw is None:
        return GeneratorSettings()
    try:
        return GeneratorSettings.model_validate(raw)
    except ValidationError as exc:
        details = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
            for err in exc.errors()
        )
        raise SettingsError(path, details) from exc
