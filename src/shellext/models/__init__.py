"""shellext data models - re-exports all public model classes."""

from shellext.models.config import GeneratorSettings, ProjectConfig, SettingsError

__all__ = [
    "GeneratorSettings",
    "ProjectConfig",
    "SettingsError",
]
