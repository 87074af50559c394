"""Configuration store: user settings plus the lens registry."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Final, Optional

from carto.errors import PreferencesReadError
from carto.paths import PathResolver, default_resolver
from carto.settings.lens import Lense
from carto.settings.user import UserSettings
from carto.utils.file import ensure_directory_exists

logger: Final = logging.getLogger(__name__)


def ensure_directories(resolver: PathResolver) -> None:
    """Create the data, preference and lenses directories if missing.

    Raises:
        DirectoryResolutionError: If a platform directory cannot be determined
        DirectoryCreationError: If a directory cannot be created
    """
    for directory in (resolver.data_dir(), resolver.prefs_dir(), resolver.lenses_dir()):
        ensure_directory_exists(directory)


@dataclass
class ConfigStore:
    """Process-wide configuration.

    Built once at startup by :meth:`initialize`. ``user_settings`` and
    ``lenses`` are plain attributes: the setup wizard rewrites the former
    (saving it back with ``UserSettings.save``) and the lens loader fills
    the latter from files under ``paths.lenses_dir()``.

    Examples:
        store = ConfigStore.initialize()
        if store.user_settings.run_wizard:
            ...
        store.lenses[lens.name] = lens
    """

    user_settings: UserSettings
    lenses: dict[str, Lense] = field(default_factory=dict)
    paths: PathResolver = field(default_factory=default_resolver)

    @classmethod
    def initialize(cls, resolver: Optional[PathResolver] = None) -> ConfigStore:
        """Prepare directories and load or create the preferences file.

        If the preferences file is missing, default settings are written to
        it. An existing file is loaded as is and never replaced by defaults.

        Args:
            resolver: Path resolver to use (default: the application's own)

        Returns:
            ConfigStore holding the user settings and an empty lens registry

        Raises:
            ConfigError: If any directory or the preferences file cannot be
                prepared. Callers at startup should treat this as fatal.
        """
        resolver = resolver or default_resolver()
        ensure_directories(resolver)

        prefs_path = resolver.prefs_file()
        try:
            prefs_exists = prefs_path.exists()
        except OSError as exc:
            raise PreferencesReadError(
                "Unable to access user preferences file", prefs_path, exc
            ) from exc

        if prefs_exists:
            user_settings = UserSettings.load(prefs_path)
        else:
            user_settings = UserSettings()
            user_settings.save(prefs_path)
            logger.info("Wrote default user preferences to %s", prefs_path)

        return cls(user_settings=user_settings, lenses={}, paths=resolver)
