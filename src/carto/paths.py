"""Platform-specific storage locations for the application.

Locations are pure functions of the fixed application identifier and the
platform, following each platform's own convention:

- Linux and other Unix: XDG base directories
  (``~/.local/share/carto`` and ``~/.config/carto``)
- macOS: ``~/Library/Application Support`` and ``~/Library/Preferences``
  under the reverse-domain bundle name
- Windows: ``%APPDATA%\\athlabs\\carto`` with ``data`` and ``config``
  subdirectories
"""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Final

from carto.constants import (
    APP_NAME,
    APP_ORGANIZATION,
    APP_QUALIFIER,
    LENSES_DIR_NAME,
    PREFS_FILE_NAME,
)
from carto.errors import DirectoryResolutionError

logger: Final = logging.getLogger(__name__)


def _home_dir() -> Path:
    try:
        home = Path.home()
    except (RuntimeError, KeyError) as exc:
        raise DirectoryResolutionError(
            "Unable to determine the user's home directory", original_error=exc
        ) from exc
    if not home.is_absolute():
        raise DirectoryResolutionError("Home directory is not an absolute path", home)
    return home


def _xdg_dir(variable: str, fallback: str) -> Path:
    # Relative XDG values are invalid and ignored
    value = os.environ.get(variable, "")
    if value and Path(value).is_absolute():
        return Path(value)
    return _home_dir() / fallback


@dataclass(frozen=True)
class PathResolver:
    """Resolve the application's data and preference locations.

    The resolver holds only the application identifier and the platform
    name, so it is safe to share. Every method recomputes its path from
    the current environment without touching the filesystem.

    Examples:
        resolver = PathResolver()
        resolver.prefs_file()   # ~/.config/carto/settings.yaml on Linux
        resolver.lenses_dir()   # ~/.local/share/carto/lenses on Linux
    """

    qualifier: str = APP_QUALIFIER
    organization: str = APP_ORGANIZATION
    application: str = APP_NAME
    platform: str = sys.platform

    @property
    def is_macos(self) -> bool:
        return self.platform == "darwin"

    @property
    def is_windows(self) -> bool:
        return self.platform in ("win32", "cygwin")

    def _project_path(self) -> Path:
        if self.is_macos:
            bundle = ".".join((self.qualifier, self.organization, self.application))
            return Path(bundle.replace(" ", "-"))
        if self.is_windows:
            return Path(self.organization) / self.application
        return Path(self.application.lower().replace(" ", ""))

    def _roaming_app_data(self) -> Path:
        value = os.environ.get("APPDATA", "")
        if value and Path(value).is_absolute():
            return Path(value)
        return _home_dir() / "AppData" / "Roaming"

    def data_dir(self) -> Path:
        """Directory for application data such as lens definitions.

        Raises:
            DirectoryResolutionError: If no user directory can be determined
        """
        if self.is_macos:
            base = _home_dir() / "Library" / "Application Support"
            return base / self._project_path()
        if self.is_windows:
            return self._roaming_app_data() / self._project_path() / "data"
        return _xdg_dir("XDG_DATA_HOME", ".local/share") / self._project_path()

    def prefs_dir(self) -> Path:
        """Directory holding the user-editable preferences file.

        Raises:
            DirectoryResolutionError: If no user directory can be determined
        """
        if self.is_macos:
            return _home_dir() / "Library" / "Preferences" / self._project_path()
        if self.is_windows:
            return self._roaming_app_data() / self._project_path() / "config"
        return _xdg_dir("XDG_CONFIG_HOME", ".config") / self._project_path()

    def prefs_file(self) -> Path:
        """User preferences file."""
        return self.prefs_dir() / PREFS_FILE_NAME

    def lenses_dir(self) -> Path:
        """Directory that lens definition files are loaded from."""
        return self.data_dir() / LENSES_DIR_NAME


@lru_cache(maxsize=1)
def default_resolver() -> PathResolver:
    """Return the shared resolver for this application on this platform."""
    resolver = PathResolver()
    logger.debug("Using %s path conventions", resolver.platform)
    return resolver


def data_dir() -> Path:
    return default_resolver().data_dir()


def prefs_dir() -> Path:
    return default_resolver().prefs_dir()


def prefs_file() -> Path:
    return default_resolver().prefs_file()


def lenses_dir() -> Path:
    return default_resolver().lenses_dir()
