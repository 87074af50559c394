"""Exception classes for configuration bootstrap.

Every failure while resolving directories or reading and writing the
preferences file is unrecoverable at this layer. The core raises one of
these and leaves it to the startup sequence to terminate the process.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class ConfigError(RuntimeError):
    """Error raised while bootstrapping configuration.

    Carries the offending filesystem path when one is known, along with
    the underlying exception that triggered it.
    """

    def __init__(
        self,
        message: str,
        path: Optional[Path] = None,
        original_error: Optional[BaseException] = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error message
            path: Filesystem location involved, if any
            original_error: The original exception that was caught
        """
        super().__init__(f"{message}: {path}" if path is not None else message)
        self.message: str = message
        self.path: Optional[Path] = path
        self.original_error: Optional[BaseException] = original_error


class DirectoryResolutionError(ConfigError):
    """Raised when a platform user directory cannot be determined."""

    pass


class DirectoryCreationError(ConfigError):
    """Raised when a required directory cannot be created."""

    pass


class PreferencesReadError(ConfigError):
    """Raised when the preferences file cannot be read or is malformed."""

    pass


class PreferencesWriteError(ConfigError):
    """Raised when the preferences file cannot be written."""

    pass
