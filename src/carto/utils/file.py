"""File utility functions."""

from __future__ import annotations

import contextlib
import logging
import os
from pathlib import Path
from typing import Final

from carto.errors import DirectoryCreationError, PreferencesWriteError

logger: Final = logging.getLogger(__name__)


def ensure_directory_exists(directory: Path) -> None:
    """Create directory (and any missing parents) if it doesn't exist.

    Calling this repeatedly is safe; an existing directory is left as is.

    Args:
        directory: Path to create

    Raises:
        DirectoryCreationError: If the path is occupied by a non-directory,
            cannot be inspected, or cannot be created
    """
    try:
        if directory.is_dir():
            return
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise DirectoryCreationError(
            f"Unable to create directory ({exc.strerror or exc})", directory, exc
        ) from exc
    logger.debug("Created directory: %s", directory)


def write_text_file(file_path: Path, content: str) -> None:
    """Write text to a file, replacing any previous contents.

    The text goes to a sibling temporary file first and is then moved over
    the destination, so a failed write never leaves a truncated file behind.

    Args:
        file_path: Destination file
        content: Text to write (UTF-8)

    Raises:
        PreferencesWriteError: If the file cannot be written
    """
    tmp_path = file_path.with_name(f".{file_path.name}.tmp")
    try:
        tmp_path.write_text(content, encoding="utf-8")
        os.replace(tmp_path, file_path)
    except OSError as exc:
        with contextlib.suppress(OSError):
            tmp_path.unlink(missing_ok=True)
        raise PreferencesWriteError(
            f"Unable to save user preferences file ({exc.strerror or exc})", file_path, exc
        ) from exc
    logger.debug("Wrote %d bytes to %s", len(content), file_path)
