"""Common utility functions and helpers for the carto package."""

from carto.utils.file import ensure_directory_exists, write_text_file

__all__ = [
    "ensure_directory_exists",
    "write_text_file",
]
