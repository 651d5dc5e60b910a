"""Path file loading errors."""

from __future__ import annotations


class PathLoadError(Exception):
    """Raised when a path file cannot be found or read."""


class PathFormatError(PathLoadError):
    """Raised when a path file is not valid JSON or does not have the expected shape."""
