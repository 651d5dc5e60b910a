"""PathFileReader: reads ``.path`` files from a robot deploy directory."""

from __future__ import annotations

import json
from pathlib import Path

from autopath.loader.errors import PathFormatError, PathLoadError

PATH_SUBDIR = "pathplanner"
PATH_SUFFIX = ".path"


class PathFileReader:
    """Reads authored path files stored as ``<deploy_dir>/pathplanner/<name>.path``.

    Parameters
    ----------
    deploy_dir:
        Root of the deploy directory.
    """

    def __init__(self, deploy_dir: str | Path) -> None:
        self._root = Path(deploy_dir) / PATH_SUBDIR

    def path_for(self, name: str) -> Path:
        """Return the file location of the path called *name*."""
        return self._root / f"{name}{PATH_SUFFIX}"

    def list_paths(self) -> list[str]:
        """Return the sorted names of all available paths (empty if the directory is missing)."""
        if not self._root.is_dir():
            return []
        return sorted(p.stem for p in self._root.glob(f"*{PATH_SUFFIX}") if p.is_file())

    def read(self, name: str) -> dict:
        """Return the decoded JSON object of the path called *name*.

        Raises
        ------
        PathLoadError
            If the file does not exist or cannot be read.
        PathFormatError
            If the file is not UTF-8 JSON or its top level is not an object.
        """
        file_path = self.path_for(name)
        if not file_path.is_file():
            raise PathLoadError(f"Path file not found: {str(file_path)!r}")
        return load_path_file(file_path)


def load_path_file(file_path: str | Path) -> dict:
    """Return the decoded JSON object stored in *file_path*.

    Raises
    ------
    PathLoadError
        If the file cannot be opened or read.
    PathFormatError
        If the file is not UTF-8 JSON or its top level is not an object.
    """
    file_path = Path(file_path)
    try:
        text = file_path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise PathFormatError(f"{str(file_path)!r} is not UTF-8 text: {exc}") from exc
    except OSError as exc:
        raise PathLoadError(f"Could not read {str(file_path)!r}: {exc}") from exc

    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise PathFormatError(f"Invalid JSON in {str(file_path)!r}: {exc}") from exc

    if not isinstance(data, dict):
        raise PathFormatError(f"Expected a JSON object at the top of {str(file_path)!r}")
    return data
