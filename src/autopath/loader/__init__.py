"""Loading authored path files from a deploy directory.

Public API
----------
load_path_file   - decodes one ``.path`` file
PathFileReader   - reads ``pathplanner/<name>.path`` JSON files
PathFileParser   - decoded JSON → Waypoint / EventMarker lists
PathLoadError    - raised when a path file cannot be found or read
PathFormatError  - raised on malformed path files
"""

from autopath.loader.errors import PathFormatError, PathLoadError
from autopath.loader.parser import PathFileParser
from autopath.loader.reader import PathFileReader, load_path_file

__all__ = [
    "PathFileParser",
    "PathFileReader",
    "PathFormatError",
    "PathLoadError",
    "load_path_file",
]
