"""Module de gestion des fichiers."""

from script_python_utils.filesystem.base import FileManager
from script_python_utils.filesystem.local import LocalFileManager
from script_python_utils.filesystem.paths import (
    PathSpec,
    home,
    home_dir,
    join,
    resolve,
)

__all__ = [
    "FileManager",
    "LocalFileManager",
    "PathSpec",
    "home",
    "home_dir",
    "join",
    "resolve",
]
