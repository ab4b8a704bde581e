"""Path-list file resolution with cached loading."""

from __future__ import annotations

import ntpath
import os
import sys
from typing import Callable, Generic, TypeVar

T = TypeVar("T")


def _executable_dir() -> str:
    """Directory of the running program, with a trailing separator."""
    script = sys.argv[0] if sys.argv and sys.argv[0] else ""
    directory = os.path.dirname(os.path.abspath(script)) if script else os.getcwd()
    return os.path.join(directory, "")


def _readable(path: str) -> bool:
    try:
        with open(path, "rb"):
            return True
    except OSError:
        return False


class FileManager(Generic[T]):
    """Resolves file names against a list of directories and caches loaded objects.

    The path string is a list of directories separated by semicolons; every
    percent sign is replaced by the base directory (by default the directory
    of the running program). Each directory is joined with a file name by
    plain concatenation, so directories should end with a separator.
    """

    def __init__(
        self,
        path: str,
        load_handler: Callable[[str], T],
        delete_handler: Callable[[T], None] | None = None,
        base_dir: str | None = None,
    ) -> None:
        self._load_handler = load_handler
        self._delete_handler = delete_handler
        self._base_dir = base_dir if base_dir is not None else _executable_dir()
        self._cache: dict[str, T] = {}
        self.path = ""
        self.resolved_path = ""
        self.set_path_string(path)

    @property
    def base_dir(self) -> str:
        return self._base_dir

    @property
    def directories(self) -> list[str]:
        """The resolved directories, in scanning order."""
        return self.resolved_path.split(";")[:-1]

    def set_path_string(self, new_path: str) -> None:
        """Replace the directory list and resolve its percent signs."""
        self.path = new_path
        resolved = new_path if new_path.endswith(";") else new_path + ";"
        self.resolved_path = resolved.replace("%", self._base_dir)

    def find_path(self, filename: str) -> str:
        """Return the first existing candidate, or the name itself.

        A name that already carries a drive or a directory is not scanned.
        """
        drive, _ = ntpath.splitdrive(filename)
        if drive or "/" in filename or "\\" in filename:
            return filename
        for directory in self.directories:
            candidate = directory + filename
            if _readable(candidate):
                return candidate
        return filename

    def load(self, filename: str) -> T:
        """Load a file through the handler once; later calls return the cached object."""
        if filename not in self._cache:
            self._cache[filename] = self._load_handler(self.find_path(filename))
        return self._cache[filename]

    def __contains__(self, filename: object) -> bool:
        return filename in self._cache

    def __len__(self) -> int:
        return len(self._cache)

    def close(self) -> None:
        """Release every cached object through the delete handler."""
        if self._delete_handler is not None:
            for obj in self._cache.values():
                self._delete_handler(obj)
        self._cache.clear()

    def __enter__(self) -> FileManager[T]:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()