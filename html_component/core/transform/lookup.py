"""Name lookup: resolve candidate file names inside a search directory."""

import fnmatch
import glob
import logging
import os
from pathlib import Path
from typing import Iterable, Optional, Protocol, Union

PathLike = Union[str, Path]

logger = logging.getLogger(__name__)


class NameLookup(Protocol):
    """Resolves a file name (or glob pattern) inside a directory."""

    def resolve(self, directory: PathLike, name: str) -> Optional[Path]:
        ...


class FileSystemLookup:
    """Lookup backed by the real filesystem.

    Relative directories are resolved against the process working
    directory. The name may be a glob pattern; the first match in sorted
    order is returned, which for a literal name is the candidate itself.
    """

    def resolve(self, directory: PathLike, name: str) -> Optional[Path]:
        candidate = os.path.abspath(os.path.join(directory, name))
        matches = sorted(glob.glob(candidate))
        logger.debug("Probe %s: %d match(es)", candidate, len(matches))
        if not matches:
            return None
        return Path(matches[0])


class InMemoryLookup:
    """Lookup over a fixed set of file paths, without touching the disk.

    Parameters
    ----------
    files : Iterable[PathLike]
        Paths that exist. Relative paths are made absolute against the
        working directory, as FileSystemLookup would.
    """

    def __init__(self, files: Iterable[PathLike] = ()):
        self.files = {os.path.abspath(str(f)) for f in files}

    def add(self, path: PathLike) -> None:
        self.files.add(os.path.abspath(str(path)))

    def resolve(self, directory: PathLike, name: str) -> Optional[Path]:
        candidate = os.path.abspath(os.path.join(directory, name))
        matches = sorted(fnmatch.filter(self.files, candidate))
        if not matches:
            return None
        return Path(matches[0])
