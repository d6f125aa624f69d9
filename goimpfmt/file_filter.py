"""
File selection for goimpfmt.

This module decides which files a run touches, based on:
- Excluded directories (vendor trees, VCS metadata, test data)
- Extension filtering (``.go`` by default)
- A user supplied ignore-list of files or directories

Usage:
    from goimpfmt.file_filter import FileFilter, collect_files

    files = collect_files(["./cmd", "./pkg"], FileFilter(ignore=["pkg/gen"]))
"""

import logging
import os
import re
from pathlib import Path
from typing import Iterable, List, Optional

logger = logging.getLogger(__name__)


DEFAULT_EXCLUDED_DIRS = ("vendor", ".git", "node_modules", "testdata")
DEFAULT_EXTENSIONS = (".go",)


def _normalize(path: str) -> str:
    return os.path.abspath(path).replace('\\', '/')


def build_excluded_dir_pattern(dirs: Iterable[str]) -> Optional[re.Pattern]:
    """Pattern matching ``/dirname/`` or ``/dirname`` at the end of a path."""
    names = [re.escape(d) for d in dirs if d]
    if not names:
        return None
    return re.compile(r'/(?:' + '|'.join(names) + r')(?:/|$)')


class FileFilter:
    """Predicate over file paths for a formatting run."""

    def __init__(
        self,
        extensions: Iterable[str] = DEFAULT_EXTENSIONS,
        excluded_dirs: Iterable[str] = DEFAULT_EXCLUDED_DIRS,
        ignore: Iterable[str] = (),
    ):
        self.extensions = tuple(extensions)
        self._excluded = build_excluded_dir_pattern(excluded_dirs)
        self.ignore = tuple(_normalize(p).rstrip('/') for p in ignore if p)

    def is_excluded_path(self, file_path: str, root: Optional[str] = None) -> bool:
        """True if the path lies inside an excluded directory below ``root``."""
        if self._excluded is None:
            return False
        if root is None:
            normalized = _normalize(file_path)
        else:
            normalized = "/" + os.path.relpath(file_path, root).replace("\\", "/")
        return bool(self._excluded.search(normalized))

    def is_ignored(self, file_path: str) -> bool:
        """True if the path is, or lies under, an ignore-list entry."""
        normalized = _normalize(file_path)
        for ignored in self.ignore:
            if normalized == ignored or normalized.startswith(ignored + '/'):
                return True
        return False

    def has_extension(self, file_path: str) -> bool:
        return file_path.endswith(self.extensions)

    def should_format(self, file_path: str, root: Optional[str] = None) -> bool:
        return (
            self.has_extension(file_path)
            and not self.is_excluded_path(file_path, root)
            and not self.is_ignored(file_path)
        )


def collect_files(paths: Iterable[str], file_filter: FileFilter) -> List[str]:
    """
    Collect files to format from files and directories.

    Directories are searched recursively. Missing paths are logged and
    skipped. Returns sorted, de-duplicated absolute paths.
    """
    all_files = []
    for path in paths:
        path_obj = Path(path)
        if path_obj.is_file():
            abs_path = str(path_obj.absolute())
            # Explicitly named files skip the excluded directory check
            if file_filter.has_extension(abs_path) and not file_filter.is_ignored(abs_path):
                all_files.append(abs_path)
            else:
                logger.info(f"Skipping {path}")
        elif path_obj.is_dir():
            if file_filter.is_ignored(str(path_obj)):
                logger.info(f"Skipping ignored directory {path}")
                continue
            for ext in file_filter.extensions:
                for f in path_obj.rglob(f"*{ext}"):
                    abs_path = str(f.absolute())
                    if f.is_file() and file_filter.should_format(abs_path, root=str(path_obj.absolute())):
                        all_files.append(abs_path)
        else:
            logger.warning(f"Path '{path}' does not exist")

    return sorted(set(all_files))
