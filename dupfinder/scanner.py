"""Directory scanning and grouping of files with identical contents."""

from __future__ import annotations

import os
import sys
from collections import defaultdict
from dataclasses import dataclass
from typing import Iterator

from .hashing import HashAlgorithm, calculate_hash


@dataclass
class FileInfo:
    """A scanned file with its digest, size and modification time."""

    path: str
    hash: str
    size: int
    last_modified: float


def _iter_files(directory: str, recursive: bool) -> Iterator[str]:
    """Yield regular files in directory order, descending into subdirectories
    as they are met when recursive (directory symlinks are not followed)."""
    with os.scandir(directory) as entries:
        for entry in entries:
            if entry.is_file():
                yield entry.path
            elif recursive and entry.is_dir(follow_symlinks=False):
                yield from _iter_files(entry.path, recursive)


class FileScanner:
    """Scans a directory and groups files whose contents hash the same."""

    def __init__(self) -> None:
        self._scanned_files: list[FileInfo] = []
        self._duplicate_groups: list[list[str]] = []

    @property
    def scanned_files(self) -> list[FileInfo]:
        return list(self._scanned_files)

    @property
    def total_files_scanned(self) -> int:
        return len(self._scanned_files)

    @property
    def total_duplicate_groups(self) -> int:
        return len(self._duplicate_groups)

    def find_duplicates(
        self,
        directory_path: str | os.PathLike[str],
        algorithm: HashAlgorithm = HashAlgorithm.SHA256,
        recursive: bool = True,
    ) -> list[list[str]]:
        """Scan a directory and return groups of paths with identical contents,
        largest groups first."""
        algorithm = HashAlgorithm(algorithm)
        directory_path = os.fspath(directory_path)
        self._scanned_files = []
        self._duplicate_groups = []

        print(f"Scanning directory: {directory_path}")
        print(f"Using {algorithm.value} hashing")
        print(f"Recursive: {'Yes' if recursive else 'No'}")

        self._scan_directory(directory_path, algorithm, recursive)
        self._find_duplicate_groups()

        print(f"Scan complete. Found {len(self._scanned_files)} files.")
        print(f"Found {len(self._duplicate_groups)} groups of duplicates.")
        return [list(group) for group in self._duplicate_groups]

    def _scan_directory(
        self, directory_path: str, algorithm: HashAlgorithm, recursive: bool
    ) -> None:
        try:
            for path in _iter_files(directory_path, recursive):
                self._process_file(path, algorithm)
        except OSError as exc:
            print(f"Error scanning directory: {exc}", file=sys.stderr)

    def _process_file(self, path: str, algorithm: HashAlgorithm) -> None:
        try:
            stat = os.stat(path)
            info = FileInfo(
                path=path,
                hash=calculate_hash(path, algorithm),
                size=stat.st_size,
                last_modified=stat.st_mtime,
            )
        except (OSError, ValueError) as exc:
            print(f'Error processing file "{path}": {exc}', file=sys.stderr)
            return
        self._scanned_files.append(info)
        print(f'Processed: "{os.path.basename(path)}" (Size: {info.size} bytes)')

    def _find_duplicate_groups(self) -> None:
        by_hash: dict[str, list[str]] = defaultdict(list)
        for info in self._scanned_files:
            by_hash[info.hash].append(info.path)
        groups = [paths for paths in by_hash.values() if len(paths) > 1]
        groups.sort(key=len, reverse=True)
        self._duplicate_groups = groups