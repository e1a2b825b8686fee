"""Content hashing of files with MD5 or SHA-256."""

from __future__ import annotations

import enum
import hashlib
import os
from typing import Callable, Union

CHUNK_SIZE = 8192

PathLike = Union[str, "os.PathLike[str]"]


class HashAlgorithm(enum.Enum):
    """Digest algorithms available for comparing file contents."""

    MD5 = "MD5"
    SHA256 = "SHA256"


_CONSTRUCTORS: dict[HashAlgorithm, Callable[[], "hashlib._Hash"]] = {
    HashAlgorithm.MD5: hashlib.md5,
    HashAlgorithm.SHA256: hashlib.sha256,
}


def _digest_file(file_path: PathLike, algorithm: HashAlgorithm) -> str:
    digest = _CONSTRUCTORS[algorithm]()
    with open(file_path, "rb") as handle:
        for chunk in iter(lambda: handle.read(CHUNK_SIZE), b""):
            digest.update(chunk)
    return digest.hexdigest()


def calculate_md5(file_path: PathLike) -> str:
    """Return the lower-case hex MD5 digest of a file's contents."""
    return _digest_file(file_path, HashAlgorithm.MD5)


def calculate_sha256(file_path: PathLike) -> str:
    """Return the lower-case hex SHA-256 digest of a file's contents."""
    return _digest_file(file_path, HashAlgorithm.SHA256)


def calculate_hash(file_path: PathLike, algorithm: HashAlgorithm | str) -> str:
    """Return the hex digest of a file using the given algorithm.

    Raises ValueError for an algorithm that is not supported and OSError
    when the file cannot be read.
    """
    try:
        algorithm = HashAlgorithm(algorithm)
    except (ValueError, TypeError):
        raise ValueError("Unsupported hash algorithm") from None
    return _digest_file(file_path, algorithm)


def compare_files(
    file_path1: PathLike, file_path2: PathLike, algorithm: HashAlgorithm | str
) -> bool:
    """Return True when both files have the same digest."""
    return calculate_hash(file_path1, algorithm) == calculate_hash(file_path2, algorithm)