"""Gzip compression of byte strings and files."""

from __future__ import annotations

import gzip
import os

_LEVEL = 6


def compress(data: bytes) -> bytes:
    """Return ``data`` as a single gzip member with a zero timestamp."""
    return gzip.compress(data, compresslevel=_LEVEL, mtime=0)


def decompress(data: bytes) -> bytes:
    """Return the concatenated contents of every gzip member in ``data``."""
    if not data:
        raise gzip.BadGzipFile("empty gzip input")
    return gzip.decompress(data)


def save_compressed_file(filename: str | os.PathLike[str], data: bytes) -> None:
    """Compress ``data`` and write it to ``filename``."""
    compressed = compress(data)
    fd = os.open(filename, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o777)
    with os.fdopen(fd, "wb") as handle:
        handle.write(compressed)


def load_compressed_file(filename: str | os.PathLike[str]) -> bytes:
    """Read a gzip file and return its decompressed contents."""
    with open(filename, "rb") as handle:
        return decompress(handle.read())