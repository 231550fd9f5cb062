"""Small file-system helpers."""

from __future__ import annotations

import os
import stat
from collections.abc import Callable, Iterator


def ensure_dir(path: str | os.PathLike[str]) -> None:
    """Create ``path`` and its parents unless something already exists there."""
    try:
        os.stat(path)
    except FileNotFoundError:
        os.makedirs(path, mode=0o777, exist_ok=True)


def read_file(path: str | os.PathLike[str]) -> bytes:
    """Return the whole contents of a file."""
    with open(path, "rb") as handle:
        return handle.read()


def write_file(path: str | os.PathLike[str], data: bytes) -> None:
    """Write ``data`` to ``path``, creating or truncating the file."""
    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o777)
    with os.fdopen(fd, "wb") as handle:
        handle.write(data)


def delete_file(path: str | os.PathLike[str]) -> None:
    """Remove a file, link or empty directory."""
    if os.path.isdir(path) and not os.path.islink(path):
        os.rmdir(path)
    else:
        os.remove(path)


def _walk(path: str) -> Iterator[tuple[str, os.stat_result]]:
    info = os.lstat(path)
    yield path, info
    if stat.S_ISDIR(info.st_mode):
        for name in sorted(os.listdir(path)):
            yield from _walk(os.path.join(path, name))


def iter_files(root: str | os.PathLike[str]) -> Iterator[str]:
    """Yield every non-directory path under ``root`` in lexical order.

    Symbolic links are reported, not followed.
    """
    for path, info in _walk(os.fspath(root)):
        if not stat.S_ISDIR(info.st_mode):
            yield path


def walk_dir(root: str | os.PathLike[str], fn: Callable[[str], object]) -> None:
    """Call ``fn`` on every non-directory path under ``root``; its exceptions propagate."""
    for path in iter_files(root):
        fn(path)