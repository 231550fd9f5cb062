"""Creating and unpacking plain tar archives of directory trees."""

from __future__ import annotations

import io
import os
import shutil
import stat
import tarfile
from collections.abc import Iterator
from typing import BinaryIO


def _walk(path: str) -> Iterator[str]:
    """Yield ``path`` and everything below it in lexical order, without following links."""
    info = os.lstat(path)
    yield path
    if stat.S_ISDIR(info.st_mode):
        for name in sorted(os.listdir(path)):
            yield from _walk(os.path.join(path, name))


def create_tar_archive(source_dir: str | os.PathLike[str]) -> bytes:
    """Return an uncompressed tar archive of ``source_dir``.

    Entry names are relative to ``source_dir``; the directory itself is stored as ``"."``.
    """
    source_dir = os.fspath(source_dir)
    buffer = io.BytesIO()
    with tarfile.open(fileobj=buffer, mode="w") as tar:
        for path in _walk(source_dir):
            arcname = os.path.relpath(path, source_dir)
            info = tar.gettarinfo(name=path, arcname=arcname)
            if info is None:
                raise ValueError(f"unsupported file type: {path}")
            if info.isreg():
                with open(path, "rb") as handle:
                    tar.addfile(info, handle)
            else:
                tar.addfile(info)
    return buffer.getvalue()


def _target_path(dest_dir: str, name: str) -> str:
    return os.path.normpath(os.path.join(dest_dir, *name.split("/")))


def extract_tar_archive(tar_data: bytes | bytearray | BinaryIO, dest_dir: str | os.PathLike[str]) -> None:
    """Unpack a tar archive into ``dest_dir``.

    Directories and regular files are restored; extraction stops silently at the
    first entry of any other type. Parent directories of files must already exist
    or be created by earlier directory entries.
    """
    dest_dir = os.fspath(dest_dir)
    if isinstance(tar_data, (bytes, bytearray)):
        if not tar_data:
            return
        stream: BinaryIO = io.BytesIO(tar_data)
    else:
        stream = tar_data

    with tarfile.open(fileobj=stream, mode="r|") as tar:
        for member in tar:
            target = _target_path(dest_dir, member.name)
            if member.isdir():
                os.makedirs(target, exist_ok=True)
            elif member.isreg():
                source = tar.extractfile(member)
                fd = os.open(target, os.O_CREAT | os.O_WRONLY, member.mode)
                with os.fdopen(fd, "wb") as out:
                    if source is not None:
                        shutil.copyfileobj(source, out)
            else:
                return