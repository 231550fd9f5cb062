"""Packaging of files and directory trees into a gzip-compressed tar archive."""

from __future__ import annotations

import gzip
import io
import os
import stat
import tarfile
from collections.abc import Iterable, Iterator


def _walk(path: str) -> Iterator[str]:
    info = os.lstat(path)
    yield path
    if stat.S_ISDIR(info.st_mode):
        for name in sorted(os.listdir(path)):
            yield from _walk(os.path.join(path, name))


class Packager:
    """Builds a ``.tar.gz`` archive from files and whole directories."""

    def package(
        self,
        output: str | os.PathLike[str],
        sources: Iterable[str | os.PathLike[str]],
    ) -> None:
        """Archive ``sources`` into ``output``.

        Files are stored under their base name; a directory is stored with its own
        name as the top entry and its contents below it.
        """
        buffer = io.BytesIO()
        with tarfile.open(fileobj=buffer, mode="w") as tar:
            for source in sources:
                source = os.fspath(source)
                if stat.S_ISDIR(os.stat(source).st_mode):
                    self._add_directory(tar, source)
                else:
                    self._add_file(tar, source)
        compressed = gzip.compress(buffer.getvalue(), compresslevel=6, mtime=0)
        fd = os.open(output, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o644)
        with os.fdopen(fd, "wb") as handle:
            handle.write(compressed)

    @staticmethod
    def _add_directory(tar: tarfile.TarFile, directory: str) -> None:
        base = os.path.dirname(directory) or "."
        for path in _walk(directory):
            info = tar.gettarinfo(name=path, arcname=os.path.relpath(path, base))
            if info is None:
                raise ValueError(f"unsupported file type: {path}")
            if info.isreg():
                with open(path, "rb") as handle:
                    tar.addfile(info, handle)
            else:
                tar.addfile(info)

    @staticmethod
    def _add_file(tar: tarfile.TarFile, path: str) -> None:
        with open(path, "rb") as handle:
            info = tar.gettarinfo(arcname=os.path.basename(path), fileobj=handle)
            tar.addfile(info, handle)