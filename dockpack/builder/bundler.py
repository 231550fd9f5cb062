"""Bundling of individual resource files into one gzip-compressed tar archive."""

from __future__ import annotations

import gzip
import io
import os
import tarfile
from collections.abc import Iterable


class Bundler:
    """Collects resource files into a flat ``.tar.gz`` bundle."""

    def bundle_resources(
        self,
        resource_paths: Iterable[str | os.PathLike[str]],
        output_path: str | os.PathLike[str],
    ) -> None:
        """Write every file in ``resource_paths`` under its base name into ``output_path``.

        Nothing is written if any resource cannot be added.
        """
        buffer = io.BytesIO()
        with tarfile.open(fileobj=buffer, mode="w") as tar:
            for resource in resource_paths:
                self._add_file(tar, os.fspath(resource))
        compressed = gzip.compress(buffer.getvalue(), compresslevel=6, mtime=0)
        fd = os.open(output_path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o644)
        with os.fdopen(fd, "wb") as handle:
            handle.write(compressed)

    @staticmethod
    def _add_file(tar: tarfile.TarFile, path: str) -> None:
        with open(path, "rb") as handle:
            info = tar.gettarinfo(arcname=os.path.basename(path), fileobj=handle)
            tar.addfile(info, handle)