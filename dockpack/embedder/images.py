"""Unpacking embedded image archives into a local image store."""

from __future__ import annotations

import io
import os
import shutil
import tarfile
from collections.abc import Iterable
from dataclasses import dataclass

DEFAULT_IMAGE_ROOT = "/var/lib/docker/images"


@dataclass
class Image:
    """An embedded container image: a name and the bytes of its tar archive."""

    name: str
    data: bytes


def _target(directory: str, name: str) -> str:
    return os.path.normpath(os.path.join(directory, *name.split("/")))


def _extract(image: Image, root: str) -> None:
    image_dir = os.path.join(root, image.name)
    os.makedirs(image_dir, mode=0o755, exist_ok=True)
    if not image.data:
        return

    with tarfile.open(fileobj=io.BytesIO(image.data), mode="r|") as tar:
        for member in tar:
            target = _target(image_dir, member.name)
            if member.isdir():
                os.makedirs(target, mode=0o755, exist_ok=True)
            elif member.isreg():
                source = tar.extractfile(member)
                with open(target, "wb") as out:
                    if source is not None:
                        shutil.copyfileobj(source, out)


def load_images(images: Iterable[Image], root: str | os.PathLike[str] = DEFAULT_IMAGE_ROOT) -> None:
    """Unpack each image into ``root/<name>``; only directories and regular files are restored."""
    root = os.fspath(root)
    for image in images:
        _extract(image, root)