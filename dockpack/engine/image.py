"""Container image files on disk and the metadata read from their names."""

from __future__ import annotations

import os
from dataclasses import dataclass

from dockpack.utils.fs import iter_files


@dataclass
class Image:
    """A container image file with its name and version."""

    name: str
    version: str = ""
    path: str = ""


def _strip_extension(file_name: str) -> str:
    dot = file_name.rfind(".")
    return file_name if dot < 0 else file_name[:dot]


def _version_separator(name: str) -> int:
    colon = name.rfind(":")
    return colon if colon >= 0 else name.rfind("-")


def load_image(image_path: str | os.PathLike[str]) -> Image:
    """Read an image file and derive its name and version from the file name.

    ``name:version`` and ``name-version`` are recognised, ``:`` taking precedence;
    without either the version is ``"latest"``.
    """
    image_path = os.fspath(image_path)
    if not image_path:
        raise ValueError("image path cannot be empty")
    if not os.path.lexists(image_path):
        raise FileNotFoundError(f"image file does not exist: {image_path}")

    with open(image_path, "rb") as handle:
        data = handle.read()
    if not data:
        raise ValueError(f"image file is empty: {image_path}")

    name = _strip_extension(os.path.basename(image_path))
    version = "latest"
    separator = _version_separator(name)
    if separator != -1:
        name, version = name[:separator], name[separator + 1 :]

    if not name:
        raise ValueError(f"could not extract valid image name from path: {image_path}")
    return Image(name=name, version=version, path=image_path)


def verify_image(image: Image | None) -> None:
    """Raise ``ValueError`` unless ``image`` has both a name and a version."""
    if image is None:
        raise ValueError("image cannot be None")
    if not image.name or not image.version:
        raise ValueError("image name and version must be specified")


def save_image(image: Image | None, dest_path: str | os.PathLike[str]) -> None:
    """Write placeholder image data to ``dest_path``."""
    if image is None:
        raise ValueError("image cannot be None")
    dest_path = os.fspath(dest_path)
    if not dest_path:
        raise ValueError("destination path cannot be empty")
    fd = os.open(dest_path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o644)
    with os.fdopen(fd, "wb") as handle:
        handle.write(b"dummy image data")


def list_images(directory: str | os.PathLike[str]) -> list[Image]:
    """Return an image entry for every file under ``directory``, in lexical order."""
    return [Image(name=os.path.basename(path), path=path) for path in iter_files(directory)]