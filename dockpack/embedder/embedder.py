"""Collecting images and a compose file into one compressed resource file."""

from __future__ import annotations

import base64
import json
import os
from collections.abc import Iterator
from dataclasses import dataclass, field

from dockpack.builder.compression import compress, decompress

_JSON_ESCAPES = {"<": "\\u003c", ">": "\\u003e", "&": "\\u0026", "\u2028": "\\u2028", "\u2029": "\\u2029"}


def _encode_json(value: object) -> str:
    text = json.dumps(value, ensure_ascii=False, separators=(",", ":"))
    for char, escape in _JSON_ESCAPES.items():
        text = text.replace(char, escape)
    return text + "\n"


def _to_base64(data: bytes | None) -> str | None:
    return None if data is None else base64.b64encode(data).decode("ascii")


def _from_base64(text: object, what: str) -> bytes | None:
    if text is None:
        return None
    if not isinstance(text, str):
        raise ValueError(f"{what}: expected a base64 string")
    return base64.b64decode(text, validate=True)


def _json_values(text: str) -> Iterator[object]:
    decoder = json.JSONDecoder()
    position = 0
    while True:
        while position < len(text) and text[position] in " \t\r\n":
            position += 1
        if position == len(text):
            return
        value, position = decoder.raw_decode(text, position)
        yield value


@dataclass
class Embedder:
    """Images by name and the raw bytes of a compose file."""

    images: dict[str, bytes] = field(default_factory=dict)
    compose_file: bytes | None = None

    def load_compose_file(self, path: str | os.PathLike[str]) -> None:
        """Read the compose file at ``path`` into this embedder."""
        with open(path, "rb") as handle:
            self.compose_file = handle.read()

    def add_image(self, name: str, image_path: str | os.PathLike[str]) -> None:
        """Read an image file and store it under ``name``."""
        with open(image_path, "rb") as handle:
            self.images[name] = handle.read()

    def save_embedded_resources(self, output_path: str | os.PathLike[str]) -> None:
        """Write the compose file and every image as gzip-compressed JSON lines."""
        parts = [_encode_json(_to_base64(self.compose_file))]
        parts.extend(
            _encode_json({"image": _to_base64(data), "name": name})
            for name, data in self.images.items()
        )
        compressed = compress("".join(parts).encode("utf-8"))
        fd = os.open(output_path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o644)
        with os.fdopen(fd, "wb") as handle:
            handle.write(compressed)


def extract_resources(path: str | os.PathLike[str]) -> Embedder:
    """Read a resource file written by :meth:`Embedder.save_embedded_resources`."""
    with open(path, "rb") as handle:
        text = decompress(handle.read()).decode("utf-8")

    values = _json_values(text)
    try:
        first = next(values)
    except StopIteration:
        raise ValueError("unexpected end of JSON input") from None

    embedder = Embedder(compose_file=_from_base64(first, "compose file"))
    for record in values:
        if not isinstance(record, dict) or not isinstance(record.get("name"), str):
            raise ValueError("malformed image record")
        image = _from_base64(record.get("image"), f"image {record['name']}")
        embedder.images[record["name"]] = image if image is not None else b""
    return embedder