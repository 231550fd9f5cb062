import io
import tarfile

import pytest

from dockpack.embedder.images import Image, load_images


def _tar(entries):
    buffer = io.BytesIO()
    with tarfile.open(fileobj=buffer, mode="w") as tar:
        for name, kind, payload in entries:
            info = tarfile.TarInfo(name)
            if kind == "dir":
                info.type = tarfile.DIRTYPE
                tar.addfile(info)
            elif kind == "link":
                info.type = tarfile.SYMTYPE
                info.linkname = payload
                tar.addfile(info)
            else:
                info.size = len(payload)
                tar.addfile(info, io.BytesIO(payload))
    return buffer.getvalue()


def test_extracts_directories_and_files(tmp_path):
    data = _tar(
        [
            ("layer", "dir", None),
            ("layer/file.txt", "file", b"content"),
            ("manifest.json", "file", b"{}"),
            ("link", "link", "manifest.json"),
        ]
    )
    load_images([Image(name="app", data=data)], root=tmp_path)
    image_dir = tmp_path / "app"
    assert (image_dir / "layer").is_dir()
    assert (image_dir / "layer" / "file.txt").read_bytes() == b"content"
    assert (image_dir / "manifest.json").read_bytes() == b"{}"
    assert not (image_dir / "link").exists()


def test_several_images_get_their_own_directories(tmp_path):
    images = [
        Image(name="one", data=_tar([("a", "file", b"1")])),
        Image(name="two", data=_tar([("a", "file", b"2")])),
    ]
    load_images(images, root=tmp_path)
    assert (tmp_path / "one" / "a").read_bytes() == b"1"
    assert (tmp_path / "two" / "a").read_bytes() == b"2"


def test_empty_data_creates_only_the_directory(tmp_path):
    load_images([Image(name="blank", data=b"")], root=tmp_path)
    assert (tmp_path / "blank").is_dir()
    assert list((tmp_path / "blank").iterdir()) == []


def test_file_without_parent_directory_fails(tmp_path):
    data = _tar([("missing/file.txt", "file", b"x")])
    with pytest.raises(FileNotFoundError):
        load_images([Image(name="app", data=data)], root=tmp_path)


def test_corrupt_data_raises(tmp_path):
    with pytest.raises(tarfile.ReadError):
        load_images([Image(name="bad", data=b"not a tar archive")], root=tmp_path)