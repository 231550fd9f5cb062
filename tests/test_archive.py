import io
import os
import tarfile

import pytest

from dockpack.utils.archive import create_tar_archive, extract_tar_archive


@pytest.fixture
def source_tree(tmp_path):
    src = tmp_path / "src"
    (src / "sub").mkdir(parents=True)
    (src / "a.txt").write_bytes(b"alpha")
    (src / "sub" / "b.txt").write_bytes(b"bravo")
    return src


def test_names_are_relative_and_lexical(source_tree):
    data = create_tar_archive(source_tree)
    with tarfile.open(fileobj=io.BytesIO(data)) as tar:
        names = tar.getnames()
    assert names == [".", "a.txt", "sub", "sub/b.txt"]


def test_round_trip_from_bytes(source_tree, tmp_path):
    dest = tmp_path / "dest"
    dest.mkdir()
    extract_tar_archive(create_tar_archive(source_tree), dest)
    assert (dest / "a.txt").read_bytes() == b"alpha"
    assert (dest / "sub" / "b.txt").read_bytes() == b"bravo"


def test_round_trip_from_stream(source_tree, tmp_path):
    dest = tmp_path / "dest"
    dest.mkdir()
    extract_tar_archive(io.BytesIO(create_tar_archive(source_tree)), dest)
    assert sorted(p.name for p in dest.rglob("*")) == ["a.txt", "b.txt", "sub"]


def test_directory_entries_are_directories(source_tree):
    data = create_tar_archive(source_tree)
    with tarfile.open(fileobj=io.BytesIO(data)) as tar:
        sub = tar.getmember("sub")
        file_member = tar.getmember("a.txt")
    assert sub.isdir()
    assert file_member.isreg()
    assert file_member.size == len(b"alpha")


def test_missing_source_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        create_tar_archive(tmp_path / "missing")


def test_empty_bytes_extract_nothing(tmp_path):
    extract_tar_archive(b"", tmp_path)
    assert list(tmp_path.iterdir()) == []


def _build_tar(entries):
    buffer = io.BytesIO()
    with tarfile.open(fileobj=buffer, mode="w") as tar:
        for info, payload in entries:
            tar.addfile(info, io.BytesIO(payload) if payload is not None else None)
    return buffer.getvalue()


def _file_info(name, payload):
    info = tarfile.TarInfo(name)
    info.size = len(payload)
    info.mode = 0o644
    return info


def test_file_without_parent_directory_fails(tmp_path):
    data = _build_tar([(_file_info("nodir/f.txt", b"x"), b"x")])
    with pytest.raises(FileNotFoundError):
        extract_tar_archive(data, tmp_path)


def test_extraction_stops_at_unsupported_entry(tmp_path):
    link = tarfile.TarInfo("link")
    link.type = tarfile.SYMTYPE
    link.linkname = "first.txt"
    data = _build_tar(
        [
            (_file_info("first.txt", b"one"), b"one"),
            (link, None),
            (_file_info("third.txt", b"three"), b"three"),
        ]
    )
    extract_tar_archive(data, tmp_path)
    assert (tmp_path / "first.txt").read_bytes() == b"one"
    assert not os.path.lexists(tmp_path / "link")
    assert not (tmp_path / "third.txt").exists()


def test_absolute_names_stay_inside_destination(tmp_path):
    data = _build_tar([(_file_info("/inside.txt", b"data"), b"data")])
    extract_tar_archive(data, tmp_path)
    assert (tmp_path / "inside.txt").read_bytes() == b"data"