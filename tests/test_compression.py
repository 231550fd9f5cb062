import gzip

import pytest

from dockpack.builder.compression import (
    compress,
    decompress,
    load_compressed_file,
    save_compressed_file,
)


@pytest.mark.parametrize("data", [b"", b"x", b"hello world" * 100, bytes(range(256))])
def test_round_trip(data):
    assert decompress(compress(data)) == data


def test_standard_gzip_interop():
    data = b"interoperable payload"
    assert gzip.decompress(compress(data)) == data
    assert decompress(gzip.compress(data)) == data


def test_header_has_zero_mtime():
    assert compress(b"x")[:10] == b"\x1f\x8b\x08\x00\x00\x00\x00\x00\x00\xff"


def test_deterministic():
    first = compress(b"same input")
    second = compress(b"same input")
    assert first == second
    assert first[:2] == b"\x1f\x8b"
    assert decompress(second) == b"same input"


def test_multiple_members_are_joined():
    assert decompress(compress(b"first") + compress(b"second")) == b"firstsecond"


def test_bad_header_raises():
    with pytest.raises(gzip.BadGzipFile):
        decompress(b"definitely not gzip data")


def test_empty_input_raises():
    with pytest.raises(OSError):
        decompress(b"")


def test_truncated_input_raises():
    blob = compress(b"some data that will be cut short" * 10)
    with pytest.raises(EOFError):
        decompress(blob[: len(blob) // 2])


def test_file_round_trip(tmp_path):
    path = tmp_path / "blob.gz"
    save_compressed_file(path, b"file contents")
    assert path.read_bytes()[:2] == b"\x1f\x8b"
    assert load_compressed_file(path) == b"file contents"


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_compressed_file(tmp_path / "missing.gz")