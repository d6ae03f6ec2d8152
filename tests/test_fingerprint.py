"""Tests for content fingerprints."""
import hashlib

from sitepush.utils.fingerprint import fingerprint, fingerprint_file


def test_fingerprint_is_quoted_md5():
    """Fingerprint matches the ETag format S3 reports."""
    expected = '"%s"' % hashlib.md5(b"<h1>Hello</h1>").hexdigest()
    assert fingerprint(b"<h1>Hello</h1>") == expected


def test_fingerprint_is_stable():
    assert fingerprint(b"same bytes") == fingerprint(b"same bytes")


def test_single_byte_change_changes_fingerprint():
    assert fingerprint(b"body { color: red }") != fingerprint(b"body { color: rgd }")


def test_fingerprint_file_matches_in_memory(tmp_path):
    """Chunked file hashing agrees with hashing the whole buffer."""
    data = bytes(range(256)) * 100
    path = tmp_path / "blob.bin"
    path.write_bytes(data)

    assert fingerprint_file(str(path), chunk_size=1000) == fingerprint(data)


def test_fingerprint_ignores_path_and_mtime(tmp_path):
    first = tmp_path / "a.html"
    second = tmp_path / "nested" / "b.html"
    second.parent.mkdir()
    first.write_bytes(b"page")
    second.write_bytes(b"page")

    assert fingerprint_file(str(first)) == fingerprint_file(str(second))
