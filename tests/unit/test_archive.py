"""Tests for zip archive building."""

import io
import zipfile

from neo_file_gateway.platform.files.infrastructure import build_archive, iter_archive

from conftest import ADMIN_FILE_CONTENT, ADMIN_ID, USER_FILE_CONTENT, USER_ID


def test_archive_contains_files(storage_root):
    archive = build_archive([
        storage_root.path / USER_ID / "userfile.txt",
        storage_root.path / ADMIN_ID / "adminfile.txt",
    ])

    data = b"".join(iter_archive(archive))

    with zipfile.ZipFile(io.BytesIO(data)) as zipped:
        assert sorted(zipped.namelist()) == ["adminfile.txt", "userfile.txt"]
        assert zipped.read("userfile.txt") == USER_FILE_CONTENT
        assert zipped.read("adminfile.txt") == ADMIN_FILE_CONTENT
    assert archive.closed


def test_clashing_names_get_suffix(storage_root):
    (storage_root.path / ADMIN_ID / "userfile.txt").write_bytes(b"admin copy")

    archive = build_archive([
        storage_root.path / USER_ID / "userfile.txt",
        storage_root.path / ADMIN_ID / "userfile.txt",
    ], spool_bytes=16)

    with zipfile.ZipFile(io.BytesIO(b"".join(iter_archive(archive)))) as zipped:
        assert zipped.namelist() == ["userfile.txt", "userfile (1).txt"]
        assert zipped.read("userfile (1).txt") == b"admin copy"
