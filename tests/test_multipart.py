"""Tests for multipart module."""

from unittest.mock import patch

import pytest

from jiraattach.errors import EncodingError, FileOpenError
from jiraattach.multipart import build_file_body


class TestBuildFileBody:
    """Tests for build_file_body function."""

    def test_encodes_single_file_part(self, tmp_path):
        """Body holds one part named 'file' with the file's bytes."""
        path = tmp_path / "report.txt"
        path.write_bytes(b"hello report")

        body, content_type = build_file_body(path)

        assert b'name="file"' in body
        assert b"hello report" in body
        assert b"Content-Type: application/octet-stream" in body
        assert body.count(b'name="file"') == 1

    def test_content_type_carries_boundary(self, tmp_path):
        """Content type names the boundary used in the body."""
        path = tmp_path / "report.txt"
        path.write_bytes(b"data")

        body, content_type = build_file_body(path)

        assert content_type.startswith("multipart/form-data; boundary=")
        boundary = content_type.split("boundary=", 1)[1]
        assert body.startswith(f"--{boundary}\r\n".encode())
        assert body.endswith(f"--{boundary}--\r\n".encode())

    def test_boundary_differs_per_call(self, tmp_path):
        """Each body gets a fresh random boundary."""
        path = tmp_path / "report.txt"
        path.write_bytes(b"data")

        _, first = build_file_body(path)
        _, second = build_file_body(path)

        assert first != second

    def test_filename_is_path_as_given(self, tmp_path):
        """Part filename is the full path string, not the base name."""
        path = tmp_path / "report.txt"
        path.write_bytes(b"data")

        body, _ = build_file_body(str(path))

        assert f'filename="{path}"'.encode() in body

    def test_filename_escapes_backslash_and_quote(self, tmp_path, monkeypatch):
        """Backslashes and quotes in the filename are backslash-escaped."""
        monkeypatch.chdir(tmp_path)
        (tmp_path / 'dir\\my "report".txt').write_bytes(b"data")

        body, _ = build_file_body('dir\\my "report".txt')

        assert b'filename="dir\\\\my \\"report\\".txt"' in body

    def test_relative_path_kept(self, tmp_path, monkeypatch):
        """Relative paths are used verbatim."""
        monkeypatch.chdir(tmp_path)
        (tmp_path / "report.txt").write_bytes(b"data")

        body, _ = build_file_body("report.txt")

        assert b'filename="report.txt"' in body

    def test_binary_content_preserved(self, tmp_path):
        """Binary file content is copied unchanged."""
        payload = bytes(range(256))
        path = tmp_path / "blob.bin"
        path.write_bytes(payload)

        body, _ = build_file_body(path)

        assert payload in body

    def test_empty_file(self, tmp_path):
        """Empty files produce a part with no content."""
        path = tmp_path / "empty.txt"
        path.write_bytes(b"")

        body, _ = build_file_body(path)

        assert b"application/octet-stream\r\n\r\n\r\n" in body

    def test_raises_for_missing_file(self, tmp_path):
        """Missing file raises FileOpenError naming the path."""
        path = tmp_path / "nonexistent.txt"

        with pytest.raises(FileOpenError) as exc_info:
            build_file_body(path)

        assert "error reading attachment" in str(exc_info.value)
        assert str(path) in str(exc_info.value)

    def test_raises_for_directory(self, tmp_path):
        """A directory cannot be attached."""
        with pytest.raises(FileOpenError):
            build_file_body(tmp_path)

    def test_raises_encoding_error(self, tmp_path):
        """Failure to write the form raises EncodingError."""
        path = tmp_path / "report.txt"
        path.write_bytes(b"data")

        with patch(
            "jiraattach.multipart.encode_multipart_formdata",
            side_effect=ValueError("cannot encode"),
        ):
            with pytest.raises(EncodingError, match="cannot encode"):
                build_file_body(path)
