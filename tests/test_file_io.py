"""Tests for file reader and writer."""

import pytest

from automerge_converter.io import FileReader, FileWriter


class TestFileIO:
    """Tests for FileReader and FileWriter."""

    def setup_method(self):
        """Set up test fixtures."""
        self.reader = FileReader()
        self.writer = FileWriter()

    def test_bytes_round_trip(self, temp_dir):
        path = temp_dir / "data.bin"
        data = bytes(range(256))

        assert self.writer.write_bytes(path, data) == 256
        assert self.reader.read_bytes(path) == data

    def test_text_is_utf8(self, temp_dir):
        path = temp_dir / "data.json"

        written = self.writer.write_text(path, '{"greeting": "你好"}')

        assert written == len('{"greeting": "你好"}'.encode("utf-8"))
        assert self.reader.read_text(path) == '{"greeting": "你好"}'

    def test_write_replaces_content(self, temp_dir):
        path = temp_dir / "data.bin"
        self.writer.write_bytes(path, b"first version")
        self.writer.write_bytes(path, b"second")

        assert self.reader.read_bytes(path) == b"second"

    def test_missing_file(self, temp_dir):
        with pytest.raises(FileNotFoundError):
            self.reader.read_bytes(temp_dir / "missing.bin")

    def test_missing_directory_is_not_created(self, temp_dir):
        with pytest.raises(FileNotFoundError):
            self.writer.write_bytes(temp_dir / "missing" / "data.bin", b"x")
        assert not (temp_dir / "missing").exists()

    def test_path_is_directory(self, temp_dir):
        with pytest.raises(IsADirectoryError):
            self.reader.read_bytes(temp_dir)
