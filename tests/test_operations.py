"""Tests for file and directory operations."""

import os
import stat
from unittest.mock import patch

import pytest

from fs_tools.core.exceptions import UnrecoverableError
from fs_tools.filesystem import (
    GB,
    KB,
    MB,
    PB,
    TB,
    byte_size,
    clean,
    format_size,
    mkdirp,
    read_text_file,
    size,
    touch,
    write_text_file,
)
from fs_tools.schemas import TouchOptions, WriteOptions


class TestMkdirp:
    """Test recursive directory creation."""

    def test_creates_nested_directories(self, temp_dir):
        """Test that the full path is created."""
        target = temp_dir / "a" / "b" / "c" / "d"

        result = mkdirp(str(target))

        assert result == str(target)
        assert target.is_dir()

    def test_existing_directory(self, temp_dir):
        """Test that an existing directory is left alone."""
        assert mkdirp(str(temp_dir)) == str(temp_dir)


class TestTouch:
    """Test touch."""

    def test_touch_file_with_extension(self, temp_dir):
        """Test that a path with an extension becomes a file."""
        target = temp_dir / "a" / "b" / "test.txt"

        result = touch(str(target))

        assert result == str(target)
        assert target.is_file()

    def test_touch_directory_without_extension(self, temp_dir):
        """Test that an extension-less path becomes a directory."""
        target = temp_dir / "newdir"

        touch(str(target))

        assert target.is_dir()

    def test_force_directory(self, temp_dir):
        """Test that force_directory wins over the extension."""
        target = temp_dir / "dummydir.old"

        touch(str(target), TouchOptions(force_directory=True))

        assert target.is_dir()

    def test_force_directory_beats_force_file(self, temp_dir):
        """Test that force_directory takes precedence."""
        target = temp_dir / "both"

        touch(str(target), TouchOptions(force_file=True, force_directory=True))

        assert target.is_dir()

    def test_force_file(self, temp_dir):
        """Test that force_file creates an extension-less file."""
        target = temp_dir / "dummyshellscript"

        touch(str(target), TouchOptions(force_file=True))

        assert target.is_file()

    def test_existing_file_untouched(self, temp_dir):
        """Test that existing content is preserved."""
        target = temp_dir / "keep.txt"
        target.write_text("keep")

        touch(str(target))

        assert target.read_text() == "keep"

    def test_creation_failure_is_unrecoverable(self, temp_dir):
        """Test that a failed file creation raises UnrecoverableError."""
        with patch("builtins.open", side_effect=OSError("read-only filesystem")):
            with pytest.raises(UnrecoverableError) as exc_info:
                touch(str(temp_dir / "fail.txt"))

        assert "Failed to create file" in str(exc_info.value)


class TestClean:
    """Test clean."""

    def test_clean_removes_contents(self, sample_file_structure):
        """Test that an existing directory is emptied."""
        clean(str(sample_file_structure))

        assert sample_file_structure.is_dir()
        assert os.listdir(sample_file_structure) == []

    def test_clean_creates_missing(self, temp_dir):
        """Test that a missing directory is created."""
        target = temp_dir / "a" / "b"

        clean(str(target))

        assert target.is_dir()

    def test_clean_file_cleans_parent(self, sample_file_structure):
        """Test that a file path cleans its parent directory."""
        result = clean(str(sample_file_structure / "subdir" / "file3.txt"))

        assert result == str(sample_file_structure / "subdir")
        assert os.listdir(sample_file_structure / "subdir") == []
        assert (sample_file_structure / "file1.txt").exists()


class TestTextFiles:
    """Test text file read and write."""

    def test_write_creates_parents(self, temp_dir):
        """Test writing to a path whose parents do not exist."""
        target = temp_dir / "a" / "b" / "test.txt"

        write_text_file(str(target), "test content")

        assert target.read_text() == "test content"

    def test_write_extensionless_file(self, temp_dir):
        """Test that writing always produces a file."""
        target = temp_dir / "README"

        write_text_file(str(target), "hello")

        assert target.is_file()

    def test_write_replaces_content(self, temp_dir):
        """Test that existing content is replaced."""
        target = temp_dir / "test.txt"
        target.write_text("a much longer original")

        write_text_file(str(target), "short")

        assert target.read_text() == "short"

    def test_write_with_permissions(self, temp_dir):
        """Test that custom permission bits are applied."""
        target = temp_dir / "secret.txt"

        write_text_file(str(target), "s", WriteOptions(permissions=0o600))

        assert stat.S_IMODE(os.stat(target).st_mode) == 0o600

    def test_read_text_file(self, temp_dir):
        """Test reading a text file."""
        target = temp_dir / "test.txt"
        target.write_text("test content", encoding="utf-8")

        assert read_text_file(str(target)) == "test content"

    def test_read_missing_file(self, temp_dir):
        """Test that reading a missing file propagates the error."""
        with pytest.raises(FileNotFoundError):
            read_text_file(str(temp_dir / "dne.txt"))


class TestSize:
    """Test byte size and size formatting."""

    def test_size_constants(self):
        """Test power-of-1024 unit constants."""
        assert KB == 1024
        assert MB == 1024**2
        assert GB == 1024**3
        assert TB == 1024**4
        assert PB == 1024**5

    def test_byte_size_file(self, sample_file_structure):
        """Test the size of a single file."""
        assert byte_size(str(sample_file_structure / "file1.txt")) == 8

    def test_byte_size_directory(self, sample_file_structure):
        """Test that directory sizes sum all files."""
        assert byte_size(str(sample_file_structure)) == 8 + 800 + 400

    def test_byte_size_empty_file(self, temp_dir):
        """Test that an empty file has size zero."""
        (temp_dir / "empty.txt").touch()

        assert byte_size(str(temp_dir / "empty.txt")) == 0

    def test_byte_size_missing(self, temp_dir):
        """Test that a missing path propagates the error."""
        with pytest.raises(FileNotFoundError):
            byte_size(str(temp_dir / "dne"))

    @pytest.mark.parametrize(
        "size_bytes,expected",
        [
            (0, "0B"),
            (1023, "1023B"),
            (1024, "1.00KB"),
            (1536, "1.50KB"),
            (int(3.14 * MB), "3.14MB"),
            (int(2 * GB), "2.00GB"),
            (int(5 * TB), "5.00TB"),
            (int(1.25 * PB), "1.25PB"),
        ],
    )
    def test_format_size(self, size_bytes, expected):
        """Test human-readable formatting."""
        assert format_size(size_bytes) == expected

    def test_format_size_sigfigs(self):
        """Test a custom number of decimals."""
        assert format_size(1536, 3) == "1.500KB"
        assert format_size(int(1.25 * MB), 1) == "1.2MB"

    def test_size(self, sample_file_structure):
        """Test the human-readable size of a directory."""
        assert size(str(sample_file_structure)) == "1.18KB"
