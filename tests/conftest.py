"""Test configuration and fixtures for fs-tools."""

import pytest


@pytest.fixture
def temp_dir(tmp_path):
    """Create a temporary directory for testing."""
    return tmp_path


@pytest.fixture
def sample_file_structure(temp_dir):
    """Create a sample file structure for testing tree operations."""
    root = temp_dir / "root"
    root.mkdir()

    (root / "file1.txt").write_text("content1")
    (root / "file2.txt").write_text("content2" * 100)

    subdir = root / "subdir"
    subdir.mkdir()
    (subdir / "file3.txt").write_text("content3" * 50)

    return root


@pytest.fixture
def nested_tree(temp_dir):
    """Create root/a/b/file.txt."""
    root = temp_dir / "root"
    (root / "a" / "b").mkdir(parents=True)
    (root / "a" / "b" / "file.txt").write_text("test content")
    return root


@pytest.fixture
def chdir_tmp(temp_dir, monkeypatch):
    """Run the test with the temporary directory as the working directory."""
    monkeypatch.chdir(temp_dir)
    return temp_dir
