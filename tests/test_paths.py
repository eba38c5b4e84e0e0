"""
Tests for path classification.

Tests cover:
- Directories and regular files
- Missing paths (exception and None variants)
- Symlinks resolving to their targets
"""

import os

import pytest

from escapehtml.errors import EscapeHtmlError, PathNotFoundError
from escapehtml.paths import PathKind, classify, exists


class TestClassify:
    """Test classify()."""

    def test_directory(self, tmp_path):
        """A directory classifies as DIRECTORY."""
        assert classify(str(tmp_path)) is PathKind.DIRECTORY

    def test_regular_file(self, tmp_path):
        """A plain file classifies as REGULAR_FILE."""
        f = tmp_path / "a.html"
        f.write_text("<p>")
        assert classify(str(f)) is PathKind.REGULAR_FILE

    def test_missing_path_raises(self, tmp_path):
        """A missing path raises PathNotFoundError naming the path."""
        missing = str(tmp_path / "nope")
        with pytest.raises(PathNotFoundError) as excinfo:
            classify(missing)

        assert excinfo.value.path == missing
        assert str(excinfo.value) == f"Error: {missing} does not exist"
        assert isinstance(excinfo.value, EscapeHtmlError)

    def test_symlink_follows_target(self, tmp_path):
        """A symlink to a directory classifies as a directory."""
        target = tmp_path / "target"
        target.mkdir()
        link = tmp_path / "link"
        try:
            os.symlink(target, link)
        except (OSError, NotImplementedError):
            pytest.skip("symlinks not supported")

        assert classify(str(link)) is PathKind.DIRECTORY

    def test_not_cached(self, tmp_path):
        """Classification reflects the filesystem at call time."""
        p = tmp_path / "thing"
        p.write_text("x")
        assert classify(str(p)) is PathKind.REGULAR_FILE

        p.unlink()
        p.mkdir()
        assert classify(str(p)) is PathKind.DIRECTORY


class TestExists:
    """Test exists()."""

    def test_missing_returns_none(self, tmp_path):
        assert exists(str(tmp_path / "missing")) is None

    def test_existing_returns_kind(self, tmp_path):
        assert exists(str(tmp_path)) is PathKind.DIRECTORY
