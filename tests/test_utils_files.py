"""Tests for file utility functions."""

from __future__ import annotations

import os
import stat
from pathlib import Path
from unittest.mock import patch

import pytest

from postindex.utils.files import atomic_write_text, iter_content_dirs


class TestIterContentDirs:
    """Test iter_content_dirs function."""

    def test_yields_only_directories(self, tmp_path: Path) -> None:
        """Should ignore files directly under the root."""
        (tmp_path / "01-post").mkdir()
        (tmp_path / "README.md").write_text("not a post")

        dirs = list(iter_content_dirs(tmp_path))

        assert dirs == [tmp_path / "01-post"]

    def test_sorted_by_name(self, tmp_path: Path) -> None:
        """Should yield directories in name order."""
        for name in ["b-post", "c-post", "a-post"]:
            (tmp_path / name).mkdir()

        names = [d.name for d in iter_content_dirs(tmp_path)]

        assert names == ["a-post", "b-post", "c-post"]

    def test_does_not_descend(self, tmp_path: Path) -> None:
        """Should only list direct children."""
        nested = tmp_path / "post" / "images"
        nested.mkdir(parents=True)

        dirs = list(iter_content_dirs(tmp_path))

        assert dirs == [tmp_path / "post"]

    def test_empty_directory(self, tmp_path: Path) -> None:
        """Should yield nothing for an empty root."""
        assert list(iter_content_dirs(tmp_path)) == []


class TestAtomicWriteText:
    """Test atomic_write_text function."""

    def test_writes_new_file(self, tmp_path: Path) -> None:
        """Should create the file with the given content."""
        target = tmp_path / "posts.json"

        atomic_write_text(target, "[]")

        assert target.read_text(encoding="utf-8") == "[]"

    def test_replaces_existing_file(self, tmp_path: Path) -> None:
        """Should fully overwrite previous content."""
        target = tmp_path / "posts.json"
        target.write_text("a much longer previous content", encoding="utf-8")

        atomic_write_text(target, "[]")

        assert target.read_text(encoding="utf-8") == "[]"

    def test_writes_utf8(self, tmp_path: Path) -> None:
        """Should encode content as UTF-8."""
        target = tmp_path / "posts.json"

        atomic_write_text(target, "Año de C# ñ")

        assert target.read_bytes() == "Año de C# ñ".encode("utf-8")

    def test_leaves_no_temp_files(self, tmp_path: Path) -> None:
        """Should not leave temporary files behind."""
        target = tmp_path / "posts.json"

        atomic_write_text(target, "[]")

        assert [p.name for p in tmp_path.iterdir()] == ["posts.json"]

    def test_failed_replace_keeps_previous_file(self, tmp_path: Path) -> None:
        """Should keep the old file and clean up when the move fails."""
        target = tmp_path / "posts.json"
        target.write_text("old", encoding="utf-8")

        with patch("postindex.utils.files.os.replace", side_effect=OSError("boom")):
            with pytest.raises(OSError):
                atomic_write_text(target, "new")

        assert target.read_text(encoding="utf-8") == "old"
        assert [p.name for p in tmp_path.iterdir()] == ["posts.json"]

    def test_missing_parent_raises(self, tmp_path: Path) -> None:
        """Should raise when the parent directory does not exist."""
        with pytest.raises(OSError):
            atomic_write_text(tmp_path / "missing" / "posts.json", "[]")

    def test_keeps_existing_mode(self, tmp_path: Path) -> None:
        """Should keep the permission bits of the file it replaces."""
        target = tmp_path / "posts.json"
        target.write_text("old", encoding="utf-8")
        target.chmod(0o644)

        atomic_write_text(target, "[]")

        assert stat.S_IMODE(target.stat().st_mode) == 0o644

    def test_new_file_follows_umask(self, tmp_path: Path) -> None:
        """Should create a world-readable file under a 022 umask."""
        target = tmp_path / "posts.json"
        previous = os.umask(0o022)
        try:
            atomic_write_text(target, "[]")
        finally:
            os.umask(previous)

        assert stat.S_IMODE(target.stat().st_mode) == 0o644
