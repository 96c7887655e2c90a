"""Utility helpers for working with files."""

from __future__ import annotations

import os
import stat
import tempfile
from pathlib import Path
from typing import Iterator


def iter_content_dirs(root: Path) -> Iterator[Path]:
    """Yield the direct subdirectories of ``root`` sorted by name.

    Files sitting directly under ``root`` are ignored.
    """
    for child in sorted(root.iterdir(), key=lambda item: item.name):
        if child.is_dir():
            yield child


def _target_mode(path: Path) -> int:
    try:
        return stat.S_IMODE(path.stat().st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def atomic_write_text(path: Path, text: str, *, encoding: str = "utf-8") -> None:
    """Replace ``path`` with ``text`` without ever exposing a partial file.

    The content goes to a temporary sibling first and is moved over the
    destination with :func:`os.replace`. The parent directory must exist.
    An existing destination keeps its permission bits; a new one gets the
    usual ``0o666`` masked by the umask.
    """
    mode = _target_mode(path)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    tmp_path = Path(tmp_name)
    try:
        with os.fdopen(fd, "w", encoding=encoding, newline="") as handle:
            handle.write(text)
            handle.flush()
            os.fchmod(handle.fileno(), mode)
            os.fsync(handle.fileno())
        os.replace(tmp_path, path)
    except BaseException:
        tmp_path.unlink(missing_ok=True)
        raise
