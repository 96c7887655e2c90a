"""Error types raised by the indexing pipeline."""

from __future__ import annotations

from pathlib import Path


class PostIndexError(Exception):
    """Base class for postindex errors."""


class ContentRootNotFoundError(PostIndexError, FileNotFoundError):
    """The content root directory does not exist or is not a directory."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Content directory not found: {path}")
        self.path = path


class IndexWriteError(PostIndexError, OSError):
    """The index artifact could not be written."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Cannot write index to {path}: {reason}")
        self.path = path
        self.reason = reason


class FrontMatterError(PostIndexError, ValueError):
    """The front-matter block is present but cannot be parsed."""


class ContentRootUnreadableError(PostIndexError, OSError):
    """The content root exists but cannot be listed."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Cannot read content directory {path}: {reason}")
        self.path = path
        self.reason = reason
