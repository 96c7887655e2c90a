"""Application configuration defaults."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

DEFAULT_SOURCE_DIR = Path("src/content/blog")
DEFAULT_OUTPUT_PATH = Path("public/posts.json")
DEFAULT_URL_PREFIX = "/blog/"
DEFAULT_DOCUMENT_NAME = "index.md"


def _resolve(path: Path, base_dir: Path | None) -> Path:
    if path.is_absolute() or base_dir is None:
        return path
    return base_dir / path


@dataclass(slots=True)
class AppConfig:
    source_dir: Path = DEFAULT_SOURCE_DIR
    output_path: Path = DEFAULT_OUTPUT_PATH
    url_prefix: str = DEFAULT_URL_PREFIX
    document_name: str = DEFAULT_DOCUMENT_NAME
    include_drafts: bool = False

    def __post_init__(self) -> None:
        self.source_dir = Path(self.source_dir)
        self.output_path = Path(self.output_path)
        if not self.document_name or Path(self.document_name).name != self.document_name:
            raise ValueError(f"document_name must be a plain file name: {self.document_name!r}")

    def resolve_source_dir(self, base_dir: Path | None = None) -> Path:
        return _resolve(self.source_dir, base_dir)

    def resolve_output_path(self, base_dir: Path | None = None) -> Path:
        return _resolve(self.output_path, base_dir)
