"""Posts indexing pipeline."""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Tuple

from postindex.config import AppConfig
from postindex.errors import ContentRootNotFoundError, ContentRootUnreadableError
from postindex.index.validator import validate_unit
from postindex.index.writer import IndexWriter
from postindex.ingestion.frontmatter import extract_front_matter
from postindex.models import ContentUnit, IndexRecord, Included, SkipReason, Skipped
from postindex.utils.files import iter_content_dirs

LOGGER = logging.getLogger(__name__)


def scan_content_units(root: Path, document_name: str) -> Tuple[List[ContentUnit], List[Skipped]]:
    """Find one candidate unit per subdirectory of ``root`` holding ``document_name``.

    Subdirectories without the document are returned separately so callers
    can report them; they are never an error.
    """
    if not root.is_dir():
        raise ContentRootNotFoundError(root)

    try:
        directories = list(iter_content_dirs(root))
    except OSError as exc:
        raise ContentRootUnreadableError(root, exc.strerror or str(exc)) from exc

    units: List[ContentUnit] = []
    missing: List[Skipped] = []
    for directory in directories:
        document = directory / document_name
        if document.is_file():
            units.append(ContentUnit(slug=directory.name, document_path=document))
        else:
            LOGGER.debug("No %s in %s, ignoring", document_name, directory)
            missing.append(Skipped(directory.name, SkipReason.MISSING_DOCUMENT, f"no {document_name}"))
    return units, missing


@dataclass(slots=True)
class IndexStats:
    records: List[IndexRecord] = field(default_factory=list)
    skipped: List[Skipped] = field(default_factory=list)
    output_path: Path | None = None

    @property
    def included(self) -> int:
        return len(self.records)

    @property
    def problems(self) -> List[Skipped]:
        """Skipped units that did have a document, i.e. not asset folders."""
        return [item for item in self.skipped if item.reason is not SkipReason.MISSING_DOCUMENT]

    def skipped_by_reason(self) -> Dict[SkipReason, int]:
        return dict(Counter(item.reason for item in self.skipped))


class Indexer:
    """Coordinates scanning, extraction, validation and publishing."""

    def __init__(self, config: AppConfig, *, base_dir: Path | None = None) -> None:
        self.config = config
        self.source_dir = config.resolve_source_dir(base_dir)
        self.output_path = config.resolve_output_path(base_dir)

    def collect(self) -> IndexStats:
        """Build the records in memory without touching the output file."""
        units, missing = scan_content_units(self.source_dir, self.config.document_name)
        stats = IndexStats(skipped=list(missing))

        for unit in units:
            LOGGER.debug("Processing: %s", unit.document_path)
            result = validate_unit(
                extract_front_matter(unit),
                url_prefix=self.config.url_prefix,
                include_drafts=self.config.include_drafts,
            )
            if isinstance(result, Included):
                stats.records.append(result.record)
            else:
                LOGGER.warning("Skipping %s: %s (%s)", result.slug, result.reason.value, result.detail)
                stats.skipped.append(result)

        return stats

    def run(self) -> IndexStats:
        """Rebuild the index and replace the artifact in one write."""
        stats = self.collect()
        if not stats.records:
            LOGGER.warning("No posts found in %s", self.source_dir)
        stats.output_path = IndexWriter(self.output_path).write(stats.records)
        LOGGER.info("Indexed %d posts, skipped %d", stats.included, len(stats.problems))
        return stats
