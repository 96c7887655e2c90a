"""JSON writer for the posts index artifact."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Sequence

from postindex.errors import IndexWriteError
from postindex.models import IndexRecord
from postindex.utils.files import atomic_write_text

LOGGER = logging.getLogger(__name__)


def serialize_records(records: Sequence[IndexRecord]) -> str:
    """Render records as the pretty-printed JSON array read by the site."""
    return json.dumps([record.to_dict() for record in records], indent=2, ensure_ascii=False)


class IndexWriter:
    """Publishes the index to a fixed path, replacing any previous version."""

    def __init__(self, output_path: Path) -> None:
        self.output_path = Path(output_path)

    def write(self, records: Sequence[IndexRecord]) -> Path:
        payload = serialize_records(records)
        parent = self.output_path.parent
        if not parent.is_dir():
            raise IndexWriteError(self.output_path, f"directory {parent} does not exist")
        if self.output_path.is_dir():
            raise IndexWriteError(self.output_path, "destination is a directory")

        try:
            atomic_write_text(self.output_path, payload)
        except OSError as exc:
            raise IndexWriteError(self.output_path, exc.strerror or str(exc)) from exc

        LOGGER.debug("Wrote %d records to %s", len(records), self.output_path)
        return self.output_path
