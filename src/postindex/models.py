"""Core postindex data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional, Union


class SkipReason(str, Enum):
    """Why a content unit was left out of the index."""

    MISSING_DOCUMENT = "missing-document"
    UNREADABLE = "unreadable"
    INVALID_FRONT_MATTER = "invalid-front-matter"
    MISSING_TITLE = "missing-title"
    MISSING_SUMMARY = "missing-summary"
    DRAFT = "draft"


@dataclass(slots=True)
class ContentUnit:
    """One post directory and its parsed primary document."""

    slug: str
    document_path: Path
    front_matter: Dict[str, Any] = field(default_factory=dict)
    body: str = ""
    error_reason: Optional[SkipReason] = None
    error: str = ""


@dataclass(slots=True, frozen=True)
class IndexRecord:
    """Entry of the published posts index."""

    title: str
    summary: str
    url: str

    def to_dict(self) -> Dict[str, str]:
        return {"title": self.title, "summary": self.summary, "url": self.url}


@dataclass(slots=True, frozen=True)
class Included:
    """A unit that became an index record."""

    record: IndexRecord


@dataclass(slots=True, frozen=True)
class Skipped:
    """A unit left out of the index, with the reason."""

    slug: str
    reason: SkipReason
    detail: str = ""


UnitResult = Union[Included, Skipped]
