"""Validation of content units and mapping to index records."""

from __future__ import annotations

from typing import Any

from postindex.config import DEFAULT_URL_PREFIX
from postindex.models import ContentUnit, IndexRecord, Included, SkipReason, Skipped, UnitResult

REQUIRED_FIELDS = (("title", SkipReason.MISSING_TITLE), ("summary", SkipReason.MISSING_SUMMARY))


def _is_filled(value: Any) -> bool:
    return isinstance(value, str) and value != ""


def build_url(slug: str, url_prefix: str = DEFAULT_URL_PREFIX) -> str:
    """Return the public URL of a post; never taken from front matter."""
    return f"{url_prefix}{slug}"


def validate_unit(
    unit: ContentUnit,
    *,
    url_prefix: str = DEFAULT_URL_PREFIX,
    include_drafts: bool = False,
) -> UnitResult:
    """Map ``unit`` to an :class:`Included` record or explain why it is skipped.

    Units marked ``draft: true`` are skipped as drafts unless
    ``include_drafts`` is set, whatever else their front matter holds.
    Otherwise ``title`` and ``summary`` must be non-empty strings and are
    passed through verbatim.
    """
    if unit.error_reason is not None:
        return Skipped(unit.slug, unit.error_reason, unit.error)

    data = unit.front_matter
    if data.get("draft") is True and not include_drafts:
        return Skipped(unit.slug, SkipReason.DRAFT, "marked as draft")

    for key, reason in REQUIRED_FIELDS:
        value = data.get(key)
        if not _is_filled(value):
            detail = f"'{key}' is missing" if value is None else f"'{key}' is empty or not a string"
            return Skipped(unit.slug, reason, detail)

    return Included(
        IndexRecord(
            title=data["title"],
            summary=data["summary"],
            url=build_url(unit.slug, url_prefix),
        )
    )
