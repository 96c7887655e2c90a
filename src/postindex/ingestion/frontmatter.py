"""Front-matter extraction for markdown documents.

A front-matter block is a YAML mapping at the very top of a document,
opened and closed by a line holding only ``---``::

    ---
    title: Dependency injection in .NET
    summary: Lifetimes, scopes and the pitfalls in between
    ---
    Body text...

Parsing uses PyYAML's ``safe_load`` so no arbitrary objects are built.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Dict, Tuple

import yaml

from postindex.errors import FrontMatterError
from postindex.models import ContentUnit, SkipReason

LOGGER = logging.getLogger(__name__)

_FRONT_MATTER_RE = re.compile(
    r"\A---[ \t]*\r?\n(?:(?P<header>.*?)\r?\n)??---[ \t]*(?:\r?\n|\Z)(?P<body>.*)\Z",
    flags=re.S,
)


def split_front_matter(text: str) -> Tuple[str, str]:
    """Split ``text`` into ``(header, body)``.

    Returns an empty header and the whole text when no closed block opens
    the document.
    """
    text = text.removeprefix("\ufeff")
    match = _FRONT_MATTER_RE.match(text)
    if not match:
        return "", text
    return match.group("header") or "", match.group("body")


def parse_front_matter(text: str) -> Dict[str, Any]:
    """Return the front-matter mapping of a document's text.

    A document without a front-matter block yields an empty mapping.
    Raises :class:`FrontMatterError` when the block is not valid YAML or
    does not hold a mapping.
    """
    header, _ = split_front_matter(text)
    if not header.strip():
        return {}
    try:
        data = yaml.safe_load(header)
    except yaml.YAMLError as exc:
        raise FrontMatterError(f"invalid YAML: {exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise FrontMatterError(f"expected a mapping, got {type(data).__name__}")
    return data


def extract_front_matter(unit: ContentUnit) -> ContentUnit:
    """Read the primary document of ``unit`` and fill in its front matter and body.

    Per-document problems never raise: an unreadable file or a broken header
    leaves ``front_matter`` empty and records the problem in
    ``error_reason`` and ``error``.
    """
    path = unit.document_path
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        LOGGER.debug("Failed to read %s: %s", path, exc)
        unit.error_reason = SkipReason.UNREADABLE
        unit.error = str(exc)
        return unit

    _, unit.body = split_front_matter(text)
    try:
        unit.front_matter = parse_front_matter(text)
    except FrontMatterError as exc:
        LOGGER.debug("Failed to parse front matter in %s: %s", path, exc)
        unit.error_reason = SkipReason.INVALID_FRONT_MATTER
        unit.error = str(exc)
    return unit
