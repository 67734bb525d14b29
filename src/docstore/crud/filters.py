"""Per-field search predicates over a single document"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from docstore.models import Document, SearchRequest


def matches_title_prefixes(doc: Document, prefixes: Sequence[str] | None) -> bool:
    """True when no prefixes are given or the title starts with any of them."""
    if not prefixes:
        return True
    return any(doc.title.startswith(p) for p in prefixes)


def matches_contents(doc: Document, substrings: Sequence[str] | None) -> bool:
    """True when no substrings are given or the content contains any of them."""
    if not substrings:
        return True
    return any(s in doc.content for s in substrings)


def matches_author_ids(doc: Document, author_ids: Sequence[str] | None) -> bool:
    """True when no ids are given or the author id is one of them."""
    if not author_ids:
        return True
    return doc.author.id in author_ids


def matches_created_range(
    doc: Document,
    created_from: datetime | None,
    created_to: datetime | None,
    ) -> bool:
    """Inclusive range check; a missing bound leaves that side open."""
    if created_from is not None and doc.created < created_from:
        return False
    if created_to is not None and doc.created > created_to:
        return False
    return True


def matches_request(doc: Document, request: SearchRequest) -> bool:
    """AND of all field predicates for one request."""
    return (
        matches_title_prefixes(doc, request.title_prefixes)
        and matches_contents(doc, request.contains_contents)
        and matches_author_ids(doc, request.author_ids)
        and matches_created_range(doc, request.created_from, request.created_to)
    )
