"""Shared fixtures for crud unit tests"""

from datetime import datetime, timezone

import pytest

from docstore.crud.memory_repo import DocumentStore
from docstore.models import Author, Document


def _make_doc(
    title: str = "Report",
    content: str = "Quarterly numbers",
    author_id: str = "a1",
    created: datetime = datetime(2024, 1, 1, tzinfo=timezone.utc),
    doc_id: str = None,
    ) -> Document:
    """Build a minimal Document; id is None unless given."""
    return Document(
        id=doc_id,
        title=title,
        content=content,
        author=Author(id=author_id, name=f"Author {author_id}"),
        created=created,
    )


@pytest.fixture(name="make_doc")
def make_doc_fixture():
    """Factory for Documents with overridable fields."""
    return _make_doc


@pytest.fixture(name="store")
def store_fixture():
    """Fresh empty in-memory store."""
    return DocumentStore()
