"""Seed loading: read documents from a YAML file into a store"""

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from docstore.crud.memory_repo import DocumentStore
from docstore.models import Document


logger = logging.getLogger(__name__)


def read_documents(path: str | Path) -> list[Document]:
    """Parse a YAML seed file into Documents.

    The top level is either a list of documents or a mapping with a
    'documents' list. Every failure is raised as ValueError naming the file.
    """
    path = Path(path)
    if not path.is_file():
        raise ValueError(f"Data file not found: {path}")
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid {path}: {e}") from e

    if raw is None:
        return []
    if isinstance(raw, dict):
        raw = raw.get("documents") or []
    if not isinstance(raw, list):
        raise ValueError(f"Invalid {path}: expected a list of documents")

    docs = []
    for i, entry in enumerate(raw):
        try:
            docs.append(Document.model_validate(entry))
        except ValidationError as e:
            raise ValueError(f"Invalid document #{i} in {path}: {e}") from e
    return docs


def load_store(path: str | Path, store: DocumentStore | None = None) -> DocumentStore:
    """Save every document in the seed file into store (a new one if None)."""
    store = store if store is not None else DocumentStore()
    docs = read_documents(path)
    for doc in docs:
        store.save(doc)
    logger.info("Loaded %d document(s) from %s", len(docs), path)
    return store
