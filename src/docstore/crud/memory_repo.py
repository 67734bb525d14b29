import logging
from dataclasses import dataclass, field
from uuid import uuid4

from docstore.crud.filters import matches_request
from docstore.crud.repo import DocumentRepo
from docstore.models import Document, SearchRequest


logger = logging.getLogger(__name__)


@dataclass
class DocumentStore(DocumentRepo):
    """In-memory id -> Document table. Not thread-safe; callers synchronize."""
    _docs: dict[str, Document] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self._docs)

    def save(self, doc: Document) -> Document:
        if doc.id is None:
            doc.id = str(uuid4())
            logger.debug("Assigned id %s to '%s'", doc.id, doc.title)
        self._docs[doc.id] = doc
        return doc

    def find_by_id(self, doc_id: str) -> Document | None:
        return self._docs.get(doc_id)

    def search(self, request: SearchRequest) -> list[Document]:
        results = [doc for doc in self._docs.values() if matches_request(doc, request)]
        logger.debug("Search matched %d of %d document(s)", len(results), len(self._docs))
        return results
