"""In-memory document repository implementation."""

import itertools
from dataclasses import replace

from lexico.domain.entities import Document


class InMemoryDocumentRepository:
    """Process-local document store; ids start at 1."""

    def __init__(self) -> None:
        self._by_id: dict[int, Document] = {}
        self._ids = itertools.count(1)

    async def get_by_id(self, document_id: int) -> Document | None:
        """Get document by id."""
        return self._by_id.get(document_id)

    async def add(self, document: Document) -> int:
        """Store a copy of document under a fresh id."""
        document_id = next(self._ids)
        self._by_id[document_id] = replace(document, id=document_id)
        return document_id
