"""Document repository port."""

from typing import Protocol

from lexico.domain.entities import Document


class DocumentRepository(Protocol):
    """Port for document reads.

    Writes are not part of this port: stores name their create operation
    differently. ProbingDocumentStore discovers it at call time and exposes
    the DocumentStore port on top.
    """

    async def get_by_id(self, document_id: int) -> Document | None: ...
