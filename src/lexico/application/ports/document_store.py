"""Document store port - the narrow write contract use cases depend on."""

from typing import Protocol, runtime_checkable

from lexico.domain.entities import Document


@runtime_checkable
class DocumentStore(Protocol):
    """Creates documents and reads them back by id."""

    async def create_document(self, document: Document) -> int: ...

    async def get_by_id(self, document_id: int) -> Document | None: ...
