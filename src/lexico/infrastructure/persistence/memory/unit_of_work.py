"""In-memory Unit of Work implementation."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from lexico.infrastructure.persistence.memory.document_repository import (
    InMemoryDocumentRepository,
)


class InMemoryUnitOfWork:
    """Unit of Work over in-memory repositories. Writes apply immediately."""

    def __init__(self, documents: InMemoryDocumentRepository) -> None:
        self._documents = documents

    @property
    def documents(self) -> InMemoryDocumentRepository:
        return self._documents

    async def commit(self) -> None:
        pass

    async def rollback(self) -> None:
        pass


def create_uow_factory(documents: InMemoryDocumentRepository | None = None) -> object:
    """Create UnitOfWork factory sharing one repository across units of work."""
    repository = documents or InMemoryDocumentRepository()

    @asynccontextmanager
    async def factory() -> AsyncIterator[InMemoryUnitOfWork]:
        yield InMemoryUnitOfWork(repository)

    return factory
