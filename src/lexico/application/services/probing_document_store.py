"""DocumentStore over a repository whose create operation is discovered at call time."""

from lexico.application.ports.repositories import DocumentRepository
from lexico.application.services.capability_probe import CapabilityProbe
from lexico.domain.entities import Document


class ProbingDocumentStore:
    """Adapts any repository to the DocumentStore port through a CapabilityProbe."""

    def __init__(self, repository: DocumentRepository, probe: CapabilityProbe) -> None:
        self._repository = repository
        self._probe = probe

    async def create_document(self, document: Document) -> int:
        return await self._probe.persist(self._repository, document)

    async def get_by_id(self, document_id: int) -> Document | None:
        return await self._repository.get_by_id(document_id)
