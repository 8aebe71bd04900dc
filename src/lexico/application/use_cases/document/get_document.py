"""Get document use case."""

from lexico.application.dto.document_dto import DocumentSummaryOutput
from lexico.application.ports import UnitOfWorkFactory
from lexico.domain.exceptions import NotFound


class GetDocumentUseCase:
    """Get document summary by id."""

    def __init__(self, unit_of_work_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, document_id: int) -> DocumentSummaryOutput:
        """Get document by id."""
        async with self._uow_factory() as uow:
            document = await uow.documents.get_by_id(document_id)
            if not document:
                raise NotFound("Document", str(document_id))

            return DocumentSummaryOutput(
                id=document.id,
                filename=document.filename,
                user_id=document.user_id,
                language_id=document.language_id,
                length=len(document.original_content or ""),
            )
