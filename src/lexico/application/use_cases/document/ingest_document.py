"""Ingest document use case."""

import logging
from collections.abc import Callable

from lexico.application.dto.document_dto import DocumentUploadInput, DocumentUploadOutput
from lexico.application.ports import UnitOfWorkFactory
from lexico.application.services import (
    CapabilityProbe,
    ProbingDocumentStore,
    bind_optional_attribute,
)
from lexico.domain.entities import Document
from lexico.domain.exceptions import UnsupportedBackingStore, ValidationError
from lexico.domain.value_objects import (
    ContentHash,
    normalize_language_code,
    resolve_language_id,
)

logger = logging.getLogger(__name__)

# Entity shapes differ in how they spell the size column.
FILE_SIZE_SPELLINGS: tuple[str, ...] = ("file_size", "tamano_archivo", "tamaño_archivo")


def decode_content(data: bytes) -> str:
    """Decode upload bytes as UTF-8, dropping a leading byte-order mark."""
    return data.decode("utf-8-sig", errors="replace")


class IngestDocumentUseCase:
    """Upload document: validate, fingerprint, classify language, persist."""

    def __init__(
        self,
        unit_of_work_factory: UnitOfWorkFactory,
        probe: CapabilityProbe | None = None,
        document_factory: Callable[..., Document] = Document,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._probe = probe or CapabilityProbe()
        self._document_factory = document_factory

    async def execute(self, input_data: DocumentUploadInput) -> DocumentUploadOutput:
        """Ingest document and return its store-assigned id."""
        if not input_data.data:
            raise ValidationError("Empty file")

        content = decode_content(input_data.data)
        document = self._document_factory(
            user_id=input_data.user_id,
            filename=input_data.filename,
            original_content=content,
            language_id=resolve_language_id(input_data.language_code),
            content_hash=ContentHash.of(content).value,
        )
        if not bind_optional_attribute(document, FILE_SIZE_SPELLINGS, len(input_data.data)):
            logger.warning(
                "%s declares none of %s; file size not recorded",
                type(document).__name__,
                ", ".join(FILE_SIZE_SPELLINGS),
            )

        async with self._uow_factory() as uow:
            store = ProbingDocumentStore(uow.documents, self._probe)
            try:
                document_id = await store.create_document(document)
            except UnsupportedBackingStore as e:
                logger.error("Cannot persist document %r: %s", document.filename, e)
                raise

        return DocumentUploadOutput(
            document_id=document_id,
            language=normalize_language_code(input_data.language_code),
            content_hash=document.content_hash,
        )
