"""Document DTOs."""

from dataclasses import dataclass


@dataclass
class DocumentUploadInput:
    """Input for ingesting a document."""

    user_id: int
    filename: str
    data: bytes
    language_code: str | None = None


@dataclass
class DocumentUploadOutput:
    """Result of a successful upload."""

    document_id: int
    language: str | None
    content_hash: str


@dataclass
class DocumentSummaryOutput:
    """Output DTO for a stored document."""

    id: int
    filename: str
    user_id: int
    language_id: int
    length: int
