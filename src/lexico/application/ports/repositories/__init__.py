"""Repository ports."""

from lexico.application.ports.repositories.document_repository import (
    DocumentRepository,
)

__all__ = [
    "DocumentRepository",
]
