"""Application ports - interfaces for external adapters."""

from lexico.application.ports.document_store import DocumentStore
from lexico.application.ports.repositories import DocumentRepository
from lexico.application.ports.unit_of_work import UnitOfWork, UnitOfWorkFactory

__all__ = [
    "DocumentRepository",
    "DocumentStore",
    "UnitOfWork",
    "UnitOfWorkFactory",
]
