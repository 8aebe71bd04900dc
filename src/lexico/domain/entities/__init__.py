"""Domain entities."""

from lexico.domain.entities.document import Document

__all__ = [
    "Document",
]
