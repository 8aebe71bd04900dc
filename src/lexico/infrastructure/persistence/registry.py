"""Registry: select the document store backend by configuration name."""

from collections.abc import Callable
from dataclasses import dataclass, field

from lexico.config import Settings
from lexico.infrastructure.persistence.memory.unit_of_work import (
    create_uow_factory as create_memory_uow_factory,
)
from lexico.infrastructure.persistence.postgres.connection import create_pool
from lexico.infrastructure.persistence.postgres.unit_of_work import (
    create_uow_factory as create_postgres_uow_factory,
)


@dataclass
class DocumentStoreBackend:
    """Unit of Work factory plus objects whose lifecycle the app must manage."""

    uow_factory: object
    pools: list = field(default_factory=list)


def _postgres_backend(settings: Settings) -> DocumentStoreBackend:
    pool = create_pool(settings.database_url)
    return DocumentStoreBackend(uow_factory=create_postgres_uow_factory(pool), pools=[pool])


def _memory_backend(settings: Settings) -> DocumentStoreBackend:
    return DocumentStoreBackend(uow_factory=create_memory_uow_factory())


# backend name -> builder
_BACKENDS: dict[str, Callable[[Settings], DocumentStoreBackend]] = {
    "postgres": _postgres_backend,
    "memory": _memory_backend,
}


def available_backends() -> list[str]:
    return sorted(_BACKENDS)


def create_document_store(settings: Settings) -> DocumentStoreBackend:
    """Build the backend named by settings.document_store."""
    builder = _BACKENDS.get(settings.document_store.lower())
    if builder is None:
        raise ValueError(
            f"Unknown document store {settings.document_store!r}; "
            f"expected one of {', '.join(available_backends())}"
        )
    return builder(settings)
