"""Fixtures for API tests."""

import pytest
from falcon.testing import TestClient

from lexico.application.use_cases.document.get_document import GetDocumentUseCase
from lexico.application.use_cases.document.ingest_document import IngestDocumentUseCase
from lexico.infrastructure.persistence.memory.unit_of_work import create_uow_factory
from lexico.interfaces.api.app import create_app
from lexico.interfaces.api.middleware.cors import CORSMiddleware
from lexico.interfaces.api.resources.documents import DocumentResource, DocumentsResource
from lexico.interfaces.api.resources.health import HealthResource

from tests.conftest import (
    FailingDocumentRepository,
    FakeUnitOfWork,
    ReadOnlyDocumentRepository,
    make_uow_factory,
)

MAX_UPLOAD_BYTES = 1024


def build_app(uow_factory, max_upload_bytes: int = MAX_UPLOAD_BYTES, cors_origins=None):
    """Falcon ASGI app wired the way the composition root wires it."""
    return create_app(
        DocumentsResource(IngestDocumentUseCase(uow_factory), max_upload_bytes),
        DocumentResource(GetDocumentUseCase(uow_factory)),
        HealthResource(),
        max_upload_bytes=max_upload_bytes,
        middleware=[CORSMiddleware(cors_origins or [])],
    )


@pytest.fixture
def make_client():
    """Build a test client over a fresh in-memory store with custom limits or origins."""

    def _make(max_upload_bytes: int = MAX_UPLOAD_BYTES, cors_origins=None) -> TestClient:
        return TestClient(build_app(create_uow_factory(), max_upload_bytes, cors_origins))

    return _make


@pytest.fixture
def client() -> TestClient:
    """Test client over the in-memory document store."""
    return TestClient(build_app(create_uow_factory()))


@pytest.fixture
def unsupported_client() -> TestClient:
    """Test client over a store with no create operation."""
    return TestClient(build_app(make_uow_factory(FakeUnitOfWork(ReadOnlyDocumentRepository()))))


@pytest.fixture
def failing_client() -> TestClient:
    """Test client over a store whose create operation fails."""
    return TestClient(build_app(make_uow_factory(FakeUnitOfWork(FailingDocumentRepository()))))
