"""Pytest fixtures for Lexico tests."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import replace

import pytest

from lexico.domain.entities import Document


# --- Fake repositories ---


class FakeDocumentRepository:
    """In-memory document repository exposing ``create``; records every call."""

    def __init__(self) -> None:
        self._by_id: dict[int, Document] = {}
        self.created: list[Document] = []

    async def get_by_id(self, document_id: int) -> Document | None:
        return self._by_id.get(document_id)

    async def create(self, document: Document) -> int:
        self.created.append(document)
        document_id = len(self._by_id) + 1
        self._by_id[document_id] = replace(document, id=document_id)
        return document_id


class ReadOnlyDocumentRepository:
    """Repository with no create-like operation at all."""

    def __init__(self) -> None:
        self.calls: list[str] = []

    async def get_by_id(self, document_id: int) -> Document | None:
        self.calls.append("get_by_id")
        return None

    async def persist(self, document: Document) -> int:
        self.calls.append("persist")
        return 1


class FailingDocumentRepository:
    """Repository whose create operation always fails."""

    async def get_by_id(self, document_id: int) -> Document | None:
        return None

    async def create(self, document: Document) -> int:
        raise ConnectionError("database unavailable")


# --- Fake UnitOfWork ---


class FakeUnitOfWork:
    """In-memory Unit of Work with a fake document repository."""

    def __init__(self, documents: object | None = None) -> None:
        self.documents = documents if documents is not None else FakeDocumentRepository()
        self.committed = False

    async def commit(self) -> None:
        self.committed = True

    async def rollback(self) -> None:
        pass


def make_uow_factory(uow: FakeUnitOfWork):
    """Factory yielding the same UoW for every call."""

    @asynccontextmanager
    async def _factory() -> AsyncIterator[FakeUnitOfWork]:
        yield uow

    return _factory


# --- Fixtures ---


@pytest.fixture
def fake_uow() -> FakeUnitOfWork:
    """Fresh in-memory UnitOfWork for each test."""
    return FakeUnitOfWork()


@pytest.fixture
def uow_factory(fake_uow: FakeUnitOfWork):
    """Factory returning async context manager with the test's FakeUnitOfWork."""
    return make_uow_factory(fake_uow)


@pytest.fixture
def document() -> Document:
    """Assembled, not yet persisted document."""
    return Document(
        user_id=7,
        filename="hola.txt",
        original_content="hola mundo",
        language_id=1,
        content_hash="0" * 64,
    )
