"""Unit tests for optional attribute binding."""

import logging
from dataclasses import dataclass
from typing import ClassVar

from lexico.application.services import bind_optional_attribute
from lexico.domain.entities import Document

SIZE_SPELLINGS = ("file_size", "tamano_archivo", "tamaño_archivo")


@dataclass
class BareDocument:
    filename: str = "a.txt"


@dataclass
class SpanishDocument:
    Tamano_Archivo: float = 0.0


@dataclass
class AccentedDocument:
    tamaño_archivo: int | None = None


@dataclass
class BothSpellings:
    file_size: int = 0
    tamano_archivo: int = 0


@dataclass(frozen=True)
class FrozenDocument:
    file_size: int = 0


class PropertyDocument:
    def __init__(self) -> None:
        self._size = 0

    @property
    def file_size(self) -> int:
        return self._size

    @file_size.setter
    def file_size(self, value: int) -> None:
        self._size = value


class ReadOnlyPropertyDocument:
    @property
    def file_size(self) -> int:
        return 5


class ClassVarDocument:
    file_size: ClassVar[int] = 0


class LegacyRecord:
    def __init__(self) -> None:
        self.tamano_archivo = 0
        self.checksum = None
        self._cache = 0


def _document() -> Document:
    return Document(
        user_id=1,
        filename="a.txt",
        original_content="abc",
        language_id=0,
        content_hash="0" * 64,
    )


def test_binds_matching_field() -> None:
    doc = _document()
    assert bind_optional_attribute(doc, SIZE_SPELLINGS, 42) == ["file_size"]
    assert doc.file_size == 42


def test_no_matching_field_is_noop() -> None:
    entity = BareDocument()
    assert bind_optional_attribute(entity, SIZE_SPELLINGS, 42) == []
    assert entity == BareDocument()


def test_match_is_case_insensitive_with_numeric_widening() -> None:
    entity = SpanishDocument()
    assert bind_optional_attribute(entity, SIZE_SPELLINGS, 10) == ["Tamano_Archivo"]
    assert entity.Tamano_Archivo == 10.0
    assert isinstance(entity.Tamano_Archivo, float)


def test_numeric_narrowing() -> None:
    doc = _document()
    bind_optional_attribute(doc, ["file_size"], 12.0)
    assert doc.file_size == 12
    assert isinstance(doc.file_size, int)


def test_optional_field_is_unwrapped() -> None:
    entity = AccentedDocument()
    assert bind_optional_attribute(entity, SIZE_SPELLINGS, 7) == ["tamaño_archivo"]
    assert entity.tamaño_archivo == 7


def test_each_spelling_is_attempted_independently() -> None:
    entity = BothSpellings()
    assert bind_optional_attribute(entity, SIZE_SPELLINGS, 3) == ["file_size", "tamano_archivo"]
    assert entity.file_size == 3
    assert entity.tamano_archivo == 3


def test_binding_is_idempotent() -> None:
    doc = _document()
    first = bind_optional_attribute(doc, SIZE_SPELLINGS, 99)
    state = (doc.file_size, doc.filename)
    second = bind_optional_attribute(doc, SIZE_SPELLINGS, 99)
    assert first == second
    assert (doc.file_size, doc.filename) == state


def test_inconvertible_value_is_skipped() -> None:
    doc = _document()
    assert bind_optional_attribute(doc, SIZE_SPELLINGS, "large") == []
    assert doc.file_size is None


def test_bool_is_not_a_size() -> None:
    doc = _document()
    assert bind_optional_attribute(doc, SIZE_SPELLINGS, True) == []
    assert doc.file_size is None


def test_overflowing_conversion_is_skipped() -> None:
    doc = _document()
    assert bind_optional_attribute(doc, SIZE_SPELLINGS, float("inf")) == []


def test_frozen_entity_is_left_alone() -> None:
    entity = FrozenDocument()
    assert bind_optional_attribute(entity, SIZE_SPELLINGS, 5) == []
    assert entity.file_size == 0


def test_property_with_setter_is_writable() -> None:
    entity = PropertyDocument()
    assert bind_optional_attribute(entity, SIZE_SPELLINGS, 8) == ["file_size"]
    assert entity.file_size == 8


def test_read_only_property_is_skipped() -> None:
    entity = ReadOnlyPropertyDocument()
    assert bind_optional_attribute(entity, SIZE_SPELLINGS, 8) == []
    assert entity.file_size == 5


def test_class_var_is_not_bound() -> None:
    entity = ClassVarDocument()
    assert bind_optional_attribute(entity, SIZE_SPELLINGS, 8) == []
    assert ClassVarDocument.file_size == 0


def test_skips_are_logged(caplog) -> None:
    with caplog.at_level(logging.DEBUG, logger="lexico.application.services.attribute_binder"):
        bind_optional_attribute(BareDocument(), ["file_size"], 1)
    assert "BareDocument has no writable attribute 'file_size'" in caplog.text


def test_attribute_assigned_in_init_is_writable() -> None:
    """Unannotated instance attributes take the type of their current value."""
    entity = LegacyRecord()
    assert bind_optional_attribute(entity, SIZE_SPELLINGS, 12.0) == ["tamano_archivo"]
    assert entity.tamano_archivo == 12
    assert type(entity.tamano_archivo) is int


def test_attribute_assigned_none_in_init_accepts_any_value() -> None:
    entity = LegacyRecord()
    assert bind_optional_attribute(entity, ["Checksum"], "abc") == ["checksum"]
    assert entity.checksum == "abc"


def test_private_instance_attribute_is_not_bound() -> None:
    entity = LegacyRecord()
    assert bind_optional_attribute(entity, ["_cache"], 9) == []
    assert entity._cache == 0


def test_non_string_spelling_is_skipped() -> None:
    doc = _document()
    assert bind_optional_attribute(doc, [None, 3, "file_size"], 42) == ["file_size"]
    assert doc.file_size == 42
