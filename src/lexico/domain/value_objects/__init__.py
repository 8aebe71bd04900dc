"""Domain value objects."""

from lexico.domain.value_objects.content_hash import ContentHash, compute_content_hash
from lexico.domain.value_objects.language import (
    Language,
    normalize_language_code,
    resolve_language_id,
)

__all__ = [
    "ContentHash",
    "Language",
    "compute_content_hash",
    "normalize_language_code",
    "resolve_language_id",
]
