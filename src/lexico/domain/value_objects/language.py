"""Language codes accepted on upload and their internal identifiers."""

import logging
from enum import IntEnum

logger = logging.getLogger(__name__)


class Language(IntEnum):
    """Internal language identifiers. UNKNOWN covers every unmapped code."""

    UNKNOWN = 0
    ES = 1
    EN = 2
    RU = 3


_LANGUAGE_BY_CODE: dict[str, Language] = {
    "es": Language.ES,
    "en": Language.EN,
    "ru": Language.RU,
}


def resolve_language_id(code: str | None) -> int:
    """Map a short language code to its id; unknown or missing codes give 0."""
    key = (code or "").strip().lower()
    language = _LANGUAGE_BY_CODE.get(key, Language.UNKNOWN)
    if language is Language.UNKNOWN and key:
        logger.info("Unknown language code %r, using id %d", code, Language.UNKNOWN)
    return int(language)


def normalize_language_code(code: str | None) -> str | None:
    """Lowercase the code as echoed back to clients."""
    return code.lower() if code is not None else None
