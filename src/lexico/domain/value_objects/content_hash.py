"""Content fingerprint of an uploaded document."""

import hashlib
import re
from dataclasses import dataclass

_HEX_SHA256 = re.compile(r"[0-9a-f]{64}")


def compute_content_hash(text: str) -> str:
    """SHA-256 of the UTF-8 encoded text, lowercase hex."""
    return hashlib.sha256(text.encode("utf-8")).hexdigest()


@dataclass(frozen=True)
class ContentHash:
    """SHA-256 hex digest of document content."""

    value: str

    def __post_init__(self) -> None:
        if not _HEX_SHA256.fullmatch(self.value):
            raise ValueError("Content hash must be 64 lowercase hex characters")

    @classmethod
    def of(cls, text: str) -> "ContentHash":
        return cls(compute_content_hash(text))
