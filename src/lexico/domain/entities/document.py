"""Document entity."""

from dataclasses import dataclass


@dataclass
class Document:
    """Uploaded text document. ``id`` stays 0 until the store assigns one."""

    user_id: int
    filename: str
    original_content: str
    language_id: int
    content_hash: str
    id: int = 0
    file_size: int | None = None
