"""PostgreSQL document repository implementation."""

from psycopg import AsyncConnection

from lexico.domain.entities import Document


class PostgresDocumentRepository:
    """Document repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, document_id: int) -> Document | None:
        """Get document by id."""
        cur = await self._conn.execute(
            "SELECT id, user_id, filename, original_content, language_id, content_hash, file_size "
            "FROM document WHERE id = %s",
            (document_id,),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return Document(
            id=r[0],
            user_id=r[1],
            filename=r[2],
            original_content=r[3],
            language_id=r[4],
            content_hash=r[5],
            file_size=r[6],
        )

    async def insert(self, document: Document) -> int:
        """Insert document; return the id assigned by the database."""
        cur = await self._conn.execute(
            "INSERT INTO document "
            "(user_id, filename, original_content, language_id, content_hash, file_size) "
            "VALUES (%s, %s, %s, %s, %s, %s) RETURNING id",
            (
                document.user_id,
                document.filename,
                document.original_content,
                document.language_id,
                document.content_hash,
                document.file_size,
            ),
        )
        r = await cur.fetchone()
        return r[0]
