"""Initial schema - document.

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""

from collections.abc import Sequence

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "document",
        sa.Column("id", sa.Integer(), sa.Identity(), primary_key=True),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("filename", sa.String(255), nullable=False),
        sa.Column("original_content", sa.Text(), nullable=False),
        sa.Column("language_id", sa.SmallInteger(), nullable=False, server_default="0"),
        sa.Column("content_hash", sa.CHAR(64), nullable=False),
        sa.Column("file_size", sa.Integer(), nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
    )
    op.create_index("ix_document_content_hash", "document", ["content_hash"])
    op.create_index("ix_document_user_id", "document", ["user_id"])


def downgrade() -> None:
    op.drop_index("ix_document_user_id", table_name="document")
    op.drop_index("ix_document_content_hash", table_name="document")
    op.drop_table("document")
