"""Documents table with (creation_timestamp, id) scan index.

Revision ID: 001_documents
Revises: None
Create Date: 2026-10-18

The table name follows DOCUMENTS_TABLE_NAME, the same variable Settings reads,
so the migrated table is the one SqlDocumentStore queries.
"""
import os
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

from docstore.models.document import DEFAULT_TABLE_NAME

revision: str = "001_documents"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _table_name() -> str:
    return os.environ.get("DOCUMENTS_TABLE_NAME") or DEFAULT_TABLE_NAME


def _index_name(table_name: str) -> str:
    return f"ix_{table_name}_creation_timestamp_id"


def upgrade() -> None:
    table_name = _table_name()
    op.create_table(
        table_name,
        sa.Column("id", sa.String(250), primary_key=True),
        sa.Column("title", sa.String(250), nullable=False),
        sa.Column("description", sa.String(250), nullable=False),
        sa.Column("body", sa.Text, nullable=False),
        sa.Column("revision", sa.BigInteger, nullable=False),
        sa.Column("creation_timestamp", sa.BigInteger, nullable=False),
        sa.Column("update_timestamp", sa.BigInteger, nullable=False),
    )
    op.create_index(
        _index_name(table_name),
        table_name,
        ["creation_timestamp", "id"],
    )


def downgrade() -> None:
    table_name = _table_name()
    op.drop_index(_index_name(table_name), table_name=table_name)
    op.drop_table(table_name)
