"""SQLAlchemy table definitions for FlowThread.

These table definitions are used with SQLAlchemy Core and match the schema
defined in the Alembic migrations.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    Index,
    Integer,
    LargeBinary,
    MetaData,
    SmallInteger,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects import mysql
from sqlalchemy.types import TIMESTAMP

# Metadata object for all tables
metadata = MetaData()

# 16-byte binary key; fixed-width BINARY on MySQL so it can be indexed
BinaryId = LargeBinary(16).with_variant(mysql.BINARY(16), "mysql")

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", BinaryId, primary_key=True),
    Column("page_id", Integer, nullable=False),
    # Weak reference: no foreign key, replies may outlive a purged parent row
    Column("parent_id", BinaryId, nullable=True),
    Column("author", String(255), nullable=False),
    Column("text", Text, nullable=False),
    Column("status", SmallInteger, nullable=False, server_default="0"),
    Column("report_count", Integer, nullable=False, server_default="0"),
    Column("created_at", TIMESTAMP(timezone=True), nullable=False),
    CheckConstraint("report_count >= 0", name="report_count_non_negative"),
)

Index("idx_comments_page_id", comments_table.c.page_id)
Index("idx_comments_parent_id", comments_table.c.parent_id)
Index("idx_comments_author", comments_table.c.author)

# Fixed column list read by every fetch
COMMENT_COLUMNS = (
    comments_table.c.id,
    comments_table.c.page_id,
    comments_table.c.parent_id,
    comments_table.c.author,
    comments_table.c.text,
    comments_table.c.status,
    comments_table.c.report_count,
    comments_table.c.created_at,
)
