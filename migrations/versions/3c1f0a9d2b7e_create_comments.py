"""create_comments

Create the comments table:
- 16-byte binary ids, time-prefixed so id order follows creation order
- parent_id as a weak reference (no foreign key)
- status and report_count written by moderation tooling

Revision ID: 3c1f0a9d2b7e
Revises:
Create Date: 2026-10-19 09:12:44.318205

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import mysql


# revision identifiers, used by Alembic.
revision: str = "3c1f0a9d2b7e"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

BinaryId = sa.LargeBinary(16).with_variant(mysql.BINARY(16), "mysql")


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "comments",
        sa.Column("id", BinaryId, nullable=False),
        sa.Column("page_id", sa.Integer(), nullable=False),
        sa.Column("parent_id", BinaryId, nullable=True),
        sa.Column("author", sa.String(length=255), nullable=False),
        sa.Column("text", sa.Text(), nullable=False),
        sa.Column("status", sa.SmallInteger(), server_default="0", nullable=False),
        sa.Column(
            "report_count", sa.Integer(), server_default="0", nullable=False
        ),
        sa.Column("created_at", sa.TIMESTAMP(timezone=True), nullable=False),
        sa.CheckConstraint("report_count >= 0", name="report_count_non_negative"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_comments_page_id", "comments", ["page_id"])
    op.create_index("idx_comments_parent_id", "comments", ["parent_id"])
    op.create_index("idx_comments_author", "comments", ["author"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_comments_author", table_name="comments")
    op.drop_index("idx_comments_parent_id", table_name="comments")
    op.drop_index("idx_comments_page_id", table_name="comments")
    op.drop_table("comments")
