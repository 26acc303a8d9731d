"""create presentations and slides tables"""
from __future__ import annotations

from alembic import op
import sqlalchemy as sa

revision = "0002_create_presentations"
down_revision = "0001_create_tasks"
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "presentations",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("title", sa.String(length=200), nullable=False),
        sa.Column("subtitle", sa.String(length=200), nullable=False, server_default=""),
        sa.Column("author", sa.String(length=200), nullable=False, server_default=""),
        sa.Column("company", sa.String(length=200), nullable=False, server_default=""),
        sa.Column("project_id", sa.String(length=36), nullable=True),
        sa.Column("theme", sa.String(length=40), nullable=False, server_default="modern"),
        sa.Column("audience", sa.Text(), nullable=False, server_default=""),
        sa.Column("objective", sa.Text(), nullable=False, server_default=""),
        sa.Column("duration_min", sa.Integer(), nullable=False, server_default="30"),
        sa.Column("created_at", sa.DateTime(), nullable=False),
    )
    op.create_table(
        "slides",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column(
            "presentation_id",
            sa.Integer(),
            sa.ForeignKey("presentations.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("slide_id", sa.Integer(), nullable=False),
        sa.Column("title", sa.String(length=200), nullable=False, server_default=""),
        sa.Column("content", sa.Text(), nullable=False, server_default=""),
        sa.Column("slide_type", sa.String(length=20), nullable=False, server_default="content"),
        sa.Column("sort_order", sa.Integer(), nullable=False, server_default="0"),
    )
    op.create_index("ix_slides_presentation_id", "slides", ["presentation_id"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_slides_presentation_id", table_name="slides")
    op.drop_table("slides")
    op.drop_table("presentations")
