"""create issues table

Revision ID: 20210918_0001
Revises:
Create Date: 2021-09-18
"""

from alembic import op
import sqlalchemy as sa


revision = "20210918_0001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "issues",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("issue_title", sa.String(length=255), nullable=False),
        sa.Column("issue_text", sa.Text(), nullable=False),
        sa.Column("created_by", sa.String(length=255), nullable=False),
        sa.Column("assigned_to", sa.String(length=255), nullable=False, server_default=""),
        sa.Column("status_text", sa.String(length=255), nullable=False, server_default=""),
        sa.Column("open", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("projectname", sa.String(length=255), nullable=False),
        sa.Column("created_on", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_on", sa.DateTime(timezone=True), nullable=False),
        sqlite_autoincrement=True,
    )
    op.create_index("ix_issues_projectname", "issues", ["projectname"])


def downgrade() -> None:
    op.drop_index("ix_issues_projectname", table_name="issues")
    op.drop_table("issues")
