"""Create directory, column, cell and table schema.

Revision ID: 001
Revises:
Create Date: 2026-10-18 12:00:00.000000

"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False
        ),
        sa.Column(
            "updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False
        ),
    ]


def upgrade() -> None:
    """Create all plot451 tables."""
    op.create_table(
        "column_directories",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("parent_id", sa.Integer(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(["parent_id"], ["column_directories.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_column_directories_id", "column_directories", ["id"])
    op.create_index("ix_column_directories_parent_id", "column_directories", ["parent_id"])

    op.create_table(
        "column_cells",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("value", sa.Float(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_column_cells_id", "column_cells", ["id"])

    op.create_table(
        "columns",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("directory_id", sa.Integer(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(["directory_id"], ["column_directories.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_columns_id", "columns", ["id"])
    op.create_index("ix_columns_directory_id", "columns", ["directory_id"])

    op.create_table(
        "column_cell_links",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("column_id", sa.Integer(), nullable=False),
        sa.Column("cell_id", sa.Integer(), nullable=False),
        sa.Column("sort_order", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["column_id"], ["columns.id"]),
        sa.ForeignKeyConstraint(["cell_id"], ["column_cells.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_column_cell_links_column_id", "column_cell_links", ["column_id"])
    op.create_index("ix_column_cell_links_cell_id", "column_cell_links", ["cell_id"])

    op.create_table(
        "tables",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=100), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_tables_id", "tables", ["id"])

    op.create_table(
        "table_column_links",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("table_id", sa.Integer(), nullable=False),
        sa.Column("column_id", sa.Integer(), nullable=False),
        sa.Column("sort_order", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["table_id"], ["tables.id"]),
        sa.ForeignKeyConstraint(["column_id"], ["columns.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_table_column_links_table_id", "table_column_links", ["table_id"])
    op.create_index("ix_table_column_links_column_id", "table_column_links", ["column_id"])


def downgrade() -> None:
    """Drop all plot451 tables."""
    op.drop_index("ix_table_column_links_column_id", table_name="table_column_links")
    op.drop_index("ix_table_column_links_table_id", table_name="table_column_links")
    op.drop_table("table_column_links")
    op.drop_index("ix_tables_id", table_name="tables")
    op.drop_table("tables")
    op.drop_index("ix_column_cell_links_cell_id", table_name="column_cell_links")
    op.drop_index("ix_column_cell_links_column_id", table_name="column_cell_links")
    op.drop_table("column_cell_links")
    op.drop_index("ix_columns_directory_id", table_name="columns")
    op.drop_index("ix_columns_id", table_name="columns")
    op.drop_table("columns")
    op.drop_index("ix_column_cells_id", table_name="column_cells")
    op.drop_table("column_cells")
    op.drop_index("ix_column_directories_parent_id", table_name="column_directories")
    op.drop_index("ix_column_directories_id", table_name="column_directories")
    op.drop_table("column_directories")
