"""Database models."""

from datetime import datetime

from sqlalchemy import DateTime, Float, ForeignKey, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from plot451.database import Base


class ColumnDirectory(Base):
    """Directory node; parent_id is NULL for top-level directories."""

    __tablename__ = "column_directories"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    parent_id: Mapped[int | None] = mapped_column(
        ForeignKey("column_directories.id"), nullable=True, index=True
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    def __repr__(self) -> str:
        """String representation of ColumnDirectory."""
        return f"<ColumnDirectory(id={self.id}, name='{self.name}', parent_id={self.parent_id})>"


class ColumnCell(Base):
    """Single numeric cell; NULL value means a blank cell."""

    __tablename__ = "column_cells"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    value: Mapped[float | None] = mapped_column(Float, nullable=True)

    def __repr__(self) -> str:
        """String representation of ColumnCell."""
        return f"<ColumnCell(id={self.id}, value={self.value})>"


class ColumnCellLink(Base):
    """Position of a cell inside a column."""

    __tablename__ = "column_cell_links"

    id: Mapped[int] = mapped_column(primary_key=True)
    column_id: Mapped[int] = mapped_column(ForeignKey("columns.id"), nullable=False, index=True)
    cell_id: Mapped[int] = mapped_column(
        ForeignKey("column_cells.id"), nullable=False, index=True
    )
    sort_order: Mapped[int] = mapped_column(Integer, nullable=False)


class Column(Base):
    """Named column living in a directory."""

    __tablename__ = "columns"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    directory_id: Mapped[int] = mapped_column(
        ForeignKey("column_directories.id"), nullable=False, index=True
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    cell_links: Mapped[list[ColumnCellLink]] = relationship(
        order_by=ColumnCellLink.sort_order,
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        """String representation of Column."""
        return f"<Column(id={self.id}, name='{self.name}', directory_id={self.directory_id})>"


class TableColumnLink(Base):
    """Position of a column inside a table."""

    __tablename__ = "table_column_links"

    id: Mapped[int] = mapped_column(primary_key=True)
    table_id: Mapped[int] = mapped_column(ForeignKey("tables.id"), nullable=False, index=True)
    column_id: Mapped[int] = mapped_column(ForeignKey("columns.id"), nullable=False, index=True)
    sort_order: Mapped[int] = mapped_column(Integer, nullable=False)


class Table(Base):
    """Named, ordered selection of columns."""

    __tablename__ = "tables"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    column_links: Mapped[list[TableColumnLink]] = relationship(
        order_by=TableColumnLink.sort_order,
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        """String representation of Table."""
        return f"<Table(id={self.id}, name='{self.name}')>"
