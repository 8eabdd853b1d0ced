"""Pydantic schemas for table API request/response validation."""

from typing import Literal

from pydantic import BaseModel, Field

from plot451.domain.table.collections.table_with_columns_and_cells import (
    TableWithColumnsAndCells,
)
from plot451.domain.table.entities.table import Table as TableEntity
from plot451.infrastructure.column.schemas.column_schemas import ColumnWithCellsResponse


class TableSummary(BaseModel):
    """Table without resolved columns, used in listings."""

    id: str
    name: str
    column_ids: list[str]

    @classmethod
    def from_entity(cls, table: TableEntity) -> "TableSummary":
        return cls(
            id=table.id.value,
            name=table.name.value,
            column_ids=[column_id.value for column_id in table.columns],
        )


class Table(BaseModel):
    """Schema for a table response with every column and its cells."""

    id: str
    name: str
    columns: list[ColumnWithCellsResponse]

    @classmethod
    def from_collection(cls, view: TableWithColumnsAndCells) -> "Table":
        return cls(
            id=view.table.id.value,
            name=view.table.name.value,
            columns=[ColumnWithCellsResponse.from_collection(column) for column in view.columns],
        )


class TableCreateRequest(BaseModel):
    """Schema for creating a table."""

    name: str = Field(..., min_length=1, description="Table name, at most 100 characters")
    column_ids: list[str] = Field(..., description="IDs of the columns, in table order")


class TableUpdateRequest(BaseModel):
    """Schema for renaming a table."""

    name: str = Field(..., min_length=1, description="New table name")


class TableColumnInsertRequest(BaseModel):
    """Schema for adding an existing column next to one of the table's columns."""

    column_id: str = Field(..., min_length=1, description="Column to add")
    destination_id: str = Field(..., min_length=1, description="Column already in the table")
    position: Literal["in_front_of", "behind"] = "behind"


class TableColumnMoveRequest(BaseModel):
    """Schema for moving a column of the table next to another one."""

    column_id: str = Field(..., min_length=1, description="Column to move")
    destination_id: str = Field(..., min_length=1, description="Column to move next to")
    position: Literal["in_front_of", "behind"] = "in_front_of"
