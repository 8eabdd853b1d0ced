"""Pydantic schemas for column and cell API request/response validation."""

from pydantic import BaseModel, Field

from plot451.domain.column.collections.column_with_cells import ColumnWithCells
from plot451.domain.column.entities.column import Column
from plot451.domain.column.entities.column_cell import ColumnCell


class Cell(BaseModel):
    """Schema for a cell response."""

    id: str
    value: float | None = None

    @classmethod
    def from_entity(cls, cell: ColumnCell) -> "Cell":
        return cls(id=cell.id.value, value=cell.value.value)


class ColumnSummary(BaseModel):
    """Column without its cell values, used in listings."""

    id: str
    name: str
    directory_id: str
    cell_ids: list[str] = Field(default_factory=list)

    @classmethod
    def from_entity(cls, column: Column) -> "ColumnSummary":
        return cls(
            id=column.id.value,
            name=column.name.value,
            directory_id=column.directory_id.value,
            cell_ids=[cell_id.value for cell_id in column.cells],
        )


class ColumnWithCellsResponse(BaseModel):
    """Schema for a column response with its cells in order."""

    id: str
    name: str
    directory_id: str
    cells: list[Cell] = Field(default_factory=list)

    @classmethod
    def from_collection(cls, column_with_cells: ColumnWithCells) -> "ColumnWithCellsResponse":
        column = column_with_cells.column
        return cls(
            id=column.id.value,
            name=column.name.value,
            directory_id=column.directory_id.value,
            cells=[Cell.from_entity(cell) for cell in column_with_cells.cells],
        )


class ColumnCreateRequest(BaseModel):
    """Schema for creating a column."""

    name: str = Field(..., min_length=1, max_length=255, description="Column name")
    directory_id: str = Field(..., min_length=1, description="ID of the owning directory")
    values: list[float | None] = Field(
        default_factory=list, description="Initial cell values, in order"
    )


class ColumnUpdateRequest(BaseModel):
    """Schema for renaming and/or moving a column."""

    name: str | None = Field(None, min_length=1, max_length=255, description="New column name")
    directory_id: str | None = Field(None, min_length=1, description="ID of the new directory")


class CellOrderRequest(BaseModel):
    """Schema for replacing the cell order of a column."""

    cell_ids: list[str] = Field(..., description="Every cell id of the column, in the new order")


class CellValueRequest(BaseModel):
    """Schema for appending a cell or editing its value."""

    value: float | None = Field(None, description="Cell value, null for a blank cell")
