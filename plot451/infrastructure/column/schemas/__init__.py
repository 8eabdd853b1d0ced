"""Column context schemas."""

from plot451.infrastructure.column.schemas.column_schemas import (
    Cell,
    CellOrderRequest,
    CellValueRequest,
    ColumnCreateRequest,
    ColumnSummary,
    ColumnUpdateRequest,
    ColumnWithCellsResponse,
)
from plot451.infrastructure.column.schemas.directory_schemas import (
    Directory,
    DirectoryContentsResponse,
    DirectoryCreateRequest,
    DirectoryUpdateRequest,
)

__all__ = [
    "Cell",
    "CellOrderRequest",
    "CellValueRequest",
    "ColumnCreateRequest",
    "ColumnSummary",
    "ColumnUpdateRequest",
    "ColumnWithCellsResponse",
    "Directory",
    "DirectoryContentsResponse",
    "DirectoryCreateRequest",
    "DirectoryUpdateRequest",
]
