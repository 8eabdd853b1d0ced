"""Table context schemas."""

from plot451.infrastructure.table.schemas.table_schemas import (
    Table,
    TableColumnInsertRequest,
    TableColumnMoveRequest,
    TableCreateRequest,
    TableSummary,
    TableUpdateRequest,
)

__all__ = [
    "Table",
    "TableColumnInsertRequest",
    "TableColumnMoveRequest",
    "TableCreateRequest",
    "TableSummary",
    "TableUpdateRequest",
]
