"""Value objects shared across the column and table contexts."""

from .cell_value import CellValue, CellValueParseError
from .ids import ColumnCellId, ColumnDirectoryId, ColumnId, TableId
from .names import (
    ColumnDirectoryName,
    ColumnName,
    EmptyNameError,
    NameTooLongError,
    TableName,
)

__all__ = [
    "CellValue",
    "CellValueParseError",
    "ColumnCellId",
    "ColumnDirectoryId",
    "ColumnDirectoryName",
    "ColumnId",
    "ColumnName",
    "EmptyNameError",
    "NameTooLongError",
    "TableId",
    "TableName",
]
