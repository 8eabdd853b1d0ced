"""Column module domain layer."""

from .collections import ColumnWithCells, DirectoryContents
from .entities import Column, ColumnCell, ColumnDirectory
from .services import ColumnFactory

__all__ = [
    "Column",
    "ColumnCell",
    "ColumnDirectory",
    "ColumnFactory",
    "ColumnWithCells",
    "DirectoryContents",
]
