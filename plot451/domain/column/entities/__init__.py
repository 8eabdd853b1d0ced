from .column import Column
from .column_cell import ColumnCell
from .column_directory import ColumnDirectory

__all__ = [
    "Column",
    "ColumnCell",
    "ColumnDirectory",
]
