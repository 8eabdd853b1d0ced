from .column_with_cells import ColumnWithCells
from .directory_contents import DirectoryContents

__all__ = [
    "ColumnWithCells",
    "DirectoryContents",
]
