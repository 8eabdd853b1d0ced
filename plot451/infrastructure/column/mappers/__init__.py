from .column_directory_mapper import ColumnDirectoryMapper
from .column_mapper import ColumnCellMapper, ColumnMapper

__all__ = [
    "ColumnCellMapper",
    "ColumnDirectoryMapper",
    "ColumnMapper",
]
