from .cells.column_cells_use_case import ColumnCellsUseCase
from .columns.create_column_use_case import CreateColumnUseCase
from .columns.delete_column_use_case import DeleteColumnUseCase
from .columns.get_column_use_case import GetColumnUseCase
from .columns.reorder_column_cells_use_case import ReorderColumnCellsUseCase
from .columns.update_column_use_case import UpdateColumnUseCase
from .directories.create_directory_use_case import CreateDirectoryUseCase
from .directories.delete_directory_use_case import DeleteDirectoryUseCase
from .directories.list_directory_contents_use_case import ListDirectoryContentsUseCase
from .directories.list_root_directories_use_case import ListRootDirectoriesUseCase
from .directories.update_directory_use_case import UpdateDirectoryUseCase

__all__ = [
    "ColumnCellsUseCase",
    "CreateColumnUseCase",
    "CreateDirectoryUseCase",
    "DeleteColumnUseCase",
    "DeleteDirectoryUseCase",
    "GetColumnUseCase",
    "ListDirectoryContentsUseCase",
    "ListRootDirectoriesUseCase",
    "ReorderColumnCellsUseCase",
    "UpdateColumnUseCase",
    "UpdateDirectoryUseCase",
]
