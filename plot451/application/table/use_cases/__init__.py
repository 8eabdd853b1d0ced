from .table_columns.table_columns_use_case import ColumnPosition, TableColumnsUseCase
from .tables.create_table_use_case import CreateTableUseCase
from .tables.delete_table_use_case import DeleteTableUseCase
from .tables.get_table_use_case import GetTableUseCase
from .tables.list_tables_use_case import ListTablesUseCase
from .tables.rename_table_use_case import RenameTableUseCase

__all__ = [
    "ColumnPosition",
    "CreateTableUseCase",
    "DeleteTableUseCase",
    "GetTableUseCase",
    "ListTablesUseCase",
    "RenameTableUseCase",
    "TableColumnsUseCase",
]
