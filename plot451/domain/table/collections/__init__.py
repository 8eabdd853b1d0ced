from .table_columns import TableColumns
from .table_with_columns_and_cells import TableWithColumnsAndCells

__all__ = [
    "TableColumns",
    "TableWithColumnsAndCells",
]
