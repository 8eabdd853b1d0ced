"""Assembles fully resolved table views."""

from plot451.application.column.protocols.column_repository import ColumnRepositoryProtocol
from plot451.domain.column.collections.column_with_cells import ColumnWithCells
from plot451.domain.table.collections.table_with_columns_and_cells import (
    TableWithColumnsAndCells,
)
from plot451.domain.table.entities.table import Table


class TableViewService:
    """Loads the columns and cells a table references and joins them into one view."""

    def __init__(self, column_repository: ColumnRepositoryProtocol) -> None:
        self.column_repository = column_repository

    def build_view(self, table: Table) -> TableWithColumnsAndCells:
        """
        Build the view of a persisted table, columns in table order.

        Raises:
            NotAllColumnsFoundError: If a referenced column no longer exists
        """
        columns = self.column_repository.find_by_ids(table.columns)
        columns_with_cells = [
            ColumnWithCells(column, self.column_repository.find_cells_by_column_id(column.id))
            for column in columns
            if column.id is not None
        ]
        return TableWithColumnsAndCells(table, columns_with_cells)
