"""Fully resolved table view."""

from collections.abc import Sequence
from dataclasses import dataclass

from plot451.domain.column.collections.column_with_cells import ColumnWithCells
from plot451.domain.common.exceptions import CollectionAssemblyError
from plot451.domain.table.entities.table import Table


@dataclass(frozen=True)
class TableWithColumnsAndCells:
    """Read view of a persisted table with every column and its cells, in table order."""

    table: Table
    columns: tuple[ColumnWithCells, ...]

    def __init__(self, table: Table, columns: Sequence[ColumnWithCells]) -> None:
        if table.id is None:
            raise CollectionAssemblyError("TableWithColumnsAndCells", "table is not persisted")
        column_ids = [column.id for column in columns]
        if column_ids != table.columns:
            raise CollectionAssemblyError(
                "TableWithColumnsAndCells",
                f"columns {[str(i) for i in column_ids]} do not match table {table.id} "
                f"order {[str(i) for i in table.columns]}",
            )
        object.__setattr__(self, "table", table)
        object.__setattr__(self, "columns", tuple(columns))
