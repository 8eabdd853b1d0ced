"""Table joined with its resolved columns."""

from collections.abc import Sequence
from dataclasses import dataclass

from plot451.domain.column.entities.column import Column
from plot451.domain.common.exceptions import CollectionAssemblyError
from plot451.domain.table.entities.table import Table


@dataclass(frozen=True)
class TableColumns:
    """
    Read view of a table and its columns, in table order.

    Used before a table is persisted (creation checks), so the table may
    still lack an id.
    """

    table: Table
    columns: tuple[Column, ...]

    def __init__(self, table: Table, columns: Sequence[Column]) -> None:
        column_ids = [column.id for column in columns]
        if column_ids != table.columns:
            raise CollectionAssemblyError(
                "TableColumns",
                f"columns {[str(i) for i in column_ids]} do not match table order "
                f"{[str(i) for i in table.columns]}",
            )
        object.__setattr__(self, "table", table)
        object.__setattr__(self, "columns", tuple(columns))
