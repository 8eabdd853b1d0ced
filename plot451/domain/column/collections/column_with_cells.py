"""Column joined with its resolved cells."""

from collections.abc import Sequence
from dataclasses import dataclass

from plot451.domain.column.entities.column import Column
from plot451.domain.column.entities.column_cell import ColumnCell
from plot451.domain.common.exceptions import CollectionAssemblyError
from plot451.domain.common.value_objects import ColumnId, ColumnName


@dataclass(frozen=True)
class ColumnWithCells:
    """
    Read view of a persisted column and its cells, in column order.

    The cell ids must match the column's cell list exactly, position by
    position.
    """

    column: Column
    cells: tuple[ColumnCell, ...]

    def __init__(self, column: Column, cells: Sequence[ColumnCell]) -> None:
        if column.id is None:
            raise CollectionAssemblyError("ColumnWithCells", "column is not persisted")
        cell_ids = [cell.id for cell in cells]
        if cell_ids != column.cells:
            raise CollectionAssemblyError(
                "ColumnWithCells",
                f"cells {[str(i) for i in cell_ids]} do not match column {column.id} "
                f"order {[str(i) for i in column.cells]}",
            )
        object.__setattr__(self, "column", column)
        object.__setattr__(self, "cells", tuple(cells))

    @property
    def id(self) -> ColumnId:
        return self.column.id

    @property
    def name(self) -> ColumnName:
        return self.column.name

    def __len__(self) -> int:
        return len(self.cells)
