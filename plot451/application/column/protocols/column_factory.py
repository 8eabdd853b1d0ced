"""Protocol for building column-context entities."""

from collections.abc import Sequence
from typing import Protocol

from plot451.domain.column.entities.column import Column
from plot451.domain.column.entities.column_cell import ColumnCell
from plot451.domain.column.entities.column_directory import ColumnDirectory
from plot451.domain.common.value_objects import (
    CellValue,
    ColumnCellId,
    ColumnDirectoryId,
    ColumnDirectoryName,
    ColumnName,
)


class ColumnFactoryProtocol(Protocol):
    """Builds unsaved entities without touching storage."""

    def create_column(
        self,
        name: ColumnName,
        directory_id: ColumnDirectoryId,
        cells: Sequence[ColumnCellId] = (),
    ) -> Column:
        ...

    def create_cell(self, value: CellValue) -> ColumnCell:
        ...

    def create_directory(
        self, name: ColumnDirectoryName, parent_id: ColumnDirectoryId | None = None
    ) -> ColumnDirectory:
        ...
