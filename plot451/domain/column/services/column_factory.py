"""Default construction helpers for the column context."""

from collections.abc import Sequence

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


class ColumnFactory:
    """Stateless factory building unsaved column-context entities."""

    def create_column(
        self,
        name: ColumnName,
        directory_id: ColumnDirectoryId,
        cells: Sequence[ColumnCellId] = (),
    ) -> Column:
        return Column.create(name=name, directory_id=directory_id, cells=cells)

    def create_cell(self, value: CellValue) -> ColumnCell:
        return ColumnCell.create(value=value)

    def create_directory(
        self, name: ColumnDirectoryName, parent_id: ColumnDirectoryId | None = None
    ) -> ColumnDirectory:
        return ColumnDirectory.create(name=name, parent_id=parent_id)
