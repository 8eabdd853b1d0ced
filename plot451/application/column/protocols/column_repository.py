"""Protocol for the column repository."""

from collections.abc import Sequence
from typing import Protocol

from plot451.domain.column.entities.column import Column
from plot451.domain.column.entities.column_cell import ColumnCell
from plot451.domain.column.entities.column_directory import ColumnDirectory
from plot451.domain.common.value_objects.ids import ColumnCellId, ColumnDirectoryId, ColumnId


class ColumnRepositoryProtocol(Protocol):
    """
    Protocol for column, cell and directory persistence.

    Saving an entity without an id assigns a fresh id through set_id and
    returns it; saving an entity that already has an id overwrites the
    stored state. Storage failures surface as RepositoryError.
    """

    # Columns
    def save(self, column: Column) -> ColumnId:
        """Insert or update a column together with its cell order."""
        ...

    def find(self, column_id: ColumnId) -> Column | None:
        ...

    def find_by_ids(self, column_ids: Sequence[ColumnId]) -> list[Column]:
        """
        Load columns in request order.

        Raises:
            NotAllColumnsFoundError: If any id is unknown, carrying every requested id
        """
        ...

    def find_by_directory_id(self, directory_id: ColumnDirectoryId) -> list[Column]:
        ...

    def find_all(self) -> list[Column]:
        ...

    def delete(self, column: Column) -> None:
        """Delete a column and every cell it references."""
        ...

    # Cells
    def save_cell(self, cell: ColumnCell) -> ColumnCellId:
        ...

    def find_cell(self, cell_id: ColumnCellId) -> ColumnCell | None:
        ...

    def find_cells_by_column_id(self, column_id: ColumnId) -> list[ColumnCell]:
        """
        Load the cells of a column in column order.

        Raises:
            ColumnNotFoundError: If the column does not exist
        """
        ...

    def find_cells_by_ids(self, cell_ids: Sequence[ColumnCellId]) -> list[ColumnCell]:
        """
        Raises:
            NotAllCellsFoundError: If any id is unknown, carrying every requested id
        """
        ...

    def delete_cell(self, cell: ColumnCell) -> None:
        ...

    # Directories
    def save_directory(self, directory: ColumnDirectory) -> ColumnDirectoryId:
        ...

    def find_directory(self, directory_id: ColumnDirectoryId) -> ColumnDirectory | None:
        ...

    def find_root_directories(self) -> list[ColumnDirectory]:
        ...

    def find_children_directories(self, parent_id: ColumnDirectoryId) -> list[ColumnDirectory]:
        ...

    def delete_directory(self, directory: ColumnDirectory) -> None:
        """
        Delete a directory with everything it contains.

        Columns directly in the directory go first (cells, then the column),
        then each child directory recursively, then the directory itself.
        """
        ...
