"""In-process repository for columns, cells and directories."""

import copy
import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from plot451.domain.column.entities.column import Column
from plot451.domain.column.entities.column_cell import ColumnCell
from plot451.domain.column.entities.column_directory import ColumnDirectory
from plot451.domain.column.exceptions import (
    ColumnNotFoundError,
    NotAllCellsFoundError,
    NotAllColumnsFoundError,
)
from plot451.domain.common.value_objects.ids import ColumnCellId, ColumnDirectoryId, ColumnId
from plot451.infrastructure.common.read_write_lock import ReadWriteLock

logger = logging.getLogger(__name__)


@dataclass
class _ColumnStore:
    current_cell_id: int = 0
    cells: dict[ColumnCellId, ColumnCell] = field(default_factory=dict)
    current_column_id: int = 0
    columns: dict[ColumnId, Column] = field(default_factory=dict)
    current_directory_id: int = 0
    directories: dict[ColumnDirectoryId, ColumnDirectory] = field(default_factory=dict)


class InMemoryColumnRepository:
    """
    Column repository backed by dicts.

    Entities are copied on the way in and out, so a loaded entity only
    changes the store when it is saved again. Every write, including id
    assignment and the directory cascade, holds the write lock throughout.
    """

    def __init__(self) -> None:
        self._store = _ColumnStore()
        self._lock = ReadWriteLock()

    # Column methods

    def save(self, column: Column) -> ColumnId:
        with self._lock.write():
            if column.id is None:
                self._store.current_column_id += 1
                column.set_id(ColumnId(str(self._store.current_column_id)))
            self._store.columns[column.id] = copy.deepcopy(column)
            return column.id

    def find(self, column_id: ColumnId) -> Column | None:
        with self._lock.read():
            column = self._store.columns.get(column_id)
            return copy.deepcopy(column) if column else None

    def find_by_ids(self, column_ids: Sequence[ColumnId]) -> list[Column]:
        """
        Raises:
            NotAllColumnsFoundError: If any ID has no column
        """
        with self._lock.read():
            if any(column_id not in self._store.columns for column_id in column_ids):
                raise NotAllColumnsFoundError(column_ids)
            return [copy.deepcopy(self._store.columns[column_id]) for column_id in column_ids]

    def find_by_directory_id(self, directory_id: ColumnDirectoryId) -> list[Column]:
        with self._lock.read():
            return [
                copy.deepcopy(column)
                for column in self._store.columns.values()
                if column.directory_id == directory_id
            ]

    def find_all(self) -> list[Column]:
        with self._lock.read():
            return [copy.deepcopy(column) for column in self._store.columns.values()]

    def delete(self, column: Column) -> None:
        """Delete a column and every cell it references."""
        with self._lock.write():
            self._delete_column(column)

    # Cell methods

    def save_cell(self, cell: ColumnCell) -> ColumnCellId:
        with self._lock.write():
            if cell.id is None:
                self._store.current_cell_id += 1
                cell.set_id(ColumnCellId(str(self._store.current_cell_id)))
            self._store.cells[cell.id] = copy.deepcopy(cell)
            return cell.id

    def find_cell(self, cell_id: ColumnCellId) -> ColumnCell | None:
        with self._lock.read():
            cell = self._store.cells.get(cell_id)
            return copy.deepcopy(cell) if cell else None

    def find_cells_by_column_id(self, column_id: ColumnId) -> list[ColumnCell]:
        """
        Raises:
            ColumnNotFoundError: If the column does not exist
            NotAllCellsFoundError: If the column references a missing cell
        """
        with self._lock.read():
            column = self._store.columns.get(column_id)
            if column is None:
                raise ColumnNotFoundError(column_id)
            return self._cells_by_ids(column.cells)

    def find_cells_by_ids(self, cell_ids: Sequence[ColumnCellId]) -> list[ColumnCell]:
        """
        Raises:
            NotAllCellsFoundError: If any ID has no cell
        """
        with self._lock.read():
            return self._cells_by_ids(cell_ids)

    def delete_cell(self, cell: ColumnCell) -> None:
        with self._lock.write():
            if cell.id is not None:
                self._store.cells.pop(cell.id, None)

    # Directory methods

    def save_directory(self, directory: ColumnDirectory) -> ColumnDirectoryId:
        with self._lock.write():
            if directory.id is None:
                self._store.current_directory_id += 1
                directory.set_id(ColumnDirectoryId(str(self._store.current_directory_id)))
            self._store.directories[directory.id] = copy.deepcopy(directory)
            return directory.id

    def find_directory(self, directory_id: ColumnDirectoryId) -> ColumnDirectory | None:
        with self._lock.read():
            directory = self._store.directories.get(directory_id)
            return copy.deepcopy(directory) if directory else None

    def find_root_directories(self) -> list[ColumnDirectory]:
        with self._lock.read():
            return [
                copy.deepcopy(directory)
                for directory in self._store.directories.values()
                if directory.is_root()
            ]

    def find_children_directories(self, parent_id: ColumnDirectoryId) -> list[ColumnDirectory]:
        with self._lock.read():
            return [
                copy.deepcopy(directory)
                for directory in self._store.directories.values()
                if directory.parent_id == parent_id
            ]

    def delete_directory(self, directory: ColumnDirectory) -> None:
        """Delete a directory, its columns and cells, and its sub-directories recursively."""
        if directory.id is None:
            return
        with self._lock.write():
            self._delete_directory_tree(directory.id)
        logger.info(f"Deleted directory {directory.id} with its contents")

    # Helpers (caller holds the lock)

    def _cells_by_ids(self, cell_ids: Sequence[ColumnCellId]) -> list[ColumnCell]:
        if any(cell_id not in self._store.cells for cell_id in cell_ids):
            raise NotAllCellsFoundError(cell_ids)
        return [copy.deepcopy(self._store.cells[cell_id]) for cell_id in cell_ids]

    def _delete_column(self, column: Column) -> None:
        for cell_id in column.cells:
            self._store.cells.pop(cell_id, None)
        if column.id is not None:
            self._store.columns.pop(column.id, None)

    def _delete_directory_tree(self, directory_id: ColumnDirectoryId) -> None:
        columns = [c for c in self._store.columns.values() if c.directory_id == directory_id]
        for column in columns:
            self._delete_column(column)

        children = [
            child_id
            for child_id, child in self._store.directories.items()
            if child.parent_id == directory_id
        ]
        for child_id in children:
            self._delete_directory_tree(child_id)

        self._store.directories.pop(directory_id, None)
