"""Behaviour shared by the SQL and in-memory column repositories."""

import pytest

from plot451.domain.column.entities import Column, ColumnCell, ColumnDirectory
from plot451.domain.column.exceptions import (
    ColumnNotFoundError,
    NotAllCellsFoundError,
    NotAllColumnsFoundError,
)
from plot451.domain.common.value_objects import (
    CellValue,
    ColumnCellId,
    ColumnDirectoryId,
    ColumnDirectoryName,
    ColumnId,
    ColumnName,
)
from plot451.infrastructure.column.repositories import ColumnRepository, InMemoryColumnRepository

Repository = ColumnRepository | InMemoryColumnRepository


def save_directory(
    repo: Repository, name: str, parent_id: ColumnDirectoryId | None = None
) -> ColumnDirectory:
    directory = ColumnDirectory.create(ColumnDirectoryName(name), parent_id)
    repo.save_directory(directory)
    return directory


def save_column(
    repo: Repository, name: str, directory_id: ColumnDirectoryId, values: list[float | None]
) -> Column:
    cells = [ColumnCell.create(CellValue(v)) for v in values]
    for cell in cells:
        repo.save_cell(cell)
    column = Column.create(ColumnName(name), directory_id, [cell.id for cell in cells])
    repo.save(column)
    return column


class TestSave:
    def test_save_assigns_id(self, column_repository: Repository) -> None:
        directory = save_directory(column_repository, "root")
        column = Column.create(ColumnName("c"), directory.id)

        column_id = column_repository.save(column)

        assert column.id == column_id
        assert column_repository.find(column_id) == column

    def test_saved_ids_differ(self, column_repository: Repository) -> None:
        directory = save_directory(column_repository, "root")
        first = save_column(column_repository, "a", directory.id, [])
        second = save_column(column_repository, "b", directory.id, [])
        assert first.id != second.id

    def test_save_again_updates(self, column_repository: Repository) -> None:
        directory = save_directory(column_repository, "root")
        column = save_column(column_repository, "a", directory.id, [1.0, 2.0])

        loaded = column_repository.find(column.id)
        loaded.change_name(ColumnName("renamed"))
        loaded.change_order(list(reversed(loaded.cells)))
        column_repository.save(loaded)

        stored = column_repository.find(column.id)
        assert stored.name == ColumnName("renamed")
        assert stored.cells == list(reversed(column.cells))

    def test_loaded_entity_is_detached_until_saved(self, column_repository: Repository) -> None:
        directory = save_directory(column_repository, "root")
        column = save_column(column_repository, "a", directory.id, [])

        loaded = column_repository.find(column.id)
        loaded.change_name(ColumnName("unsaved"))

        assert column_repository.find(column.id).name == ColumnName("a")

    def test_find_unknown_returns_none(self, column_repository: Repository) -> None:
        assert column_repository.find(ColumnId("999")) is None
        assert column_repository.find(ColumnId("not-a-key")) is None


class TestBatchLookups:
    def test_find_by_ids_keeps_request_order(self, column_repository: Repository) -> None:
        directory = save_directory(column_repository, "root")
        a = save_column(column_repository, "a", directory.id, [])
        b = save_column(column_repository, "b", directory.id, [])

        found = column_repository.find_by_ids([b.id, a.id, b.id])

        assert [c.id for c in found] == [b.id, a.id, b.id]

    def test_find_by_ids_reports_every_requested_id(self, column_repository: Repository) -> None:
        directory = save_directory(column_repository, "root")
        a = save_column(column_repository, "a", directory.id, [])
        missing = ColumnId("999")

        with pytest.raises(NotAllColumnsFoundError) as exc_info:
            column_repository.find_by_ids([a.id, missing])

        assert exc_info.value.requested_ids == [a.id, missing]

    def test_find_cells_by_ids_missing(self, column_repository: Repository) -> None:
        with pytest.raises(NotAllCellsFoundError):
            column_repository.find_cells_by_ids([ColumnCellId("404")])

    def test_find_cells_by_column_id_in_column_order(self, column_repository: Repository) -> None:
        directory = save_directory(column_repository, "root")
        column = save_column(column_repository, "a", directory.id, [3.0, None, 1.0])

        cells = column_repository.find_cells_by_column_id(column.id)

        assert [cell.value.value for cell in cells] == [3.0, None, 1.0]
        assert [cell.id for cell in cells] == column.cells

    def test_find_cells_by_unknown_column(self, column_repository: Repository) -> None:
        with pytest.raises(ColumnNotFoundError):
            column_repository.find_cells_by_column_id(ColumnId("404"))

    def test_find_by_directory_id(self, column_repository: Repository) -> None:
        first = save_directory(column_repository, "first")
        second = save_directory(column_repository, "second")
        a = save_column(column_repository, "a", first.id, [])
        save_column(column_repository, "b", second.id, [])

        assert [c.id for c in column_repository.find_by_directory_id(first.id)] == [a.id]
        assert len(column_repository.find_all()) == 2


class TestCells:
    def test_edit_cell(self, column_repository: Repository) -> None:
        cell = ColumnCell.create(CellValue(1.0))
        column_repository.save_cell(cell)

        cell.edit_value(CellValue(None))
        column_repository.save_cell(cell)

        assert column_repository.find_cell(cell.id).value.is_blank

    def test_delete_cell(self, column_repository: Repository) -> None:
        cell = ColumnCell.create(CellValue(1.0))
        column_repository.save_cell(cell)

        column_repository.delete_cell(cell)

        assert column_repository.find_cell(cell.id) is None


class TestDelete:
    def test_delete_column_removes_cells(self, column_repository: Repository) -> None:
        directory = save_directory(column_repository, "root")
        column = save_column(column_repository, "a", directory.id, [1.0, 2.0])

        column_repository.delete(column)

        assert column_repository.find(column.id) is None
        for cell_id in column.cells:
            assert column_repository.find_cell(cell_id) is None

    def test_delete_directory_cascades_to_subtree_only(
        self, column_repository: Repository
    ) -> None:
        root = save_directory(column_repository, "root")
        doomed = save_directory(column_repository, "doomed", root.id)
        nested = save_directory(column_repository, "nested", doomed.id)
        sibling = save_directory(column_repository, "sibling", root.id)
        doomed_column = save_column(column_repository, "a", doomed.id, [1.0])
        nested_column = save_column(column_repository, "b", nested.id, [2.0])
        sibling_column = save_column(column_repository, "c", sibling.id, [3.0])

        column_repository.delete_directory(doomed)

        assert column_repository.find_directory(doomed.id) is None
        assert column_repository.find_directory(nested.id) is None
        assert column_repository.find(doomed_column.id) is None
        assert column_repository.find(nested_column.id) is None
        assert column_repository.find_cell(nested_column.cells[0]) is None
        assert column_repository.find_directory(sibling.id) == sibling
        assert column_repository.find(sibling_column.id) == sibling_column
        assert column_repository.find_cell(sibling_column.cells[0]) is not None
        assert [d.id for d in column_repository.find_children_directories(root.id)] == [
            sibling.id
        ]


class TestDirectories:
    def test_roots_and_children(self, column_repository: Repository) -> None:
        root = save_directory(column_repository, "root")
        child = save_directory(column_repository, "child", root.id)

        assert [d.id for d in column_repository.find_root_directories()] == [root.id]
        assert [d.id for d in column_repository.find_children_directories(root.id)] == [child.id]
        assert column_repository.find_children_directories(child.id) == []

    def test_reparent(self, column_repository: Repository) -> None:
        root = save_directory(column_repository, "root")
        child = save_directory(column_repository, "child", root.id)

        child.move_to(None)
        column_repository.save_directory(child)

        assert len(column_repository.find_root_directories()) == 2
