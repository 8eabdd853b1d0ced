"""Tests for the Column and ColumnDirectory entities."""

import pytest

from plot451.domain.column.entities import Column, ColumnDirectory
from plot451.domain.column.exceptions import InvalidOrderError
from plot451.domain.common.value_objects import (
    ColumnCellId,
    ColumnDirectoryId,
    ColumnDirectoryName,
    ColumnId,
    ColumnName,
)

A, B, C = ColumnCellId("a"), ColumnCellId("b"), ColumnCellId("c")


def make_column(*cells: ColumnCellId) -> Column:
    return Column.create_with_id(
        ColumnId("1"), ColumnName("col"), ColumnDirectoryId("10"), list(cells)
    )


class TestColumnCells:
    def test_insert_appends(self) -> None:
        column = make_column(A, B)
        column.insert_cell(C)
        assert column.cells == [A, B, C]

    def test_remove_cell_removes_every_occurrence(self) -> None:
        column = make_column(A, B, A)
        column.remove_cell(A)
        assert column.cells == [B]

    def test_remove_absent_cell_is_noop(self) -> None:
        column = make_column(A)
        column.remove_cell(C)
        assert column.cells == [A]

    def test_contains_cell(self) -> None:
        column = make_column(A)
        assert column.contains_cell(A)
        assert not column.contains_cell(B)

    def test_create_copies_input(self) -> None:
        cells = [A, B]
        column = Column.create(ColumnName("col"), ColumnDirectoryId("10"), cells)
        cells.append(C)
        assert column.cells == [A, B]
        assert column.id is None


class TestColumnChangeOrder:
    def test_permutation_is_accepted(self) -> None:
        column = make_column(A, B, C)
        column.change_order([C, A, B])
        assert column.cells == [C, A, B]

    def test_same_order_is_accepted(self) -> None:
        column = make_column(A, B)
        column.change_order([A, B])
        assert column.cells == [A, B]

    def test_empty_column_accepts_empty_order(self) -> None:
        column = make_column()
        column.change_order([])
        assert column.cells == []

    @pytest.mark.parametrize(
        "new_order",
        [
            [A, B],
            [A, B, C, C],
            [A, B, ColumnCellId("z")],
            [A, A, B],
            [],
        ],
    )
    def test_invalid_order_raises_and_keeps_cells(self, new_order: list[ColumnCellId]) -> None:
        column = make_column(A, B, C)
        with pytest.raises(InvalidOrderError) as exc_info:
            column.change_order(new_order)
        assert exc_info.value.column_id == ColumnId("1")
        assert column.cells == [A, B, C]


class TestColumnAttributes:
    def test_move_to(self) -> None:
        column = make_column()
        column.move_to(ColumnDirectoryId("20"))
        assert column.directory_id == ColumnDirectoryId("20")

    def test_change_name(self) -> None:
        column = make_column()
        column.change_name(ColumnName("renamed"))
        assert column.name == ColumnName("renamed")


class TestColumnDirectory:
    def test_root(self) -> None:
        directory = ColumnDirectory.create(ColumnDirectoryName("root"))
        assert directory.is_root()
        assert not directory.is_child_of(ColumnDirectoryId("1"))

    def test_child(self) -> None:
        directory = ColumnDirectory.create(ColumnDirectoryName("sub"), ColumnDirectoryId("1"))
        assert not directory.is_root()
        assert directory.is_child_of(ColumnDirectoryId("1"))

    def test_move_to_root(self) -> None:
        directory = ColumnDirectory.create_with_id(
            ColumnDirectoryId("2"), ColumnDirectoryName("sub"), ColumnDirectoryId("1")
        )
        directory.move_to(None)
        assert directory.is_root()

    def test_change_name(self) -> None:
        directory = ColumnDirectory.create(ColumnDirectoryName("old"))
        directory.change_name(ColumnDirectoryName("new"))
        assert directory.name.value == "new"
