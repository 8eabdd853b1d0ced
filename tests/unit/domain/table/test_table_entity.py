"""Tests for the Table entity."""

import pytest

from plot451.domain.common.value_objects import ColumnId, TableId, TableName
from plot451.domain.table.entities import Table
from plot451.domain.table.exceptions import EmptyColumnListError, TableColumnNotFoundError

A, B, C, D, E = (ColumnId(x) for x in "ABCDE")
X = ColumnId("X")


def make_table(*columns: ColumnId) -> Table:
    return Table.create_with_id(TableId("1"), TableName("t"), list(columns))


class TestTableCreation:
    def test_empty_column_list_raises(self) -> None:
        with pytest.raises(EmptyColumnListError):
            Table.create(TableName("t"), [])

    def test_reconstituting_empty_table_raises(self) -> None:
        with pytest.raises(EmptyColumnListError):
            Table.create_with_id(TableId("1"), TableName("t"), [])

    def test_create(self) -> None:
        table = Table.create(TableName("t"), [A, B])
        assert table.columns == [A, B]
        assert table.id is None


class TestMoveColumnInFrontOf:
    @pytest.mark.parametrize(
        ("target", "destination", "expected"),
        [
            (A, C, [B, A, C, D, E]),
            (E, B, [A, E, B, C, D]),
            (A, B, [A, B, C, D, E]),
            (B, A, [B, A, C, D, E]),
            (A, E, [B, C, D, A, E]),
            (C, C, [A, B, C, D, E]),
        ],
    )
    def test_moves(self, target: ColumnId, destination: ColumnId, expected: list[ColumnId]) -> None:
        table = make_table(A, B, C, D, E)
        table.move_column_in_front_of(target, destination)
        assert table.columns == expected

    def test_missing_target_raises(self) -> None:
        table = make_table(A, B)
        with pytest.raises(TableColumnNotFoundError) as exc_info:
            table.move_column_in_front_of(X, A)
        assert exc_info.value.column_id == X

    def test_missing_destination_raises(self) -> None:
        table = make_table(A, B)
        with pytest.raises(TableColumnNotFoundError) as exc_info:
            table.move_column_in_front_of(A, X)
        assert exc_info.value.column_id == X
        assert table.columns == [A, B]


class TestMoveColumnBehind:
    @pytest.mark.parametrize(
        ("target", "destination", "expected"),
        [
            (A, C, [B, C, A, D, E]),
            (E, B, [A, B, E, C, D]),
            (A, E, [B, C, D, E, A]),
            (B, A, [A, B, C, D, E]),
            (A, A, [A, B, C, D, E]),
        ],
    )
    def test_moves(self, target: ColumnId, destination: ColumnId, expected: list[ColumnId]) -> None:
        table = make_table(A, B, C, D, E)
        table.move_column_behind(target, destination)
        assert table.columns == expected

    def test_missing_column_raises(self) -> None:
        table = make_table(A, B)
        with pytest.raises(TableColumnNotFoundError):
            table.move_column_behind(A, X)


class TestInsertAndRemove:
    def test_insert_in_front_of(self) -> None:
        table = make_table(A, B, C)
        table.insert_column_in_front_of(B, X)
        assert table.columns == [A, X, B, C]

    def test_insert_behind(self) -> None:
        table = make_table(A, B, C)
        table.insert_column_behind(C, X)
        assert table.columns == [A, B, C, X]

    def test_insert_relative_to_missing_column_raises(self) -> None:
        table = make_table(A)
        with pytest.raises(TableColumnNotFoundError):
            table.insert_column_behind(X, B)

    def test_remove_column(self) -> None:
        table = make_table(A, B, A)
        table.remove_column(A)
        assert table.columns == [B]

    def test_remove_absent_column_is_noop(self) -> None:
        table = make_table(A)
        table.remove_column(X)
        assert table.columns == [A]

    def test_contains_column(self) -> None:
        table = make_table(A)
        assert table.contains_column(A)
        assert not table.contains_column(B)

    def test_change_name(self) -> None:
        table = make_table(A)
        table.change_name(TableName("renamed"))
        assert table.name == TableName("renamed")
