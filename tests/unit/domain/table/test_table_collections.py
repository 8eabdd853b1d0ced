"""Tests for table collections and the duplicated column names rule."""

import pytest

from plot451.domain.column.collections import ColumnWithCells
from plot451.domain.column.entities import Column
from plot451.domain.common.exceptions import CollectionAssemblyError
from plot451.domain.common.value_objects import (
    ColumnDirectoryId,
    ColumnId,
    ColumnName,
    TableId,
    TableName,
)
from plot451.domain.table import (
    NoDuplicatedColumnNamesSpecification,
    Table,
    TableColumns,
    TableFactory,
    TableWithColumnsAndCells,
)
from plot451.domain.table.exceptions import DuplicatedColumnNamesError

DIR_ID = ColumnDirectoryId("1")


def column(column_id: str, name: str) -> Column:
    return Column.create_with_id(ColumnId(column_id), ColumnName(name), DIR_ID, [])


class TestTableColumns:
    def test_unsaved_table_is_accepted(self) -> None:
        table = TableFactory().create_table(TableName("t"), [ColumnId("1"), ColumnId("2")])
        view = TableColumns(table, [column("1", "a"), column("2", "b")])
        assert [c.id for c in view.columns] == table.columns

    def test_order_mismatch_raises(self) -> None:
        table = Table.create(TableName("t"), [ColumnId("1"), ColumnId("2")])
        with pytest.raises(CollectionAssemblyError):
            TableColumns(table, [column("2", "b"), column("1", "a")])


class TestTableWithColumnsAndCells:
    def test_persisted_table(self) -> None:
        table = Table.create_with_id(TableId("9"), TableName("t"), [ColumnId("1")])
        view = TableWithColumnsAndCells(table, [ColumnWithCells(column("1", "a"), [])])
        assert view.columns[0].id == ColumnId("1")

    def test_unsaved_table_raises(self) -> None:
        table = Table.create(TableName("t"), [ColumnId("1")])
        with pytest.raises(CollectionAssemblyError):
            TableWithColumnsAndCells(table, [ColumnWithCells(column("1", "a"), [])])

    def test_missing_column_raises(self) -> None:
        table = Table.create_with_id(TableId("9"), TableName("t"), [ColumnId("1"), ColumnId("2")])
        with pytest.raises(CollectionAssemblyError):
            TableWithColumnsAndCells(table, [ColumnWithCells(column("1", "a"), [])])


class TestNoDuplicatedColumnNamesSpecification:
    def test_unique_names_pass(self) -> None:
        table = Table.create(TableName("t"), [ColumnId("1"), ColumnId("2")])
        candidate = TableColumns(table, [column("1", "a"), column("2", "b")])
        NoDuplicatedColumnNamesSpecification().is_satisfied_by(candidate)
        assert NoDuplicatedColumnNamesSpecification().holds_for(candidate)

    def test_duplicate_names_raise(self) -> None:
        table = Table.create(TableName("t"), [ColumnId("1"), ColumnId("2"), ColumnId("3")])
        candidate = TableColumns(
            table, [column("1", "a"), column("2", " b "), column("3", "b")]
        )
        with pytest.raises(DuplicatedColumnNamesError) as exc_info:
            NoDuplicatedColumnNamesSpecification().is_satisfied_by(candidate)
        assert exc_info.value.name == ColumnName("b")
        assert not NoDuplicatedColumnNamesSpecification().holds_for(candidate)

    def test_same_column_twice_is_a_duplicate_name(self) -> None:
        table = Table.create(TableName("t"), [ColumnId("1"), ColumnId("1")])
        candidate = TableColumns(table, [column("1", "a"), column("1", "a")])
        with pytest.raises(DuplicatedColumnNamesError):
            NoDuplicatedColumnNamesSpecification().is_satisfied_by(candidate)
