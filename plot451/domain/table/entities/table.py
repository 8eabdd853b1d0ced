from collections.abc import Sequence
from dataclasses import dataclass, field

from plot451.domain.common.entity import Entity
from plot451.domain.common.value_objects.ids import ColumnId, TableId
from plot451.domain.common.value_objects.names import TableName
from plot451.domain.table.exceptions import EmptyColumnListError, TableColumnNotFoundError


@dataclass(eq=False)
class Table(Entity[TableId]):
    """
    Table entity.

    An ordered list of column references. A table is never constructed
    without columns. Removing columns is tolerated at this level; callers
    that must keep a table non-empty check before removing.
    """

    name: TableName
    columns: list[ColumnId] = field(default_factory=list)
    id: TableId | None = None

    def __post_init__(self) -> None:
        self.columns = list(self.columns)
        if not self.columns:
            raise EmptyColumnListError()

    def _index_of(self, column_id: ColumnId) -> int:
        try:
            return self.columns.index(column_id)
        except ValueError:
            raise TableColumnNotFoundError(column_id) from None

    def contains_column(self, column_id: ColumnId) -> bool:
        return column_id in self.columns

    # Reordering
    def move_column_in_front_of(self, target: ColumnId, destination: ColumnId) -> None:
        """
        Move target so that it sits directly before destination.

        [A, B, C, D, E] with (A, C) becomes [B, A, C, D, E].

        Raises:
            TableColumnNotFoundError: For target first, then destination
        """
        target_index = self._index_of(target)
        destination_index = self._index_of(destination)
        if target_index == destination_index:
            return
        if destination_index < target_index:
            self.columns.pop(target_index)
            self.columns.insert(destination_index, target)
        else:
            self.columns.insert(destination_index, target)
            self.columns.pop(target_index)

    def move_column_behind(self, target: ColumnId, destination: ColumnId) -> None:
        """
        Move target so that it sits directly after destination.

        [A, B, C, D, E] with (A, C) becomes [B, C, A, D, E].

        Raises:
            TableColumnNotFoundError: For target first, then destination
        """
        target_index = self._index_of(target)
        destination_index = self._index_of(destination)
        if target_index == destination_index:
            return
        if destination_index < target_index:
            self.columns.pop(target_index)
            self.columns.insert(destination_index + 1, target)
        else:
            self.columns.insert(destination_index + 1, target)
            self.columns.pop(target_index)

    # Insertion and removal
    def insert_column_in_front_of(self, destination: ColumnId, new_column: ColumnId) -> None:
        """Insert new_column directly before destination. Duplicates are not checked."""
        self.columns.insert(self._index_of(destination), new_column)

    def insert_column_behind(self, destination: ColumnId, new_column: ColumnId) -> None:
        """Insert new_column directly after destination. Duplicates are not checked."""
        self.columns.insert(self._index_of(destination) + 1, new_column)

    def remove_column(self, column_id: ColumnId) -> None:
        """Remove every occurrence of the column. Removing an absent column is a no-op."""
        self.columns = [c for c in self.columns if c != column_id]

    def change_name(self, name: TableName) -> None:
        self.name = name

    # Factory methods
    @classmethod
    def create(cls, name: TableName, columns: Sequence[ColumnId]) -> "Table":
        """
        Factory for creating a new, not yet persisted table.

        Raises:
            EmptyColumnListError: If columns is empty
        """
        return cls(name=name, columns=list(columns))

    @classmethod
    def create_with_id(cls, id: TableId, name: TableName, columns: Sequence[ColumnId]) -> "Table":
        """
        Factory for reconstituting a table from persistence.

        Raises:
            EmptyColumnListError: If the stored table has no columns
        """
        return cls(name=name, columns=list(columns), id=id)
