"""Protocol for building tables."""

from collections.abc import Sequence
from typing import Protocol

from plot451.domain.common.value_objects import ColumnId, TableName
from plot451.domain.table.entities.table import Table


class TableFactoryProtocol(Protocol):
    def create_table(self, name: TableName, columns: Sequence[ColumnId]) -> Table:
        """
        Raises:
            EmptyColumnListError: If columns is empty
        """
        ...
