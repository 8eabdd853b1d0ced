from collections.abc import Sequence

from plot451.domain.common.value_objects import ColumnId, TableName
from plot451.domain.table.entities.table import Table


class TableFactory:
    """Stateless factory building unsaved tables."""

    def create_table(self, name: TableName, columns: Sequence[ColumnId]) -> Table:
        """
        Raises:
            EmptyColumnListError: If columns is empty
        """
        return Table.create(name=name, columns=columns)
