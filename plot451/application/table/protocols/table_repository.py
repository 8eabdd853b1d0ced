"""Protocol for the table repository."""

from typing import Protocol

from plot451.domain.common.value_objects.ids import ColumnId, TableId
from plot451.domain.table.entities.table import Table


class TableRepositoryProtocol(Protocol):
    """Protocol for table persistence, with the same save semantics as columns."""

    def save(self, table: Table) -> TableId:
        ...

    def find(self, table_id: TableId) -> Table | None:
        ...

    def find_parent_tables_by_column_id(self, column_id: ColumnId) -> list[Table]:
        """Find every table whose column list references the column."""
        ...

    def find_all(self) -> list[Table]:
        ...

    def delete(self, table: Table) -> None:
        ...
