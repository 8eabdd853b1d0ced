"""In-process repository for tables."""

import copy
from dataclasses import dataclass, field

from plot451.domain.common.value_objects.ids import ColumnId, TableId
from plot451.domain.table.entities.table import Table
from plot451.infrastructure.common.read_write_lock import ReadWriteLock


@dataclass
class _TableStore:
    current_table_id: int = 0
    tables: dict[TableId, Table] = field(default_factory=dict)


class InMemoryTableRepository:
    """Table repository backed by a dict, with copy-in/copy-out semantics."""

    def __init__(self) -> None:
        self._store = _TableStore()
        self._lock = ReadWriteLock()

    def save(self, table: Table) -> TableId:
        with self._lock.write():
            if table.id is None:
                self._store.current_table_id += 1
                table.set_id(TableId(str(self._store.current_table_id)))
            self._store.tables[table.id] = copy.deepcopy(table)
            return table.id

    def find(self, table_id: TableId) -> Table | None:
        with self._lock.read():
            table = self._store.tables.get(table_id)
            return copy.deepcopy(table) if table else None

    def find_parent_tables_by_column_id(self, column_id: ColumnId) -> list[Table]:
        with self._lock.read():
            return [
                copy.deepcopy(table)
                for table in self._store.tables.values()
                if table.contains_column(column_id)
            ]

    def find_all(self) -> list[Table]:
        with self._lock.read():
            return [copy.deepcopy(table) for table in self._store.tables.values()]

    def delete(self, table: Table) -> None:
        with self._lock.write():
            if table.id is not None:
                self._store.tables.pop(table.id, None)
