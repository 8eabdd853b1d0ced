"""Keeps tables consistent when columns are deleted."""

from collections.abc import Iterable

import structlog

from plot451.application.table.protocols.table_repository import TableRepositoryProtocol
from plot451.domain.common.value_objects.ids import ColumnId, TableId

logger = structlog.get_logger(__name__)


class ColumnDetachmentService:
    """
    Removes columns from the tables that reference them.

    A table that ends up without columns is deleted, since a table can
    never be stored empty.
    """

    def __init__(self, table_repository: TableRepositoryProtocol) -> None:
        self.table_repository = table_repository

    def detach_columns(self, column_ids: Iterable[ColumnId]) -> list[TableId]:
        """
        Detach the given columns from every table.

        Returns:
            IDs of the tables deleted because they became empty
        """
        deleted_tables: list[TableId] = []
        for column_id in column_ids:
            for table in self.table_repository.find_parent_tables_by_column_id(column_id):
                table.remove_column(column_id)
                if table.columns:
                    self.table_repository.save(table)
                    logger.info(
                        "column_detached_from_table",
                        column_id=column_id.value,
                        table_id=table.id.value if table.id else None,
                    )
                else:
                    self.table_repository.delete(table)
                    if table.id is not None:
                        deleted_tables.append(table.id)
                    logger.info(
                        "empty_table_deleted",
                        column_id=column_id.value,
                        table_id=table.id.value if table.id else None,
                    )
        return deleted_tables
