"""Use case for arranging the columns of a table."""

from typing import Literal

import structlog

from plot451.application.column.protocols.column_repository import ColumnRepositoryProtocol
from plot451.application.table.protocols.table_repository import TableRepositoryProtocol
from plot451.application.table.services.table_view_service import TableViewService
from plot451.domain.common.value_objects import ColumnId, TableId
from plot451.domain.table.collections.table_columns import TableColumns
from plot451.domain.table.collections.table_with_columns_and_cells import (
    TableWithColumnsAndCells,
)
from plot451.domain.table.entities.table import Table
from plot451.domain.table.exceptions import TableColumnNotFoundError, TableWouldBeEmptyError
from plot451.domain.table.specifications.no_duplicated_column_names import (
    NoDuplicatedColumnNamesSpecification,
)
from plot451.exceptions import ColumnNotFound, TableNotFound

logger = structlog.get_logger(__name__)

ColumnPosition = Literal["in_front_of", "behind"]


class TableColumnsUseCase:
    """Use case for moving, inserting and removing table columns."""

    def __init__(
        self,
        column_repository: ColumnRepositoryProtocol,
        table_repository: TableRepositoryProtocol,
        table_view_service: TableViewService,
    ) -> None:
        """Initialize use case with dependencies."""
        self.column_repository = column_repository
        self.table_repository = table_repository
        self.table_view_service = table_view_service
        self.no_duplicated_column_names = NoDuplicatedColumnNamesSpecification()

    def _load_table(self, table_id: str) -> Table:
        table = self.table_repository.find(TableId(table_id))
        if table is None:
            raise TableNotFound(table_id)
        return table

    def move_column(
        self,
        table_id: str,
        column_id: str,
        destination_id: str,
        position: ColumnPosition = "in_front_of",
    ) -> TableWithColumnsAndCells:
        """
        Move a column of the table next to another one.

        Args:
            table_id: ID of the table
            column_id: Column to move
            destination_id: Column the moved column is placed next to
            position: "in_front_of" or "behind" the destination

        Raises:
            TableNotFound: If the table does not exist
            TableColumnNotFoundError: If either column is not part of the table
        """
        table = self._load_table(table_id)
        target = ColumnId(column_id)
        destination = ColumnId(destination_id)

        if position == "behind":
            table.move_column_behind(target, destination)
        else:
            table.move_column_in_front_of(target, destination)
        self.table_repository.save(table)

        logger.info(
            "moved_table_column",
            table_id=table_id,
            column_id=column_id,
            destination_id=destination_id,
            position=position,
        )

        return self.table_view_service.build_view(table)

    def insert_column(
        self,
        table_id: str,
        column_id: str,
        destination_id: str,
        position: ColumnPosition = "behind",
    ) -> TableWithColumnsAndCells:
        """
        Add an existing column to the table next to one of its columns.

        Raises:
            TableNotFound: If the table does not exist
            ColumnNotFound: If the column to insert does not exist
            TableColumnNotFoundError: If the destination is not part of the table
            DuplicatedColumnNamesError: If the table already has a column with that name
        """
        table = self._load_table(table_id)
        new_column_id = ColumnId(column_id)
        destination = ColumnId(destination_id)
        if self.column_repository.find(new_column_id) is None:
            raise ColumnNotFound(column_id)

        if position == "in_front_of":
            table.insert_column_in_front_of(destination, new_column_id)
        else:
            table.insert_column_behind(destination, new_column_id)

        columns = self.column_repository.find_by_ids(table.columns)
        self.no_duplicated_column_names.is_satisfied_by(TableColumns(table, columns))
        self.table_repository.save(table)

        logger.info(
            "inserted_table_column",
            table_id=table_id,
            column_id=column_id,
            destination_id=destination_id,
            position=position,
        )

        return self.table_view_service.build_view(table)

    def remove_column(self, table_id: str, column_id: str) -> TableWithColumnsAndCells:
        """
        Remove a column from the table. The column itself is kept.

        Raises:
            TableNotFound: If the table does not exist
            TableColumnNotFoundError: If the column is not part of the table
            TableWouldBeEmptyError: If it is the table's last column
        """
        table = self._load_table(table_id)
        target = ColumnId(column_id)
        if not table.contains_column(target):
            raise TableColumnNotFoundError(target)
        if all(existing == target for existing in table.columns):
            raise TableWouldBeEmptyError(table.id, target)

        table.remove_column(target)
        self.table_repository.save(table)

        logger.info("removed_table_column", table_id=table_id, column_id=column_id)

        return self.table_view_service.build_view(table)
