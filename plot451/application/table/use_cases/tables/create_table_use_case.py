"""Use case for creating tables."""

from collections.abc import Sequence

import structlog

from plot451.application.column.protocols.column_repository import ColumnRepositoryProtocol
from plot451.application.table.protocols.table_factory import TableFactoryProtocol
from plot451.application.table.protocols.table_repository import TableRepositoryProtocol
from plot451.application.table.services.table_view_service import TableViewService
from plot451.domain.common.value_objects import ColumnId, TableName
from plot451.domain.table.collections.table_columns import TableColumns
from plot451.domain.table.collections.table_with_columns_and_cells import (
    TableWithColumnsAndCells,
)
from plot451.domain.table.specifications.no_duplicated_column_names import (
    NoDuplicatedColumnNamesSpecification,
)

logger = structlog.get_logger(__name__)


class CreateTableUseCase:
    """Use case for creating a table from existing columns."""

    def __init__(
        self,
        column_repository: ColumnRepositoryProtocol,
        table_repository: TableRepositoryProtocol,
        table_factory: TableFactoryProtocol,
        table_view_service: TableViewService,
    ) -> None:
        """Initialize use case with dependencies."""
        self.column_repository = column_repository
        self.table_repository = table_repository
        self.table_factory = table_factory
        self.table_view_service = table_view_service
        self.no_duplicated_column_names = NoDuplicatedColumnNamesSpecification()

    def create_table(self, name: str, column_ids: Sequence[str]) -> TableWithColumnsAndCells:
        """
        Create a table referencing existing columns.

        Args:
            name: Table name (trimmed, at most 100 characters)
            column_ids: IDs of the columns, in table order

        Returns:
            The saved table with its columns and cells

        Raises:
            ValidationError: If the name is invalid
            NotAllColumnsFoundError: If any column does not exist
            EmptyColumnListError: If no column is given
            DuplicatedColumnNamesError: If two columns share a name
        """
        table_name = TableName(name)
        ids = [ColumnId(column_id) for column_id in column_ids]

        columns = self.column_repository.find_by_ids(ids)
        table = self.table_factory.create_table(table_name, ids)
        self.no_duplicated_column_names.is_satisfied_by(TableColumns(table, columns))

        table_id = self.table_repository.save(table)

        logger.info("created_table", table_id=table_id.value, column_count=len(ids))

        return self.table_view_service.build_view(table)
