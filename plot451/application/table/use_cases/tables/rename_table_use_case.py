"""Use case for renaming tables."""

import structlog

from plot451.application.table.protocols.table_repository import TableRepositoryProtocol
from plot451.application.table.services.table_view_service import TableViewService
from plot451.domain.common.value_objects import TableId, TableName
from plot451.domain.table.collections.table_with_columns_and_cells import (
    TableWithColumnsAndCells,
)
from plot451.exceptions import TableNotFound

logger = structlog.get_logger(__name__)


class RenameTableUseCase:
    """Use case for renaming a table."""

    def __init__(
        self,
        table_repository: TableRepositoryProtocol,
        table_view_service: TableViewService,
    ) -> None:
        """Initialize use case with dependencies."""
        self.table_repository = table_repository
        self.table_view_service = table_view_service

    def rename_table(self, table_id: str, name: str) -> TableWithColumnsAndCells:
        """
        Raises:
            TableNotFound: If the table does not exist
            ValidationError: If the name is empty or longer than 100 characters
        """
        table_name = TableName(name)
        table = self.table_repository.find(TableId(table_id))
        if table is None:
            raise TableNotFound(table_id)

        table.change_name(table_name)
        self.table_repository.save(table)

        logger.info("renamed_table", table_id=table_id)

        return self.table_view_service.build_view(table)
