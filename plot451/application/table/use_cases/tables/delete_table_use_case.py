"""Use case for deleting tables."""

import structlog

from plot451.application.table.protocols.table_repository import TableRepositoryProtocol
from plot451.domain.common.value_objects import TableId
from plot451.exceptions import TableNotFound

logger = structlog.get_logger(__name__)


class DeleteTableUseCase:
    """Use case for deleting a table. The referenced columns are kept."""

    def __init__(self, table_repository: TableRepositoryProtocol) -> None:
        """Initialize use case with dependencies."""
        self.table_repository = table_repository

    def delete_table(self, table_id: str) -> None:
        """
        Raises:
            TableNotFound: If the table does not exist
        """
        table = self.table_repository.find(TableId(table_id))
        if table is None:
            raise TableNotFound(table_id)

        self.table_repository.delete(table)

        logger.info("deleted_table", table_id=table_id)
