"""Use case for deleting columns."""

import structlog

from plot451.application.column.protocols.column_repository import ColumnRepositoryProtocol
from plot451.application.column.services.column_detachment_service import (
    ColumnDetachmentService,
)
from plot451.domain.common.value_objects import ColumnId
from plot451.exceptions import ColumnNotFound

logger = structlog.get_logger(__name__)


class DeleteColumnUseCase:
    """Use case for deleting a column and its cells."""

    def __init__(
        self,
        column_repository: ColumnRepositoryProtocol,
        column_detachment_service: ColumnDetachmentService,
    ) -> None:
        """Initialize use case with dependencies."""
        self.column_repository = column_repository
        self.column_detachment_service = column_detachment_service

    def delete_column(self, column_id: str) -> None:
        """
        Delete a column.

        The column is first removed from every table referencing it; tables
        left without columns are deleted.

        Raises:
            ColumnNotFound: If the column does not exist
        """
        column = self.column_repository.find(ColumnId(column_id))
        if column is None:
            raise ColumnNotFound(column_id)

        deleted_tables = self.column_detachment_service.detach_columns([column.id])
        self.column_repository.delete(column)

        logger.info(
            "deleted_column",
            column_id=column_id,
            deleted_table_ids=[table_id.value for table_id in deleted_tables],
        )
