"""Use case for deleting a directory subtree."""

import structlog

from plot451.application.column.protocols.column_repository import ColumnRepositoryProtocol
from plot451.application.column.services.column_detachment_service import (
    ColumnDetachmentService,
)
from plot451.application.column.services.directory_tree_service import DirectoryTreeService
from plot451.domain.common.value_objects import ColumnDirectoryId
from plot451.exceptions import DirectoryNotFound

logger = structlog.get_logger(__name__)


class DeleteDirectoryUseCase:
    """Use case for deleting a directory with all of its columns and sub-directories."""

    def __init__(
        self,
        column_repository: ColumnRepositoryProtocol,
        directory_tree_service: DirectoryTreeService,
        column_detachment_service: ColumnDetachmentService,
    ) -> None:
        """Initialize use case with dependencies."""
        self.column_repository = column_repository
        self.directory_tree_service = directory_tree_service
        self.column_detachment_service = column_detachment_service

    def delete_directory(self, directory_id: str) -> None:
        """
        Delete a directory and everything below it.

        Columns in the subtree are detached from their tables before the
        cascade runs, so no table keeps a reference to a deleted column.

        Raises:
            DirectoryNotFound: If the directory does not exist
        """
        directory = self.column_repository.find_directory(ColumnDirectoryId(directory_id))
        if directory is None:
            raise DirectoryNotFound(directory_id)

        column_ids = self.directory_tree_service.collect_column_ids(directory)
        deleted_tables = self.column_detachment_service.detach_columns(column_ids)
        self.column_repository.delete_directory(directory)

        logger.info(
            "deleted_directory",
            directory_id=directory_id,
            column_count=len(column_ids),
            deleted_table_ids=[table_id.value for table_id in deleted_tables],
        )
