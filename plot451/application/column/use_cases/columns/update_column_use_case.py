"""Use case for renaming and moving columns."""

import structlog

from plot451.application.column.protocols.column_repository import ColumnRepositoryProtocol
from plot451.domain.column.collections.column_with_cells import ColumnWithCells
from plot451.domain.common.value_objects import ColumnDirectoryId, ColumnId, ColumnName
from plot451.exceptions import ColumnNotFound, DirectoryNotFound

logger = structlog.get_logger(__name__)


class UpdateColumnUseCase:
    """Use case for changing a column's name or directory."""

    def __init__(self, column_repository: ColumnRepositoryProtocol) -> None:
        """Initialize use case with dependencies."""
        self.column_repository = column_repository

    def update_column(
        self,
        column_id: str,
        name: str | None = None,
        directory_id: str | None = None,
    ) -> ColumnWithCells:
        """
        Rename and/or move a column.

        Args:
            column_id: ID of the column to update
            name: New name (optional)
            directory_id: ID of the new owning directory (optional)

        Returns:
            The updated column with its cells

        Raises:
            ColumnNotFound: If the column does not exist
            DirectoryNotFound: If the target directory does not exist
            ValidationError: If the new name is empty
        """
        column = self.column_repository.find(ColumnId(column_id))
        if column is None:
            raise ColumnNotFound(column_id)

        if name is not None:
            column.change_name(ColumnName(name))

        if directory_id is not None:
            target_directory_id = ColumnDirectoryId(directory_id)
            if self.column_repository.find_directory(target_directory_id) is None:
                raise DirectoryNotFound(directory_id)
            column.move_to(target_directory_id)

        self.column_repository.save(column)

        logger.info("updated_column", column_id=column_id, directory_id=column.directory_id.value)

        return ColumnWithCells(column, self.column_repository.find_cells_by_column_id(column.id))
