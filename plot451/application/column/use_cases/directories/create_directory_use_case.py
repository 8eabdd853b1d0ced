"""Use case for creating column directories."""

import structlog

from plot451.application.column.protocols.column_factory import ColumnFactoryProtocol
from plot451.application.column.protocols.column_repository import ColumnRepositoryProtocol
from plot451.domain.column.entities.column_directory import ColumnDirectory
from plot451.domain.common.value_objects import ColumnDirectoryId, ColumnDirectoryName
from plot451.exceptions import DirectoryNotFound

logger = structlog.get_logger(__name__)


class CreateDirectoryUseCase:
    """Use case for creating a root or nested directory."""

    def __init__(
        self,
        column_repository: ColumnRepositoryProtocol,
        column_factory: ColumnFactoryProtocol,
    ) -> None:
        """Initialize use case with dependencies."""
        self.column_repository = column_repository
        self.column_factory = column_factory

    def create_directory(self, name: str, parent_id: str | None = None) -> ColumnDirectory:
        """
        Create a directory.

        Args:
            name: Directory name (trimmed)
            parent_id: ID of the parent directory, None for a root directory

        Returns:
            The saved directory

        Raises:
            ValidationError: If the name is empty
            DirectoryNotFound: If the parent directory does not exist
        """
        directory_name = ColumnDirectoryName(name)
        parent_directory_id = ColumnDirectoryId(parent_id) if parent_id is not None else None

        if (
            parent_directory_id is not None
            and self.column_repository.find_directory(parent_directory_id) is None
        ):
            raise DirectoryNotFound(parent_id)

        directory = self.column_factory.create_directory(directory_name, parent_directory_id)
        directory_id = self.column_repository.save_directory(directory)

        logger.info("created_directory", directory_id=directory_id.value, parent_id=parent_id)

        return directory
