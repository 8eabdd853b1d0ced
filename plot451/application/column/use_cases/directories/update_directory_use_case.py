"""Use case for renaming and moving directories."""

import structlog

from plot451.application.column.protocols.column_repository import ColumnRepositoryProtocol
from plot451.application.column.services.directory_tree_service import DirectoryTreeService
from plot451.domain.column.entities.column_directory import ColumnDirectory
from plot451.domain.common.value_objects import ColumnDirectoryId, ColumnDirectoryName
from plot451.exceptions import DirectoryNotFound

logger = structlog.get_logger(__name__)


class UpdateDirectoryUseCase:
    """Use case for changing a directory's name or parent."""

    def __init__(
        self,
        column_repository: ColumnRepositoryProtocol,
        directory_tree_service: DirectoryTreeService,
    ) -> None:
        """Initialize use case with dependencies."""
        self.column_repository = column_repository
        self.directory_tree_service = directory_tree_service

    def _load_directory(self, directory_id: str) -> ColumnDirectory:
        directory = self.column_repository.find_directory(ColumnDirectoryId(directory_id))
        if directory is None:
            raise DirectoryNotFound(directory_id)
        return directory

    def update_directory(
        self,
        directory_id: str,
        name: str | None = None,
        parent_id: str | None = None,
        change_parent: bool = False,
    ) -> ColumnDirectory:
        """
        Rename and/or move a directory.

        Args:
            directory_id: ID of the directory to update
            name: New name (optional)
            parent_id: ID of the new parent; None with change_parent moves it to the top level
            change_parent: Whether parent_id should be applied

        Returns:
            The updated directory

        Raises:
            DirectoryNotFound: If the directory or the new parent does not exist
            DirectoryCycleError: If the new parent is the directory or one of its descendants
            ValidationError: If the new name is empty
        """
        directory = self._load_directory(directory_id)

        if name is not None:
            directory.change_name(ColumnDirectoryName(name))

        if change_parent:
            new_parent_id = self._load_directory(parent_id).id if parent_id is not None else None
            self.directory_tree_service.ensure_can_move(directory, new_parent_id)
            directory.move_to(new_parent_id)

        self.column_repository.save_directory(directory)

        logger.info(
            "updated_directory",
            directory_id=directory_id,
            parent_id=directory.parent_id.value if directory.parent_id else None,
        )

        return directory
