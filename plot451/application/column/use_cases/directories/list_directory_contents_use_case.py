"""Use case for listing the direct contents of a directory."""

from plot451.application.column.protocols.column_repository import ColumnRepositoryProtocol
from plot451.domain.column.collections.directory_contents import DirectoryContents
from plot451.domain.common.value_objects import ColumnDirectoryId
from plot451.exceptions import DirectoryNotFound


class ListDirectoryContentsUseCase:
    """Use case for browsing one level of the directory tree."""

    def __init__(self, column_repository: ColumnRepositoryProtocol) -> None:
        """Initialize use case with dependencies."""
        self.column_repository = column_repository

    def list_contents(self, directory_id: str) -> DirectoryContents:
        """
        List the columns and child directories directly inside a directory.

        Raises:
            DirectoryNotFound: If the directory does not exist
        """
        directory = self.column_repository.find_directory(ColumnDirectoryId(directory_id))
        if directory is None:
            raise DirectoryNotFound(directory_id)

        columns = self.column_repository.find_by_directory_id(directory.id)
        children = self.column_repository.find_children_directories(directory.id)
        return DirectoryContents(directory, columns, children)
