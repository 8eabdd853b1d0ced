"""Read-only walks over the directory tree."""

from plot451.application.column.protocols.column_repository import ColumnRepositoryProtocol
from plot451.domain.column.entities.column_directory import ColumnDirectory
from plot451.domain.column.exceptions import DirectoryCycleError
from plot451.domain.common.value_objects.ids import ColumnDirectoryId, ColumnId


class DirectoryTreeService:
    """Answers subtree and ancestry questions through the column repository."""

    def __init__(self, column_repository: ColumnRepositoryProtocol) -> None:
        self.column_repository = column_repository

    def collect_column_ids(self, directory: ColumnDirectory) -> list[ColumnId]:
        """Return the ids of every column in the directory and all its descendants."""
        column_ids: list[ColumnId] = []
        pending = [directory]
        while pending:
            current = pending.pop()
            if current.id is None:
                continue
            column_ids.extend(
                column.id
                for column in self.column_repository.find_by_directory_id(current.id)
                if column.id is not None
            )
            pending.extend(self.column_repository.find_children_directories(current.id))
        return column_ids

    def ensure_can_move(
        self, directory: ColumnDirectory, new_parent_id: ColumnDirectoryId | None
    ) -> None:
        """
        Check that re-parenting keeps the tree acyclic.

        Walks up from the new parent; meeting the directory itself means the
        new parent is the directory or one of its descendants.

        Raises:
            DirectoryCycleError: If the move would create a cycle
        """
        if new_parent_id is None or directory.id is None:
            return
        visited: set[ColumnDirectoryId] = set()
        current_id: ColumnDirectoryId | None = new_parent_id
        while current_id is not None and current_id not in visited:
            if current_id == directory.id:
                raise DirectoryCycleError(directory.id, new_parent_id)
            visited.add(current_id)
            current = self.column_repository.find_directory(current_id)
            current_id = current.parent_id if current else None
