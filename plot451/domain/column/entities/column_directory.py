from dataclasses import dataclass

from plot451.domain.common.entity import Entity
from plot451.domain.common.value_objects.ids import ColumnDirectoryId
from plot451.domain.common.value_objects.names import ColumnDirectoryName


@dataclass(eq=False)
class ColumnDirectory(Entity[ColumnDirectoryId]):
    """
    Column directory entity.

    Directories form a tree through a parent back-reference only. A
    directory neither owns its parent nor holds its children; tree queries
    (children of, descendants of) are answered by the repository.
    """

    name: ColumnDirectoryName
    parent_id: ColumnDirectoryId | None = None
    id: ColumnDirectoryId | None = None

    # Query methods
    def is_root(self) -> bool:
        """Check if this is a top-level directory (no parent)."""
        return self.parent_id is None

    def is_child_of(self, directory_id: ColumnDirectoryId) -> bool:
        return self.parent_id is not None and self.parent_id == directory_id

    # Commands
    def change_name(self, name: ColumnDirectoryName) -> None:
        self.name = name

    def move_to(self, new_parent_id: ColumnDirectoryId | None) -> None:
        """Re-parent the directory; None turns it into a root."""
        self.parent_id = new_parent_id

    # Factory methods
    @classmethod
    def create(
        cls, name: ColumnDirectoryName, parent_id: ColumnDirectoryId | None = None
    ) -> "ColumnDirectory":
        """Factory for creating a new, not yet persisted directory."""
        return cls(name=name, parent_id=parent_id)

    @classmethod
    def create_with_id(
        cls,
        id: ColumnDirectoryId,
        name: ColumnDirectoryName,
        parent_id: ColumnDirectoryId | None = None,
    ) -> "ColumnDirectory":
        """Factory for reconstituting a directory from persistence."""
        return cls(name=name, parent_id=parent_id, id=id)
