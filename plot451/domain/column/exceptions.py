"""Column module domain exceptions."""

from collections.abc import Sequence

from plot451.domain.common.exceptions import (
    BusinessRuleViolationError,
    EntityNotFoundError,
    InvariantViolationError,
    NotAllEntitiesFoundError,
)
from plot451.domain.common.value_objects.ids import (
    ColumnCellId,
    ColumnDirectoryId,
    ColumnId,
)


class InvalidOrderError(InvariantViolationError):
    """Raised when a new cell order is not a rearrangement of the current cells."""

    def __init__(self, column_id: ColumnId | None) -> None:
        super().__init__(
            "Column",
            "new cell order must contain exactly the current cells, each once",
        )
        self.column_id = column_id


class ColumnNotFoundError(EntityNotFoundError):
    """Raised when a column cannot be found."""

    def __init__(self, column_id: ColumnId) -> None:
        super().__init__("Column", column_id)
        self.column_id = column_id


class CellNotFoundError(EntityNotFoundError):
    """Raised when a cell cannot be found."""

    def __init__(self, cell_id: ColumnCellId) -> None:
        super().__init__("ColumnCell", cell_id)
        self.cell_id = cell_id


class DirectoryNotFoundError(EntityNotFoundError):
    """Raised when a column directory cannot be found."""

    def __init__(self, directory_id: ColumnDirectoryId) -> None:
        super().__init__("ColumnDirectory", directory_id)
        self.directory_id = directory_id


class NotAllColumnsFoundError(NotAllEntitiesFoundError):
    """Raised when a batch column lookup misses at least one id."""

    def __init__(self, requested_ids: Sequence[ColumnId]) -> None:
        super().__init__("Column", requested_ids)


class NotAllCellsFoundError(NotAllEntitiesFoundError):
    """Raised when a batch cell lookup misses at least one id."""

    def __init__(self, requested_ids: Sequence[ColumnCellId]) -> None:
        super().__init__("ColumnCell", requested_ids)


class DirectoryCycleError(BusinessRuleViolationError):
    """Raised when a directory would become its own ancestor."""

    def __init__(self, directory_id: ColumnDirectoryId, new_parent_id: ColumnDirectoryId) -> None:
        super().__init__(
            "directory_tree_acyclic",
            f"Cannot move directory {directory_id} under {new_parent_id}: "
            "the target is the directory itself or one of its descendants",
        )
        self.directory_id = directory_id
        self.new_parent_id = new_parent_id
