from collections.abc import Sequence
from dataclasses import dataclass, field

from plot451.domain.column.exceptions import InvalidOrderError
from plot451.domain.common.entity import Entity
from plot451.domain.common.value_objects.ids import ColumnCellId, ColumnDirectoryId, ColumnId
from plot451.domain.common.value_objects.names import ColumnName


@dataclass(eq=False)
class Column(Entity[ColumnId]):
    """
    Column entity.

    An ordered sequence of cell references living in one directory.
    The column owns the order of its cells; the cells themselves are
    stored separately and resolved through the repository.
    """

    name: ColumnName
    directory_id: ColumnDirectoryId
    cells: list[ColumnCellId] = field(default_factory=list)
    id: ColumnId | None = None

    def __post_init__(self) -> None:
        self.cells = list(self.cells)

    # Cell list operations
    def insert_cell(self, cell_id: ColumnCellId) -> None:
        """Append a cell at the end of the column."""
        self.cells.append(cell_id)

    def remove_cell(self, cell_id: ColumnCellId) -> None:
        """Remove every occurrence of the cell. Removing an absent cell is a no-op."""
        self.cells = [c for c in self.cells if c != cell_id]

    def change_order(self, new_order: Sequence[ColumnCellId]) -> None:
        """
        Replace the cell order.

        The new order must hold exactly the current cells, each once.

        Raises:
            InvalidOrderError: On a missing, extra or duplicated cell id.
                The column is left unchanged.
        """
        new_order = list(new_order)
        current = set(self.cells)
        proposed = set(new_order)
        if (
            len(current) != len(proposed)
            or current != proposed
            or len(proposed) != len(new_order)
        ):
            raise InvalidOrderError(self.id)
        self.cells = new_order

    def contains_cell(self, cell_id: ColumnCellId) -> bool:
        return cell_id in self.cells

    def move_to(self, directory_id: ColumnDirectoryId) -> None:
        """Move the column to another directory."""
        self.directory_id = directory_id

    def change_name(self, name: ColumnName) -> None:
        self.name = name

    # Factory methods
    @classmethod
    def create(
        cls,
        name: ColumnName,
        directory_id: ColumnDirectoryId,
        cells: Sequence[ColumnCellId] = (),
    ) -> "Column":
        """Factory for creating a new, not yet persisted column."""
        return cls(name=name, directory_id=directory_id, cells=list(cells))

    @classmethod
    def create_with_id(
        cls,
        id: ColumnId,
        name: ColumnName,
        directory_id: ColumnDirectoryId,
        cells: Sequence[ColumnCellId],
    ) -> "Column":
        """Factory for reconstituting a column from persistence."""
        return cls(name=name, directory_id=directory_id, cells=list(cells), id=id)
