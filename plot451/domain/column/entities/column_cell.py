from dataclasses import dataclass

from plot451.domain.common.entity import Entity
from plot451.domain.common.value_objects.cell_value import CellValue
from plot451.domain.common.value_objects.ids import ColumnCellId


@dataclass(eq=False)
class ColumnCell(Entity[ColumnCellId]):
    """
    Column cell entity.

    Holds one optional numeric value. The owning column references the
    cell by id; the cell itself does not know its column.
    """

    value: CellValue
    id: ColumnCellId | None = None

    def edit_value(self, value: CellValue) -> None:
        """Replace the cell value."""
        self.value = value

    # Factory methods
    @classmethod
    def create(cls, value: CellValue) -> "ColumnCell":
        """Factory for creating a new, not yet persisted cell."""
        return cls(value=value)

    @classmethod
    def create_with_id(cls, id: ColumnCellId, value: CellValue) -> "ColumnCell":
        """Factory for reconstituting a cell from persistence."""
        return cls(value=value, id=id)
