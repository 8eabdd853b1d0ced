"""Use case for reordering the cells of a column."""

from collections.abc import Sequence

import structlog

from plot451.application.column.protocols.column_repository import ColumnRepositoryProtocol
from plot451.domain.column.collections.column_with_cells import ColumnWithCells
from plot451.domain.common.value_objects import ColumnCellId, ColumnId
from plot451.exceptions import ColumnNotFound

logger = structlog.get_logger(__name__)


class ReorderColumnCellsUseCase:
    """Use case for replacing the cell order of a column."""

    def __init__(self, column_repository: ColumnRepositoryProtocol) -> None:
        """Initialize use case with dependencies."""
        self.column_repository = column_repository

    def reorder_cells(self, column_id: str, cell_ids: Sequence[str]) -> ColumnWithCells:
        """
        Replace the cell order of a column.

        Args:
            column_id: ID of the column
            cell_ids: Every current cell id, each exactly once, in the new order

        Returns:
            The column with its cells in the new order

        Raises:
            ColumnNotFound: If the column does not exist
            InvalidOrderError: If cell_ids is not a rearrangement of the current cells
        """
        column = self.column_repository.find(ColumnId(column_id))
        if column is None:
            raise ColumnNotFound(column_id)

        column.change_order([ColumnCellId(cell_id) for cell_id in cell_ids])
        self.column_repository.save(column)

        logger.info("reordered_column_cells", column_id=column_id, cell_count=len(column.cells))

        return ColumnWithCells(column, self.column_repository.find_cells_by_column_id(column.id))
