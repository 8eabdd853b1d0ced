"""Use case for cell operations within a column."""

import structlog

from plot451.application.column.protocols.column_factory import ColumnFactoryProtocol
from plot451.application.column.protocols.column_repository import ColumnRepositoryProtocol
from plot451.domain.column.entities.column import Column
from plot451.domain.column.entities.column_cell import ColumnCell
from plot451.domain.column.exceptions import CellNotFoundError
from plot451.domain.common.value_objects import CellValue, ColumnCellId, ColumnId
from plot451.exceptions import ColumnNotFound

logger = structlog.get_logger(__name__)


class ColumnCellsUseCase:
    """Use case for appending, editing and removing the cells of a column."""

    def __init__(
        self,
        column_repository: ColumnRepositoryProtocol,
        column_factory: ColumnFactoryProtocol,
    ) -> None:
        """Initialize use case with dependencies."""
        self.column_repository = column_repository
        self.column_factory = column_factory

    def _load_column(self, column_id: str) -> Column:
        column = self.column_repository.find(ColumnId(column_id))
        if column is None:
            raise ColumnNotFound(column_id)
        return column

    def _load_cell_of(self, column: Column, cell_id: str) -> ColumnCell:
        target_id = ColumnCellId(cell_id)
        if not column.contains_cell(target_id):
            raise CellNotFoundError(target_id)
        cell = self.column_repository.find_cell(target_id)
        if cell is None:
            raise CellNotFoundError(target_id)
        return cell

    def append_cell(self, column_id: str, value: float | None) -> ColumnCell:
        """
        Append a new cell at the end of a column.

        Raises:
            ColumnNotFound: If the column does not exist
            ValidationError: If the value is not a number
        """
        column = self._load_column(column_id)
        cell = self.column_factory.create_cell(CellValue(value))

        cell_id = self.column_repository.save_cell(cell)
        column.insert_cell(cell_id)
        self.column_repository.save(column)

        logger.info("appended_cell", column_id=column_id, cell_id=cell_id.value)

        return cell

    def edit_cell(self, column_id: str, cell_id: str, value: float | None) -> ColumnCell:
        """
        Replace the value of a cell of the column.

        Raises:
            ColumnNotFound: If the column does not exist
            CellNotFoundError: If the cell is not part of the column
        """
        column = self._load_column(column_id)
        cell = self._load_cell_of(column, cell_id)

        cell.edit_value(CellValue(value))
        self.column_repository.save_cell(cell)

        logger.info("edited_cell", column_id=column_id, cell_id=cell_id)

        return cell

    def remove_cell(self, column_id: str, cell_id: str) -> None:
        """
        Remove a cell from the column and delete it.

        Raises:
            ColumnNotFound: If the column does not exist
            CellNotFoundError: If the cell is not part of the column
        """
        column = self._load_column(column_id)
        cell = self._load_cell_of(column, cell_id)

        column.remove_cell(cell.id)
        self.column_repository.save(column)
        self.column_repository.delete_cell(cell)

        logger.info("removed_cell", column_id=column_id, cell_id=cell_id)
