"""Use case for creating columns."""

from collections.abc import Sequence

import structlog

from plot451.application.column.protocols.column_factory import ColumnFactoryProtocol
from plot451.application.column.protocols.column_repository import ColumnRepositoryProtocol
from plot451.domain.column.collections.column_with_cells import ColumnWithCells
from plot451.domain.common.value_objects import (
    CellValue,
    ColumnDirectoryId,
    ColumnName,
)
from plot451.exceptions import DirectoryNotFound

logger = structlog.get_logger(__name__)


class CreateColumnUseCase:
    """Use case for creating a column with its initial cells."""

    def __init__(
        self,
        column_repository: ColumnRepositoryProtocol,
        column_factory: ColumnFactoryProtocol,
    ) -> None:
        """Initialize use case with dependencies."""
        self.column_repository = column_repository
        self.column_factory = column_factory

    def create_column(
        self,
        name: str,
        directory_id: str,
        values: Sequence[float | None] = (),
    ) -> ColumnWithCells:
        """
        Create a column in a directory.

        Cells are persisted first so the column can be saved with their ids.

        Args:
            name: Column name (trimmed)
            directory_id: ID of the owning directory
            values: Initial cell values, in column order

        Returns:
            The saved column with its cells

        Raises:
            ValidationError: If the name or a value is invalid
            DirectoryNotFound: If the directory does not exist
        """
        column_name = ColumnName(name)
        target_directory_id = ColumnDirectoryId(directory_id)
        cell_values = [CellValue(value) for value in values]

        if self.column_repository.find_directory(target_directory_id) is None:
            raise DirectoryNotFound(directory_id)

        # TODO: save cells and column in one transaction once repositories expose a unit of work
        cells = []
        for cell_value in cell_values:
            cell = self.column_factory.create_cell(cell_value)
            self.column_repository.save_cell(cell)
            cells.append(cell)

        column = self.column_factory.create_column(
            column_name, target_directory_id, [cell.id for cell in cells if cell.id]
        )
        column_id = self.column_repository.save(column)

        logger.info(
            "created_column",
            column_id=column_id.value,
            directory_id=directory_id,
            cell_count=len(cells),
        )

        return ColumnWithCells(column, cells)
