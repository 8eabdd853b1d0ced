"""Use case for reading a column with its cells."""

from plot451.application.column.protocols.column_repository import ColumnRepositoryProtocol
from plot451.domain.column.collections.column_with_cells import ColumnWithCells
from plot451.domain.common.value_objects import ColumnId
from plot451.exceptions import ColumnNotFound


class GetColumnUseCase:
    def __init__(self, column_repository: ColumnRepositoryProtocol) -> None:
        self.column_repository = column_repository

    def get_column(self, column_id: str) -> ColumnWithCells:
        """
        Raises:
            ColumnNotFound: If the column does not exist
        """
        column = self.column_repository.find(ColumnId(column_id))
        if column is None:
            raise ColumnNotFound(column_id)
        return ColumnWithCells(column, self.column_repository.find_cells_by_column_id(column.id))
