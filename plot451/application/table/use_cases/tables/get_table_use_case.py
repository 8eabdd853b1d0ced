"""Use case for reading a table with its columns and cells."""

from plot451.application.table.protocols.table_repository import TableRepositoryProtocol
from plot451.application.table.services.table_view_service import TableViewService
from plot451.domain.common.value_objects import TableId
from plot451.domain.table.collections.table_with_columns_and_cells import (
    TableWithColumnsAndCells,
)
from plot451.exceptions import TableNotFound


class GetTableUseCase:
    def __init__(
        self,
        table_repository: TableRepositoryProtocol,
        table_view_service: TableViewService,
    ) -> None:
        self.table_repository = table_repository
        self.table_view_service = table_view_service

    def get_table(self, table_id: str) -> TableWithColumnsAndCells:
        """
        Raises:
            TableNotFound: If the table does not exist
        """
        table = self.table_repository.find(TableId(table_id))
        if table is None:
            raise TableNotFound(table_id)
        return self.table_view_service.build_view(table)
