"""Use case for listing tables."""

from plot451.application.table.protocols.table_repository import TableRepositoryProtocol
from plot451.domain.table.entities.table import Table


class ListTablesUseCase:
    def __init__(self, table_repository: TableRepositoryProtocol) -> None:
        self.table_repository = table_repository

    def list_tables(self) -> list[Table]:
        return self.table_repository.find_all()
