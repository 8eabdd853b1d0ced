"""Use case for listing top-level directories."""

from plot451.application.column.protocols.column_repository import ColumnRepositoryProtocol
from plot451.domain.column.entities.column_directory import ColumnDirectory


class ListRootDirectoriesUseCase:
    def __init__(self, column_repository: ColumnRepositoryProtocol) -> None:
        self.column_repository = column_repository

    def list_root_directories(self) -> list[ColumnDirectory]:
        return self.column_repository.find_root_directories()
