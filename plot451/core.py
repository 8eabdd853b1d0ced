from dependency_injector import containers, providers
from sqlalchemy.orm import Session

from plot451.application.column.services.column_detachment_service import (
    ColumnDetachmentService,
)
from plot451.application.column.services.directory_tree_service import DirectoryTreeService
from plot451.application.column.use_cases import (
    ColumnCellsUseCase,
    CreateColumnUseCase,
    CreateDirectoryUseCase,
    DeleteColumnUseCase,
    DeleteDirectoryUseCase,
    GetColumnUseCase,
    ListDirectoryContentsUseCase,
    ListRootDirectoriesUseCase,
    ReorderColumnCellsUseCase,
    UpdateColumnUseCase,
    UpdateDirectoryUseCase,
)
from plot451.application.table.services.table_view_service import TableViewService
from plot451.application.table.use_cases import (
    CreateTableUseCase,
    DeleteTableUseCase,
    GetTableUseCase,
    ListTablesUseCase,
    RenameTableUseCase,
    TableColumnsUseCase,
)
from plot451.config import get_settings
from plot451.domain.column.services.column_factory import ColumnFactory
from plot451.domain.table.services.table_factory import TableFactory
from plot451.infrastructure.column.repositories import ColumnRepository, InMemoryColumnRepository
from plot451.infrastructure.table.repositories import InMemoryTableRepository, TableRepository


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    config = providers.Configuration()

    # Declare db as a dependency that will be provided at runtime
    db = providers.Dependency(instance_of=Session)

    # In-memory stores live for the whole process
    in_memory_column_repository = providers.Singleton(InMemoryColumnRepository)
    in_memory_table_repository = providers.Singleton(InMemoryTableRepository)

    # Repositories, picked by STORAGE_BACKEND
    column_repository = providers.Selector(
        config.storage_backend,
        sql=providers.Factory(ColumnRepository, db=db),
        memory=in_memory_column_repository,
    )
    table_repository = providers.Selector(
        config.storage_backend,
        sql=providers.Factory(TableRepository, db=db),
        memory=in_memory_table_repository,
    )

    # Factories (pure domain construction, no db)
    column_factory = providers.Factory(ColumnFactory)
    table_factory = providers.Factory(TableFactory)

    # Application services
    column_detachment_service = providers.Factory(
        ColumnDetachmentService,
        table_repository=table_repository,
    )
    directory_tree_service = providers.Factory(
        DirectoryTreeService,
        column_repository=column_repository,
    )
    table_view_service = providers.Factory(
        TableViewService,
        column_repository=column_repository,
    )

    # Column module, directory use cases
    create_directory_use_case = providers.Factory(
        CreateDirectoryUseCase,
        column_repository=column_repository,
        column_factory=column_factory,
    )
    list_root_directories_use_case = providers.Factory(
        ListRootDirectoriesUseCase,
        column_repository=column_repository,
    )
    list_directory_contents_use_case = providers.Factory(
        ListDirectoryContentsUseCase,
        column_repository=column_repository,
    )
    update_directory_use_case = providers.Factory(
        UpdateDirectoryUseCase,
        column_repository=column_repository,
        directory_tree_service=directory_tree_service,
    )
    delete_directory_use_case = providers.Factory(
        DeleteDirectoryUseCase,
        column_repository=column_repository,
        directory_tree_service=directory_tree_service,
        column_detachment_service=column_detachment_service,
    )

    # Column module, column and cell use cases
    create_column_use_case = providers.Factory(
        CreateColumnUseCase,
        column_repository=column_repository,
        column_factory=column_factory,
    )
    get_column_use_case = providers.Factory(
        GetColumnUseCase,
        column_repository=column_repository,
    )
    update_column_use_case = providers.Factory(
        UpdateColumnUseCase,
        column_repository=column_repository,
    )
    reorder_column_cells_use_case = providers.Factory(
        ReorderColumnCellsUseCase,
        column_repository=column_repository,
    )
    column_cells_use_case = providers.Factory(
        ColumnCellsUseCase,
        column_repository=column_repository,
        column_factory=column_factory,
    )
    delete_column_use_case = providers.Factory(
        DeleteColumnUseCase,
        column_repository=column_repository,
        column_detachment_service=column_detachment_service,
    )

    # Table module use cases
    create_table_use_case = providers.Factory(
        CreateTableUseCase,
        column_repository=column_repository,
        table_repository=table_repository,
        table_factory=table_factory,
        table_view_service=table_view_service,
    )
    list_tables_use_case = providers.Factory(
        ListTablesUseCase,
        table_repository=table_repository,
    )
    get_table_use_case = providers.Factory(
        GetTableUseCase,
        table_repository=table_repository,
        table_view_service=table_view_service,
    )
    rename_table_use_case = providers.Factory(
        RenameTableUseCase,
        table_repository=table_repository,
        table_view_service=table_view_service,
    )
    table_columns_use_case = providers.Factory(
        TableColumnsUseCase,
        column_repository=column_repository,
        table_repository=table_repository,
        table_view_service=table_view_service,
    )
    delete_table_use_case = providers.Factory(
        DeleteTableUseCase,
        table_repository=table_repository,
    )


# Initialize container
container = Container()
container.config.storage_backend.from_value(get_settings().STORAGE_BACKEND)
