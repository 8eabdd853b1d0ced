"""Router for tables and their column arrangement."""

from fastapi import APIRouter, Depends, status

from plot451.application.table.use_cases import (
    CreateTableUseCase,
    DeleteTableUseCase,
    GetTableUseCase,
    ListTablesUseCase,
    RenameTableUseCase,
    TableColumnsUseCase,
)
from plot451.core import container
from plot451.infrastructure.common.di import inject_use_case
from plot451.infrastructure.table.schemas import (
    Table,
    TableColumnInsertRequest,
    TableColumnMoveRequest,
    TableCreateRequest,
    TableSummary,
    TableUpdateRequest,
)

router = APIRouter(prefix="/tables", tags=["tables"])


@router.post("", response_model=Table, status_code=status.HTTP_201_CREATED)
def create_table(
    body: TableCreateRequest,
    use_case: CreateTableUseCase = Depends(inject_use_case(container.create_table_use_case)),
) -> Table:
    """Create a table from existing columns; column names must be unique within it."""
    view = use_case.create_table(name=body.name, column_ids=body.column_ids)
    return Table.from_collection(view)


@router.get("", response_model=list[TableSummary])
def list_tables(
    use_case: ListTablesUseCase = Depends(inject_use_case(container.list_tables_use_case)),
) -> list[TableSummary]:
    """List every table with its column ids."""
    return [TableSummary.from_entity(table) for table in use_case.list_tables()]


@router.get("/{table_id}", response_model=Table)
def get_table(
    table_id: str,
    use_case: GetTableUseCase = Depends(inject_use_case(container.get_table_use_case)),
) -> Table:
    """Get a table with its columns and cells in order."""
    return Table.from_collection(use_case.get_table(table_id))


@router.patch("/{table_id}", response_model=Table)
def rename_table(
    table_id: str,
    body: TableUpdateRequest,
    use_case: RenameTableUseCase = Depends(inject_use_case(container.rename_table_use_case)),
) -> Table:
    """Rename a table."""
    return Table.from_collection(use_case.rename_table(table_id, body.name))


@router.delete("/{table_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_table(
    table_id: str,
    use_case: DeleteTableUseCase = Depends(inject_use_case(container.delete_table_use_case)),
) -> None:
    """Delete a table. Its columns are kept."""
    use_case.delete_table(table_id)


@router.post("/{table_id}/columns", response_model=Table)
def insert_table_column(
    table_id: str,
    body: TableColumnInsertRequest,
    use_case: TableColumnsUseCase = Depends(inject_use_case(container.table_columns_use_case)),
) -> Table:
    """Add an existing column in front of or behind one of the table's columns."""
    view = use_case.insert_column(
        table_id,
        column_id=body.column_id,
        destination_id=body.destination_id,
        position=body.position,
    )
    return Table.from_collection(view)


@router.post("/{table_id}/columns/move", response_model=Table)
def move_table_column(
    table_id: str,
    body: TableColumnMoveRequest,
    use_case: TableColumnsUseCase = Depends(inject_use_case(container.table_columns_use_case)),
) -> Table:
    """Move one of the table's columns in front of or behind another one."""
    view = use_case.move_column(
        table_id,
        column_id=body.column_id,
        destination_id=body.destination_id,
        position=body.position,
    )
    return Table.from_collection(view)


@router.delete("/{table_id}/columns/{column_id}", response_model=Table)
def remove_table_column(
    table_id: str,
    column_id: str,
    use_case: TableColumnsUseCase = Depends(inject_use_case(container.table_columns_use_case)),
) -> Table:
    """Remove a column from the table. The last column cannot be removed."""
    return Table.from_collection(use_case.remove_column(table_id, column_id))
