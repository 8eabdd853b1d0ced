"""Router for columns and their cells."""

from fastapi import APIRouter, Depends, status

from plot451.application.column.use_cases import (
    ColumnCellsUseCase,
    CreateColumnUseCase,
    DeleteColumnUseCase,
    GetColumnUseCase,
    ReorderColumnCellsUseCase,
    UpdateColumnUseCase,
)
from plot451.core import container
from plot451.infrastructure.column.schemas import (
    Cell,
    CellOrderRequest,
    CellValueRequest,
    ColumnCreateRequest,
    ColumnUpdateRequest,
    ColumnWithCellsResponse,
)
from plot451.infrastructure.common.di import inject_use_case

router = APIRouter(prefix="/columns", tags=["columns"])


@router.post("", response_model=ColumnWithCellsResponse, status_code=status.HTTP_201_CREATED)
def create_column(
    body: ColumnCreateRequest,
    use_case: CreateColumnUseCase = Depends(inject_use_case(container.create_column_use_case)),
) -> ColumnWithCellsResponse:
    """Create a column in a directory with its initial cell values."""
    column = use_case.create_column(
        name=body.name,
        directory_id=body.directory_id,
        values=body.values,
    )
    return ColumnWithCellsResponse.from_collection(column)


@router.get("/{column_id}", response_model=ColumnWithCellsResponse)
def get_column(
    column_id: str,
    use_case: GetColumnUseCase = Depends(inject_use_case(container.get_column_use_case)),
) -> ColumnWithCellsResponse:
    """Get a column with its cells in order."""
    return ColumnWithCellsResponse.from_collection(use_case.get_column(column_id))


@router.patch("/{column_id}", response_model=ColumnWithCellsResponse)
def update_column(
    column_id: str,
    body: ColumnUpdateRequest,
    use_case: UpdateColumnUseCase = Depends(inject_use_case(container.update_column_use_case)),
) -> ColumnWithCellsResponse:
    """Rename a column and/or move it to another directory."""
    column = use_case.update_column(
        column_id,
        name=body.name,
        directory_id=body.directory_id,
    )
    return ColumnWithCellsResponse.from_collection(column)


@router.delete("/{column_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_column(
    column_id: str,
    use_case: DeleteColumnUseCase = Depends(inject_use_case(container.delete_column_use_case)),
) -> None:
    """
    Delete a column and its cells.

    The column is removed from every table using it; tables left without
    columns are deleted.
    """
    use_case.delete_column(column_id)


@router.put("/{column_id}/cells/order", response_model=ColumnWithCellsResponse)
def reorder_cells(
    column_id: str,
    body: CellOrderRequest,
    use_case: ReorderColumnCellsUseCase = Depends(
        inject_use_case(container.reorder_column_cells_use_case)
    ),
) -> ColumnWithCellsResponse:
    """Replace the cell order; the body must list every cell of the column exactly once."""
    column = use_case.reorder_cells(column_id, body.cell_ids)
    return ColumnWithCellsResponse.from_collection(column)


@router.post("/{column_id}/cells", response_model=Cell, status_code=status.HTTP_201_CREATED)
def append_cell(
    column_id: str,
    body: CellValueRequest,
    use_case: ColumnCellsUseCase = Depends(inject_use_case(container.column_cells_use_case)),
) -> Cell:
    """Append a cell at the end of the column."""
    return Cell.from_entity(use_case.append_cell(column_id, body.value))


@router.patch("/{column_id}/cells/{cell_id}", response_model=Cell)
def edit_cell(
    column_id: str,
    cell_id: str,
    body: CellValueRequest,
    use_case: ColumnCellsUseCase = Depends(inject_use_case(container.column_cells_use_case)),
) -> Cell:
    """Replace the value of a cell."""
    return Cell.from_entity(use_case.edit_cell(column_id, cell_id, body.value))


@router.delete("/{column_id}/cells/{cell_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_cell(
    column_id: str,
    cell_id: str,
    use_case: ColumnCellsUseCase = Depends(inject_use_case(container.column_cells_use_case)),
) -> None:
    """Remove a cell from the column and delete it."""
    use_case.remove_cell(column_id, cell_id)
