"""Router for column directory management."""

from fastapi import APIRouter, Depends, status

from plot451.application.column.use_cases import (
    CreateDirectoryUseCase,
    DeleteDirectoryUseCase,
    ListDirectoryContentsUseCase,
    ListRootDirectoriesUseCase,
    UpdateDirectoryUseCase,
)
from plot451.core import container
from plot451.infrastructure.column.schemas import (
    Directory,
    DirectoryContentsResponse,
    DirectoryCreateRequest,
    DirectoryUpdateRequest,
)
from plot451.infrastructure.common.di import inject_use_case

router = APIRouter(prefix="/directories", tags=["directories"])


@router.post("", response_model=Directory, status_code=status.HTTP_201_CREATED)
def create_directory(
    body: DirectoryCreateRequest,
    use_case: CreateDirectoryUseCase = Depends(
        inject_use_case(container.create_directory_use_case)
    ),
) -> Directory:
    """Create a top-level directory, or a sub-directory when parent_id is given."""
    directory = use_case.create_directory(name=body.name, parent_id=body.parent_id)
    return Directory.from_entity(directory)


@router.get("", response_model=list[Directory])
def list_root_directories(
    use_case: ListRootDirectoriesUseCase = Depends(
        inject_use_case(container.list_root_directories_use_case)
    ),
) -> list[Directory]:
    """List the top-level directories."""
    return [Directory.from_entity(d) for d in use_case.list_root_directories()]


@router.get("/{directory_id}/contents", response_model=DirectoryContentsResponse)
def list_directory_contents(
    directory_id: str,
    use_case: ListDirectoryContentsUseCase = Depends(
        inject_use_case(container.list_directory_contents_use_case)
    ),
) -> DirectoryContentsResponse:
    """List the columns and sub-directories directly inside a directory."""
    contents = use_case.list_contents(directory_id)
    return DirectoryContentsResponse.from_collection(contents)


@router.patch("/{directory_id}", response_model=Directory)
def update_directory(
    directory_id: str,
    body: DirectoryUpdateRequest,
    use_case: UpdateDirectoryUseCase = Depends(
        inject_use_case(container.update_directory_use_case)
    ),
) -> Directory:
    """
    Rename a directory and/or move it.

    An explicit null parent_id moves the directory to the top level.
    """
    directory = use_case.update_directory(
        directory_id,
        name=body.name,
        parent_id=body.parent_id,
        change_parent="parent_id" in body.model_fields_set,
    )
    return Directory.from_entity(directory)


@router.delete("/{directory_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_directory(
    directory_id: str,
    use_case: DeleteDirectoryUseCase = Depends(
        inject_use_case(container.delete_directory_use_case)
    ),
) -> None:
    """Delete a directory with all of its columns and sub-directories."""
    use_case.delete_directory(directory_id)
