"""Pydantic schemas for directory API request/response validation."""

from pydantic import BaseModel, Field

from plot451.domain.column.collections.directory_contents import DirectoryContents
from plot451.domain.column.entities.column_directory import ColumnDirectory
from plot451.infrastructure.column.schemas.column_schemas import ColumnSummary


class Directory(BaseModel):
    """Schema for a directory response."""

    id: str
    name: str
    parent_id: str | None = None

    @classmethod
    def from_entity(cls, directory: ColumnDirectory) -> "Directory":
        return cls(
            id=directory.id.value,
            name=directory.name.value,
            parent_id=directory.parent_id.value if directory.parent_id else None,
        )


class DirectoryContentsResponse(BaseModel):
    """Schema for the direct contents of a directory."""

    directory: Directory
    columns: list[ColumnSummary] = Field(default_factory=list)
    directories: list[Directory] = Field(default_factory=list)

    @classmethod
    def from_collection(cls, contents: DirectoryContents) -> "DirectoryContentsResponse":
        return cls(
            directory=Directory.from_entity(contents.directory),
            columns=[ColumnSummary.from_entity(column) for column in contents.columns],
            directories=[Directory.from_entity(child) for child in contents.directories],
        )


class DirectoryCreateRequest(BaseModel):
    """Schema for creating a directory."""

    name: str = Field(..., min_length=1, max_length=255, description="Directory name")
    parent_id: str | None = Field(
        None, min_length=1, description="ID of the parent directory, omitted for a root"
    )


class DirectoryUpdateRequest(BaseModel):
    """
    Schema for renaming and/or moving a directory.

    An explicit "parent_id": null moves the directory to the top level;
    leaving the field out keeps the current parent.
    """

    name: str | None = Field(None, min_length=1, max_length=255, description="New name")
    parent_id: str | None = Field(None, min_length=1, description="ID of the new parent")
