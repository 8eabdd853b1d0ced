"""Directory joined with its direct columns and sub-directories."""

from collections.abc import Sequence
from dataclasses import dataclass

from plot451.domain.column.entities.column import Column
from plot451.domain.column.entities.column_directory import ColumnDirectory
from plot451.domain.common.exceptions import CollectionAssemblyError


@dataclass(frozen=True)
class DirectoryContents:
    """Read view of one directory level: the columns and child directories directly in it."""

    directory: ColumnDirectory
    columns: tuple[Column, ...]
    directories: tuple[ColumnDirectory, ...]

    def __init__(
        self,
        directory: ColumnDirectory,
        columns: Sequence[Column],
        directories: Sequence[ColumnDirectory],
    ) -> None:
        if directory.id is None:
            raise CollectionAssemblyError("DirectoryContents", "directory is not persisted")
        for column in columns:
            if column.directory_id != directory.id:
                raise CollectionAssemblyError(
                    "DirectoryContents",
                    f"column {column.id} belongs to directory {column.directory_id}, "
                    f"not {directory.id}",
                )
        for child in directories:
            if child.parent_id != directory.id:
                raise CollectionAssemblyError(
                    "DirectoryContents",
                    f"directory {child.id} is not a child of {directory.id}",
                )
        object.__setattr__(self, "directory", directory)
        object.__setattr__(self, "columns", tuple(columns))
        object.__setattr__(self, "directories", tuple(directories))

    @property
    def is_empty(self) -> bool:
        return not self.columns and not self.directories
