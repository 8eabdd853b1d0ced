from dataclasses import dataclass

from ..entity import EntityId


@dataclass(frozen=True)
class ColumnDirectoryId(EntityId):
    """Strongly-typed column directory identifier."""


@dataclass(frozen=True)
class ColumnId(EntityId):
    """Strongly-typed column identifier."""


@dataclass(frozen=True)
class ColumnCellId(EntityId):
    """Strongly-typed column cell identifier."""


@dataclass(frozen=True)
class TableId(EntityId):
    """Strongly-typed table identifier."""
