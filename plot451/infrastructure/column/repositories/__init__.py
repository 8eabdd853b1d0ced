from .column_repository import ColumnRepository
from .in_memory_column_repository import InMemoryColumnRepository

__all__ = [
    "ColumnRepository",
    "InMemoryColumnRepository",
]
