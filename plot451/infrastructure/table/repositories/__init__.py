from .in_memory_table_repository import InMemoryTableRepository
from .table_repository import TableRepository

__all__ = [
    "InMemoryTableRepository",
    "TableRepository",
]
