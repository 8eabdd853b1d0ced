from .column_factory import ColumnFactoryProtocol
from .column_repository import ColumnRepositoryProtocol

__all__ = [
    "ColumnFactoryProtocol",
    "ColumnRepositoryProtocol",
]
