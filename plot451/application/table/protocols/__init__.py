from .table_factory import TableFactoryProtocol
from .table_repository import TableRepositoryProtocol

__all__ = [
    "TableFactoryProtocol",
    "TableRepositoryProtocol",
]
