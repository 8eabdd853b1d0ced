"""Table module domain layer."""

from .collections import TableColumns, TableWithColumnsAndCells
from .entities import Table
from .services import TableFactory
from .specifications import NoDuplicatedColumnNamesSpecification

__all__ = [
    "NoDuplicatedColumnNamesSpecification",
    "Table",
    "TableColumns",
    "TableFactory",
    "TableWithColumnsAndCells",
]
