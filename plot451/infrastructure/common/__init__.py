from .ids import to_primary_key
from .read_write_lock import ReadWriteLock
from .sql_transaction import sql_transaction

__all__ = [
    "ReadWriteLock",
    "sql_transaction",
    "to_primary_key",
]
