from .table_factory import TableFactory

__all__ = ["TableFactory"]
