from .column_factory import ColumnFactory

__all__ = ["ColumnFactory"]
