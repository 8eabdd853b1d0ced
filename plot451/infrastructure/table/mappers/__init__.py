from .table_mapper import TableMapper

__all__ = ["TableMapper"]
