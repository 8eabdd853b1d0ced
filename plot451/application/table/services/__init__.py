from .table_view_service import TableViewService

__all__ = ["TableViewService"]
