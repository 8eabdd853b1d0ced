from .column_detachment_service import ColumnDetachmentService
from .directory_tree_service import DirectoryTreeService

__all__ = [
    "ColumnDetachmentService",
    "DirectoryTreeService",
]
