"""Custom exception hierarchy for the plot451 application."""


class Plot451Error(Exception):
    """Base exception for all plot451 application errors."""

    def __init__(self, message: str, status_code: int = 500) -> None:
        """Initialize exception with message and optional status code."""
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class NotFoundError(Plot451Error):
    """Resource not found error."""

    def __init__(self, message: str) -> None:
        """Initialize with message and 404 status code."""
        super().__init__(message, status_code=404)


class ColumnNotFound(NotFoundError):
    """Column not found error."""

    def __init__(self, column_id: str | None = None, *, message: str | None = None) -> None:
        """Initialize with column ID or custom message."""
        self.column_id = column_id
        if message:
            super().__init__(message)
        elif column_id is not None:
            super().__init__(f"Column with id {column_id} not found")
        else:
            super().__init__("Column not found")


class DirectoryNotFound(NotFoundError):
    """Directory not found error."""

    def __init__(self, directory_id: str | None = None, *, message: str | None = None) -> None:
        """Initialize with directory ID or custom message."""
        self.directory_id = directory_id
        if message:
            super().__init__(message)
        elif directory_id is not None:
            super().__init__(f"Directory with id {directory_id} not found")
        else:
            super().__init__("Directory not found")


class TableNotFound(NotFoundError):
    """Table not found error."""

    def __init__(self, table_id: str | None = None, *, message: str | None = None) -> None:
        """Initialize with table ID or custom message."""
        self.table_id = table_id
        if message:
            super().__init__(message)
        elif table_id is not None:
            super().__init__(f"Table with id {table_id} not found")
        else:
            super().__init__("Table not found")

