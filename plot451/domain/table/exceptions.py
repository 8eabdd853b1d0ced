"""Table module domain exceptions."""

from plot451.domain.common.exceptions import (
    BusinessRuleViolationError,
    EntityNotFoundError,
    InvariantViolationError,
)
from plot451.domain.common.value_objects.ids import ColumnId, TableId
from plot451.domain.common.value_objects.names import ColumnName


class EmptyColumnListError(InvariantViolationError):
    """Raised when a table would be constructed without any column."""

    def __init__(self) -> None:
        super().__init__("Table", "a table must reference at least one column")


class TableNotFoundError(EntityNotFoundError):
    """Raised when a table cannot be found."""

    def __init__(self, table_id: TableId) -> None:
        super().__init__("Table", table_id)
        self.table_id = table_id


class TableColumnNotFoundError(BusinessRuleViolationError):
    """Raised when a column referenced by a table operation is not part of the table."""

    def __init__(self, column_id: ColumnId) -> None:
        super().__init__(
            "table_column_present",
            f"Column {column_id} is not part of the table",
        )
        self.column_id = column_id


class DuplicatedColumnNamesError(BusinessRuleViolationError):
    """Raised when two columns of one table share a name."""

    def __init__(self, name: ColumnName) -> None:
        super().__init__(
            "no_duplicated_column_names",
            f"Column name '{name.value}' appears more than once in the table",
        )
        self.name = name


class TableWouldBeEmptyError(BusinessRuleViolationError):
    """Raised when removing a column would leave a table without columns."""

    def __init__(self, table_id: TableId | None, column_id: ColumnId) -> None:
        super().__init__(
            "table_not_empty",
            f"Cannot remove column {column_id}: it is the last column of table {table_id}",
        )
        self.table_id = table_id
        self.column_id = column_id
