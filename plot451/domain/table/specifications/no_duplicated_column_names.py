from plot451.domain.common.specification import Specification
from plot451.domain.common.value_objects.names import ColumnName
from plot451.domain.table.collections.table_columns import TableColumns
from plot451.domain.table.exceptions import DuplicatedColumnNamesError


class NoDuplicatedColumnNamesSpecification(Specification[TableColumns]):
    """Column names within one table must be unique."""

    def is_satisfied_by(self, candidate: TableColumns) -> None:
        """
        Scan column names in table order.

        Raises:
            DuplicatedColumnNamesError: For the first name seen twice
        """
        seen: set[ColumnName] = set()
        for column in candidate.columns:
            if column.name in seen:
                raise DuplicatedColumnNamesError(column.name)
            seen.add(column.name)
