"""Mapper for Table ORM ↔ Domain conversion."""

from plot451.domain.common.value_objects import ColumnId, TableId, TableName
from plot451.domain.table.entities.table import Table
from plot451.models import Table as TableORM
from plot451.models import TableColumnLink as TableColumnLinkORM


class TableMapper:
    """Mapper for Table ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: TableORM) -> Table:
        """Convert ORM model to domain entity, columns in link order."""
        return Table.create_with_id(
            id=TableId(str(orm_model.id)),
            name=TableName(orm_model.name),
            columns=[ColumnId(str(link.column_id)) for link in orm_model.column_links],
        )

    def to_orm(self, domain_entity: Table, orm_model: TableORM | None = None) -> TableORM:
        """Convert domain entity to ORM model, rebuilding the column links."""
        if orm_model is None:
            orm_model = TableORM()
        orm_model.name = domain_entity.name.value
        orm_model.column_links = [
            TableColumnLinkORM(column_id=int(column_id.value), sort_order=position)
            for position, column_id in enumerate(domain_entity.columns)
        ]
        return orm_model
