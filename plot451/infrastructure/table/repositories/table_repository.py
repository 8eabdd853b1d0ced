"""SQLAlchemy repository for tables."""

import logging

from sqlalchemy import select
from sqlalchemy.orm import Session

from plot451.domain.common.exceptions import RepositoryError
from plot451.domain.common.value_objects.ids import ColumnId, TableId
from plot451.domain.table.entities.table import Table
from plot451.infrastructure.common.ids import to_primary_key
from plot451.infrastructure.common.sql_transaction import sql_transaction
from plot451.infrastructure.table.mappers.table_mapper import TableMapper
from plot451.models import Table as TableORM
from plot451.models import TableColumnLink as TableColumnLinkORM

logger = logging.getLogger(__name__)


class TableRepository:
    """Repository for Table domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = TableMapper()

    def _get(self, table_id: TableId | None) -> TableORM | None:
        pk = to_primary_key(table_id) if table_id is not None else None
        return self.db.get(TableORM, pk) if pk is not None else None

    def save(self, table: Table) -> TableId:
        """
        Save a table and rewrite its column links.

        A table without id is inserted and receives the generated id;
        otherwise the row with that id is updated, or created if missing.
        """
        with sql_transaction(self.db, "save table"):
            if table.id is None:
                orm_model = TableORM()
            else:
                pk = to_primary_key(table.id)
                if pk is None:
                    raise RepositoryError(f"Table id {table.id} is not a stored key")
                orm_model = self.db.get(TableORM, pk) or TableORM(id=pk)
            self.mapper.to_orm(table, orm_model)
            self.db.add(orm_model)

        saved_id = TableId(str(orm_model.id))
        if table.id is None:
            table.set_id(saved_id)
            logger.debug(f"Created table {saved_id} with {len(table.columns)} columns")
        return saved_id

    def find(self, table_id: TableId) -> Table | None:
        orm_model = self._get(table_id)
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_parent_tables_by_column_id(self, column_id: ColumnId) -> list[Table]:
        """Find every table with at least one link to the column."""
        pk = to_primary_key(column_id)
        if pk is None:
            return []
        stmt = (
            select(TableORM)
            .join(TableColumnLinkORM, TableColumnLinkORM.table_id == TableORM.id)
            .where(TableColumnLinkORM.column_id == pk)
            .distinct()
            .order_by(TableORM.id)
        )
        return [self.mapper.to_domain(orm) for orm in self.db.execute(stmt).scalars().all()]

    def find_all(self) -> list[Table]:
        stmt = select(TableORM).order_by(TableORM.id)
        return [self.mapper.to_domain(orm) for orm in self.db.execute(stmt).scalars().all()]

    def delete(self, table: Table) -> None:
        orm_model = self._get(table.id)
        if orm_model is None:
            return
        with sql_transaction(self.db, "delete table"):
            self.db.delete(orm_model)
        logger.debug(f"Deleted table {table.id}")
