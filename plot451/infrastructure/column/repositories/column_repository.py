"""SQLAlchemy repository for columns, cells and directories."""

import logging
from collections.abc import Sequence
from typing import Any

from sqlalchemy import select
from sqlalchemy.orm import Session

from plot451.domain.column.entities.column import Column
from plot451.domain.column.entities.column_cell import ColumnCell
from plot451.domain.column.entities.column_directory import ColumnDirectory
from plot451.domain.column.exceptions import (
    ColumnNotFoundError,
    NotAllCellsFoundError,
    NotAllColumnsFoundError,
)
from plot451.domain.common.entity import EntityId
from plot451.domain.common.exceptions import RepositoryError
from plot451.domain.common.value_objects.ids import ColumnCellId, ColumnDirectoryId, ColumnId
from plot451.infrastructure.column.mappers.column_directory_mapper import ColumnDirectoryMapper
from plot451.infrastructure.column.mappers.column_mapper import ColumnCellMapper, ColumnMapper
from plot451.infrastructure.common.ids import to_primary_key
from plot451.infrastructure.common.sql_transaction import sql_transaction
from plot451.models import Column as ColumnORM
from plot451.models import ColumnCell as ColumnCellORM
from plot451.models import ColumnDirectory as ColumnDirectoryORM

logger = logging.getLogger(__name__)


class ColumnRepository:
    """Repository for Column, ColumnCell and ColumnDirectory domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = ColumnMapper()
        self.cell_mapper = ColumnCellMapper()
        self.directory_mapper = ColumnDirectoryMapper()

    # Column methods

    def save(self, column: Column) -> ColumnId:
        """
        Save a column and rewrite its cell links.

        A column without id is inserted and receives the generated id;
        otherwise the row with that id is updated, or created if missing.
        """
        with sql_transaction(self.db, "save column"):
            orm_model = self._get_or_new(ColumnORM, column.id)
            self.mapper.to_orm(column, orm_model)
            self.db.add(orm_model)

        saved_id = ColumnId(str(orm_model.id))
        if column.id is None:
            column.set_id(saved_id)
            logger.debug(f"Created column {saved_id} in directory {column.directory_id}")
        return saved_id

    def find(self, column_id: ColumnId) -> Column | None:
        orm_model = self._get(ColumnORM, column_id)
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_ids(self, column_ids: Sequence[ColumnId]) -> list[Column]:
        """
        Find columns by IDs, in request order.

        Raises:
            NotAllColumnsFoundError: If any ID has no column
        """
        by_id = {
            str(orm.id): orm for orm in self._select_by_ids(ColumnORM, column_ids)
        }
        if any(column_id.value not in by_id for column_id in column_ids):
            raise NotAllColumnsFoundError(column_ids)
        return [self.mapper.to_domain(by_id[column_id.value]) for column_id in column_ids]

    def find_by_directory_id(self, directory_id: ColumnDirectoryId) -> list[Column]:
        pk = to_primary_key(directory_id)
        if pk is None:
            return []
        stmt = select(ColumnORM).where(ColumnORM.directory_id == pk).order_by(ColumnORM.id)
        return [self.mapper.to_domain(orm) for orm in self.db.execute(stmt).scalars().all()]

    def find_all(self) -> list[Column]:
        stmt = select(ColumnORM).order_by(ColumnORM.id)
        return [self.mapper.to_domain(orm) for orm in self.db.execute(stmt).scalars().all()]

    def delete(self, column: Column) -> None:
        """Delete a column together with every cell it references."""
        orm_model = self._get(ColumnORM, column.id) if column.id else None
        if orm_model is None:
            return
        with sql_transaction(self.db, "delete column"):
            self._delete_column_rows(orm_model)
        logger.debug(f"Deleted column {column.id}")

    # Cell methods

    def save_cell(self, cell: ColumnCell) -> ColumnCellId:
        with sql_transaction(self.db, "save cell"):
            orm_model = self._get_or_new(ColumnCellORM, cell.id)
            self.cell_mapper.to_orm(cell, orm_model)
            self.db.add(orm_model)

        saved_id = ColumnCellId(str(orm_model.id))
        if cell.id is None:
            cell.set_id(saved_id)
        return saved_id

    def find_cell(self, cell_id: ColumnCellId) -> ColumnCell | None:
        orm_model = self._get(ColumnCellORM, cell_id)
        return self.cell_mapper.to_domain(orm_model) if orm_model else None

    def find_cells_by_column_id(self, column_id: ColumnId) -> list[ColumnCell]:
        """
        Find the cells of a column in column order.

        Raises:
            ColumnNotFoundError: If the column does not exist
        """
        column_orm = self._get(ColumnORM, column_id)
        if column_orm is None:
            raise ColumnNotFoundError(column_id)
        cell_ids = [ColumnCellId(str(link.cell_id)) for link in column_orm.cell_links]
        return self.find_cells_by_ids(cell_ids)

    def find_cells_by_ids(self, cell_ids: Sequence[ColumnCellId]) -> list[ColumnCell]:
        """
        Find cells by IDs, in request order.

        Raises:
            NotAllCellsFoundError: If any ID has no cell
        """
        by_id = {str(orm.id): orm for orm in self._select_by_ids(ColumnCellORM, cell_ids)}
        if any(cell_id.value not in by_id for cell_id in cell_ids):
            raise NotAllCellsFoundError(cell_ids)
        return [self.cell_mapper.to_domain(by_id[cell_id.value]) for cell_id in cell_ids]

    def delete_cell(self, cell: ColumnCell) -> None:
        orm_model = self._get(ColumnCellORM, cell.id) if cell.id else None
        if orm_model is None:
            return
        with sql_transaction(self.db, "delete cell"):
            self.db.delete(orm_model)

    # Directory methods

    def save_directory(self, directory: ColumnDirectory) -> ColumnDirectoryId:
        with sql_transaction(self.db, "save directory"):
            orm_model = self._get_or_new(ColumnDirectoryORM, directory.id)
            self.directory_mapper.to_orm(directory, orm_model)
            self.db.add(orm_model)

        saved_id = ColumnDirectoryId(str(orm_model.id))
        if directory.id is None:
            directory.set_id(saved_id)
            logger.debug(f"Created directory {saved_id} (parent={directory.parent_id})")
        return saved_id

    def find_directory(self, directory_id: ColumnDirectoryId) -> ColumnDirectory | None:
        orm_model = self._get(ColumnDirectoryORM, directory_id)
        return self.directory_mapper.to_domain(orm_model) if orm_model else None

    def find_root_directories(self) -> list[ColumnDirectory]:
        stmt = (
            select(ColumnDirectoryORM)
            .where(ColumnDirectoryORM.parent_id.is_(None))
            .order_by(ColumnDirectoryORM.id)
        )
        return [
            self.directory_mapper.to_domain(orm) for orm in self.db.execute(stmt).scalars().all()
        ]

    def find_children_directories(self, parent_id: ColumnDirectoryId) -> list[ColumnDirectory]:
        pk = to_primary_key(parent_id)
        if pk is None:
            return []
        stmt = (
            select(ColumnDirectoryORM)
            .where(ColumnDirectoryORM.parent_id == pk)
            .order_by(ColumnDirectoryORM.id)
        )
        return [
            self.directory_mapper.to_domain(orm) for orm in self.db.execute(stmt).scalars().all()
        ]

    def delete_directory(self, directory: ColumnDirectory) -> None:
        """
        Delete a directory and its whole subtree in one transaction.

        Post-order: the directory's columns with their cells, then each child
        directory recursively, then the directory itself.
        """
        orm_model = self._get(ColumnDirectoryORM, directory.id) if directory.id else None
        if orm_model is None:
            return
        with sql_transaction(self.db, "delete directory"):
            self._delete_directory_tree(orm_model)
        logger.info(f"Deleted directory {directory.id} with its contents")

    # Helpers

    def _get(self, orm_class: type, entity_id: EntityId | None) -> Any:
        pk = to_primary_key(entity_id) if entity_id is not None else None
        if pk is None:
            return None
        return self.db.get(orm_class, pk)

    def _get_or_new(self, orm_class: type, entity_id: EntityId | None) -> Any:
        """Load the row behind an id, or start a new one keeping that id for upserts."""
        if entity_id is None:
            return orm_class()
        pk = to_primary_key(entity_id)
        if pk is None:
            raise RepositoryError(f"{orm_class.__name__} id {entity_id} is not a stored key")
        return self.db.get(orm_class, pk) or orm_class(id=pk)

    def _select_by_ids(self, orm_class: type, entity_ids: Sequence[EntityId]) -> Sequence[Any]:
        pks = [pk for pk in (to_primary_key(i) for i in entity_ids) if pk is not None]
        if not pks:
            return []
        stmt = select(orm_class).where(orm_class.id.in_(pks))
        return self.db.execute(stmt).scalars().all()

    def _delete_column_rows(self, column_orm: ColumnORM) -> None:
        cell_ids = [link.cell_id for link in column_orm.cell_links]
        self.db.delete(column_orm)
        self.db.flush()
        if cell_ids:
            for cell_orm in self.db.execute(
                select(ColumnCellORM).where(ColumnCellORM.id.in_(cell_ids))
            ).scalars():
                self.db.delete(cell_orm)
            self.db.flush()

    def _delete_directory_tree(self, directory_orm: ColumnDirectoryORM) -> None:
        columns = self.db.execute(
            select(ColumnORM).where(ColumnORM.directory_id == directory_orm.id)
        ).scalars().all()
        for column_orm in columns:
            self._delete_column_rows(column_orm)

        children = self.db.execute(
            select(ColumnDirectoryORM).where(ColumnDirectoryORM.parent_id == directory_orm.id)
        ).scalars().all()
        for child in children:
            self._delete_directory_tree(child)

        self.db.delete(directory_orm)
        self.db.flush()
