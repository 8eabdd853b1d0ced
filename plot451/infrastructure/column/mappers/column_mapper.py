"""Mappers for Column and ColumnCell ORM ↔ Domain conversion."""

from plot451.domain.column.entities.column import Column
from plot451.domain.column.entities.column_cell import ColumnCell
from plot451.domain.common.value_objects import (
    CellValue,
    ColumnCellId,
    ColumnDirectoryId,
    ColumnId,
    ColumnName,
)
from plot451.models import Column as ColumnORM
from plot451.models import ColumnCell as ColumnCellORM
from plot451.models import ColumnCellLink as ColumnCellLinkORM


class ColumnMapper:
    """Mapper for Column ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: ColumnORM) -> Column:
        """Convert ORM model to domain entity, cells in link order."""
        return Column.create_with_id(
            id=ColumnId(str(orm_model.id)),
            name=ColumnName(orm_model.name),
            directory_id=ColumnDirectoryId(str(orm_model.directory_id)),
            cells=[ColumnCellId(str(link.cell_id)) for link in orm_model.cell_links],
        )

    def to_orm(self, domain_entity: Column, orm_model: ColumnORM | None = None) -> ColumnORM:
        """
        Convert domain entity to ORM model.

        The cell links are rebuilt from the entity's order on every call.
        """
        if orm_model is None:
            orm_model = ColumnORM()
        orm_model.name = domain_entity.name.value
        orm_model.directory_id = int(domain_entity.directory_id.value)
        orm_model.cell_links = [
            ColumnCellLinkORM(cell_id=int(cell_id.value), sort_order=position)
            for position, cell_id in enumerate(domain_entity.cells)
        ]
        return orm_model


class ColumnCellMapper:
    """Mapper for ColumnCell ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: ColumnCellORM) -> ColumnCell:
        """Convert ORM model to domain entity."""
        return ColumnCell.create_with_id(
            id=ColumnCellId(str(orm_model.id)),
            value=CellValue(orm_model.value),
        )

    def to_orm(
        self, domain_entity: ColumnCell, orm_model: ColumnCellORM | None = None
    ) -> ColumnCellORM:
        """Convert domain entity to ORM model."""
        if orm_model:
            orm_model.value = domain_entity.value.value
            return orm_model
        return ColumnCellORM(value=domain_entity.value.value)
