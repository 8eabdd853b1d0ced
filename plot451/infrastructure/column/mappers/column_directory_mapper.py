"""Mapper for ColumnDirectory ORM ↔ Domain conversion."""

from plot451.domain.column.entities.column_directory import ColumnDirectory
from plot451.domain.common.value_objects import ColumnDirectoryId, ColumnDirectoryName
from plot451.models import ColumnDirectory as ColumnDirectoryORM


class ColumnDirectoryMapper:
    """Mapper for ColumnDirectory ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: ColumnDirectoryORM) -> ColumnDirectory:
        """Convert ORM model to domain entity."""
        return ColumnDirectory.create_with_id(
            id=ColumnDirectoryId(str(orm_model.id)),
            name=ColumnDirectoryName(orm_model.name),
            parent_id=(
                ColumnDirectoryId(str(orm_model.parent_id))
                if orm_model.parent_id is not None
                else None
            ),
        )

    def to_orm(
        self, domain_entity: ColumnDirectory, orm_model: ColumnDirectoryORM | None = None
    ) -> ColumnDirectoryORM:
        """Convert domain entity to ORM model."""
        parent_id = int(domain_entity.parent_id.value) if domain_entity.parent_id else None
        if orm_model:
            # Update existing
            orm_model.name = domain_entity.name.value
            orm_model.parent_id = parent_id
            return orm_model

        # Create new
        return ColumnDirectoryORM(name=domain_entity.name.value, parent_id=parent_id)
