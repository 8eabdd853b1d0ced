"""
Base class for Entities.

Entities are objects that have a distinct identity that runs through time
and different states. Two entities are equal if they have the same identity,
regardless of their attributes.

Identities are assigned by the persistence layer: a freshly created entity
has no id until its first save, and the id can be set exactly once.

Example:
    @dataclass(eq=False)
    class ColumnCell(Entity[ColumnCellId]):
        value: CellValue
        id: ColumnCellId | None = None

        def edit_value(self, value: CellValue) -> None:
            self.value = value
"""

from abc import ABC
from dataclasses import dataclass
from typing import Generic, TypeVar

from .exceptions import IdentityAlreadyAssignedError, ValidationError
from .value_object import ValueObject


@dataclass(frozen=True)
class EntityId(ValueObject):
    """
    Base class for strongly-typed entity identifiers.

    Entity IDs are opaque value objects wrapping a non-empty string.
    They provide type safety to prevent mixing up IDs of different entities.

    Example:
        @dataclass(frozen=True)
        class ColumnId(EntityId):
            pass

        column_id = ColumnId("42")
        table_id = TableId("42")
        # These are different types, preventing accidental mixing
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise ValidationError(
                f"{self.__class__.__name__} must wrap a string", value=self.value
            )
        if not self.value:
            raise ValidationError(f"{self.__class__.__name__} cannot be empty")

    def __str__(self) -> str:
        return self.value

    def to_primitive(self) -> str:
        """Convert to primitive for serialization."""
        return self.value


IdType = TypeVar("IdType", bound=EntityId)


class Entity(ABC, Generic[IdType]):
    """
    Base class for Entities in the domain model.

    Entities are:
    - Defined by identity (not attributes)
    - Mutable (state can change over time)
    - Have lifecycle (created, persisted, modified, deleted)

    Subclasses must have an 'id' attribute of type IdType | None and be
    declared with @dataclass(eq=False) so identity equality is kept.
    """

    id: IdType | None

    @property
    def is_persisted(self) -> bool:
        """Check if the persistence layer already assigned an identity."""
        return self.id is not None

    def set_id(self, new_id: IdType) -> None:
        """
        Assign the identity handed out by the persistence layer.

        Raises:
            IdentityAlreadyAssignedError: If the entity already has an id
        """
        if self.id is not None:
            raise IdentityAlreadyAssignedError(self.__class__.__name__, self.id, new_id)
        self.id = new_id

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, self.__class__):
            return False
        if self.id is None or other.id is None:
            return self is other
        return self.id == other.id

    def __hash__(self) -> int:
        if self.id is None:
            return id(self)
        return hash(self.id)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self.id})"
