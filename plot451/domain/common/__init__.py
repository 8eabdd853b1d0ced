"""
Domain common module.

Contains base classes for domain modeling:
- ValueObject: Immutable objects defined by their attributes
- Entity: Objects with write-once identity and lifecycle
- Specification: Named business rule predicates
"""

from .entity import Entity, EntityId
from .exceptions import (
    BusinessRuleViolationError,
    CollectionAssemblyError,
    DomainConsistencyError,
    DomainError,
    EntityNotFoundError,
    IdentityAlreadyAssignedError,
    InvariantViolationError,
    NotAllEntitiesFoundError,
    RepositoryError,
    ValidationError,
)
from .specification import Specification
from .value_object import ValueObject

__all__ = [
    "BusinessRuleViolationError",
    "CollectionAssemblyError",
    "DomainConsistencyError",
    "DomainError",
    "Entity",
    "EntityId",
    "EntityNotFoundError",
    "IdentityAlreadyAssignedError",
    "InvariantViolationError",
    "NotAllEntitiesFoundError",
    "RepositoryError",
    "Specification",
    "ValidationError",
    "ValueObject",
]
