"""
Domain layer exceptions.

These exceptions represent domain-level errors that occur when
business rules are violated or domain invariants are broken.
They should be caught and translated to appropriate responses
by the infrastructure layer.

Defects that can only be reached through a bug in a repository or a use
case (reassigning an identity, assembling an inconsistent collection) are
not domain errors: they derive from DomainConsistencyError and must never
be translated into a client error.
"""

from collections.abc import Sequence


class DomainError(Exception):
    """
    Base exception for all domain errors.

    All domain exceptions should inherit from this class
    so they can be caught and handled uniformly.
    """

    def __init__(self, message: str, details: dict[str, object] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - {self.details}"
        return self.message


class ValidationError(DomainError):
    """
    Raised when domain validation fails.

    Example: Empty column name, unparsable cell value.
    """

    def __init__(self, message: str, field: str | None = None, value: object = None) -> None:
        details: dict[str, object] = {}
        if field:
            details["field"] = field
        if value is not None:
            details["value"] = value
        super().__init__(message, details)
        self.field = field
        self.value = value


class EntityNotFoundError(DomainError):
    """
    Raised when an entity cannot be found.

    Example: Looking up the cells of a column that doesn't exist.
    """

    def __init__(self, entity_type: str, entity_id: object) -> None:
        message = f"{entity_type} with id {entity_id} not found"
        super().__init__(message, {"entity_type": entity_type, "entity_id": entity_id})
        self.entity_type = entity_type
        self.entity_id = entity_id


class NotAllEntitiesFoundError(DomainError):
    """
    Raised when a batch lookup cannot resolve every requested id.

    Batch lookups never return partial results, the full list of
    requested ids is carried for diagnostics.
    """

    def __init__(self, entity_type: str, requested_ids: Sequence[object]) -> None:
        self.entity_type = entity_type
        self.requested_ids = list(requested_ids)
        super().__init__(
            f"Not all {entity_type} entities found",
            {"requested_ids": [str(i) for i in self.requested_ids]},
        )


class BusinessRuleViolationError(DomainError):
    """
    Raised when a business rule is violated.

    Example: Two columns of the same table sharing a name.
    """

    def __init__(self, rule: str, message: str | None = None) -> None:
        msg = message or f"Business rule violated: {rule}"
        super().__init__(msg, {"rule": rule})
        self.rule = rule


class InvariantViolationError(DomainError):
    """
    Raised when an aggregate invariant is violated.

    Invariants are rules that must always be true for an aggregate
    to be in a valid state.

    Example: A table must always reference at least one column.
    """

    def __init__(self, aggregate: str, invariant: str) -> None:
        message = f"Invariant violation in {aggregate}: {invariant}"
        super().__init__(message, {"aggregate": aggregate, "invariant": invariant})
        self.aggregate = aggregate
        self.invariant = invariant


class RepositoryError(DomainError):
    """Raised by persistence adapters when the underlying storage fails."""

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        super().__init__(f"Unexpected repository error: {message}")
        self.cause = cause


class DomainConsistencyError(RuntimeError):
    """
    Raised when a programming defect breaks a domain invariant.

    Unlike DomainError these are not recoverable: they signal a bug in a
    repository or a use case, never bad user input.
    """


class IdentityAlreadyAssignedError(DomainConsistencyError):
    """Raised when an entity identity is assigned a second time."""

    def __init__(self, entity_type: str, current_id: object, new_id: object) -> None:
        self.entity_type = entity_type
        self.current_id = current_id
        self.new_id = new_id
        super().__init__(
            f"{entity_type} already has id {current_id}, cannot reassign to {new_id}"
        )


class CollectionAssemblyError(DomainConsistencyError):
    """Raised when a first-class collection is built from inconsistent children."""

    def __init__(self, collection: str, reason: str) -> None:
        self.collection = collection
        self.reason = reason
        super().__init__(f"Cannot assemble {collection}: {reason}")
