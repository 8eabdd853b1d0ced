"""
Base class for Specifications.

A Specification is a named predicate over a domain object. Instead of
returning a bare boolean it raises a typed DomainError describing the
first violation found, so callers can surface the offending value.

Example:
    class NoDuplicatedColumnNamesSpecification(Specification[TableColumns]):
        def is_satisfied_by(self, candidate: TableColumns) -> None:
            ...
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from .exceptions import DomainError

T = TypeVar("T")


class Specification(ABC, Generic[T]):
    """Base class for business rule predicates."""

    @abstractmethod
    def is_satisfied_by(self, candidate: T) -> None:
        """
        Check the rule against the candidate.

        Raises:
            DomainError: Describing the first violation found
        """
        raise NotImplementedError

    def holds_for(self, candidate: T) -> bool:
        """Boolean form of is_satisfied_by, for callers that only branch."""
        try:
            self.is_satisfied_by(candidate)
        except DomainError:
            return False
        return True
