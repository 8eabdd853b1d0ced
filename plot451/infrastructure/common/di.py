"""FastAPI glue for the dependency-injector container."""

from collections.abc import Callable
from typing import TypeVar

from dependency_injector.providers import Provider

from plot451.core import container
from plot451.database import DatabaseSession

T = TypeVar("T")


def inject_use_case(provider: Provider[T]) -> Callable[[DatabaseSession], T]:
    """
    Create a FastAPI dependency for a container provider.

    The request-scoped session is bound to container.db only while the use
    case graph is being built; SQL repositories keep a reference to it, the
    in-memory ones ignore it.
    """

    def dependency(db: DatabaseSession) -> T:
        with container.db.override(db):
            return provider()

    return dependency
