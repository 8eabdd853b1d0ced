"""Commit/rollback boundary shared by the SQLAlchemy repositories."""

from collections.abc import Generator
from contextlib import contextmanager

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from plot451.domain.common.exceptions import RepositoryError


@contextmanager
def sql_transaction(db: Session, action: str) -> Generator[Session, None, None]:
    """
    Run a block of session work and commit it.

    Any SQLAlchemy failure rolls the session back and is re-raised as
    RepositoryError; domain errors raised inside the block roll back too but
    propagate unchanged.
    """
    try:
        yield db
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        raise RepositoryError(f"{action} failed: {e}", cause=e) from e
    except BaseException:
        db.rollback()
        raise
