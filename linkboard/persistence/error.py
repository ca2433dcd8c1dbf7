"""Persistence layer error translation."""

from collections.abc import Iterator
from contextlib import contextmanager

import logfire
from sqlalchemy.exc import SQLAlchemyError

from linkboard.domain.error import BackingStoreError


@contextmanager
def backing_store_errors(operation: str) -> Iterator[None]:
    """Translate database failures into ``BackingStoreError``.

    Domain errors raised inside the block pass through untouched.

    Args:
        operation: Name of the repository operation, for the error message
    """
    try:
        yield
    except SQLAlchemyError as e:
        logfire.error(
            "Backing store call failed",
            operation=operation,
            error=str(e),
            error_type=type(e).__name__,
        )
        raise BackingStoreError(operation) from e
