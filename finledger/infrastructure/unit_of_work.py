# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Session scopes for repository calls.

One scope is one transaction: committed when the block exits normally,
rolled back otherwise, and always closed.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import contextmanager

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from finledger.shared.errors import StoreError
from finledger.shared.logging import logger

SessionFactory = Callable[[], Session]


@contextmanager
def session_scope(factory: SessionFactory) -> Iterator[Session]:
    session = factory()
    try:
        yield session
        session.commit()
    except BaseException:
        session.rollback()
        raise
    finally:
        session.close()


@contextmanager
def store_operation(factory: SessionFactory, operation: str) -> Iterator[Session]:
    """:func:`session_scope` that reports database failures as :class:`StoreError`.

    Domain errors raised inside the block pass through untouched. The
    database error is logged with its traceback and kept as ``__cause__``.
    """
    try:
        with session_scope(factory) as session:
            yield session
    except SQLAlchemyError as exc:
        logger.opt(exception=exc).error(f"store.{operation}: {type(exc).__name__}")
        raise StoreError(operation) from exc


__all__ = ["SessionFactory", "session_scope", "store_operation"]
