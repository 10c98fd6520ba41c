# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from finledger.domain.users.entities import User as DomainUser
from finledger.domain.users.exceptions import DuplicateEmailError
from finledger.domain.users.repositories import UserRepository
from finledger.infrastructure.db.models import User
from finledger.infrastructure.unit_of_work import store_operation


def _as_utc(value: datetime) -> datetime:
    return value if value.tzinfo else value.replace(tzinfo=UTC)


def _to_domain(row: User) -> DomainUser:
    return DomainUser(
        id=row.id,
        email=row.email,
        password_hash=row.password_hash,
        created_at=_as_utc(row.created_at),
    )


class SqlAlchemyUserRepository(UserRepository):
    def __init__(self, session_factory: Callable[[], Session]) -> None:
        self._session_factory = session_factory

    def find_by_email(self, email: str) -> DomainUser | None:
        with store_operation(self._session_factory, "users.find_by_email") as session:
            row = session.scalars(select(User).where(User.email == email)).first()
            return _to_domain(row) if row else None

    def add(self, user: DomainUser) -> DomainUser:
        with store_operation(self._session_factory, "users.add") as session:
            row = User(
                email=user.email,
                password_hash=user.password_hash,
                created_at=user.created_at,
            )
            session.add(row)
            try:
                session.flush()
            except IntegrityError as exc:
                # lost a race with a concurrent registration for the same email
                raise DuplicateEmailError() from exc
            return _to_domain(row)
